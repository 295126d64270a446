"""File-change records as delivered by a pull request's file list."""

from typing import Any, Dict, List, Mapping, Optional
from dataclasses import dataclass


@dataclass
class FileChange:
    """Represents a file changed in a PR."""
    filename: str
    status: str = "modified"  # added, removed, modified, renamed
    patch: Optional[str] = None  # Unified diff patch, absent for renames and binaries
    additions: int = 0
    deletions: int = 0
    changes: int = 0
    previous_filename: Optional[str] = None  # For renamed files

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FileChange":
        """Build from a GitHub-style file record, tolerating missing keys."""
        additions = data.get('additions') or 0
        deletions = data.get('deletions') or 0
        return cls(
            filename=data.get('filename') or "",
            status=data.get('status') or "modified",
            patch=data.get('patch'),
            additions=additions,
            deletions=deletions,
            changes=data.get('changes') or additions + deletions,
            previous_filename=data.get('previous_filename')
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'filename': self.filename,
            'status': self.status,
            'patch': self.patch,
            'additions': self.additions,
            'deletions': self.deletions,
            'changes': self.changes,
            'previous_filename': self.previous_filename,
        }


@dataclass
class ChangeSetSummary:
    """Totals over a set of file changes."""
    file_count: int
    additions: int
    deletions: int

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions


def normalize_file_changes(payload: Any) -> List[FileChange]:
    """
    Coerce a file-list payload into FileChange objects.

    Accepts:
    - a list of file records
    - a mapping with a ``files`` list
    - a single file record mapping

    Anything else yields an empty list.
    """
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, Mapping) and isinstance(payload.get('files'), list):
        items = payload['files']
    elif isinstance(payload, Mapping):
        items = [payload]
    else:
        return []

    files = []
    for item in items:
        if isinstance(item, FileChange):
            files.append(item)
        elif isinstance(item, Mapping):
            files.append(FileChange.from_dict(item))
    return files


def summarize(files: List[FileChange]) -> ChangeSetSummary:
    """Count files and total additions/deletions."""
    return ChangeSetSummary(
        file_count=len(files),
        additions=sum(f.additions for f in files),
        deletions=sum(f.deletions for f in files)
    )
