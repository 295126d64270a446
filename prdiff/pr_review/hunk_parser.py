"""Parse per-file unified diff patches into merged, line-numbered hunks."""

import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union
from dataclasses import dataclass, field

from config.settings import settings, DEFAULT_MERGE_DISTANCE
from .change_set import FileChange

logger = logging.getLogger(__name__)

# Default merge distance; Settings.merge_distance overrides it per environment
MERGE_DISTANCE = DEFAULT_MERGE_DISTANCE

# Two numbers with optional ",count" suffixes; anything after the closing @@ is ignored
HUNK_HEADER = re.compile(r'@@ -(?P<old_start>\d+),?\d* \+(?P<new_start>\d+),?\d* @@')


@dataclass
class Hunk:
    """
    One contiguous change region in the new version of a file.

    Example hunk header:
    @@ -10,5 +12,7 @@ function_name

    starts a hunk at new-file line 12. ``last_line`` is a running cursor that
    advances for every context or added line, so once the hunk is closed it
    points just past the hunk's last new-file line. Removed lines have no
    position in the new file and never move it.
    """
    start_line: int
    last_line: int
    removed: List[str] = field(default_factory=list)
    added: List[str] = field(default_factory=list)

    @classmethod
    def open_at(cls, start_line: int) -> "Hunk":
        """Start an empty hunk at a new-file line."""
        return cls(start_line=start_line, last_line=start_line)

    def absorb(self, other: "Hunk") -> None:
        """Fold a following hunk into this one."""
        self.removed.extend(other.removed)
        self.added.extend(other.added)
        self.last_line = other.last_line


@dataclass
class FileDiffRecord:
    """A merged hunk ready for prompt building and review comments."""
    path: str
    start_line: int
    removed: List[str]
    added: List[str]
    diff: str

    @staticmethod
    def render_diff(removed: List[str], added: List[str]) -> str:
        """Render removed lines as ``- x`` followed by added lines as ``+ x``."""
        lines = [f"- {line}" for line in removed]
        lines.extend(f"+ {line}" for line in added)
        return "\n".join(lines)

    @classmethod
    def from_hunk(cls, path: str, hunk: Hunk) -> "FileDiffRecord":
        return cls(
            path=path,
            start_line=hunk.start_line,
            removed=list(hunk.removed),
            added=list(hunk.added),
            diff=cls.render_diff(hunk.removed, hunk.added)
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape exchanged with the prompt and comment layers."""
        return {
            'path': self.path,
            'startLine': self.start_line,
            'removed': list(self.removed),
            'added': list(self.added),
            'diff': self.diff,
        }


FileInput = Union[FileChange, Mapping[str, Any]]


class HunkParser:
    """Turn file patches into merged hunks and FileDiffRecords."""

    def __init__(
        self,
        merge_distance: Optional[int] = None,
        on_malformed_header: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize parser.

        Args:
            merge_distance: Max line gap for merging hunks (uses settings if not provided)
            on_malformed_header: Called with every ``@@`` line that is not a valid header
        """
        if merge_distance is None:
            merge_distance = settings.merge_distance

        if merge_distance < 0:
            raise ValueError(f"merge_distance must be >= 0, got {merge_distance}")

        self.merge_distance = merge_distance
        self.on_malformed_header = on_malformed_header

    def parse_patch(self, patch: Optional[str]) -> List[Hunk]:
        """
        Parse one file's patch into hunks, in file order.

        Args:
            patch: Unified diff text for a single file (may be None or empty)

        Returns:
            List of Hunk objects, before merging
        """
        hunks = []
        if not patch:
            return hunks

        current = None

        for line in patch.split("\n"):
            if line.startswith("@@"):
                match = HUNK_HEADER.search(line)
                if not match:
                    self._malformed_header(line)
                    continue

                if current:
                    hunks.append(current)
                current = Hunk.open_at(int(match.group('new_start')))

            elif current:
                if line.startswith("+"):
                    current.added.append(line[1:])
                    current.last_line += 1
                elif line.startswith("-"):
                    current.removed.append(line[1:])
                else:
                    # Context line, text not kept
                    current.last_line += 1

        if current:
            hunks.append(current)

        return hunks

    def merge_hunks(self, hunks: Iterable[Hunk]) -> List[Hunk]:
        """
        Merge each hunk into its predecessor when they are close enough.

        Single left-to-right pass: a hunk is compared only against the last
        emitted hunk, using that hunk's ``last_line`` as updated by earlier
        absorptions.
        """
        merged: List[Hunk] = []
        last: Optional[Hunk] = None

        for hunk in hunks:
            if last is not None and hunk.start_line - last.last_line <= self.merge_distance:
                last.absorb(hunk)
            else:
                merged.append(hunk)
                last = hunk

        return merged

    def parse_file(self, filename: str, patch: Optional[str]) -> List[FileDiffRecord]:
        """Parse, merge and shape the hunks of a single file."""
        hunks = self.merge_hunks(self.parse_patch(patch))
        return [FileDiffRecord.from_hunk(filename, hunk) for hunk in hunks]

    def parse_files(self, files: Iterable[FileInput]) -> List[FileDiffRecord]:
        """
        Parse every file in order.

        Args:
            files: FileChange objects or mappings with ``filename`` and ``patch``

        Returns:
            FileDiffRecords, file order first, then ascending start line
        """
        records = []

        for file in files:
            if isinstance(file, FileChange):
                filename, patch = file.filename, file.patch
            else:
                filename, patch = file.get('filename', ''), file.get('patch')
            records.extend(self.parse_file(filename, patch))

        return records

    def _malformed_header(self, line: str) -> None:
        logger.debug("Skipping malformed hunk header: %r", line)
        if self.on_malformed_header:
            self.on_malformed_header(line)


def parse_file_changes(
    files: Iterable[FileInput],
    merge_distance: Optional[int] = None
) -> List[FileDiffRecord]:
    """
    Quick helper to turn file changes into FileDiffRecords in one call.

    Example:
        >>> records = parse_file_changes([{"filename": "a.py", "patch": "@@ -1 +1 @@\\n+x"}])
        >>> records[0].diff
        '+ x'
    """
    return HunkParser(merge_distance).parse_files(files)
