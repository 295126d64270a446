"""Build AI review prompts from merged diff records."""

import json
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass, field

from config.settings import settings
from .change_set import FileChange, summarize
from .hunk_parser import FileDiffRecord


SYSTEM_PROMPT = """You are a strict senior code reviewer.
Follow these coding practices:

{rules}

Rules for review:
- Only comment if there is a violation.
- No positive notes.
- Keep comments 1-2 sentences.
- Output valid JSON (add "body" only if needed).
"""

RESPONSE_FORMAT = """Format your response as JSON:
{
  "overall_review": "General feedback about the PR",
  "comments": [
    {
      "path": "file_path",
      "startLine": line_number,
      "body": "Specific feedback referencing the violated practice"
    }
  ]
}"""

NO_PATCH = "No patch available (renamed file)"


@dataclass
class ReviewPrompt:
    """Chat messages for the AI reviewer."""
    messages: List[Dict[str, str]] = field(default_factory=list)
    pr_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'messages': self.messages, 'prUrl': self.pr_url}


class ReviewPromptBuilder:
    """Assemble system and user prompts for reviewing a PR."""

    def __init__(self, rules: Optional[str] = None):
        """
        Initialize builder.

        Args:
            rules: Coding practices to review against (uses settings if not provided)
        """
        self.rules = rules or settings.review_rules

    def build_system_prompt(self) -> str:
        return SYSTEM_PROMPT.format(rules=self.rules)

    def build_messages(
        self,
        records: Sequence[FileDiffRecord],
        pr_url: Optional[str] = None
    ) -> ReviewPrompt:
        """
        Build the system + user message pair for a set of hunks.

        The user message carries the records as indented JSON so the model
        can cite ``path`` and ``startLine`` back in its comments.
        """
        changes = json.dumps(
            [record.to_dict() for record in records], indent=2, ensure_ascii=False
        )

        return ReviewPrompt(
            messages=[
                {'role': 'system', 'content': self.build_system_prompt()},
                {'role': 'user', 'content': "Here are the code changes:\n" + changes},
            ],
            pr_url=pr_url
        )

    def build_file_overview(
        self,
        title: str,
        description: Optional[str],
        files: Sequence[FileChange],
        additions: Optional[int] = None,
        deletions: Optional[int] = None
    ) -> str:
        """
        Build a whole-PR prompt listing every file with its raw patch.

        Args:
            title: PR title
            description: PR body
            files: Changed files
            additions: PR-level additions (summed from files if not provided)
            deletions: PR-level deletions (summed from files if not provided)
        """
        summary = summarize(list(files))
        if additions is None:
            additions = summary.additions
        if deletions is None:
            deletions = summary.deletions

        parts = [
            "Please review the following pull request according to the practices above:",
            "",
            f"**PR Title**: {title}",
            f"**PR Description**: {description or 'No description provided'}",
            f"**Files Changed**: {summary.file_count} files",
            f"**Total Changes**: +{additions} additions, -{deletions} deletions",
            "",
            "**Code Changes**:",
        ]

        for index, file in enumerate(files, 1):
            parts.extend([
                "",
                f"**File {index}**: {file.filename}",
                f"**Status**: {file.status}",
                f"**Changes**: +{file.additions} -{file.deletions}",
                "",
                "```diff",
                file.patch or NO_PATCH,
                "```",
            ])

        parts.extend(["", RESPONSE_FORMAT])
        return "\n".join(parts)
