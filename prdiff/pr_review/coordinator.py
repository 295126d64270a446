"""High-level PR review coordinator: fetch, parse hunks, build the prompt."""

from typing import List, Optional, Dict, Any
from dataclasses import dataclass

from .change_set import FileChange
from .pr_fetcher import PRFetcher, PRData
from .hunk_parser import HunkParser, FileDiffRecord
from .prompt_builder import ReviewPromptBuilder, ReviewPrompt


@dataclass
class PRReviewSession:
    """Complete PR review session data."""
    pr_data: PRData
    records: List[FileDiffRecord]
    prompt: ReviewPrompt

    @property
    def files(self) -> List[FileChange]:
        return self.pr_data.files

    @property
    def files_without_patch(self) -> List[str]:
        """Files that produced no hunks (renames, binaries)."""
        return [f.filename for f in self.files if not f.patch]

    def get_stats(self) -> Dict[str, Any]:
        """Get review session statistics."""
        return {
            'pr_number': self.pr_data.number,
            'pr_title': self.pr_data.title,
            'total_files': len(self.files),
            'total_additions': self.pr_data.additions,
            'total_deletions': self.pr_data.deletions,
            'hunks': len(self.records),
            'files_without_patch': len(self.files_without_patch),
        }


class PRReviewCoordinator:
    """
    Coordinate the PR review preparation workflow.

    Combines:
    - PR fetching (file list with patches)
    - Hunk parsing and merging
    - Review prompt building
    """

    def __init__(
        self,
        github_token: Optional[str] = None,
        merge_distance: Optional[int] = None,
        rules: Optional[str] = None,
        fetcher: Optional[PRFetcher] = None
    ):
        """
        Initialize coordinator.

        Args:
            github_token: GitHub API token
            merge_distance: Max line gap for merging hunks
            rules: Coding practices for the review prompt
            fetcher: Pre-built fetcher (created from github_token if not provided)
        """
        self.fetcher = fetcher or PRFetcher(github_token)
        self.parser = HunkParser(merge_distance)
        self.prompt_builder = ReviewPromptBuilder(rules)

    def prepare_pr_review(self, repo_full_name: str, pr_number: int) -> PRReviewSession:
        """
        Fetch -> Parse -> Prompt.

        Args:
            repo_full_name: Repository in format "owner/repo"
            pr_number: PR number

        Returns:
            PRReviewSession with records and prompt ready for the AI reviewer
        """
        print(f"Step 1: Fetching PR #{pr_number} from {repo_full_name}...")
        pr_data = self.fetcher.fetch_pr(repo_full_name, pr_number)
        print(f"  ✓ Fetched PR: {pr_data.title}")
        print(f"  ✓ Files changed: {len(pr_data.files)}")
        print(f"  ✓ Changes: +{pr_data.additions} -{pr_data.deletions}")

        print(f"\nStep 2: Parsing diffs into hunks (merge distance {self.parser.merge_distance})...")
        records = self.parser.parse_files(pr_data.files)
        print(f"  ✓ Hunks: {len(records)}")

        skipped = [f.filename for f in pr_data.files if not f.patch]
        if skipped:
            print(f"  ✗ No patch for {len(skipped)} file(s): {', '.join(skipped)}")

        print("\nStep 3: Building review prompt...")
        prompt = self.prompt_builder.build_messages(records, pr_url=pr_data.url)
        print(f"  ✓ Prompt ready ({len(prompt.messages)} messages)")

        return PRReviewSession(pr_data=pr_data, records=records, prompt=prompt)

    def close(self):
        """Close the coordinator and cleanup resources."""
        self.fetcher.close()


def quick_prepare_review(
    repo_full_name: str,
    pr_number: int,
    github_token: Optional[str] = None,
    merge_distance: Optional[int] = None
) -> PRReviewSession:
    """
    Quick helper function to prepare a PR review in one call.

    Example:
        >>> session = quick_prepare_review("owner/repo", 123)
        >>> for record in session.records:
        ...     print(f"{record.path}:{record.start_line}")
    """
    coordinator = PRReviewCoordinator(github_token, merge_distance=merge_distance)
    try:
        return coordinator.prepare_pr_review(repo_full_name, pr_number)
    finally:
        coordinator.close()
