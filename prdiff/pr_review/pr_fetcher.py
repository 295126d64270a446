"""Fetch pull request data from GitHub API."""

from typing import List, Optional
from dataclasses import dataclass, field

from github import Github
from github.GithubException import GithubException
from github.PullRequest import PullRequest

from config.settings import settings
from .change_set import FileChange


@dataclass
class PRData:
    """Pull request data needed for review."""
    number: int
    title: str
    description: str
    state: str  # open, closed

    # Repository info
    repo_owner: str
    repo_name: str
    repo_full_name: str

    # Commit the review comments attach to
    head_sha: str

    # Changes
    additions: int = 0
    deletions: int = 0
    files: List[FileChange] = field(default_factory=list)

    # URLs
    html_url: Optional[str] = None
    url: Optional[str] = None  # API URL


class PRFetcher:
    """Fetch pull request data from GitHub."""

    def __init__(self, github_token: Optional[str] = None):
        """
        Initialize PR fetcher.

        Args:
            github_token: GitHub API token (uses settings if not provided)
        """
        self.github_token = github_token or settings.github_token

        if not self.github_token:
            raise ValueError("GitHub token required. Set GITHUB_TOKEN in .env file")

        self.github = Github(self.github_token)

    def fetch_pr(self, repo_full_name: str, pr_number: int) -> PRData:
        """
        Fetch PR metadata and its changed files.

        Args:
            repo_full_name: Repository in format "owner/repo"
            pr_number: PR number

        Returns:
            PRData object
        """
        owner, name = self._split_repo(repo_full_name)

        try:
            repo = self.github.get_repo(repo_full_name)
            pr = repo.get_pull(pr_number)
            files = self._fetch_files(pr)
        except GithubException as e:
            raise ValueError(f"Could not fetch PR #{pr_number} from {repo_full_name}: {e}") from e

        return PRData(
            number=pr.number,
            title=pr.title,
            description=pr.body or "",
            state=pr.state,
            repo_owner=owner,
            repo_name=name,
            repo_full_name=repo_full_name,
            head_sha=pr.head.sha,
            additions=pr.additions,
            deletions=pr.deletions,
            files=files,
            html_url=pr.html_url,
            url=pr.url
        )

    def fetch_file_changes(self, repo_full_name: str, pr_number: int) -> List[FileChange]:
        """Fetch only the changed files of a PR."""
        return self.fetch_pr(repo_full_name, pr_number).files

    def _fetch_files(self, pr: PullRequest) -> List[FileChange]:
        """Fetch all changed files in the PR."""
        files = []

        for file in pr.get_files():
            files.append(FileChange(
                filename=file.filename,
                status=file.status,
                patch=file.patch,
                additions=file.additions,
                deletions=file.deletions,
                changes=file.changes,
                previous_filename=file.previous_filename
            ))

        return files

    @staticmethod
    def _split_repo(repo_full_name: str):
        parts = repo_full_name.split('/')
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid repository name: {repo_full_name}. Expected format: owner/repo")
        return parts[0], parts[1]

    def close(self):
        """Close the GitHub client."""
        self.github.close()
