"""Turn AI review output into GitHub review comments and post them."""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional
from dataclasses import dataclass

from github import Github
from github.GithubException import GithubException

from config.settings import settings

logger = logging.getLogger(__name__)

COMMENTS_URL = "https://api.github.com/repos/{owner}/{repo}/pulls/{pull_number}/comments"


class CommentSubmissionError(ValueError):
    """Posting stopped partway; ``posted`` comments are already on the PR."""

    def __init__(self, message: str, posted: int = 0):
        super().__init__(message)
        self.posted = posted


@dataclass
class ReviewComment:
    """A single inline review comment."""
    path: str
    line: int
    body: str
    commit_id: str
    side: str = "RIGHT"

    def to_payload(self) -> Dict[str, Any]:
        """Body for GitHub's create-review-comment endpoint."""
        return {
            'path': self.path,
            'line': self.line,
            'side': self.side,
            'body': self.body,
            'commit_id': self.commit_id,
        }


def extract_ai_comments(response: Any) -> List[Dict[str, Any]]:
    """
    Pull ``message.content.comments`` out of a completion response.

    ``content`` may be a JSON string or an already-decoded mapping. Missing
    levels or undecodable content yield an empty list.
    """
    if not isinstance(response, Mapping):
        return []

    message = response.get('message')
    if not isinstance(message, Mapping):
        return []

    content = message.get('content')
    if isinstance(content, str):
        try:
            content = json.loads(content)
        except ValueError:
            logger.debug("AI response content is not JSON, no comments extracted")
            return []

    if not isinstance(content, Mapping):
        return []

    comments = content.get('comments')
    if not isinstance(comments, list):
        return []
    return [c for c in comments if isinstance(c, Mapping)]


def prepare_review_comments(
    response: Any,
    commit_id: str,
    side: Optional[str] = None
) -> List[ReviewComment]:
    """
    Map AI comments onto review comments anchored at ``commit_id``.

    The comment line is the AI's ``startLine`` (the merged hunk's first
    new-file line), falling back to ``line``. Comments with neither are
    dropped.
    """
    side = side or settings.review_comment_side
    prepared = []

    for comment in extract_ai_comments(response):
        line = comment.get('startLine')
        if line is None:
            line = comment.get('line')
        try:
            line = int(line)
        except (TypeError, ValueError):
            line = None

        if line is None or not comment.get('path'):
            logger.debug("Dropping AI comment without path/line: %r", comment)
            continue

        prepared.append(ReviewComment(
            path=comment['path'],
            line=line,
            body=comment.get('body') or "",
            commit_id=commit_id,
            side=side
        ))

    return prepared


def has_comments(data: Any) -> bool:
    """True when ``data`` carries a non-empty ``comments`` list."""
    if not isinstance(data, Mapping):
        return False
    comments = data.get('comments')
    return isinstance(comments, list) and len(comments) > 0


def build_submission(
    owner: str,
    repo: str,
    pull_number: int,
    comments: List[ReviewComment]
) -> List[Dict[str, Any]]:
    """Build one POST request description per comment."""
    url = COMMENTS_URL.format(owner=owner, repo=repo, pull_number=pull_number)
    return [
        {'url': url, 'method': 'POST', 'payload': comment.to_payload()}
        for comment in comments
    ]


class CommentSubmitter:
    """Post review comments to a GitHub pull request."""

    def __init__(self, github_token: Optional[str] = None):
        """
        Initialize submitter.

        Args:
            github_token: GitHub API token (uses settings if not provided)
        """
        self.github_token = github_token or settings.github_token

        if not self.github_token:
            raise ValueError("GitHub token required. Set GITHUB_TOKEN in .env file")

        self.github = Github(self.github_token)

    def submit(
        self,
        repo_full_name: str,
        pr_number: int,
        comments: List[ReviewComment]
    ) -> int:
        """
        Post comments on a PR.

        Args:
            repo_full_name: Repository in format "owner/repo"
            pr_number: PR number
            comments: Prepared review comments

        Returns:
            Number of comments posted

        Raises:
            ValueError: The repository or PR could not be opened
            CommentSubmissionError: A comment failed; earlier ones stay posted
        """
        if not comments:
            logger.info("No comments to submit, skipping")
            return 0

        try:
            repo = self.github.get_repo(repo_full_name)
            pr = repo.get_pull(pr_number)
        except GithubException as e:
            raise ValueError(f"Could not open PR #{pr_number} in {repo_full_name}: {e}") from e

        commits = {}

        posted = 0
        for comment in comments:
            try:
                if comment.commit_id not in commits:
                    commits[comment.commit_id] = repo.get_commit(comment.commit_id)
                pr.create_review_comment(
                    body=comment.body,
                    commit=commits[comment.commit_id],
                    path=comment.path,
                    line=comment.line,
                    side=comment.side
                )
            except GithubException as e:
                raise CommentSubmissionError(
                    f"Could not post comment on {comment.path}:{comment.line} "
                    f"({posted} of {len(comments)} already posted): {e}",
                    posted=posted
                ) from e
            posted += 1

        logger.info("Posted %d review comments on %s#%d", posted, repo_full_name, pr_number)
        return posted

    def close(self):
        """Close the GitHub client."""
        self.github.close()
