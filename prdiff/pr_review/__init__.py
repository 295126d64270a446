"""PR review module: file changes, hunk parsing, prompts and comments."""

from .change_set import FileChange, ChangeSetSummary, normalize_file_changes, summarize
from .hunk_parser import HunkParser, Hunk, FileDiffRecord, MERGE_DISTANCE, parse_file_changes
from .prompt_builder import ReviewPromptBuilder, ReviewPrompt
from .comments import (
    ReviewComment,
    CommentSubmitter,
    CommentSubmissionError,
    extract_ai_comments,
    prepare_review_comments,
    has_comments,
    build_submission,
)
from .pr_fetcher import PRFetcher, PRData
from .coordinator import PRReviewCoordinator, PRReviewSession, quick_prepare_review

__all__ = [
    # Change sets
    'FileChange',
    'ChangeSetSummary',
    'normalize_file_changes',
    'summarize',

    # Hunk parsing
    'HunkParser',
    'Hunk',
    'FileDiffRecord',
    'MERGE_DISTANCE',
    'parse_file_changes',

    # Prompts
    'ReviewPromptBuilder',
    'ReviewPrompt',

    # Comments
    'ReviewComment',
    'CommentSubmitter',
    'CommentSubmissionError',
    'extract_ai_comments',
    'prepare_review_comments',
    'has_comments',
    'build_submission',

    # Fetching
    'PRFetcher',
    'PRData',

    # Coordinator
    'PRReviewCoordinator',
    'PRReviewSession',
    'quick_prepare_review',
]
