"""Pydantic models for API requests and responses."""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class FileChangeModel(BaseModel):
    """One entry of a PR's file list."""
    filename: str = Field(..., description="Path of the file in the new version")
    status: str = Field("modified", description="added, removed, modified or renamed")
    patch: Optional[str] = Field(None, description="Unified diff patch (absent for renames)")
    additions: int = 0
    deletions: int = 0
    changes: int = 0
    previous_filename: Optional[str] = None


class HunksRequest(BaseModel):
    """Request to parse file patches into merged hunks."""
    files: List[FileChangeModel]
    merge_distance: Optional[int] = Field(None, ge=0, description="Max line gap for merging hunks")


class HunkRecordResponse(BaseModel):
    """Single merged hunk."""
    model_config = ConfigDict(populate_by_name=True)

    path: str
    start_line: int = Field(..., alias="startLine")
    removed: List[str]
    added: List[str]
    diff: str


class HunksResponse(BaseModel):
    """Merged hunks across all files."""
    total: int
    records: List[HunkRecordResponse]


class PromptRequest(HunksRequest):
    """Request to build review prompt messages."""
    rules: Optional[str] = Field(None, description="Coding practices (uses settings if omitted)")
    pr_url: Optional[str] = None


class PromptResponse(BaseModel):
    """Chat messages for the AI reviewer."""
    model_config = ConfigDict(populate_by_name=True)

    messages: List[Dict[str, str]]
    pr_url: Optional[str] = Field(None, alias="prUrl")
    record_count: int


class CommentsRequest(BaseModel):
    """AI reviewer output to turn into review comments."""
    response: Dict[str, Any] = Field(..., description="Completion response with message.content.comments")
    commit_id: str = Field(..., description="Head commit SHA the comments attach to")
    owner: Optional[str] = None
    repo: Optional[str] = None
    pull_number: Optional[int] = Field(None, gt=0)


class ReviewCommentResponse(BaseModel):
    """Single review comment payload."""
    path: str
    line: int
    side: str
    body: str
    commit_id: str


class SubmissionResponse(BaseModel):
    """Request description for posting one comment."""
    url: str
    method: str
    payload: ReviewCommentResponse


class CommentsResponse(BaseModel):
    """Prepared comments and optional submission requests."""
    has_comments: bool
    comments: List[ReviewCommentResponse]
    submissions: List[SubmissionResponse] = Field(default_factory=list)
