"""API routes for hunk parsing, prompt building and comment preparation."""

from typing import List

from fastapi import APIRouter

from .models import (
    FileChangeModel,
    HunksRequest,
    HunksResponse,
    HunkRecordResponse,
    PromptRequest,
    PromptResponse,
    CommentsRequest,
    CommentsResponse,
    ReviewCommentResponse,
    SubmissionResponse,
)
from ..pr_review.change_set import FileChange
from ..pr_review.hunk_parser import HunkParser, FileDiffRecord
from ..pr_review.prompt_builder import ReviewPromptBuilder
from ..pr_review.comments import prepare_review_comments, build_submission

router = APIRouter()


def to_file_changes(files: List[FileChangeModel]) -> List[FileChange]:
    return [FileChange(**f.model_dump()) for f in files]


def parse_request(request: HunksRequest) -> List[FileDiffRecord]:
    return HunkParser(request.merge_distance).parse_files(to_file_changes(request.files))


@router.post("/hunks", response_model=HunksResponse)
async def parse_hunks(request: HunksRequest):
    """Parse file patches into merged, line-numbered hunks."""
    records = parse_request(request)
    return HunksResponse(
        total=len(records),
        records=[HunkRecordResponse(**record.to_dict()) for record in records]
    )


@router.post("/prompt", response_model=PromptResponse)
async def build_prompt(request: PromptRequest):
    """Build system + user messages for reviewing the given files."""
    records = parse_request(request)
    prompt = ReviewPromptBuilder(request.rules).build_messages(records, pr_url=request.pr_url)
    return PromptResponse(
        messages=prompt.messages,
        pr_url=prompt.pr_url,
        record_count=len(records)
    )


@router.post("/comments/prepare", response_model=CommentsResponse)
async def prepare_comments(request: CommentsRequest):
    """Turn AI reviewer output into review comment payloads."""
    comments = prepare_review_comments(request.response, request.commit_id)

    submissions = []
    if request.owner and request.repo and request.pull_number:
        submissions = [
            SubmissionResponse(**submission)
            for submission in build_submission(
                request.owner, request.repo, request.pull_number, comments
            )
        ]

    return CommentsResponse(
        has_comments=bool(comments),
        comments=[ReviewCommentResponse(**c.to_payload()) for c in comments],
        submissions=submissions
    )
