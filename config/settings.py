"""Configuration settings for prdiff."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


# Max gap (new-file lines) between one hunk's end and the next hunk's start for merging
DEFAULT_MERGE_DISTANCE = 3

DEFAULT_REVIEW_RULES = """- Functions and variables use descriptive, intention-revealing names
- No commented-out code or leftover debug output
- Errors are handled explicitly, never silently swallowed
- Public functions carry a short docstring
- No secrets, tokens or credentials in source"""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # GitHub API
    github_token: Optional[str] = None

    # Hunk merging: max gap (in new-file lines) between two hunks that are merged
    merge_distance: int = Field(DEFAULT_MERGE_DISTANCE, ge=0)

    # Review comments
    review_comment_side: str = "RIGHT"  # RIGHT = new version of the file
    review_rules: str = DEFAULT_REVIEW_RULES

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Global settings instance
settings = Settings()
