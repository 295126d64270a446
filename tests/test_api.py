"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from prdiff.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    """Tests for service endpoints."""

    def test_health(self, client):
        """Test health check."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root(self, client):
        """Test root endpoint reports the default merge distance."""
        body = client.get("/").json()
        assert body["api"] == "/api/v1"
        assert body["default_merge_distance"] == 3
        assert "/api/v1/hunks" in body["endpoints"]

    def test_value_error_becomes_400(self, client, monkeypatch):
        """Test collaborator ValueErrors map to a 400 with the message."""
        def broken_parser(merge_distance):
            raise ValueError("merge_distance must be >= 0, got -5")

        monkeypatch.setattr("prdiff.api.routes.HunkParser", broken_parser)
        response = client.post("/api/v1/hunks", json={"files": []})

        assert response.status_code == 400
        assert response.json() == {"detail": "merge_distance must be >= 0, got -5"}


class TestHunksEndpoint:
    """Tests for POST /api/v1/hunks."""

    def test_parse_hunks(self, client, pr_files):
        """Test records come back in order with startLine keys."""
        response = client.post("/api/v1/hunks", json={"files": pr_files})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert body["records"][0] == {
            "path": "src/main.py",
            "startLine": 1,
            "removed": ["import sys"],
            "added": ["import sys, re", "import json"],
            "diff": "- import sys\n+ import sys, re\n+ import json",
        }
        assert body["records"][2]["path"] == "README.md"

    def test_merge_distance_override(self, client, pr_files):
        """Test request-level merge distance."""
        response = client.post("/api/v1/hunks", json={"files": pr_files, "merge_distance": 50})
        assert response.json()["total"] == 2

    def test_negative_merge_distance_rejected(self, client, pr_files):
        """Test validation rejects negative merge distance."""
        response = client.post("/api/v1/hunks", json={"files": pr_files, "merge_distance": -1})
        assert response.status_code == 422

    def test_missing_filename_rejected(self, client):
        """Test file records need a filename."""
        response = client.post("/api/v1/hunks", json={"files": [{"patch": "@@ -1 +1 @@"}]})
        assert response.status_code == 422


class TestPromptEndpoint:
    """Tests for POST /api/v1/prompt."""

    def test_build_prompt(self, client, pr_files):
        """Test messages and PR URL."""
        response = client.post("/api/v1/prompt", json={
            "files": pr_files,
            "rules": "- Keep functions short",
            "pr_url": "https://api.github.com/repos/octo/repo/pulls/7",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["record_count"] == 3
        assert body["prUrl"] == "https://api.github.com/repos/octo/repo/pulls/7"
        assert "- Keep functions short" in body["messages"][0]["content"]
        assert body["messages"][1]["content"].startswith("Here are the code changes:")


class TestCommentsEndpoint:
    """Tests for POST /api/v1/comments/prepare."""

    def test_prepare_with_submissions(self, client):
        """Test comments and submission payloads."""
        response = client.post("/api/v1/comments/prepare", json={
            "response": {"message": {"content": {"comments": [
                {"path": "src/main.py", "startLine": 41, "body": "Use logging."}
            ]}}},
            "commit_id": "abc123",
            "owner": "octo",
            "repo": "repo",
            "pull_number": 7,
        })

        assert response.status_code == 200
        body = response.json()
        assert body["has_comments"] is True
        assert body["comments"][0]["line"] == 41
        assert body["comments"][0]["side"] == "RIGHT"
        assert body["submissions"][0]["url"] == "https://api.github.com/repos/octo/repo/pulls/7/comments"

    def test_prepare_without_comments(self, client):
        """Test empty AI output."""
        response = client.post("/api/v1/comments/prepare", json={
            "response": {"message": {"content": "{}"}},
            "commit_id": "abc123",
        })

        body = response.json()
        assert body["has_comments"] is False
        assert body["comments"] == []
        assert body["submissions"] == []
