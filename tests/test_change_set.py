"""Tests for file-change normalization."""

from prdiff.pr_review.change_set import (
    FileChange,
    normalize_file_changes,
    summarize,
)


class TestFileChange:
    """Tests for FileChange."""

    def test_from_dict_full(self):
        """Test a complete GitHub file record."""
        change = FileChange.from_dict({
            "filename": "a.py",
            "status": "renamed",
            "patch": "@@ -1 +1 @@",
            "additions": 2,
            "deletions": 1,
            "changes": 3,
            "previous_filename": "b.py",
        })

        assert change.filename == "a.py"
        assert change.status == "renamed"
        assert change.previous_filename == "b.py"
        assert change.changes == 3

    def test_from_dict_missing_keys(self):
        """Test defaults for a sparse record."""
        change = FileChange.from_dict({"filename": "a.py", "patch": None, "additions": 4})

        assert change.status == "modified"
        assert change.patch is None
        assert change.deletions == 0
        assert change.changes == 4

    def test_to_dict_round_fields(self):
        """Test to_dict exposes every field."""
        data = FileChange(filename="a.py").to_dict()
        assert set(data) == {
            "filename", "status", "patch", "additions",
            "deletions", "changes", "previous_filename",
        }


class TestNormalizeFileChanges:
    """Tests for normalize_file_changes."""

    def test_list(self, pr_files):
        """Test a plain list of file records."""
        files = normalize_file_changes(pr_files)
        assert [f.filename for f in files] == ["src/main.py", "src/renamed.py", "README.md"]

    def test_files_wrapper(self, pr_files):
        """Test a mapping with a files list."""
        files = normalize_file_changes({"files": pr_files})
        assert len(files) == 3

    def test_single_record(self):
        """Test a single file mapping is wrapped."""
        files = normalize_file_changes({"filename": "a.py", "patch": "@@ -1 +1 @@"})
        assert len(files) == 1
        assert files[0].filename == "a.py"

    def test_unexpected_payload(self):
        """Test unsupported payloads yield nothing."""
        assert normalize_file_changes(None) == []
        assert normalize_file_changes("a.py") == []

    def test_skips_non_mapping_items(self):
        """Test junk entries are skipped, FileChange objects kept."""
        change = FileChange(filename="b.py")
        files = normalize_file_changes([{"filename": "a.py"}, 42, change])
        assert [f.filename for f in files] == ["a.py", "b.py"]


class TestSummarize:
    """Tests for change-set totals."""

    def test_summarize(self, pr_files):
        """Test totals over files."""
        summary = summarize(normalize_file_changes(pr_files))

        assert summary.file_count == 3
        assert summary.additions == 5
        assert summary.deletions == 2
        assert summary.total_changes == 7
