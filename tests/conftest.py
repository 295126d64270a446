"""Test configuration."""

import pytest


@pytest.fixture
def two_hunk_patch():
    """Patch with two hunks far enough apart to stay separate."""
    return "\n".join([
        "@@ -1,3 +1,4 @@ import os",
        " import os",
        "-import sys",
        "+import sys, re",
        "+import json",
        " ",
        "@@ -40,3 +41,3 @@ def main():",
        " def main():",
        "-    print('hi')",
        "+    print('hello')",
        "     return 0",
    ])


@pytest.fixture
def pr_files(two_hunk_patch):
    """GitHub-style file list with a modified, a renamed and an added file."""
    return [
        {
            "filename": "src/main.py",
            "status": "modified",
            "patch": two_hunk_patch,
            "additions": 3,
            "deletions": 2,
        },
        {
            "filename": "src/renamed.py",
            "status": "renamed",
            "previous_filename": "src/old_name.py",
            "additions": 0,
            "deletions": 0,
        },
        {
            "filename": "README.md",
            "status": "added",
            "patch": "@@ -0,0 +1,2 @@\n+# Title\n+Some text",
            "additions": 2,
            "deletions": 0,
        },
    ]
