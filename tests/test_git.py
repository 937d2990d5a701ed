"""Tests for git.py — local commit lookup."""

import pytest

from github_tags import process
from github_tags.git import current_commit


def test_current_commit(mock_process):
    mock_process.responses.append(process.Result(0, "abc123def\n", ""))
    assert current_commit() == "abc123def"
    assert mock_process.calls[0][1] == ["git", "rev-parse", "--verify", "HEAD"]


def test_current_commit_failure(mock_process):
    mock_process.responses.append(process.Result(128, "", "fatal: not a git repository\n"))
    with pytest.raises(RuntimeError, match="not a git repository"):
        current_commit()


def test_current_commit_empty(mock_process):
    mock_process.responses.append(process.Result(0, "\n", ""))
    with pytest.raises(RuntimeError, match="no commit"):
        current_commit()
