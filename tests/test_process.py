"""Tests for process.py — subprocess wrapper."""

from github_tags.process import Result, run


def test_result_dataclass():
    r = Result(returncode=0, stdout="hello", stderr="")
    assert r.returncode == 0
    assert r.stdout == "hello"
    assert r.stderr == ""


def test_run_captures_output():
    result = run(["echo", "hello"])
    assert result.returncode == 0
    assert result.stdout.strip() == "hello"
    assert result.stderr == ""


def test_run_captures_stderr():
    result = run(["sh", "-c", "echo err >&2"])
    assert result.stderr.strip() == "err"


def test_run_returns_nonzero():
    result = run(["sh", "-c", "exit 42"])
    assert result.returncode == 42


def test_run_with_cwd(tmp_path):
    result = run(["pwd"], cwd=str(tmp_path))
    assert result.stdout.strip() == str(tmp_path.resolve())
