"""Shared test fixtures."""

import pytest

from github_tags.github import RefResponse, RefStatus, tag_ref


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CI-provided variables out of option resolution."""
    for var in ("GITHUB_TOKEN", "GITHUB_REPOSITORY", "GITHUB_ACTIONS"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.run for tests."""
    from github_tags import process

    calls = []
    responses = []

    def fake_run(args, cwd=None):
        calls.append(("run", args, cwd))
        if responses:
            return responses.pop(0)
        return process.Result(returncode=0, stdout="", stderr="")

    monkeypatch.setattr(process, "run", fake_run)

    return type("MockProcess", (), {"calls": calls, "responses": responses})()


def ok(name, commit):
    return RefResponse(RefStatus.OK, tag_ref(name), commit=commit)


def missing(name, message="Not Found"):
    return RefResponse(RefStatus.MISSING, tag_ref(name), message=message)


def error(name, message="Server Error"):
    return RefResponse(RefStatus.ERROR, tag_ref(name), message=message)


class FakeRefsClient:
    """Scripted stand-in for RefsClient. Records (method, name, commit) calls."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def _next(self, call):
        self.calls.append(call)
        if not self.responses:
            raise AssertionError(f"unexpected call {call}")
        return self.responses.pop(0)

    def get_ref(self, name):
        return self._next(("GET", name, None))

    def create_ref(self, name, commit):
        return self._next(("POST", name, commit))

    def update_ref(self, name, commit, force=True):
        return self._next(("PATCH", name, commit))


class RecordingReporter:
    def __init__(self):
        self.messages = []

    def ok(self, msg):
        self.messages.append(("ok", msg))

    def warn(self, msg):
        self.messages.append(("warn", msg))

    def fail(self, msg=None, detail=None):
        self.messages.append(("fail", msg, detail))

    def kinds(self):
        return [m[0] for m in self.messages]


@pytest.fixture
def fake_client():
    return FakeRefsClient()


@pytest.fixture
def reporter():
    return RecordingReporter()
