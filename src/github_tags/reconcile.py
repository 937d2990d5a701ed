"""Core tag update algorithm + rollback tag bookkeeping.

Every step returns an exit code (0=success, 1=failure). A failure is
reported once and ends the chain; nothing is retried.
"""

from typing import Callable, Protocol

from github_tags import git, log
from github_tags.config import TagOptions
from github_tags.github import RefsClient, RefStatus


class Reporter(Protocol):
    def ok(self, msg: str) -> None: ...

    def warn(self, msg: str) -> None: ...

    def fail(self, msg: str | None = None, detail: str | None = None) -> None: ...


class TagReconciler:
    def __init__(
        self,
        options: TagOptions,
        client: RefsClient,
        reporter: Reporter = log,
        current_commit: Callable[[], str] | None = None,
    ):
        self.options = options
        self.client = client
        self.reporter = reporter
        self.local_commit = (current_commit or git.current_commit)()

    @property
    def tag(self) -> str:
        return self.options.tag

    @property
    def rollback_tag(self) -> str:
        return self.options.rollback_tag

    def reconcile(self) -> int:
        if self.options.rollback:
            return self.check_rollback_source()
        return self.update_tag(self.tag, self.local_commit)

    def update_tag(self, tag: str, commit: str) -> int:
        """Force-move the tag to commit, creating it if the remote has none."""
        resp = self.client.update_ref(tag, commit, force=True)
        if resp.status is RefStatus.MISSING:
            self.reporter.warn(f"Tag {tag} does not exist on upstream. Trying to create...")
            return self.create_tag(tag, commit)
        if resp.points_at(commit):
            self.reporter.ok(f"Tag {tag} set to {commit}")
            return 0
        self.reporter.fail(
            "Something went wrong. Perhaps changes have not been pushed to upstream.",
            resp.message,
        )
        return 1

    def create_tag(self, tag: str, commit: str) -> int:
        resp = self.client.create_ref(tag, commit)
        if resp.points_at(commit):
            self.reporter.ok(f"Tag {tag} set to {commit}")
            return 0
        self.reporter.fail(f"Could not create tag {tag}.", resp.message)
        return 1

    def check_rollback_source(self) -> int:
        """Find the commit the tag points at before this run moves it."""
        resp = self.client.get_ref(self.tag)
        if resp.status is RefStatus.MISSING:
            self.reporter.warn(
                f"Tag {self.tag} not found. Rollback tag {self.rollback_tag} "
                "will be set to current commit"
            )
            return self.update_rollback_tag(self.local_commit)
        if resp.status is RefStatus.ERROR:
            self.reporter.fail(f"Could not read tag {self.tag}.", resp.message)
            return 1
        return self.update_rollback_tag(resp.commit)

    def update_rollback_tag(self, prior_commit: str) -> int:
        resp = self.client.get_ref(self.rollback_tag)
        if resp.status is RefStatus.MISSING:
            self.reporter.warn(
                f"Tag {self.rollback_tag} does not exist on upstream. Trying to create..."
            )
            return self.create_rollback_tag(prior_commit)
        if resp.status is RefStatus.ERROR:
            self.reporter.fail(f"Could not read tag {self.rollback_tag}.", resp.message)
            return 1

        if prior_commit == self.local_commit:
            self.reporter.warn("Rollback commit is same as current. Leaving rollback alone...")
            return self.update_tag(self.tag, self.local_commit)

        resp = self.client.update_ref(self.rollback_tag, prior_commit, force=True)
        if resp.status is RefStatus.MISSING:
            self.reporter.warn(
                f"Tag {self.rollback_tag} does not exist on upstream. Trying to create..."
            )
            return self.create_rollback_tag(prior_commit)
        if resp.points_at(prior_commit):
            self.reporter.ok(f"Rollback tag {self.rollback_tag} set to {prior_commit}")
            return self.update_tag(self.tag, self.local_commit)
        self.reporter.fail(f"Could not move tag {self.rollback_tag}.", resp.message)
        return 1

    def create_rollback_tag(self, prior_commit: str) -> int:
        resp = self.client.create_ref(self.rollback_tag, prior_commit)
        if resp.points_at(prior_commit):
            self.reporter.ok(f"Rollback tag {self.rollback_tag} set to {prior_commit}")
            return self.update_tag(self.tag, self.local_commit)
        self.reporter.fail(f"Could not create tag {self.rollback_tag}.", resp.message)
        return 1
