"""Local git lookups."""

from github_tags import process


def current_commit(cwd: str | None = None) -> str:
    """Return the commit hash of HEAD in the local repository."""
    result = process.run(["git", "rev-parse", "--verify", "HEAD"], cwd=cwd)
    if result.returncode != 0:
        raise RuntimeError(f"git rev-parse failed: {result.stderr.strip()}")
    commit = result.stdout.strip()
    if not commit:
        raise RuntimeError("git rev-parse returned no commit")
    return commit
