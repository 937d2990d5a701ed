"""Subprocess wrapper — the single mock seam for shell calls."""

import subprocess
from dataclasses import dataclass


@dataclass
class Result:
    returncode: int
    stdout: str
    stderr: str


def run(args: list[str], cwd: str | None = None) -> Result:
    """Run a command and capture output. Never raises on non-zero exit."""
    proc = subprocess.run(
        args,
        capture_output=True,
        text=True,
        cwd=cwd,
    )
    return Result(returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
