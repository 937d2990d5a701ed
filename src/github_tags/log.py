"""Timestamped output + GitHub Actions formatting.

The module doubles as the reporter handed to the reconciler: anything with
``ok``, ``warn`` and ``fail`` works in its place.
"""

import os
import sys
from datetime import datetime


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def info(msg: str) -> None:
    print(f"[{_timestamp()}] {msg}", flush=True)


def header(title: str) -> None:
    line = f"── {title} " + "─" * max(0, 45 - len(title))
    if _is_github_actions():
        print(f"::group::{title}", flush=True)
    info(line)


def footer(title: str) -> None:
    line = f"── {title} " + "─" * max(0, 45 - len(title))
    info(line)
    if _is_github_actions():
        print("::endgroup::", flush=True)


def ok(msg: str) -> None:
    info(f"  ✓ {msg}")


def warn(msg: str) -> None:
    if _is_github_actions():
        print(f"::warning::{msg}", flush=True)
    info(f"  ! {msg}")


def fail(msg: str | None = None, detail: str | None = None) -> None:
    msg = msg or "Sorry, task failed."
    if _is_github_actions():
        print(f"::error::{msg}", flush=True)
    info(f"  ✗ {msg}")
    if detail:
        info(f"    {detail}")


def error(msg: str) -> None:
    if _is_github_actions():
        print(f"::error::{msg}", flush=True)
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)
