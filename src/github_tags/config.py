"""Resolve tag options from CLI flags, environment and .github-tags.yml."""

import os
import tomllib
from dataclasses import dataclass

import yaml

CONFIG_FILE = ".github-tags.yml"
DEFAULT_API_URL = "https://api.github.com"

_FILE_KEYS = ("owner", "repo", "token", "tag", "rollback", "api_url")


class ConfigError(Exception):
    """A required option is missing or unusable."""


@dataclass(frozen=True)
class TagOptions:
    owner: str | None
    repo: str | None
    token: str | None
    tag: str | None
    rollback: bool = False
    api_url: str = DEFAULT_API_URL

    @property
    def rollback_tag(self) -> str:
        return f"rollback-{self.tag}"


def load_file(path: str = CONFIG_FILE) -> dict:
    """Read options from a YAML file. A missing file yields no options."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of options")
    if data.get("rollback") is not None and not isinstance(data["rollback"], bool):
        raise ConfigError(f"{path}: rollback must be true or false")

    # Older configs spell the token the way the API query parameter did
    if "token" not in data and "oauth_token" in data:
        data["token"] = data["oauth_token"]
    return {k: data[k] for k in _FILE_KEYS if data.get(k) is not None}


def _env_options() -> dict:
    """Options supplied by the environment (GitHub Actions sets both)."""
    opts: dict = {}
    if os.environ.get("GITHUB_TOKEN"):
        opts["token"] = os.environ["GITHUB_TOKEN"]
    full_name = os.environ.get("GITHUB_REPOSITORY", "")
    owner, _, repo = full_name.partition("/")
    if owner and repo:
        opts["owner"] = owner
        opts["repo"] = repo
    return opts


def default_tag(path: str = "pyproject.toml") -> str | None:
    """Return the project version declared in pyproject.toml, or None."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return None
    project = data.get("project")
    if not isinstance(project, dict):
        return None
    version = project.get("version")
    return str(version) if version else None


def resolve(cli_opts: dict, config_path: str = CONFIG_FILE) -> TagOptions:
    """Merge option sources. Order: CLI → environment → file → defaults."""
    merged: dict = {}
    merged.update(load_file(config_path))
    merged.update(_env_options())
    merged.update({k: v for k, v in cli_opts.items() if v is not None})

    tag = merged.get("tag")
    if tag is None:
        tag = default_tag()

    return TagOptions(
        owner=merged.get("owner"),
        repo=merged.get("repo"),
        token=merged.get("token"),
        tag=str(tag) if tag is not None else None,
        rollback=bool(merged.get("rollback", False)),
        api_url=merged.get("api_url") or DEFAULT_API_URL,
    )


def validate(options: TagOptions) -> None:
    """Raise ConfigError for the first missing required option."""
    if not options.owner:
        raise ConfigError("You must provide the owner's name.")
    if not options.repo:
        raise ConfigError("You must provide the repo name.")
    if not options.token:
        raise ConfigError("You must provide the oauth token.")
    if not options.tag:
        raise ConfigError("You must provide a tag or a project version.")
