"""Click entry point — all commands."""

import sys

import click

from github_tags import __version__, config, github, log
from github_tags import reconcile as reconcile_mod


def _connection_options(f):
    f = click.option("--owner", default=None, help="Repository owner (user or organization)")(f)
    f = click.option("--repo", default=None, help="Repository name")(f)
    f = click.option("--token", default=None, help="API token (defaults to $GITHUB_TOKEN)")(f)
    f = click.option("--tag", default=None, help="Tag name (defaults to the pyproject.toml version)")(f)
    f = click.option("--api-url", default=None, help="API base URL for GitHub Enterprise")(f)
    f = click.option(
        "--config",
        "config_path",
        default=config.CONFIG_FILE,
        show_default=True,
        help="YAML file with default options",
    )(f)
    return f


def _load_options(config_path: str, **cli_opts) -> config.TagOptions:
    options = config.resolve(cli_opts, config_path=config_path)
    config.validate(options)
    return options


def _client(options: config.TagOptions) -> github.RefsClient:
    return github.RefsClient(options.owner, options.repo, options.token, api_url=options.api_url)


@click.group()
@click.version_option(version=__version__, prog_name="github-tags")
def main():
    """Create, move and roll back git tags on GitHub."""


@main.command(name="set")
@_connection_options
@click.option(
    "--rollback/--no-rollback",
    default=None,
    help="Record the tag's previous commit in rollback-<tag> first",
)
def set_cmd(owner, repo, token, tag, api_url, config_path, rollback):
    """Point a tag at the current local commit."""
    try:
        options = _load_options(
            config_path, owner=owner, repo=repo, token=token, tag=tag, api_url=api_url, rollback=rollback
        )
        reconciler = reconcile_mod.TagReconciler(options, _client(options))
    except (config.ConfigError, RuntimeError) as e:
        log.error(str(e))
        sys.exit(1)

    log.header(f"tag {options.owner}/{options.repo}")
    log.info(f"tag: {options.tag}")
    log.info(f"commit: {reconciler.local_commit}")
    if options.rollback:
        log.info(f"rollback: {options.rollback_tag}")
    log.info("")

    try:
        code = reconciler.reconcile()
    except github.TransportError as e:
        log.fail("Request to GitHub failed.", str(e))
        code = 1

    log.info("")
    log.footer("complete" if code == 0 else "FAILED")
    sys.exit(code)


@main.command()
@_connection_options
def show(owner, repo, token, tag, api_url, config_path):
    """Show where the tag and its rollback tag point."""
    try:
        options = _load_options(config_path, owner=owner, repo=repo, token=token, tag=tag, api_url=api_url)
    except config.ConfigError as e:
        log.error(str(e))
        sys.exit(1)

    client = _client(options)
    code = 0
    for name in (options.tag, options.rollback_tag):
        try:
            resp = client.get_ref(name)
        except github.TransportError as e:
            log.error(str(e))
            sys.exit(1)
        if resp.status is github.RefStatus.OK:
            log.info(f"{resp.name}  {resp.commit}")
        elif resp.status is github.RefStatus.MISSING:
            log.info(f"{resp.name}  (none)")
        else:
            log.error(f"{resp.name}: {resp.message}")
            code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
