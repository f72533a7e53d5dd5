"""Click command for the template-scaffold CLI."""

import sys

import click

from template_scaffold.catalog.github_catalog import DEFAULT_OWNER
from template_scaffold.create_command import CreateCommand
from template_scaffold.create_opts import CreateOpts
from template_scaffold.errors import ScaffoldToolError, failure_mark


@click.command("template-scaffold")
@click.argument("target_dir", required=False)
@click.option("-t", "--template", metavar="NAME",
              help="Template to use; skips the template prompt if it names a known template")
@click.option("--owner", envvar="TEMPLATE_SCAFFOLD_OWNER", default=DEFAULT_OWNER,
              show_default=True,
              help="GitHub account whose template repositories are offered")
@click.option("--github-token", envvar="GITHUB_TOKEN", metavar="TOKEN",
              help="GitHub API token (raises the search rate limit)")
def main(**kwargs):
    """Create a new project in TARGET_DIR from a GitHub template repository."""
    opts = CreateOpts(**kwargs)
    try:
        succeeded = CreateCommand(opts).execute()
    except ScaffoldToolError as exc:
        click.echo(f"{failure_mark()} {exc}", err=True)
        sys.exit(1)
    if not succeeded:
        sys.exit(1)
