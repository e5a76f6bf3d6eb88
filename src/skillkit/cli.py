import click

from skillkit import __version__
from skillkit.cli_command import CONTEXT_SETTINGS
from skillkit.kit_cli_commands.create_branch import create_branch
from skillkit.kit_cli_commands.fetch_pr_comments import fetch_pr_comments


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Git and GitHub helpers for agent-driven development workflows."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(create_branch)
cli.add_command(fetch_pr_comments)


if __name__ == "__main__":
    cli()
