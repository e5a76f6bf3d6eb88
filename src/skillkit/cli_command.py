"""Click command class with a per-command usage error exit status."""

from typing import Any

import click

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


class ExitCodeCommand(click.Command):
    """click.Command whose usage errors exit with a configurable status.

    Click exits with status 2 on bad arguments. The skill commands have a
    documented exit code table that callers branch on, so the status used for
    unknown options, missing arguments and extra arguments is set per command.

    Example:
        @click.command(cls=ExitCodeCommand, usage_exit_code=6)
        def my_command() -> None:
            ...
    """

    def __init__(self, *args: Any, usage_exit_code: int = 2, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.usage_exit_code = usage_exit_code

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = self.usage_exit_code
            raise


def raise_usage_error(ctx: click.Context, message: str) -> None:
    """Raise a UsageError that exits with the command's usage exit status.

    For argument checks click cannot express, such as empty string values.
    """
    error = click.UsageError(message, ctx=ctx)
    if isinstance(ctx.command, ExitCodeCommand):
        error.exit_code = ctx.command.usage_exit_code
    raise error
