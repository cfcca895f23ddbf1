"""Click group that answers usage mistakes with the relevant help text."""

from typing import Any, NoReturn

import click


def _fail_with_help(ctx: click.Context, error: click.UsageError, exit_code: int) -> NoReturn:
    click.echo(f"Error: {error.format_message()}", err=True)
    click.echo("")
    click.echo(ctx.get_help())
    ctx.exit(exit_code)


class AzpubGroup(click.Group):
    """Print help for the failing command instead of a bare usage line."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            _fail_with_help(e.ctx or ctx, e, e.exit_code)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            # Unknown command
            _fail_with_help(ctx, e, 1)
