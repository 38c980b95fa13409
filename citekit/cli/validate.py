"""Validate Typer app factory."""

from typing import Annotated

import typer

from citekit.api.validate.cmd_check import cmd_check
from citekit.cli._handle_stage_result import _handle_stage_result


def validate() -> typer.Typer:
    """Create and configure the validate Typer app."""
    app = typer.Typer(
        name="validate",
        help="Validate citations in a markdown file",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        path: Annotated[str | None, typer.Argument(help="Markdown file to validate")] = None,
        scope: Annotated[
            str | None, typer.Option("--scope", "-s", help="Folder searched by filename when a link path fails")
        ] = None,
        lines: Annotated[str | None, typer.Option("--lines", "-l", help="Only report lines 'start-end' or 'n'")] = None,
    ) -> None:
        """Check that every link resolves to an existing file and anchor."""
        if path is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()
        _handle_stage_result(cmd_check, ctx)(path=path, scope=scope, lines=lines)

    return app
