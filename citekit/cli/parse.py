"""AST Typer app factory."""

from typing import Annotated

import typer

from citekit.api.parse.cmd_ast import cmd_ast
from citekit.cli._handle_stage_result import _handle_stage_result


def parse() -> typer.Typer:
    """Create and configure the ast Typer app."""
    app = typer.Typer(
        name="ast",
        help="Show the parsed structure of a markdown file",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        path: Annotated[str | None, typer.Argument(help="Markdown file to parse")] = None,
    ) -> None:
        if path is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()
        _handle_stage_result(cmd_ast, ctx)(path=path)

    return app
