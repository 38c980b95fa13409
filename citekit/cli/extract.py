"""Extract Typer app factory."""

import typer

from citekit.api.extract.cmd_file import cmd_file
from citekit.api.extract.cmd_header import cmd_header
from citekit.api.extract.cmd_links import cmd_links
from citekit.cli._handle_stage_result import _handle_stage_result


def extract() -> typer.Typer:
    """Create and configure the extract Typer app."""
    app = typer.Typer(
        name="extract",
        help="Extract cited content",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="links")
    def links_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Markdown file whose citations are extracted"),
        scope: str | None = typer.Option(None, "--scope", "-s", help="Folder searched by filename"),
        full_files: bool | None = typer.Option(
            None, "--full-files/--no-full-files", help="Also extract links without an anchor"
        ),
        session: str | None = typer.Option(None, help="Skip files already extracted in this session"),
    ) -> None:
        """Extract sections, blocks, and files cited by a document."""
        _handle_stage_result(cmd_links, ctx)(path=path, scope=scope, full_files=full_files, session=session)

    @app.command(name="header")
    def header_cmd(
        ctx: typer.Context,
        target: str = typer.Argument(..., help="Target markdown file"),
        header: str = typer.Argument(..., help="Heading text or anchor"),
        scope: str | None = typer.Option(None, "--scope", "-s", help="Folder searched by filename"),
    ) -> None:
        """Extract one section of a file."""
        _handle_stage_result(cmd_header, ctx)(target=target, header=header, scope=scope)

    @app.command(name="file")
    def file_cmd(
        ctx: typer.Context,
        target: str = typer.Argument(..., help="Target markdown file"),
        scope: str | None = typer.Option(None, "--scope", "-s", help="Folder searched by filename"),
    ) -> None:
        """Extract a whole file."""
        _handle_stage_result(cmd_file, ctx)(target=target, scope=scope)

    return app
