"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from citekit import __version__
    from citekit.api.config.CitekitConfig import CitekitConfig
    from citekit.cli._create_app import _create_app
    from citekit.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"citekit {__version__}")
        return 0

    try:
        configure_logging(CitekitConfig.load())
    except ValueError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        return 1

    app = _create_app()
    try:
        app(argv)
        return 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
