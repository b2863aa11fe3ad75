"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from linky import __version__
    from linky.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        print(f"linky {__version__}")
        return 0

    app = _create_app()
    try:
        result = app(args=argv, prog_name="linky", standalone_mode=False)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except click.exceptions.Abort:
        return 1
    return result if isinstance(result, int) else 0
