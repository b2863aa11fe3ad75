"""Create the linky Typer CLI app."""

import logging
import sys
from pathlib import Path

import typer

from linky.api.config.LinkyConfig import LinkyConfig
from linky.api.link._sources import StreamFormatError, get_source
from linky.api.link.Fetcher import Fetcher
from linky.api.link.LinkChecker import LinkChecker
from linky.api.link.Tag import Tag
from linky.cli._log_error_chain import _log_error_chain
from linky.utils.logger import configure_logging, get_logger


def _create_app() -> typer.Typer:
    """Create and configure the linky Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Extract links from Markdown files.",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def run(
        files: list[str] | None = typer.Argument(
            None, help="Files to parse (default: read 'path:line: tag link' lines from stdin)"
        ),
        check: bool = typer.Option(False, "--check", "-c", help="Check links"),
        follow: bool = typer.Option(False, "--follow", "-f", help="Follow HTTP redirects"),
        mute: list[Tag] | None = typer.Option(None, "--mute", "-m", help="Tags to mute"),
        prefix: list[str] | None = typer.Option(None, "--prefix", "-p", help="Fragment prefixes"),
        root: str | None = typer.Option(
            None, "--root", "-r", metavar="PATH", help="Join absolute local links to a document root [default: /]"
        ),
        config_path: Path | None = typer.Option(None, "--config", help="JSON configuration file"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug diagnostics"),
    ) -> None:
        """Extract links from Markdown files and optionally check them."""
        configure_logging(logging.DEBUG if verbose else None)
        logger = get_logger("cli")

        try:
            path = config_path or LinkyConfig.get_config_path()
            config = LinkyConfig.load(path) if path else LinkyConfig()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(2) from e

        config = config.with_overrides(check=check, follow=follow, mute=mute, prefixes=prefix, root=root)

        source = get_source(files, sys.stdin)
        fetcher = Fetcher(follow_redirects=config.follow, timeout=config.timeout) if config.check else None
        checker = LinkChecker(config, fetcher)

        try:
            for record in checker.run(source):
                if record.error is not None:
                    _log_error_chain(record.error, logger)
                typer.echo(record.report_line())
        except StreamFormatError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(2) from e
        finally:
            if fetcher is not None:
                fetcher.close()

        errors = checker.error_count + source.errors
        raise typer.Exit(1 if errors else 0)

    return app
