#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=lambda: settings.api_host,
    help="Host to bind to (default: BOOKSHELF_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=lambda: settings.api_port,
    type=int,
    help="Port to bind to (default: BOOKSHELF_API_PORT or 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=lambda: settings.api_reload,
    help="Enable auto-reload for development (default: BOOKSHELF_API_RELOAD)",
)
@click.option(
    "--log-level",
    default=lambda: settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error", "critical"], case_sensitive=False),
    help="Log level (default: BOOKSHELF_LOG_LEVEL or info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app factory reads these when it is imported by the reloader process
    os.environ["BOOKSHELF_API_HOST"] = host
    os.environ["BOOKSHELF_API_PORT"] = str(port)
    os.environ["BOOKSHELF_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"

    try:
        # Each process builds its own app, and so its own book store
        uvicorn.run(
            "bookshelf.api.app:get_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the schema to this file instead of stdout",
)
def export_schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from bookshelf.graphql.schema import print_schema

    sdl = print_schema()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"✓ Schema written to {output}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
