#!/usr/bin/env python3
"""
Main CLI entry point for the Academia backend server.
"""

import os

import click
import uvicorn

from academia import __version__
from academia.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="academia")
def cli() -> None:
    """Academia CLI - run the API server and inspect the schema."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option("--seed", is_flag=True, default=False, help="Load the demo dataset on startup")
def serve(host: str, port: int, reload: bool, log_level: str, seed: bool) -> None:
    """Start the Academia API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Academia API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        seed=seed,
    )

    # Settings are read when the app is imported, so pass flags through the environment
    if log_level == "debug":
        os.environ["ACADEMIA_DEBUG"] = "true"
    else:
        os.environ.setdefault("ACADEMIA_DEBUG", "false")
    os.environ["ACADEMIA_LOG_LEVEL"] = log_level.upper()
    if seed:
        os.environ["ACADEMIA_SEED_DEMO_DATA"] = "true"

    # Every worker would hold its own store, so only a single process is served
    uvicorn.run(
        "academia.api.app:get_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from academia.graphql.schema import print_schema

    click.echo(print_schema())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
