#!/usr/bin/env python3
"""
Main CLI entry point for the Hotspots API server.
"""

import os
import sys

import click
import uvicorn

from hotspots import __version__
from hotspots.config import settings
from hotspots.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="hotspots")
def cli() -> None:
    """Hotspots CLI - run the API server and inspect configuration."""
    pass


@cli.command()
@click.option("--host", default=None, help="Host to bind to (default: HOTSPOTS_API_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind to (default: HOTSPOTS_API_PORT)")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development (default: HOTSPOTS_API_RELOAD)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: HOTSPOTS_LOG_LEVEL)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str | None) -> None:
    """Start the Hotspots API server."""
    host = host or settings.api_host
    port = port if port is not None else settings.api_port
    reload = reload or settings.api_reload
    debug = settings.debug if log_level is None else log_level == "debug"
    log_level = (log_level or settings.log_level).lower()

    configure_logging(debug=debug, level=log_level)

    logger.info("Starting Hotspots API server", host=host, port=port, reload=reload)

    # The app factory reads this settings object when uvicorn imports it in-process
    settings.log_level = log_level.upper()
    settings.debug = debug
    if reload:
        # Reload workers rebuild settings from the environment
        os.environ["HOTSPOTS_LOG_LEVEL"] = settings.log_level
        os.environ["HOTSPOTS_DEBUG"] = "true" if debug else "false"

    try:
        uvicorn.run(
            "hotspots.api.app:create_app",
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


@cli.command("check-config")
def check_config() -> None:
    """Print the resolved store configuration."""
    click.echo(f"Environment:   {settings.environment}")
    click.echo(f"Store backend: {settings.store_backend}")
    click.echo(f"Database URL:  {settings.base_db_url or '(not set)'}")

    if settings.store_backend.lower() == "firebase" and not settings.base_db_url:
        env_var = "FB_PROD_DB_URL" if settings.is_production else "FB_DEV_DB_URL"
        click.echo(f"✗ {env_var} is not set", err=True)
        sys.exit(1)

    click.echo("✓ Configuration looks usable")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
