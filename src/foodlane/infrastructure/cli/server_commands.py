"""CLI commands for running the HTTP server and preparing storage."""

from __future__ import annotations

import click
import uvicorn

from foodlane.infrastructure.bootstrap import build_engine, init_db
from foodlane.infrastructure.config import Settings
from foodlane.infrastructure.logging import configure_logging


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: $HOST or 0.0.0.0).")
@click.option("--port", default=None, type=int, help="Port (default: $PORT or 5000).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    settings = Settings.from_env()
    try:
        settings.require_secret()
    except RuntimeError as exc:
        raise click.ClickException(str(exc))

    configure_logging(settings.environment, settings.log_level)
    uvicorn.run(
        "foodlane.infrastructure.api.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


@click.command("init-db")
def init_db_command() -> None:
    """Create the database tables if they do not exist."""
    settings = Settings.from_env()
    init_db(build_engine(settings.database_url))
    click.echo(f"Database ready at {settings.database_url}")
