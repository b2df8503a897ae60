#!/usr/bin/env python3
"""
Application Entry Script.

Usage:
    python run.py --help
    python run.py --action server --reload --verbose
    python run.py --action init-db
    python run.py --action config
"""

import asyncio
import subprocess
import sys
from pathlib import Path

import click

# Ensure project root is in path for absolute imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from beehively.backend.core.logging import get_logger, log_with_source, setup_logging


def validate_project_root() -> Path:
    """Validate that we're running from the project root."""
    if not (PROJECT_ROOT / ".project_root").exists():
        click.echo(
            click.style("Error: .project_root not found. Run from project root.", fg="red"),
            err=True,
        )
        sys.exit(1)
    return PROJECT_ROOT


@click.command()
@click.option(
    "--action",
    type=click.Choice(["server", "init-db", "config", "info"]),
    default="info",
    help="Action to perform.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option("--host", default=None, help="Server host (for server action).")
@click.option("--port", default=None, type=int, help="Server port (for server action).")
@click.option("--reload", is_flag=True, help="Enable auto-reload (for server action).")
def main(
    action: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
    reload: bool,
) -> None:
    """
    Beehively Application Entry Point.

    Run the API server, create database tables, or inspect configuration.

    Examples:

        # Start development server
        python run.py --action server --reload --verbose

        # Create all tables in the configured database
        python run.py --action init-db

        # View loaded configuration
        python run.py --action config
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type="console")
    logger = get_logger(__name__)

    logger.debug("Starting application", extra={"action": action, "log_level": log_level})

    if action == "server":
        run_server(logger, host, port, reload)
    elif action == "init-db":
        init_db(logger)
    elif action == "config":
        show_config()
    elif action == "info":
        show_info()


def run_server(logger, host: str | None, port: int | None, reload: bool) -> None:
    """Start the FastAPI server under uvicorn."""
    from beehively.backend.core.config import get_server_address

    default_host, default_port = get_server_address()
    server_host = host or default_host
    server_port = port or default_port

    logger.info(
        "Starting server",
        extra={"host": server_host, "port": server_port, "reload": reload},
    )

    cmd = [
        sys.executable, "-m", "uvicorn",
        "beehively.backend.main:app",
        "--host", server_host,
        "--port", str(server_port),
    ]
    if reload:
        cmd.append("--reload")

    click.echo(f"Starting server at http://{server_host}:{server_port}")
    click.echo("Press Ctrl+C to stop\n")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except subprocess.CalledProcessError as e:
        logger.error("Server failed to start", extra={"exit_code": e.returncode})
        sys.exit(e.returncode)


def init_db(logger) -> None:
    """Create every table in the configured database."""
    from beehively.backend.core.database import create_all_tables, dispose_engine

    async def _run() -> list[str]:
        try:
            return await create_all_tables()
        finally:
            await dispose_engine()

    tables = asyncio.run(_run())
    log_with_source(logger, "cli", "info", "Tables created", tables=tables)
    click.echo(f"Created tables: {', '.join(tables)}")


def show_config() -> None:
    """Print the validated YAML configuration (secrets excluded)."""
    from beehively.backend.core.config import get_app_config

    app_config = get_app_config()
    sections = {
        "application": app_config.application,
        "database": app_config.database,
        "logging": app_config.logging,
        "features": app_config.features,
        "security": app_config.security,
    }
    for name, section in sections.items():
        click.echo(click.style(f"[{name}]", fg="cyan", bold=True))
        for key, value in section.model_dump().items():
            click.echo(f"  {key}: {value}")


def show_info() -> None:
    """Show application name, version and available actions."""
    from beehively.backend.core.config import get_app_config

    app_settings = get_app_config().application
    click.echo(f"{app_settings.name} v{app_settings.version}")
    click.echo(app_settings.description)
    click.echo("\nAvailable Actions:")
    click.echo("  server   Start the API server")
    click.echo("  init-db  Create database tables")
    click.echo("  config   Show loaded configuration")
    click.echo("  info     Show this message")


if __name__ == "__main__":
    main()
