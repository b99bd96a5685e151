#!/usr/bin/env python3
"""
CLI entry point for Duties database migrations.
"""

import os
import sys
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from duties import __version__
from duties.logging import configure_logging, get_logger

logger = get_logger(__name__)


def get_alembic_config() -> Config:
    """Locate alembic.ini via DUTIES_ALEMBIC_INI or the project root."""
    alembic_ini = os.getenv("DUTIES_ALEMBIC_INI")
    if alembic_ini is None:
        project_dir = Path(__file__).resolve().parents[3]
        alembic_ini = str(project_dir / "alembic.ini")

    if not Path(alembic_ini).exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    return Config(alembic_ini)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="duties-migrate")
def main(log_level: str) -> None:
    """Duties database migration management."""
    configure_logging(debug=(log_level == "debug"))


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    try:
        config = get_alembic_config()
        logger.info("Upgrading database", revision=revision)
        command.upgrade(config, revision)
        logger.info("Database upgrade completed successfully")
    except Exception as e:
        logger.error("Database upgrade failed", error=str(e))
        sys.exit(1)


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    try:
        config = get_alembic_config()
        logger.info("Downgrading database", revision=revision)
        command.downgrade(config, revision)
        logger.info("Database downgrade completed successfully")
    except Exception as e:
        logger.error("Database downgrade failed", error=str(e))
        sys.exit(1)


@main.command()
def current() -> None:
    """Show the current database revision."""
    try:
        command.current(get_alembic_config(), verbose=True)
    except Exception as e:
        logger.error("Failed to read current revision", error=str(e))
        sys.exit(1)


@main.command()
def history() -> None:
    """Show migration history."""
    try:
        command.history(get_alembic_config(), verbose=True)
    except Exception as e:
        logger.error("Failed to read migration history", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
