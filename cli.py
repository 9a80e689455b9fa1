#!/usr/bin/env python3
"""
tsshell CLI.

Entry point for the interactive time-series database shell.
Connection defaults come from config/settings/application.yaml and
credentials from config/.env; options below override both.

Usage:
    python cli.py --help
    python cli.py
    python cli.py --host db.local --port 8086 --database telegraf
    python cli.py --username admin --password secret --precision ms
    python cli.py --debug
"""

import sys
from pathlib import Path

import click
import structlog

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from tsshell.core.logging import get_logger, setup_logging


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
@click.option("--host", default=None, help="Database host.")
@click.option("--port", default=None, type=int, help="Database HTTP port.")
@click.option("--username", "-u", default=None, help="Username for Basic auth.")
@click.option("--password", "-p", default=None, help="Password for Basic auth.")
@click.option("--database", default="", help="Database selected at startup.")
@click.option("--retention-policy", default="", help="Retention policy selected at startup.")
@click.option("--precision", default="", help="Timestamp format: rfc3339, h, m, s, ms, u or ns.")
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
def main(
    host: str | None,
    port: int | None,
    username: str | None,
    password: str | None,
    database: str,
    retention_policy: str,
    precision: str,
    verbose: bool,
    debug: bool,
) -> None:
    """
    Interactive time-series database shell.

    \b
    Examples:
        python cli.py
        python cli.py --host db.local --port 8086
        python cli.py --database telegraf --precision ms
        python cli.py -u admin -p secret --debug
    """
    validate_project_root()

    from tsshell.core.config import get_app_config, get_settings

    # Logging setup reads logging.yaml, so configuration errors are echoed directly.
    try:
        app_config = get_app_config().application
        settings = get_settings()
    except (FileNotFoundError, RuntimeError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if debug:
        setup_logging(level="DEBUG", format_type="console", enable_console=True)
    elif verbose:
        setup_logging(level="INFO", format_type="console", enable_console=True)
    else:
        setup_logging()

    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)
    logger.debug("CLI invoked", verbose=verbose, debug=debug)

    run_shell(
        host=host or app_config.server.host,
        port=port or app_config.server.port,
        username=username if username is not None else settings.tsdb_username,
        password=password if password is not None else settings.tsdb_password,
        database=database,
        retention_policy=retention_policy,
        precision=precision,
        connect_timeout=app_config.timeouts.connect,
        timeout=app_config.timeouts.request,
        prefix=app_config.prompt.prefix,
        title=app_config.prompt.title,
    )


def run_shell(
    host: str,
    port: int,
    username: str,
    password: str,
    database: str,
    retention_policy: str,
    precision: str,
    connect_timeout: float,
    timeout: float,
    prefix: str,
    title: str,
) -> None:
    """Build the session and transport client, then run the shell."""
    from tsshell.cli.client import TransportClient
    from tsshell.cli.session import SessionState
    from tsshell.cli.shell import InteractiveShell

    logger = get_logger(__name__)
    logger.info("Starting shell", host=host, port=port, database=database)

    session = SessionState(
        database=database,
        retention_policy=retention_policy,
        precision=precision,
        username=username,
        password=password,
    )
    client = TransportClient(host, port, connect_timeout=connect_timeout, timeout=timeout)

    InteractiveShell(client, session=session, prefix=prefix, title=title).run()


if __name__ == "__main__":
    main()
