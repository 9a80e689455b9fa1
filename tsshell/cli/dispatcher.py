"""
Command Dispatcher.

Classifies one input line by its first token and runs exactly one
handler. Errors raised by a handler are printed and the shell keeps
accepting lines; only exit/quit/\\q end the session.
"""

from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tsshell.cli.client import TransportClient
from tsshell.cli.commands import (
    EXIT_COMMANDS,
    QUERY_COMMANDS,
    Command,
    first_token,
    parse_command,
)
from tsshell.cli.render import ResultRenderer
from tsshell.cli.session import SessionState
from tsshell.core.exceptions import (
    ApplicationError,
    InvalidArgumentError,
    UnsupportedCommandError,
)
from tsshell.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

INSERT_PREFIX_LEN = len("insert ")

HELP_ROWS = [
    ("auth", "prompts for username and password"),
    ("use <db name>", "sets current database"),
    ("rp <retention policy>", "sets current retention policy"),
    ("precision <format>", "specifies the format of the timestamp: rfc3339, h, m, s, ms, u or ns"),
    ("insert <line protocol>", "writes a point to the current database and retention policy"),
    ("exit/quit/ctrl+d", "quits the shell"),
    ("show databases", "show database names"),
    ("show series", "show series information"),
    ("show measurements", "show measurement information"),
    ("show tag keys", "show tag key information"),
    ("show field keys", "show field key information"),
]


class CommandDispatcher:
    """
    Routes input lines to session, write, or query handlers.

    Usage:
        dispatcher = CommandDispatcher(session, client, renderer, console, on_shutdown)
        dispatcher.execute("use telegraf")
        dispatcher.execute("show measurements")
    """

    def __init__(
        self,
        session: SessionState,
        client: TransportClient,
        renderer: ResultRenderer,
        console: Console,
        on_shutdown: Callable[[], None],
    ) -> None:
        self.session = session
        self.client = client
        self.renderer = renderer
        self.console = console
        self.on_shutdown = on_shutdown

    def execute(self, line: str) -> None:
        """Run one line, reporting any handler error to the user."""
        line = line.strip()
        if not line:
            return

        try:
            self.dispatch(line)
        except ApplicationError as e:
            log_with_source(
                logger,
                "shell",
                "info",
                "Command failed",
                command=first_token(line),
                code=e.code,
                error=e.message,
            )
            self.console.print(f"[red]{escape(e.message)}[/red]")

    def dispatch(self, line: str) -> None:
        """
        Run the handler for a trimmed, non-empty line.

        Raises:
            ApplicationError: Whatever the handler raises.
        """
        token = first_token(line)
        command = parse_command(token)

        if command in EXIT_COMMANDS:
            self.on_shutdown()
        elif command is Command.HELP:
            self.help()
        elif command is Command.USE:
            self.session.database = self._argument(line, "invalid argument, use [db name]")
        elif command is Command.RP:
            self.session.retention_policy = self._argument(
                line, "invalid argument, rp [retention policy]"
            )
        elif command is Command.PRECISION:
            self.session.precision = self._argument(
                line, "invalid argument, precision [rfc3339,h,m,s,ms,u,ns]"
            )
        elif command is Command.AUTH:
            self.auth()
        elif command is Command.INSERT:
            self.write(line)
        elif command in QUERY_COMMANDS:
            self.query(line)
        else:
            raise UnsupportedCommandError(token)

    @staticmethod
    def _argument(line: str, usage: str) -> str:
        parts = line.split()
        if len(parts) < 2:
            raise InvalidArgumentError(usage)
        return parts[1]

    def help(self) -> None:
        table = Table(title="Usage", show_header=True)
        table.add_column("Command", style="cyan")
        table.add_column("Description")
        for command, description in HELP_ROWS:
            table.add_row(escape(command), description)
        self.console.print(table)

    def auth(self) -> None:
        """Prompt for credentials; the password is not echoed."""
        username = self.console.input("username: ").strip()
        password = self.console.input("password: ", password=True)
        self.session.username = username
        self.session.password = password
        self.client.set_credentials(self.session.username, self.session.password)
        log_with_source(logger, "shell", "info", "Credentials set", username=username)

    def write(self, line: str) -> None:
        payload = line[INSERT_PREFIX_LEN:]
        if not payload.strip():
            raise InvalidArgumentError("invalid argument, insert [line protocol]")
        self.client.write(self.session.database, self.session.retention_policy, payload)

    def query(self, line: str) -> None:
        body = self.client.query(
            self.session.database,
            self.session.retention_policy,
            line,
            self.session.precision,
        )
        self.renderer.render(body)
