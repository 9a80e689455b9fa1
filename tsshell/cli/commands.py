"""
Shell Commands.

The closed set of commands recognized at the prompt, keyed by the
first whitespace-delimited token of a line.
"""

from enum import Enum


class Command(str, Enum):
    """Command recognized from the first token of an input line."""

    HELP = "help"
    USE = "use"
    RP = "rp"
    PRECISION = "precision"
    AUTH = "auth"
    INSERT = "insert"
    SHOW = "show"
    CREATE = "create"
    DROP = "drop"
    EXPLAIN = "explain"
    KILL = "kill"
    GRANT = "grant"
    ALTER = "alter"
    REVOKE = "revoke"
    SET = "set"
    EXIT = "exit"
    QUIT = "quit"
    QUIT_SHORT = "\\q"
    UNSUPPORTED = ""


QUERY_COMMANDS = frozenset({
    Command.SHOW,
    Command.CREATE,
    Command.DROP,
    Command.EXPLAIN,
    Command.KILL,
    Command.GRANT,
    Command.ALTER,
    Command.REVOKE,
    Command.SET,
})
"""Commands forwarded verbatim to the query endpoint."""

EXIT_COMMANDS = frozenset({Command.EXIT, Command.QUIT, Command.QUIT_SHORT})


def first_token(line: str) -> str:
    """Return the first whitespace-delimited token of a line, or ''."""
    parts = line.split()
    return parts[0] if parts else ""


def parse_command(token: str) -> Command:
    """
    Map a token to its Command.

    Matching is case-sensitive. Unknown and empty tokens map to
    Command.UNSUPPORTED.
    """
    if not token:
        return Command.UNSUPPORTED
    try:
        return Command(token)
    except ValueError:
        return Command.UNSUPPORTED
