"""Unit tests for command classification."""

import pytest

from tsshell.cli.commands import (
    EXIT_COMMANDS,
    QUERY_COMMANDS,
    Command,
    first_token,
    parse_command,
)


class TestFirstToken:
    """Tests for first_token."""

    def test_splits_on_any_whitespace(self) -> None:
        assert first_token("use\ttelegraf") == "use"

    def test_empty_line(self) -> None:
        assert first_token("   ") == ""


class TestParseCommand:
    """Tests for parse_command."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("help", Command.HELP),
            ("use", Command.USE),
            ("rp", Command.RP),
            ("precision", Command.PRECISION),
            ("auth", Command.AUTH),
            ("insert", Command.INSERT),
            ("\\q", Command.QUIT_SHORT),
        ],
    )
    def test_session_commands(self, token: str, expected: Command) -> None:
        assert parse_command(token) is expected

    @pytest.mark.parametrize(
        "token",
        ["show", "drop", "create", "explain", "kill", "grant", "alter", "revoke", "set"],
    )
    def test_query_verbs(self, token: str) -> None:
        assert parse_command(token) in QUERY_COMMANDS

    @pytest.mark.parametrize("token", ["exit", "quit", "\\q"])
    def test_exit_tokens(self, token: str) -> None:
        assert parse_command(token) in EXIT_COMMANDS

    @pytest.mark.parametrize("token", ["select", "SHOW", "Use", "delete", ""])
    def test_unknown_tokens_unsupported(self, token: str) -> None:
        """Matching is case-sensitive; anything else is unsupported."""
        assert parse_command(token) is Command.UNSUPPORTED
