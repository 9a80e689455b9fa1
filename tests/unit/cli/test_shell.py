"""Unit tests for the interactive shell loop."""

import base64
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from tsshell.cli.client import TransportClient
from tsshell.cli.session import SessionState
from tsshell.cli.shell import InteractiveShell


def make_shell(client: TransportClient, console: Console, lines: list) -> InteractiveShell:
    """Shell whose prompt returns `lines` in order (exceptions are raised)."""
    console.input = MagicMock(side_effect=lines)
    return InteractiveShell(client, console=console, title="test shell")


class TestInteractiveShell:
    """Tests for InteractiveShell.run."""

    def test_lines_dispatched_until_exit(self, client: TransportClient, console: Console) -> None:
        shell = make_shell(client, console, ["use db1", "rp rp1", "exit", "use never"])

        shell.run()

        assert shell.session.database == "db1"
        assert shell.session.retention_policy == "rp1"
        assert not shell.running
        assert console.input.call_count == 3

    def test_bad_command_does_not_stop_loop(self, client: TransportClient, console: Console) -> None:
        shell = make_shell(client, console, ["bogus", "use", "use db2", "quit"])

        shell.run()

        text = console.file.getvalue()
        assert "unsupported command: bogus" in text
        assert "invalid argument, use [db name]" in text
        assert shell.session.database == "db2"

    def test_eof_shuts_down(self, client: TransportClient, console: Console) -> None:
        shell = make_shell(client, console, ["use db1", EOFError()])

        shell.run()

        assert shell.session.database == "db1"
        assert "Goodbye!" in console.file.getvalue()

    def test_interrupt_shuts_down(self, client: TransportClient, console: Console) -> None:
        shell = make_shell(client, console, [KeyboardInterrupt()])

        shell.run()

        assert not shell.running
        assert "Goodbye!" in console.file.getvalue()

    def test_client_closed_on_shutdown(self, client: TransportClient, console: Console) -> None:
        shell = make_shell(client, console, ["\\q"])

        shell.run()

        assert client._client.is_closed

    def test_unexpected_error_reported(self, client: TransportClient, console: Console) -> None:
        shell = make_shell(client, console, ["use db1", EOFError()])
        shell.dispatcher.execute = MagicMock(side_effect=RuntimeError("boom [x]"))

        shell.run()

        assert "Error: boom [x]" in console.file.getvalue()

    def test_title_printed(self, client: TransportClient, console: Console) -> None:
        shell = make_shell(client, console, ["exit"])

        shell.run()

        assert "test shell" in console.file.getvalue()

    def test_interrupt_during_query_shuts_down(self, client: TransportClient, handler, console: Console) -> None:
        def interrupt(request):
            raise KeyboardInterrupt()

        handler.error = interrupt
        shell = make_shell(client, console, ["show databases", "use never"])

        shell.run()

        assert not shell.running
        assert shell.session.database == ""
        assert client._client.is_closed
        assert "Goodbye!" in console.file.getvalue()

    def test_interrupt_at_password_prompt_shuts_down(self, client: TransportClient, console: Console) -> None:
        shell = make_shell(client, console, ["auth", "admin", KeyboardInterrupt(), "exit"])

        shell.run()

        assert not shell.running
        assert shell.session.username == ""
        assert console.input.call_count == 3
        assert client._client.is_closed
        assert "Goodbye!" in console.file.getvalue()

    def test_client_closed_when_loop_raises(self, client: TransportClient, console: Console) -> None:
        shell = make_shell(client, console, ["exit"])
        shell.dispatcher.execute = MagicMock(side_effect=SystemExit(3))

        with pytest.raises(SystemExit):
            shell.run()

        assert client._client.is_closed

    def test_startup_credentials_sent_from_session(self, client: TransportClient, handler, console: Console) -> None:
        console.input = MagicMock(side_effect=["show databases", "exit"])
        session = SessionState(username="admin", password="s3cret")
        shell = InteractiveShell(client, session=session, console=console)

        shell.run()

        expected = "Basic " + base64.b64encode(b"admin:s3cret").decode()
        assert handler.last.headers["Authorization"] == expected
