"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

import io

import pytest
from rich.console import Console

from tsshell.cli.session import SessionState


@pytest.fixture
def console() -> Console:
    """
    Rich console writing plain text to an in-memory buffer.

    Usage:
        def test_output(console):
            console.print("hello")
            assert "hello" in console.file.getvalue()
    """
    return Console(
        file=io.StringIO(),
        width=120,
        color_system=None,
        force_terminal=False,
        highlight=False,
    )


@pytest.fixture
def session() -> SessionState:
    """Fresh, empty session state."""
    return SessionState()
