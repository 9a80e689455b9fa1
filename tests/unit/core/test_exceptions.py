"""Unit tests for shell exceptions."""

import pytest

from tsshell.core.exceptions import (
    ApplicationError,
    DecodeError,
    InvalidArgumentError,
    TransportError,
    UnsupportedCommandError,
)


class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (InvalidArgumentError("invalid argument, use [db name]"), "CMD_INVALID_ARGUMENT"),
            (UnsupportedCommandError("select"), "CMD_UNSUPPORTED"),
            (TransportError("refused"), "NET_TRANSPORT_ERROR"),
            (DecodeError("bad json"), "RES_DECODE_ERROR"),
        ],
    )
    def test_codes(self, error: ApplicationError, code: str) -> None:
        assert isinstance(error, ApplicationError)
        assert error.code == code

    def test_unsupported_message_names_token(self) -> None:
        error = UnsupportedCommandError("select")
        assert error.token == "select"
        assert str(error) == "unsupported command: select"
