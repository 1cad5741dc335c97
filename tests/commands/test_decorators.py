"""Unit tests for command decorators."""

import pytest
import typer

from vibelist.commands.decorators import AppError, command_wrapper
from vibelist.models import TaskValidationError, ValidationReason
from vibelist.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
)
from vibelist.utils.task_helpers import TaskResolutionError


def _wrapped(exc):
    @command_wrapper
    def cmd():
        raise exc

    return cmd


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def cmd(x):
            return x * 2

        assert cmd(21) == 42
        assert cmd.__name__ == "cmd"

    @pytest.mark.parametrize(
        ("exc", "code"),
        [
            (TaskValidationError(ValidationReason.EMPTY_TEXT), ERROR_INVALID_ARGS),
            (TaskResolutionError("no match"), ERROR_NOT_FOUND),
            (TaskResolutionError("many", ambiguous=True), ERROR_INVALID_ARGS),
            (AppError("boom", ERROR_NOT_FOUND), ERROR_NOT_FOUND),
            (AppError("boom"), ERROR_GENERAL),
            (RuntimeError("surprise"), ERROR_GENERAL),
        ],
    )
    def test_exception_maps_to_exit_code(self, exc, code):
        with pytest.raises(typer.Exit) as exc_info:
            _wrapped(exc)()
        assert exc_info.value.exit_code == code

    def test_exit_passes_through(self):
        with pytest.raises(typer.Exit) as exc_info:
            _wrapped(typer.Exit(3))()
        assert exc_info.value.exit_code == 3

    def test_unexpected_error_message(self, capsys):
        with pytest.raises(typer.Exit):
            _wrapped(RuntimeError("surprise"))()
        assert "An unexpected error occurred: surprise" in capsys.readouterr().out
