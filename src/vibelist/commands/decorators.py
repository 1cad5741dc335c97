"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from vibelist.models import TaskValidationError
from vibelist.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    get_exit_code_name,
)
from vibelist.utils.logger import get_logger
from vibelist.utils.task_helpers import TaskResolutionError
from vibelist.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Wrap a command with timing logs and error-to-exit-code mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except TaskValidationError as e:
            # User-correctable input, not a system failure
            logger.info("command rejected input: %s - %s", cmd, e.reason)
            format_error(str(e))
            raise typer.Exit(code=ERROR_INVALID_ARGS) from e

        except TaskResolutionError as e:
            code = ERROR_INVALID_ARGS if e.ambiguous else ERROR_NOT_FOUND
            logger.info(
                "command could not resolve task: %s %s - %s", cmd, get_exit_code_name(code), e
            )
            format_error(str(e))
            raise typer.Exit(code=code) from e

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) %s - %s",
                cmd,
                elapsed,
                get_exit_code_name(e.exit_code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
