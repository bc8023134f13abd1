"""
Error types and exit codes for tfexporter.

Interpretation of run artifacts degrades toward zero/false instead of
raising; the errors here cover the few conditions that callers must be
able to tell apart (undecodable plan, duplicate gauge, bad configuration,
failed push).

Exit Codes:
- 0: Success
- 10: Configuration error
- 11: Publish error (Pushgateway unreachable or rejected the batch)
- 12: Input error (plan could not be decoded in strict mode)
- 127: Unknown/internal error
"""

from __future__ import annotations

import functools
import sys
import traceback
from enum import IntEnum
from typing import Any, Callable, TypeVar

import structlog

logger = structlog.get_logger()


class ExitCode(IntEnum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    CONFIG_ERROR = 10
    PUBLISH_ERROR = 11
    INPUT_ERROR = 12
    UNKNOWN_ERROR = 127


class TfExporterError(Exception):
    """Base exception for tfexporter errors with exit code support."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR
    show_traceback: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(TfExporterError):
    """Raised when required settings are missing or invalid."""

    exit_code = ExitCode.CONFIG_ERROR


class PublishError(TfExporterError):
    """Raised when the metric batch could not be pushed."""

    exit_code = ExitCode.PUBLISH_ERROR


class InputError(TfExporterError):
    """Raised when a run artifact cannot be interpreted at all."""

    exit_code = ExitCode.INPUT_ERROR


class PlanDecodeError(InputError):
    """Plan payload exists but is not a JSON object."""


class DuplicateGaugeError(TfExporterError, ValueError):
    """A gauge name was set twice in one metric set."""


F = TypeVar("F", bound=Callable[..., int])


def main_with_error_handling(
    *,
    show_traceback: bool = False,
    log_errors: bool = True,
) -> Callable[[F], F]:
    """
    Decorator for CLI commands that maps exceptions to exit codes.

    Usage:
        @main_with_error_handling()
        def collect_command(...) -> int:
            ...
            return 0

    Exit codes:
        - TfExporterError subclasses: the error's exit_code
        - KeyboardInterrupt: 130
        - Other exceptions: 127
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            try:
                return func(*args, **kwargs)
            except TfExporterError as e:
                if log_errors:
                    logger.error(
                        "command_error",
                        error_type=type(e).__name__,
                        message=e.message,
                        exit_code=int(e.exit_code),
                        **e.details,
                    )
                if e.show_traceback or show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return e.exit_code
            except KeyboardInterrupt:
                if log_errors:
                    logger.info("command_interrupted")
                return 130
            except Exception as e:
                if log_errors:
                    logger.error(
                        "unexpected_error",
                        error_type=type(e).__name__,
                        message=str(e),
                        exit_code=int(ExitCode.UNKNOWN_ERROR),
                    )
                if show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return ExitCode.UNKNOWN_ERROR

        return wrapper  # type: ignore[return-value]

    return decorator
