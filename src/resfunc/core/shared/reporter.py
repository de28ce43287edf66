"""Diagnostic reporting abstraction.

Resolution objects report non-fatal diagnostics (for instance a negative
width of the main Gaussian) through a reporter instead of printing them, so
that callers decide how to surface them: log them, collect them, or turn
them into hard failures.

Design Pattern: Protocol-based dependency injection
    - Reporter protocol defines the contract
    - NullReporter provides silent operation for batch scans
    - LoggingReporter uses Python's logging module (the default)
    - CompositeReporter fans out to several reporters
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Protocol for diagnostic reporting.

    All methods take plain strings to avoid coupling to any specific output
    format or styling system.

    Resolutions only ever call :meth:`warning`; :meth:`info` and :meth:`error`
    serve the CLI and composite reporters. A sink passed to a resolution may
    therefore implement ``warning`` alone.
    """

    def info(self, message: str) -> None:
        """Report informational message.

        Args:
            message: Informational message
        """
        ...

    def warning(self, message: str) -> None:
        """Report a warning.

        Use for non-fatal issues that make a result unreliable.

        Args:
            message: Warning message
        """
        ...

    def error(self, message: str) -> None:
        """Report an error.

        Use for errors that may affect results but don't stop execution.

        Args:
            message: Error message
        """
        ...


class NullReporter:
    """Silent reporter that discards all messages.

    Example:
        >>> reporter = NullReporter()
        >>> reporter.warning("sigma < 0")  # No output
    """

    def info(self, message: str) -> None:
        """Discard info message."""

    def warning(self, message: str) -> None:
        """Discard warning message."""

    def error(self, message: str) -> None:
        """Discard error message."""


class LoggingReporter:
    """Reporter that writes to Python logging.

    Example:
        >>> reporter = LoggingReporter("resfunc.resolutions")
        >>> reporter.warning("sigma of the main Gaussian is < 0")  # WARNING level
    """

    def __init__(self, logger_name: str = "resfunc") -> None:
        """Initialize with a logger name.

        Args:
            logger_name: Name for the logger (default: 'resfunc')
        """
        self._logger = logging.getLogger(logger_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def info(self, message: str) -> None:
        """Log info at INFO level."""
        self._logger.info(message)

    def warning(self, message: str) -> None:
        """Log warning at WARNING level."""
        self._logger.warning(message)

    def error(self, message: str) -> None:
        """Log error at ERROR level."""
        self._logger.error(message)


class CompositeReporter:
    """Reporter that delegates to multiple reporters.

    Example:
        >>> reporter = CompositeReporter([LoggingReporter(), collector])
        >>> reporter.warning("unreliable")  # Goes to both reporters
    """

    def __init__(self, reporters: list[Reporter]) -> None:
        """Initialize with list of reporters.

        Args:
            reporters: List of reporters to delegate to
        """
        self._reporters = reporters

    def info(self, message: str) -> None:
        """Delegate info to all reporters."""
        for reporter in self._reporters:
            reporter.info(message)

    def warning(self, message: str) -> None:
        """Delegate warning to all reporters."""
        for reporter in self._reporters:
            reporter.warning(message)

    def error(self, message: str) -> None:
        """Delegate error to all reporters."""
        for reporter in self._reporters:
            reporter.error(message)


def default_reporter() -> Reporter:
    """Return the reporter used when a resolution is built without one."""
    return LoggingReporter("resfunc.resolutions")


__all__ = [
    "CompositeReporter",
    "LoggingReporter",
    "NullReporter",
    "Reporter",
    "default_reporter",
]
