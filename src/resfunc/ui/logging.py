"""Logging configuration for resfunc."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from resfunc.ui.console import VERSION, console

LOGGER_NAME = "resfunc"


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
    log_format: str | None = None,
) -> logging.Logger:
    """Configure the ``resfunc`` logger.

    Args:
        log_file: Optional log file; a ``.json`` suffix selects structured records
        verbose: Echo records to the console through Rich
        level: Logging level for all handlers
        log_format: Force ``"text"`` or ``"json"`` regardless of the suffix

    Returns
    -------
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)

        use_json = log_format == "json" or (log_format is None and log_file.suffix == ".json")
        if use_json:
            file_formatter: logging.Formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    if logger.handlers:
        logger.info(f"resfunc v{VERSION} - session started")
        logger.info(f"Command: {' '.join(sys.argv)}")
        logger.info(f"Python: {sys.version.split()[0]} | Platform: {sys.platform}")

    return logger


def close_logging() -> None:
    """Close and detach every handler of the ``resfunc`` logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


__all__ = ["JSONFormatter", "LOGGER_NAME", "close_logging", "setup_logging"]
