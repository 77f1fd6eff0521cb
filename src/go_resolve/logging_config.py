"""Logging configuration for go-resolve."""

import logging
import sys

import click

# Package-level logger
LOGGER_NAME = "go_resolve"

# Color mapping for log levels
LEVEL_COLORS = {
    "DEBUG": "blue",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors warnings and errors using Click."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        level_color = LEVEL_COLORS.get(record.levelname, "white")

        if record.levelno >= logging.ERROR:
            return click.style(message, fg=level_color, bold=True)
        if record.levelno == logging.WARNING:
            return click.style(message, fg=level_color)
        return message


def setup_logging(verbose: bool = False, quiet: bool = False, log_level: str | None = None) -> None:
    """Configure logging for go-resolve.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Show only WARNING and above
        log_level: Explicit log level (overrides verbose/quiet)
    """
    # Determine log level: explicit > verbose > quiet > INFO
    if log_level:
        level = getattr(logging, log_level.upper())
    elif verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    # Diagnostics go to stderr so resolved trees on stdout stay clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(fmt="%(levelname)s: %(message)s"))

    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module
    """
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
