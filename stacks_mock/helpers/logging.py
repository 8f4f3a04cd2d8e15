"""Logger module."""

import logging
import os
import sys

import colorlog

loggers: dict[str, logging.Logger] = {}

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

STREAMS = ("stdout", "stderr")

LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _env_log_level() -> str:
    """Level from STACKS_MOCK_LOG_LEVEL, or INFO when unset or unknown."""
    value = os.getenv("STACKS_MOCK_LOG_LEVEL", "INFO").upper()
    value = LEVEL_ALIASES.get(value, value)
    return value if value in LOG_LEVELS else "INFO"


def get_logger(
    name: str,
    log_handler: str = "stdout",
    log_level: str | None = None,
    log_color: bool | None = None,
) -> logging.Logger:
    """Get a cached logger for a stacks_mock module.

    Level and color fall back to the STACKS_MOCK_LOG_LEVEL and
    STACKS_MOCK_LOG_COLOR environment variables, so a test harness can turn
    on debug output for the generator and driver without code changes.
    An unknown environment level falls back to INFO; an explicit
    `log_level` must be valid.

    Args:
        name: The name of the logger.
        log_handler: Stream to write to ('stdout' or 'stderr').
        log_level: The logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
        log_color: Whether to use colored output.

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        ValueError: If invalid handler or log level is provided.
    """
    if name in loggers:
        return loggers[name]

    if log_level is None:
        log_level = _env_log_level()
    if log_color is None:
        log_color = os.getenv("STACKS_MOCK_LOG_COLOR", "").lower() in {"1", "true", "yes"}

    if log_handler not in STREAMS:
        err_msg = f"Invalid handler: {log_handler}"
        raise ValueError(err_msg)

    if log_level not in LOG_LEVELS:
        err_msg = f"Invalid log level: {log_level}"
        raise ValueError(err_msg)

    stream = getattr(sys, log_handler)
    if log_color:
        logger = colorlog.getLogger(name)
        handler: logging.Handler = colorlog.StreamHandler(stream)
        formatter: logging.Formatter = colorlog.ColoredFormatter(
            f"%(log_color)s {LOG_FORMAT}", log_colors=LOG_COLORS
        )
    else:
        logger = logging.getLogger(name)
        handler = logging.StreamHandler(stream)
        formatter = logging.Formatter(LOG_FORMAT)

    level = LOG_LEVELS[log_level]
    logger.setLevel(level)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    loggers[name] = logger
    return logger


__all__ = ["get_logger"]
