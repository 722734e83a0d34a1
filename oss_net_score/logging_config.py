"""
Logging setup for the command-line entry point.

Library modules only create named loggers; handlers are attached here, once.
"""

import logging

from oss_net_score.config import Settings
from oss_net_score.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# LOG_LEVEL values: 0 = errors only, 1 = informational, 2 = debug
LOG_LEVELS = {
    "0": logging.ERROR,
    "1": logging.INFO,
    "2": logging.DEBUG,
}

_handler: logging.Handler | None = None


def resolve_log_level(value: str) -> int:
    """Map a LOG_LEVEL setting to a logging level; unknown values mean errors only."""
    return LOG_LEVELS.get(str(value).strip(), logging.ERROR)


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Send package log records to the configured log file.

    Calling it again replaces the previous file handler.

    Raises:
        ConfigurationError: If the log file cannot be opened.
    """
    global _handler
    package_logger = logging.getLogger("oss_net_score")
    package_logger.setLevel(resolve_log_level(settings.log_level))
    package_logger.propagate = False

    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler.close()

    try:
        _handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    except OSError as e:
        _handler = None
        raise ConfigurationError(f"Cannot open log file {settings.log_file}: {e}") from e
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(_handler)
    return package_logger
