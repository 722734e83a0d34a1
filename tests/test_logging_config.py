"""
Tests for logging setup.
"""

import logging

import pytest

from oss_net_score.config import Settings
from oss_net_score.exceptions import ConfigurationError
from oss_net_score.logging_config import configure_logging, resolve_log_level


@pytest.mark.parametrize(
    "value, level",
    [
        ("0", logging.ERROR),
        ("1", logging.INFO),
        ("2", logging.DEBUG),
        ("7", logging.ERROR),
        ("verbose", logging.ERROR),
    ],
)
def test_resolve_log_level(value, level):
    assert resolve_log_level(value) == level


def test_configure_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "run.log"
    package_logger = configure_logging(Settings(github_token=None, log_level="1", log_file=str(log_file)))

    logging.getLogger("oss_net_score.metrics.license").info("hello from license")
    logging.getLogger("oss_net_score.core").debug("hidden debug line")
    for handler in package_logger.handlers:
        handler.flush()

    content = log_file.read_text()
    assert "INFO [oss_net_score.metrics.license]: hello from license" in content
    assert "hidden debug line" not in content


def test_configure_logging_replaces_handler(tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    configure_logging(Settings(github_token=None, log_level="0", log_file=str(first)))
    package_logger = configure_logging(
        Settings(github_token=None, log_level="0", log_file=str(second))
    )

    file_handlers = [h for h in package_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(second)


def test_configure_logging_missing_directory(tmp_path):
    log_file = tmp_path / "missing" / "run.log"
    with pytest.raises(ConfigurationError, match="Cannot open log file"):
        configure_logging(Settings(github_token=None, log_file=str(log_file)))
