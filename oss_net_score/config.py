"""
Configuration management for OSS Net Score.

Settings are resolved in this order (first match wins):
1. Explicit overrides (CLI options)
2. Environment variables (a .env file is loaded first)
3. .oss-net-score.toml in the working directory
4. [tool.oss-net-score] in pyproject.toml
5. Built-in defaults
"""

import os
import tomllib
from pathlib import Path
from typing import Any, NamedTuple

from dotenv import load_dotenv

from oss_net_score.exceptions import ConfigurationError

LOCAL_CONFIG_NAME = ".oss-net-score.toml"
PYPROJECT_NAME = "pyproject.toml"
TOOL_SECTION = "oss-net-score"

DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "0"
DEFAULT_LOG_FILE = "./combined.log"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(NamedTuple):
    """Run-wide settings, read once at startup."""

    github_token: str | None
    timeout: float = DEFAULT_TIMEOUT
    fail_fast: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str = DEFAULT_LOG_FILE
    verify_ssl: bool = True

    def require_token(self) -> str:
        """Return the GitHub token or explain how to set one."""
        if not self.github_token:
            raise ConfigurationError(
                "GITHUB_TOKEN is required to query the GitHub API.\n"
                "\n"
                "To get started:\n"
                "1. Create a GitHub Personal Access Token:\n"
                "   -> https://github.com/settings/tokens/new\n"
                "2. Select scope: 'public_repo'\n"
                "3. Set the token:\n"
                "   export GITHUB_TOKEN='your_token_here'  # Linux/macOS\n"
                "   or add to your .env file: GITHUB_TOKEN=your_token_here\n"
            )
        return self.github_token


def load_config_file(config_path: Path) -> dict:
    """Load a TOML configuration file."""
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Failed to load config from {config_path}: {e}") from e


def get_file_config(root: Path | None = None) -> dict[str, Any]:
    """
    Read the [tool.oss-net-score] table.

    The local config file takes priority; pyproject.toml is only consulted
    when the local file is absent or has no table.

    Args:
        root: Directory to look in. Defaults to the current directory.

    Returns:
        The table contents, or an empty dict.
    """
    root = root or Path.cwd()

    for name in (LOCAL_CONFIG_NAME, PYPROJECT_NAME):
        config = load_config_file(root / name)
        section = config.get("tool", {}).get(TOOL_SECTION, {})
        if section:
            return section

    return {}


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid timeout value: {value!r}") from e
    if timeout <= 0:
        raise ConfigurationError(f"Timeout must be positive, got {timeout}")
    return timeout


def load_settings(root: Path | None = None, **overrides: Any) -> Settings:
    """
    Build the run settings.

    Args:
        root: Directory holding the optional TOML config files.
        **overrides: Values that beat every other source. ``None`` means
            "not given".

    Returns:
        Populated Settings.
    """
    load_dotenv()
    file_config = get_file_config(root)

    def pick(key: str, env_var: str, default: Any) -> Any:
        if overrides.get(key) is not None:
            return overrides[key]
        env_value = os.getenv(env_var)
        if env_value:
            return env_value
        if key in file_config:
            return file_config[key]
        return default

    return Settings(
        github_token=overrides.get("github_token") or os.getenv("GITHUB_TOKEN"),
        timeout=_parse_timeout(pick("timeout", "OSS_NET_SCORE_TIMEOUT", DEFAULT_TIMEOUT)),
        fail_fast=_parse_bool(pick("fail_fast", "OSS_NET_SCORE_FAIL_FAST", False)),
        log_level=str(pick("log_level", "LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        log_file=str(pick("log_file", "LOG_FILE", DEFAULT_LOG_FILE)),
        verify_ssl=not _parse_bool(overrides.get("insecure") or False),
    )
