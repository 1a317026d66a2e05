"""
Board configuration loading.

Values are resolved from, lowest to highest precedence: built-in defaults,
a YAML config file, TASKBOARD_* environment variables, explicit overrides.
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from taskboard.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TASKS_PATH,
    DEFAULT_STATUS_PATH,
    DEFAULT_TIMEOUT_SECONDS,
)
from taskboard.core.exceptions import ConfigError
from taskboard.core.models import Actor

DEFAULT_CONFIG_FILENAME = "taskboard.yaml"
CONFIG_PATH_ENV = "TASKBOARD_CONFIG"

ENV_KEYS = {
    "TASKBOARD_BASE_URL": "base_url",
    "TASKBOARD_TASKS_PATH": "tasks_path",
    "TASKBOARD_STATUS_PATH": "status_path",
    "TASKBOARD_TOKEN": "token",
    "TASKBOARD_TIMEOUT": "timeout",
    "TASKBOARD_ROLE": "role",
    "TASKBOARD_ACTOR_EMAIL": "actor_email",
}


@dataclass(frozen=True)
class BoardConfig:
    """Resolved board settings."""

    base_url: str = DEFAULT_BASE_URL
    tasks_path: str = DEFAULT_TASKS_PATH
    status_path: str = DEFAULT_STATUS_PATH
    token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    role: Optional[str] = None
    actor_email: str = ""

    def actor(self) -> Optional[Actor]:
        """Actor described by this config, None when no role is configured."""
        if not self.role:
            return None
        return Actor(role=self.role, email=self.actor_email)


def _field_names() -> set:
    return {f.name for f in fields(BoardConfig)}


def _coerce(values: Mapping[str, Any], source: str) -> Dict[str, Any]:
    """Validate keys and normalize value types."""
    unknown = set(values) - _field_names()
    if unknown:
        raise ConfigError(f"Unknown config keys in {source}: {sorted(unknown)}")

    result = dict(values)
    if "timeout" in result and result["timeout"] is not None:
        try:
            result["timeout"] = float(result["timeout"])
        except (TypeError, ValueError):
            raise ConfigError(
                f"Invalid timeout in {source}: {result['timeout']!r}"
            ) from None
        if result["timeout"] <= 0:
            raise ConfigError(f"Timeout must be positive in {source}")
    return result


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read a YAML config file.

    Args:
        path: Path to the YAML file.

    Returns:
        Mapping of config keys to values (empty for an empty file).

    Raises:
        ConfigError: If the file cannot be read or is not a YAML mapping.
    """
    try:
        content = path.read_text()
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return _coerce(data, str(path))


def read_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect TASKBOARD_* environment overrides."""
    environ = os.environ if environ is None else environ
    values = {
        field: environ[key]
        for key, field in ENV_KEYS.items()
        if environ.get(key)
    }
    return _coerce(values, "environment")


def find_config_file(
    explicit: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[Path] = None,
) -> Optional[Path]:
    """Locate the config file: explicit path, then $TASKBOARD_CONFIG, then ./taskboard.yaml."""
    environ = os.environ if environ is None else environ
    if explicit:
        return Path(explicit).expanduser()
    if environ.get(CONFIG_PATH_ENV):
        return Path(environ[CONFIG_PATH_ENV]).expanduser()

    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[Path] = None,
) -> BoardConfig:
    """Resolve the board configuration.

    Args:
        config_path: Explicit YAML file path (must exist if given).
        overrides: Highest-precedence values; None entries are skipped.
        environ: Environment mapping (defaults to os.environ).
        cwd: Directory searched for taskboard.yaml.

    Returns:
        BoardConfig

    Raises:
        ConfigError: On unreadable file, unknown keys or bad values.
    """
    config = BoardConfig()

    path = find_config_file(config_path, environ, cwd)
    if path is not None:
        config = replace(config, **read_config_file(path))

    config = replace(config, **read_env(environ))

    if overrides:
        explicit = {k: v for k, v in overrides.items() if v is not None}
        config = replace(config, **_coerce(explicit, "overrides"))

    return config
