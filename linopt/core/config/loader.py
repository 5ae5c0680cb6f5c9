"""
Configuration loader — reads the optional config.yml into settings.

It reads YAML, validates against a Pydantic schema, and returns typed
settings. With no file at all the built-in defaults apply, so the
optimizer runs out of the box.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from linopt.core.data.distros import KNOWN_BROWSERS

logger = logging.getLogger(__name__)

# Default config location and env override
DEFAULT_CONFIG_FILE = Path("~/.config/linopt/config.yml")
CONFIG_ENV_VAR = "LINOPT_CONFIG"

LOG_FILE_NAME = "linux_optimizer.log"


class ConfigError(Exception):
    """Raised when configuration is invalid or an explicit file is missing."""


class OptimizerSettings(BaseModel):
    """User-tunable knobs. Defaults match the stock optimizer."""

    base_dir: Path = Path("~/Downloads/LinuxOptimizer")
    swappiness: int = Field(default=10, ge=0, le=200)
    vfs_cache_pressure: int = Field(default=50, ge=0)
    snap_retain: int = Field(default=2, ge=2, le=20)
    browsers: list[str] = Field(default_factory=lambda: list(KNOWN_BROWSERS))

    def paths(self, home: Path | None = None) -> OptimizerPaths:
        """Resolve the working directory tree.

        Args:
            home: Override for ``~`` expansion (tests).
        """
        raw = str(self.base_dir)
        if home is not None and raw.startswith("~"):
            root = home / raw[1:].lstrip("/")
        else:
            root = Path(raw).expanduser()
        return OptimizerPaths(root=root)


@dataclass(frozen=True)
class OptimizerPaths:
    """Directory layout under the optimizer root."""

    root: Path

    @property
    def backups(self) -> Path:
        return self.root / "backups"

    @property
    def logs(self) -> Path:
        return self.root / "logs"

    @property
    def browser_configs(self) -> Path:
        return self.root / "browser_configs"

    @property
    def temp(self) -> Path:
        return self.root / "temp"

    @property
    def log_file(self) -> Path:
        return self.logs / LOG_FILE_NAME

    def ensure(self) -> None:
        """Create every directory in the tree (idempotent)."""
        for directory in (self.backups, self.logs, self.browser_configs, self.temp):
            directory.mkdir(parents=True, exist_ok=True)


def find_config_file(explicit: Path | None = None) -> tuple[Path | None, bool]:
    """Locate the config file.

    Precedence: explicit path > ``LINOPT_CONFIG`` > default location.

    Returns:
        ``(path, required)``. ``required`` is True when the user named
        the file, so its absence is an error rather than "use defaults".
    """
    if explicit is not None:
        return explicit, True

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True

    default = DEFAULT_CONFIG_FILE.expanduser()
    return (default if default.is_file() else None), False


def load_settings(path: Path | None = None) -> OptimizerSettings:
    """Load and validate optimizer settings.

    Args:
        path: Explicit path to a YAML config. If None, searches the
            env var and the default location.

    Returns:
        Validated OptimizerSettings (defaults when no file exists).

    Raises:
        ConfigError: If a required file is missing or the file is invalid.
    """
    path, required = find_config_file(path)

    if path is None:
        logger.debug("No config file found, using defaults")
        return OptimizerSettings()

    if not path.is_file():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return OptimizerSettings()

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return OptimizerSettings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = OptimizerSettings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    logger.info("Loaded settings from %s", path)
    return settings
