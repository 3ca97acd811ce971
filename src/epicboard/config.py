"""Configuration loader for epicboard (global + project with TOML-based defaults)."""

from __future__ import annotations

import copy
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigError

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for Python <3.11
    import tomli as tomllib  # type: ignore

DEFAULT_CONFIG: Dict[str, Any] = {
    "general": {
        "log_enabled": True,
        "log_file": "~/.config/epicboard/events.log",
    },
    "storage": {
        "db_path": "./data/db.json",
        "id_length": 6,
    },
}


class ConfigLoader:
    """
    Handles configuration loading from multiple sources with priority resolution.

    Priority (highest → lowest):
    1. Command-line arguments (applied with ``set``)
    2. Environment variables (EPICBOARD_*, ``__`` between nested keys)
    3. Project config (.epicboard/config.toml)
    4. Global config (~/.config/epicboard/config.toml)
    5. Built-in defaults
    """

    ENV_PREFIX = "EPICBOARD_"

    def __init__(self, create_default: bool = True) -> None:
        self.global_dir = self.get_global_config_dir()
        self.project_dir = self.get_project_config_dir()
        self.create_default = create_default

        self.config: Dict[str, Any] = {}
        self._load_all()

    # ------------------------------------------------------------------ #
    # Public getters
    # ------------------------------------------------------------------ #
    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-separated key."""
        value: Any = self.config
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def set(self, key: str, value: Any) -> None:
        """Override a value by dot-separated key."""
        self._set_nested(self.config, key, value)

    @property
    def db_path(self) -> Path:
        return Path(str(self.get("storage.db_path"))).expanduser()

    @property
    def id_length(self) -> int:
        value = self.get("storage.id_length", 6)
        try:
            length = int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"storage.id_length must be an integer, got {value!r}") from exc
        if length < 1:
            raise ConfigError(f"storage.id_length must be positive, got {length}")
        return length

    @property
    def log_file(self) -> Optional[Path]:
        """Event log path, or None when logging is switched off."""
        enabled = self.get("general.log_enabled", True)
        if isinstance(enabled, str):
            enabled = enabled.strip().lower() not in ("0", "false", "no", "off")
        log_file = str(self.get("general.log_file", "")).strip()
        if not enabled or not log_file:
            return None
        return Path(log_file).expanduser()

    # ------------------------------------------------------------------ #
    # Load/merge helpers
    # ------------------------------------------------------------------ #
    def _load_all(self) -> None:
        """Load all configuration files with proper priority."""
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self._load_global_config()
        if self.project_dir:
            self._load_project_config()
        self._apply_env_overrides()

    def _load_global_config(self) -> None:
        """Load global configuration."""
        config_file = self.global_dir / "config.toml"
        if config_file.exists():
            with open(config_file, "rb") as f:
                self._deep_merge(self.config, tomllib.load(f))
        elif self.create_default:
            self._create_default_config()

    def _load_project_config(self) -> None:
        """Load project-specific config and merge with global."""
        config_file = self.project_dir / "config.toml"
        if config_file.exists():
            with open(config_file, "rb") as f:
                self._deep_merge(self.config, tomllib.load(f))

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides (EPICBOARD_SECTION__KEY)."""
        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX):
                continue
            config_key = key[len(self.ENV_PREFIX) :].lower().replace("__", ".")
            self._set_nested(self.config, config_key, value)

    # ------------------------------------------------------------------ #
    # Static paths/helpers
    # ------------------------------------------------------------------ #
    @staticmethod
    def get_global_config_dir() -> Path:
        """Get platform-specific global config directory following XDG spec."""
        system = platform.system()
        if system == "Windows":
            base = Path(os.environ.get("APPDATA", "~\\AppData\\Roaming")).expanduser()
        elif system == "Darwin":
            xdg = os.environ.get("XDG_CONFIG_HOME")
            base = Path(xdg) if xdg else Path.home() / ".config"
        else:
            base = Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()
        return base / "epicboard"

    @staticmethod
    def get_project_config_dir() -> Path | None:
        """Find .epicboard directory in current or parent directories."""
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_dir = parent / ".epicboard"
            if config_dir.is_dir():
                return config_dir
        return None

    # ------------------------------------------------------------------ #
    # Persistence helpers
    # ------------------------------------------------------------------ #
    def _create_default_config(self) -> None:
        self.global_dir.mkdir(parents=True, exist_ok=True)
        config_file = self.global_dir / "config.toml"
        with open(config_file, "w", encoding="utf-8") as f:
            f.write(self._get_default_config_toml())

    @staticmethod
    def _get_default_config_toml() -> str:
        """Default config TOML text for first-run creation."""
        general = DEFAULT_CONFIG["general"]
        storage = DEFAULT_CONFIG["storage"]
        return "\n".join(
            [
                "[general]",
                f"log_enabled = {str(general['log_enabled']).lower()}",
                f'log_file = "{general["log_file"]}"',
                "",
                "[storage]",
                f'db_path = "{storage["db_path"]}"',
                f"id_length = {storage['id_length']}",
                "",
            ]
        )

    # ------------------------------------------------------------------ #
    # Utility helpers
    # ------------------------------------------------------------------ #
    def _deep_merge(self, base: dict, override: dict) -> None:
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, d: dict, path: str, value: Any) -> None:
        keys = path.split(".")
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = value


Config = ConfigLoader

__all__ = ["ConfigLoader", "Config", "DEFAULT_CONFIG"]
