"""
Configuration management for robofont
"""

import os
import json
import threading
from pathlib import Path
from typing import Dict, Any, Optional

from .exceptions import ConfigError

# Default configuration
default_config: Dict[str, Any] = {
    "fonts_dir": None,
    "default_font": "slant",
    "log_level": "WARNING",
    "log_file": None,
}

# Environment variables that override file values
ENV_OVERRIDES: Dict[str, str] = {
    "default_font": "ROBOFONT_DEFAULT_FONT",
    "log_level": "ROBOFONT_LOG_LEVEL",
    "fonts_dir": "ROBOFONT_FONTS_DIR",
    "log_file": "ROBOFONT_LOG_FILE",
}

class Config:
    """
    Configuration manager for robofont.
    Handles loading, saving, and accessing configuration values.
    """
    config_dir: Path
    config_file: Path
    config: Dict[str, Any]

    def __init__(self, config_dir: Optional[str] = None) -> None:
        if config_dir is None:
            config_dir = os.getenv("ROBOFONT_HOME", "~/.robofont")
        self.config_dir = Path(os.path.expanduser(config_dir))
        self.config_file = self.config_dir / "config.json"
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file, falling back to defaults."""
        self.config = default_config.copy()
        if not self.config_file.exists():
            return
        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                stored = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read {self.config_file}: {e}") from e
        if not isinstance(stored, dict):
            raise ConfigError(f"{self.config_file} must contain a JSON object")
        self.config.update(stored)

    def _save_config(self, config: Dict[str, Any]) -> None:
        """Save configuration to file."""
        self.config_dir.mkdir(exist_ok=True, parents=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key, honouring environment overrides."""
        env_name = ENV_OVERRIDES.get(key)
        if env_name:
            value = os.getenv(env_name)
            if value:
                return value
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by key."""
        if key not in default_config:
            raise ConfigError(f"Unknown configuration key: {key}")
        self.config[key] = value
        self._save_config(self.config)

    @property
    def fonts_dir(self) -> Path:
        """Directory searched for user ``.robofont`` files, ``<config_dir>/fonts`` unless set."""
        value = self.get("fonts_dir")
        if not value:
            return self.config_dir / "fonts"
        return Path(os.path.expanduser(str(value)))

    def as_dict(self) -> Dict[str, Any]:
        """Effective configuration, environment overrides applied."""
        return {key: self.get(key) for key in self.config}


_config: Optional[Config] = None
_config_lock = threading.Lock()


def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    with _config_lock:
        if _config is None:
            _config = Config()
        return _config


def reset_config(config_dir: Optional[str] = None) -> Config:
    """Drop the cached configuration and load it again from ``config_dir``."""
    global _config
    with _config_lock:
        _config = Config(config_dir)
        return _config
