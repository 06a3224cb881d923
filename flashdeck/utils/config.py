"""Configuration management for Flashdeck."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

CONFIG_HOME_ENV = "FLASHDECK_HOME"


def default_config_dir() -> Path:
    override = os.environ.get(CONFIG_HOME_ENV)
    if override:
        return Path(override)
    return Path.home() / ".flashdeck"


class ConfigManager:
    """Manages application configuration with persistent storage."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else default_config_dir()
        self.config_file = self.config_dir / "config.json"
        self._config = self._load_config()

    def _defaults(self) -> Dict[str, Any]:
        return {
            "database_path": str(self.config_dir / "flashcards.sqlite"),
            "window_width": 850,
            "window_height": 600,
            "font_size": 24,
            "log_level": "WARNING",
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults."""
        config = self._defaults()
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r') as f:
                    config.update(json.load(f))
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
        return config

    def _save_config(self) -> None:
        """Save configuration to file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w') as f:
                json.dump(self._config, f, indent=2)
        except IOError as e:
            logger.warning("Could not save config: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def get_database_path(self) -> str:
        return self.get("database_path")

    def get_window_size(self) -> Tuple[int, int]:
        return int(self.get("window_width", 850)), int(self.get("window_height", 600))

    def set_window_size(self, width: int, height: int) -> None:
        self._config["window_width"] = width
        self._config["window_height"] = height
        self._save_config()

    def get_font_size(self) -> int:
        return int(self.get("font_size", 24))


# Global config manager instance
config = ConfigManager()
