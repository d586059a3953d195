"""
Configuration Manager - Handle diff backend settings persistence
"""

from __future__ import annotations

import codecs
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from models.diff import LinePairing

from .char_aligner import DEFAULT_MAX_TABLE_CELLS


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # 1. environment variable
            config_dir = os.environ.get("SBS_DIFF_CONFIG_DIR")

            # 2. home directory ~/.sbs_diff
            if not config_dir:
                config_dir = os.path.expanduser("~/.sbs_diff")

            config_path = Path(config_dir)
            try:
                config_path.mkdir(parents=True, exist_ok=True)
                self._config_file = config_path / "config.json"
            except OSError as e:
                print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
                self._config_file = None

            # 3. temp dir when the preferred location is not writable
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "sbs_diff"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[ConfigManager] Critical Error in init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "sbs_diff_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next get_instance() re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, layered over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return config

        if not isinstance(stored, dict):
            print(f"[ConfigManager] Ignoring malformed config in {self._config_file}")
            return config

        config.update(stored)
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "pairing": LinePairing.POSITIONAL.value,
            "maxTableCells": DEFAULT_MAX_TABLE_CELLS,
            "encoding": "utf-8",
            "server": {"host": "127.0.0.1", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def get_pairing(self) -> LinePairing:
        """Configured line pairing, positional when the stored value is unknown"""
        value = self._config.get("pairing", LinePairing.POSITIONAL.value)
        try:
            return LinePairing(value)
        except ValueError:
            print(f"[ConfigManager] Unknown pairing '{value}', using positional")
            return LinePairing.POSITIONAL

    def get_max_table_cells(self) -> int | None:
        """Configured alignment table limit; 0 or a negative value disables it"""
        value = self._config.get("maxTableCells", DEFAULT_MAX_TABLE_CELLS)
        if isinstance(value, bool) or not isinstance(value, int):
            print(f"[ConfigManager] Invalid maxTableCells '{value}', using default")
            return DEFAULT_MAX_TABLE_CELLS
        if value <= 0:
            return None
        return value

    def get_encoding(self) -> str:
        """Encoding used to read input files, utf-8 when the stored codec is unknown"""
        value = self._config.get("encoding") or "utf-8"
        try:
            codecs.lookup(value)
        except (LookupError, TypeError):
            print(f"[ConfigManager] Unknown encoding '{value}', using utf-8")
            return "utf-8"
        return value
