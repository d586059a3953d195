"""Tests for configuration persistence."""

from __future__ import annotations

import json

from models.diff import LinePairing
from services.char_aligner import DEFAULT_MAX_TABLE_CELLS
from services.config_manager import ConfigManager


def test_uses_env_directory(isolated_config):
    config_manager = ConfigManager.get_instance()
    assert config_manager.config_file == isolated_config / "config.json"
    assert ConfigManager.get_instance() is config_manager


def test_defaults():
    config_manager = ConfigManager.get_instance()
    assert config_manager.get_pairing() is LinePairing.POSITIONAL
    assert config_manager.get_max_table_cells() == DEFAULT_MAX_TABLE_CELLS
    assert config_manager.get_encoding() == "utf-8"


def test_save_and_reload(isolated_config):
    ConfigManager.get_instance().set("pairing", "lcs")
    stored = json.loads((isolated_config / "config.json").read_text())
    assert stored["pairing"] == "lcs"

    ConfigManager.reset_instance()
    assert ConfigManager.get_instance().get_pairing() is LinePairing.LCS


def test_corrupt_file_falls_back_to_defaults(isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text("{not json")
    assert ConfigManager.get_instance().get_config()["pairing"] == "positional"


def test_invalid_values_fall_back():
    config_manager = ConfigManager.get_instance()
    config_manager.save_config({"pairing": "sideways", "maxTableCells": "lots"})
    assert config_manager.get_pairing() is LinePairing.POSITIONAL
    assert config_manager.get_max_table_cells() == DEFAULT_MAX_TABLE_CELLS


def test_non_positive_limit_disables_it():
    config_manager = ConfigManager.get_instance()
    config_manager.save_config({"maxTableCells": 0})
    assert config_manager.get_max_table_cells() is None


def test_unknown_encoding_falls_back_to_utf8(isolated_config, capsys):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text('{"encoding": "no-such-codec"}')

    assert ConfigManager.get_instance().get_encoding() == "utf-8"
    assert "Unknown encoding 'no-such-codec'" in capsys.readouterr().out


def test_non_string_encoding_falls_back_to_utf8():
    config_manager = ConfigManager.get_instance()
    config_manager.save_config({"encoding": 5})
    assert config_manager.get_encoding() == "utf-8"


def test_known_encoding_is_kept():
    config_manager = ConfigManager.get_instance()
    config_manager.save_config({"encoding": "latin-1"})
    assert config_manager.get_encoding() == "latin-1"
