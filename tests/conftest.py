"""Pytest fixtures for diff backend tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest
from hypothesis import HealthCheck, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="sbs-diff-tests-"))
os.environ["SBS_DIFF_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

from services.config_manager import ConfigManager  # noqa: E402

# isolated_config is shared by all examples of a @given test
_shared = {"deadline": None, "suppress_health_check": [HealthCheck.function_scoped_fixture]}
settings.register_profile("ci", max_examples=200, **_shared)
settings.register_profile("dev", max_examples=50, **_shared)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose, **_shared)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Give every test its own config directory and a fresh ConfigManager."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("SBS_DIFF_CONFIG_DIR", str(config_dir))
    ConfigManager.reset_instance()
    yield config_dir
    ConfigManager.reset_instance()


@pytest.fixture
def write_file(tmp_path: Path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write
