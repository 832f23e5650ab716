"""Shared fixtures: every test gets its own config directory."""

from __future__ import annotations

import pytest

from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point ConfigManager at a temp directory and drop env API keys."""
    monkeypatch.setenv("CODE_ANALYZER_CONFIG_DIR", str(tmp_path))
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()
