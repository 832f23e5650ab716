"""Tests for services/config_manager.py."""

from __future__ import annotations

import json

from services.config_manager import ConfigManager


class TestConfigManager:
    def test_uses_env_directory(self, isolated_config) -> None:
        manager = ConfigManager.get_instance()
        assert manager.config_file == isolated_config / "config.json"

    def test_singleton(self) -> None:
        assert ConfigManager.get_instance() is ConfigManager.get_instance()

    def test_defaults(self) -> None:
        config = ConfigManager.get_instance().get_config()
        assert config["provider"] == "gemini"
        assert config["gemini"]["model"] == "gemini-2.5-flash"
        assert config["analysis"] == {"stripComments": True, "maxCodeChars": 20000}

    def test_save_and_reload(self) -> None:
        manager = ConfigManager.get_instance()
        manager.save_config({"provider": "openai"})

        ConfigManager.reset_instance()
        assert ConfigManager.get_instance().get("provider") == "openai"

    def test_stored_sections_merge_over_defaults(self, isolated_config) -> None:
        (isolated_config / "config.json").write_text(json.dumps({"analysis": {"maxCodeChars": 10}}))
        config = ConfigManager.get_instance().get_config()
        assert config["analysis"] == {"stripComments": True, "maxCodeChars": 10}

    def test_corrupt_file_falls_back_to_defaults(self, isolated_config) -> None:
        (isolated_config / "config.json").write_text("{not json")
        assert ConfigManager.get_instance().get("provider") == "gemini"

    def test_api_key_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "AIza-from-env")
        config = ConfigManager.get_instance().get_config()
        assert config["gemini"]["apiKey"] == "AIza-from-env"

    def test_env_key_not_saved(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "AIza-from-env")
        manager = ConfigManager.get_instance()
        manager.save_config(manager.get_config())

        stored = json.loads(manager.config_file.read_text())
        assert stored["gemini"]["apiKey"] == ""

    def test_stored_key_wins_over_environment(self, isolated_config, monkeypatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        (isolated_config / "config.json").write_text(json.dumps({"openai": {"apiKey": "sk-file"}}))
        assert ConfigManager.get_instance().get_config()["openai"]["apiKey"] == "sk-file"

    def test_set(self) -> None:
        manager = ConfigManager.get_instance()
        manager.set("provider", "vllm")
        assert json.loads(manager.config_file.read_text())["provider"] == "vllm"
