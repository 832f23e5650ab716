"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

# Provider section -> environment variable used when no key is stored
ENV_API_KEYS = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # Environment variable first, then the home directory
            config_dir = os.environ.get("CODE_ANALYZER_CONFIG_DIR")
            if not config_dir:
                config_dir = os.path.expanduser("~/.code_analyzer")

            config_path = Path(config_dir)
            try:
                config_path.mkdir(parents=True, exist_ok=True)
                self._config_file = config_path / "config.json"
            except OSError as e:
                print(f"[ConfigManager] Cannot write to {config_dir}: {e}")
                self._config_file = None

            # Fall back to the temp directory when the preferred path is unusable
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "code_analyzer"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[ConfigManager] Critical error during init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "code_analyzer_config_fallback.json"

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
        """Load configuration from file, layered over defaults"""
        config = self._default_config()

        if self._config_file.exists():
            try:
                with open(self._config_file) as f:
                    stored = json.load(f)
                for key, value in stored.items():
                    if isinstance(value, dict) and isinstance(config.get(key), dict):
                        config[key] = {**config[key], **value}
                    else:
                        config[key] = value
            except (json.JSONDecodeError, OSError) as e:
                print(f"[ConfigManager] Error loading config: {e}")

        return config

    def _with_env_keys(self, config: dict[str, Any]) -> dict[str, Any]:
        """Copy of config with empty API keys filled from the environment"""
        view = config.copy()
        for provider, env_var in ENV_API_KEYS.items():
            section = view.get(provider)
            if isinstance(section, dict) and not section.get("apiKey"):
                view[provider] = {**section, "apiKey": os.environ.get(env_var, "")}
        return view

    def _without_env_keys(self, config: dict[str, Any]) -> dict[str, Any]:
        """Copy of config with environment-sourced API keys put back to their stored value"""
        stored = config.copy()
        for provider, env_var in ENV_API_KEYS.items():
            section = stored.get(provider)
            env_key = os.environ.get(env_var)
            if isinstance(section, dict) and env_key and section.get("apiKey") == env_key:
                stored_key = self._config.get(provider, {}).get("apiKey", "")
                stored[provider] = {**section, "apiKey": stored_key}
        return stored

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "provider": "gemini",
            "gemini": {"apiKey": "", "model": "gemini-2.5-flash"},
            "vllm": {
                "endpoint": "http://localhost:8000",
                "apiKey": "",
                "model": "meta-llama/Llama-2-7b-chat-hf",
            },
            "openai": {"apiKey": "", "model": "gpt-4"},
            "server": {"host": "0.0.0.0", "port": 8000},
            "analysis": {"stripComments": True, "maxCodeChars": 20000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._with_env_keys(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file; keys taken from the environment are never written"""
        self._config.update(self._without_env_keys(config))

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)
