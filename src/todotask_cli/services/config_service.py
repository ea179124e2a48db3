"""Configuration service for managing TodoTask CLI configuration.

The ConfigService is the single source of truth for configuration. It
loads and saves config.json under the platform config directory, supports
dotted-key get/set, and resolves where the task vault lives.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from todotask_cli.models.config_models import AppConfig
from todotask_cli.utils.logger import get_logger

DB_PATH_ENV_VAR = "TODOTASK_DB"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir("todotask_cli"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("todotask_cli"))

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, creating defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            get_logger().info("no config found, writing defaults to %s", self.config_path)
            self._config = AppConfig()
            self.save_config()
        except ValidationError as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()
        return self._config

    def get_value(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    def set_value(self, key: str, value: Any) -> AppConfig:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
            pydantic.ValidationError: If the value is invalid for the key
        """
        self.get_value(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()
        return self._config

    def get_db_path(self) -> Path:
        """Resolve the vault path: env var, then config, then data dir."""
        env_path = os.environ.get(DB_PATH_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser()
        if self.config.database_path:
            return Path(self.config.database_path).expanduser()
        return self.data_dir / "vault.db"


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service


def get_task_repository():
    """Build the task repository for the configured vault."""
    from todotask_cli.adapters.sqlite import SqliteTaskRepository

    return SqliteTaskRepository(get_config_service().get_db_path())
