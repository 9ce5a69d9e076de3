"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import Config

    config = Config()
    db_url = config.database_url()
    seed = config.get_bool("TRANSPORTDESK_SEED_SAMPLE", True)
"""
import os
import json
import logging
from core.paths import config_path
from core.singleton import SingletonMeta
from typing import Any, Optional, Dict
from pathlib import Path
from dotenv import load_dotenv

from constants import STORAGE_KEY
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file (config/settings.json)
    - Default values
    - Type conversion
    """

    DB_URL_KEY = "TRANSPORTDESK_DB_URL"
    STORAGE_KEY_KEY = "TRANSPORTDESK_STORAGE_KEY"
    SEED_SAMPLE_KEY = "TRANSPORTDESK_SEED_SAMPLE"
    EXPORT_DIR_KEY = "TRANSPORTDESK_EXPORT_DIR"

    def __init__(self, config_file: Optional[Path] = None, env_file: Optional[Path] = None):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._config_file_path = Path(config_file) if config_file else config_path("settings.json")

        self._load_env(Path(env_file) if env_file else Path(".env"))
        self._load_json_config()

    def _load_env(self, env_file: Path):
        """Load environment variables from .env file"""
        if env_file.exists():
            load_dotenv(env_file)
            self._env_loaded = True
            logger.info("Environment variables loaded from %s", env_file)
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                self._config_cache = json.load(f)
            logger.info(f"Configuration loaded from {self._config_file_path}")
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load config file: {e}")
            self._config_cache = {}

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}",
                code="CONFIG_MISSING",
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_path(self, key: str, default: str = None) -> Optional[Path]:
        """Get Path configuration value"""
        value = self.get(key, default)
        return Path(value).expanduser() if value else None

    # ------------------------------------------------------------------
    # Application keys
    # ------------------------------------------------------------------

    def database_url(self) -> str:
        url = self.get(self.DB_URL_KEY)
        if url:
            return str(url)
        from core.paths import default_db_path
        return f"sqlite:///{default_db_path()}"

    def storage_key(self) -> str:
        return str(self.get(self.STORAGE_KEY_KEY, STORAGE_KEY))

    def seed_sample(self) -> bool:
        return self.get_bool(self.SEED_SAMPLE_KEY, True)

    def export_dir(self) -> Optional[Path]:
        return self.get_path(self.EXPORT_DIR_KEY)
