import logging
from typing import Optional

from pydantic import ValidationError

from core.models.config_data import Settings

logger = logging.getLogger(__name__)

class ConfigLoader:
    """Loads scanner settings from defaults and TEMPCHK_* environment variables."""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._instance._config = Settings.model_construct()
            cls._instance._initialized = False
        return cls._instance
    
    def __init__(self):
        if not self._initialized:
            self.load_config()
            self._initialized = True
    
    def load_config(self):
        """Load configuration from the environment, falling back to defaults."""
        try:
            self._config = Settings()
            logger.debug(f"Configuration loaded: {self._config.model_dump()}")
        except ValidationError as e:
            logger.error(f"Invalid TEMPCHK_* environment configuration, using defaults: {e}")
            self._config = self._get_default_config()
    
    @staticmethod
    def _get_default_config() -> Settings:
        """Return default configuration, ignoring the environment."""
        return Settings.model_construct()
    
    def get_settings(self) -> Settings:
        return self._config
    
    def override(
        self,
        hwmon_directory: Optional[str] = None,
        cpuinfo_path: Optional[str] = None,
        debug: Optional[bool] = None,
    ) -> Settings:
        """Return a copy of the loaded settings with command-line overrides applied."""
        updates = {}
        if hwmon_directory is not None:
            updates["hwmon_directory"] = hwmon_directory
        if cpuinfo_path is not None:
            updates["cpuinfo_path"] = cpuinfo_path
        if debug is not None:
            updates["debug"] = debug
        return self._config.model_copy(update=updates)
    
    def reload_config(self):
        """Reload configuration from the environment."""
        self.load_config()
        logger.info("Configuration reloaded")


# Global singleton instance
config_loader = ConfigLoader()


def get_settings() -> Settings:
    """FastAPI dependency returning the active settings."""
    return config_loader.get_settings()
