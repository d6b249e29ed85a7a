# main package settings/configs
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from window_hierarchy.config.settings_mixins import LoggingSettingsMixin
from functools import lru_cache

# environment name used to pick the .env file, "dev" unless APP_ENV is set
APP_ENV = os.getenv("APP_ENV", "dev")

# .env files live at the project root, next to pyproject.toml.
# NOTE: a missing .env file is skipped, environment variables still apply.
PROJECT_ROOT = Path(__file__).resolve().parents[3]
env_file_path = PROJECT_ROOT / f".env.{APP_ENV}"

class DefaultSettings(BaseSettings):
    """
    Settings every window_hierarchy config shares: the APP_ENV selector and .env parsing.
    NOTE: mixed in last so concern-specific mixins take precedence.
    """
    model_config = SettingsConfigDict(env_file_encoding="utf-8", extra="ignore")

    # picks which .env.<APP_ENV> file is read
    APP_ENV: str = APP_ENV

class HierarchySettings(
    LoggingSettingsMixin,
    DefaultSettings # passed in last to set low priority
):
    """
    The main package settings.
    Setting mix-ins are passed in for each ambient concern.
    """

    model_config = SettingsConfigDict(
        env_file=env_file_path, env_file_encoding="utf-8", extra="ignore"
    )

# use lru cache to return a cached instance of the settings
# NOTE: settings are read once per process, call get_settings.cache_clear() to reload
@lru_cache()
def get_settings() -> HierarchySettings:
    return HierarchySettings()
