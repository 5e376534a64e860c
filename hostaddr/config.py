"""Runtime settings, read from the environment or a local .env file."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "hostaddr"
    ipv6_padded: bool = False
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
