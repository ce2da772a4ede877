from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    # Type descriptors
    MAX_DISPLAYED_TYPES: int = 5  # Beyond this, descriptors elide to first two ... last two

    # Rendering of rejected values
    MAX_INSPECTED_ITEMS: int = 3
    MAX_INSPECTED_STRING: int = 80

    model_config = SettingsConfigDict(env_prefix="SHAPEGUARD_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
