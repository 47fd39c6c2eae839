"""
Runtime settings for the points-bank service.

Values come from the environment (optionally a .env file). Call
get_settings() to obtain the cached instance; tests build Settings directly.
"""

from functools import lru_cache

from dotenv import find_dotenv, load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///./app.db"
    db_echo: bool = False

    # Auth
    jwt_secret: str = "secret"  # override in production
    jwt_ttl_hours: int = 24
    bcrypt_rounds: int = 12

    # New members
    default_points: int = 15420
    default_tier: str = "Gold"

    # Application
    log_level: str = "INFO"
    log_dir: str = "logs"
    port: int = 3000

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load .env (without overriding real env vars) and build Settings once.
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings()


__all__ = ["Settings", "get_settings"]
