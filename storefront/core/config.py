# storefront/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Env vars (.env):
      - DATABASE_URL (Postgres connection string; SQLite for local runs)
      - SECRET_KEY (signs both the session cookie and access tokens)

    Optional:
      - DATABASE_SSL (append sslmode=require to Postgres URLs, default true)
      - LOG_LEVEL, CORS_ORIGINS, SESSION_* and token lifetime overrides
    """

    PROJECT_NAME: str = "Storefront API"
    API_PREFIX: str = "/api"

    # DB config
    DATABASE_URL: str = "sqlite:///./storefront.db"
    DATABASE_SSL: bool = True
    DATABASE_ECHO: bool = False

    # Signing secret (change in production!)
    SECRET_KEY: str = "change-me-in-production"

    # Access tokens (Bearer JWT)
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # Session cookie carrying the anonymous cart id
    SESSION_COOKIE: str = "storefront_session"
    SESSION_MAX_AGE: int = 60 * 60 * 24 * 30
    SESSION_HTTPS_ONLY: bool = False

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
