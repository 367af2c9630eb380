# circussync/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Live mode env vars (.env):
      - SUPABASE_URL
      - SUPABASE_KEY (anon key)
      - SUPABASE_JWT_SECRET (JWT signing secret from Supabase project settings)

    Optional:
      - SUPABASE_SERVICE_ROLE_KEY (backend client bypassing RLS)
      - USE_MOCK_DATA=true switches the database and identity provider
        to their in-memory implementations; no Supabase vars are needed.
    """

    PROJECT_NAME: str = "CircusSync API"
    API_V1_STR: str = "/api/v1"

    # Supabase config (only required in live mode)
    SUPABASE_URL: str | None = None
    SUPABASE_KEY: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None

    # JWT verification (backend-side)
    SUPABASE_JWT_SECRET: str = ""
    SUPABASE_JWT_ALG: str = "HS256"

    # Backend selection
    USE_MOCK_DATA: bool = False
    SEED_MOCK_DATA: bool = True

    # Local preference file (theme)
    PREFERENCES_PATH: str = ".circussync/preferences.json"

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
