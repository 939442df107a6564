# app\shared\config.py
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "users-api"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- HTTP Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    API_PREFIX: str = "/api"
    CORS_ORIGINS: str = "*"  # Comma-separated, "*" allows all
    ROOT_MESSAGE: str = "🚀 Users API server is running!"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "json" or "console"

    # --- Data ---
    SEED_DEMO_DATA: bool = True

    @property
    def cors_origin_list(self) -> List[str]:
        """Parsed CORS_ORIGINS; an empty or "*" value means all origins."""
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw or raw == "*":
            return ["*"]
        return [p.strip() for p in raw.split(",") if p.strip()]

    @property
    def api_root(self) -> str:
        """API_PREFIX normalized to "/prefix" (or "" for no prefix)."""
        prefix = self.API_PREFIX.strip().strip("/")
        return f"/{prefix}" if prefix else ""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
