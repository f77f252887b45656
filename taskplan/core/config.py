"""
Application configuration loader and it handles:
- Environment variables (and an optional .env file)
- Model service configuration
- Server configuration

And, the main purpose:
One immutable settings object, built at startup and handed to the app.
"""


from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # LLM (empty key -> fallback plan, no network)
    AI_API_KEY: str = ""
    AI_MODEL: str = "gemini-1.5-flash"
    AI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    APP_ENV: str = "development"  # development | production
    CLIENT_DIST_DIR: Path = Path("client/dist")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"
        frozen = True

    @property
    def has_model(self) -> bool:
        return bool(self.AI_API_KEY.strip())

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower().strip() == "production"
