"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

LYZR_CHAT_URL = "https://agent-prod.studio.lyzr.ai/v3/inference/chat/"


class Settings(BaseSettings):
    """Environment-driven configuration for the FastAPI backend."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    TWEETFORGE_DB_HOST: str = Field("localhost")
    TWEETFORGE_DB_PORT: int = Field(3306)
    TWEETFORGE_DB_NAME: str = Field("tweetforge")
    TWEETFORGE_DB_USER: str = Field("root")
    TWEETFORGE_DB_PASSWORD: str = Field("")
    TWEETFORGE_DB_CHARSET: str = Field("utf8mb4")
    DATABASE_URL: Optional[str] = Field(None, description="Full SQLAlchemy URL, overrides the TWEETFORGE_DB_* parts")

    LYZR_API_URL: str = Field(LYZR_CHAT_URL)
    LYZR_API_KEY: Optional[SecretStr] = Field(None)
    LYZR_USER_ID: Optional[str] = Field(None)
    LYZR_AGENT_ID: Optional[str] = Field(None)
    LYZR_SESSION_ID: Optional[str] = Field(None)
    INFERENCE_TIMEOUT_SECONDS: float = Field(120.0, gt=0)
    INFERENCE_STRICT_STARTUP: bool = Field(True, description="Refuse to start when inference credentials are missing")

    DEFAULT_TWEET_STYLE: str = Field("default")
    DEFAULT_TWEETS_LIMIT: int = Field(50, ge=1)

    LOG_LEVEL: str = Field("INFO")
    CORS_ALLOW_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    def sqlalchemy_url(self) -> str:
        """Return DATABASE_URL if set, else a MySQL URL using the pymysql driver."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.TWEETFORGE_DB_USER}:{self.TWEETFORGE_DB_PASSWORD}"
            f"@{self.TWEETFORGE_DB_HOST}:{self.TWEETFORGE_DB_PORT}/{self.TWEETFORGE_DB_NAME}"
            f"?charset={self.TWEETFORGE_DB_CHARSET}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()
