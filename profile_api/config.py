# profile_api/config.py
from __future__ import annotations
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = Field(default="Profile API", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3001, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Comma-separated; "*" leaves CORS fully open
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # DB
    database_url: str = Field(default="sqlite:///./profile.db", alias="DATABASE_URL")
    default_profile_id: int = Field(default=1, alias="DEFAULT_PROFILE_ID")
    shutdown_grace_seconds: float = Field(default=0.1, ge=0, alias="SHUTDOWN_GRACE_SECONDS")

    # .env loader
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

settings = Settings()
