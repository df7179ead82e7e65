# jiraclone/core/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, List, Union

from pydantic import Field, AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings (env vars / .env)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =========================================================
    # 1. Project info
    # =========================================================
    PROJECT_NAME: str = Field(
        default="Jira Clone API", description="Title shown in Swagger UI"
    )
    API_V1_STR: str = Field(default="/api", description="API prefix")

    APP_ENV: Literal["local", "dev", "test", "prod"] = Field(
        default="local",
        description="Runtime environment (local/dev/test/prod)",
    )

    # =========================================================
    # 2. CORS (frontend)
    # =========================================================
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = Field(
        default=[], description="Allowed origins (e.g. http://localhost:5173)"
    )

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        """Accept a comma separated string as well as a JSON list."""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # =========================================================
    # 3. Database
    # =========================================================
    DB_URL: str = Field(
        default="sqlite:///./.data/jiraclone.db",
        description="SQLAlchemy DB URL",
    )
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")

    # =========================================================
    # 4. Logging
    # =========================================================
    LOG_DIR: str = Field(default=".logs", description="Directory for the server log")
    LOG_LEVEL: str = Field(default="INFO", description="Console log level")

    @property
    def log_dir_path(self) -> Path:
        """Absolute log directory (Path)."""
        return Path(self.LOG_DIR).resolve()

    @property
    def cors_origins(self) -> List[str]:
        """CORS origins as plain strings; "*" when none are configured."""
        if not self.BACKEND_CORS_ORIGINS:
            return ["*"]
        return [str(o).rstrip("/") for o in self.BACKEND_CORS_ORIGINS]


@lru_cache
def get_settings() -> Settings:
    """Singleton Settings for FastAPI Depends."""
    return Settings()


settings = get_settings()
