"""Runtime settings read from the environment (and a ``.env`` file if present)."""

import os
from typing import List

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

load_dotenv(find_dotenv())


class Settings(BaseModel):
    """Service settings.

    Environment variables:
        LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL. Default: INFO
        LOG_FORMAT: simple or detailed. Default: detailed
        ALLOWED_ORIGINS: Comma-separated CORS origins.
        PIPEFORGE_WORKSPACE_CACHE_SIZE: Max live editing sessions.
        PIPEFORGE_WORKSPACE_TTL_SECONDS: Idle lifetime of a session.
    """

    log_level: str = "INFO"
    log_format: str = "detailed"
    allowed_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000"]
    )
    workspace_cache_size: int = Field(default=256, ge=1)
    workspace_ttl_seconds: int = Field(default=3600, ge=1)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("LOG_FORMAT", "detailed"),
            allowed_origins=[
                origin.strip()
                for origin in os.getenv(
                    "ALLOWED_ORIGINS", "http://localhost:3000"
                ).split(",")
                if origin.strip()
            ],
            workspace_cache_size=int(
                os.getenv("PIPEFORGE_WORKSPACE_CACHE_SIZE", "256")
            ),
            workspace_ttl_seconds=int(
                os.getenv("PIPEFORGE_WORKSPACE_TTL_SECONDS", "3600")
            ),
        )


def get_settings() -> Settings:
    """Read settings fresh from the environment."""
    return Settings.from_env()
