"""Service configuration with environment variable loading.

Pydantic-based settings for upload limits, CORS and narration estimates.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:5175,http://localhost:3000"


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings(BaseModel):
    """Runtime settings for the narration service.

    Attributes:
        max_upload_mb: Largest accepted PDF upload, in megabytes.
        cors_origins: Front-end origins allowed to call the API.
        words_per_minute: Speaking rate used for duration estimates.
        host: Bind address for the HTTP server.
        port: Bind port for the HTTP server.
        log_level: Root logging level name.
    """

    model_config = ConfigDict(validate_default=True)

    max_upload_mb: int = Field(
        default_factory=lambda: int(os.getenv("MAX_UPLOAD_MB", "50")),
        ge=1,
        le=500,
        description="Maximum PDF upload size in MB",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
        description="Allowed CORS origins",
    )
    words_per_minute: int = Field(
        default_factory=lambda: int(os.getenv("WORDS_PER_MINUTE", "150")),
        ge=50,
        le=400,
        description="Narration speed for duration estimates",
    )
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "8000")), ge=1, le=65535)
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_origins(cls, v: str | list[str]) -> list[str]:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return _split_origins(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown LOG_LEVEL: {v!r}")
        return level

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


def get_settings() -> Settings:
    """Create settings from the environment.

    Returns:
        Configured Settings instance.

    Raises:
        ValidationError: If an environment value is out of range.
    """
    return Settings()
