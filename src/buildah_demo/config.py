"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # Identity
    app_name: str = Field(default="buildah-demo", description="Service name reported by the API")
    app_version: str | None = Field(
        default=None,
        description=(
            "Version baked into the image at build time. Only used when the "
            "installed package carries no version metadata."
        ),
    )

    # Serving
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)

    # Runtime
    profiles_active: str = Field(
        default="default",
        validation_alias=AliasChoices("APP_PROFILES_ACTIVE", "SPRING_PROFILES_ACTIVE"),
        description="Comma-separated list of active profiles",
    )
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @property
    def profiles(self) -> list[str]:
        """Active profile names, ``["default"]`` when none are set."""
        names = [name.strip() for name in self.profiles_active.split(",")]
        return [name for name in names if name] or ["default"]


# Singleton — import `settings` wherever needed.
settings = Settings()
