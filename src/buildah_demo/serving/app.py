"""FastAPI application exposed by the container image."""

from __future__ import annotations

from fastapi import FastAPI

from buildah_demo.config import Settings, settings
from buildah_demo.version import resolve_version


def create_app(config: Settings = settings) -> FastAPI:
    """Build the application for *config*."""
    application = FastAPI(
        title=config.app_name,
        version=resolve_version(fallback=config.app_version),
        description="Demo service packaged with Buildah.",
    )

    # ── Routes ────────────────────────────────────────────────────────────
    @application.get("/health")
    async def health() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "ok"}

    return application


app = create_app()
