"""Process entry point: log the running version, then start uvicorn."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from buildah_demo.config import settings
from buildah_demo.logging_config import configure_logging
from buildah_demo.version import resolve_version

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="buildah-demo", description="Run the demo web service.")
    parser.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to bind (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.log_level, help="Root log level (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Start the service.

    Exactly one "Starting ..." line is emitted per call. Anything uvicorn
    raises afterwards (e.g. the port is already bound) is left to propagate.
    """
    args = _parse_args(argv)
    configure_logging(args.log_level)

    logger.info(
        "Starting BuildahDemoApplication... (version: %s)",
        resolve_version(fallback=settings.app_version),
    )
    logger.info("The following profiles are active: %s", ", ".join(settings.profiles))

    from buildah_demo.serving.app import app

    uvicorn.run(app, host=args.host, port=args.port, log_config=None)
