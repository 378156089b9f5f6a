"""Resolve the running application version from package metadata."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "buildah-demo"
UNKNOWN_VERSION = "unknown"


def resolve_version(distribution: str = DISTRIBUTION_NAME, fallback: str | None = None) -> str:
    """Return the installed version of *distribution*.

    When the distribution is not installed (e.g. running straight from a
    source checkout) the *fallback* is used, typically the ``APP_VERSION``
    build argument. If that is empty too, ``"unknown"`` is returned so the
    result is never blank.
    """
    try:
        return version(distribution)
    except PackageNotFoundError:
        pass

    if fallback and fallback.strip():
        return fallback.strip()
    return UNKNOWN_VERSION
