"""
buildah-demo — a minimal web service used to demonstrate container builds.

The application logs its version on startup and then hands control to
FastAPI/uvicorn. It defines no business endpoints; the interesting part of
the repository is how it is packaged (see ``Dockerfile`` and
``Dockerfile.runtime``).
"""
