"""
Serving — FastAPI application for the demo service.

No business endpoints are defined; everything beyond the liveness probe is
the framework's default behaviour (404 for unknown paths).
"""
