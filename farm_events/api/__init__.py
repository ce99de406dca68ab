"""HTTP boundary: FastAPI app factory, routes and response schemas."""

from .app import create_app  # noqa: F401

__all__ = ["create_app"]
