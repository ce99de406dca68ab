"""Top-level package for the farm-events project.

Exposes the FastAPI application factory so callers can do
`from farm_events import create_app` or run the server with
`python -m farm_events`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("farm-events")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .api import create_app  # convenience re-export

__all__ = ["create_app", "__version__"]
