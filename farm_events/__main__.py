"""Run the event insights API with uvicorn: ``python -m farm_events``."""

import uvicorn

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .config import HOST, PORT


def main() -> None:
    uvicorn.run("farm_events.api.app:create_app", factory=True, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
