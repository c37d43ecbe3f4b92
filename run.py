"""Run the Bookshelf FastAPI application with uvicorn."""

import logging
import sys

import uvicorn

from src.application.config import settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the API until shutdown.

    Any exception escaping the server is logged and ends the process with
    exit status 1; no recovery is attempted. uvicorn reports its own startup
    failures (e.g. port in use) with ``sys.exit``; that SystemExit is not an
    Exception and leaves the process with uvicorn's exit code unchanged.
    """
    try:
        uvicorn.run(
            "src.application.api:app",
            host=settings.host,
            port=settings.port,
            reload=settings.reload,
            log_level=settings.log_level.lower(),
        )
    except Exception:
        logger.exception("Bookshelf API stopped by an unhandled error")
        sys.exit(1)


if __name__ == "__main__":
    main()
