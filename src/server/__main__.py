"""Run the render API with uvicorn: ``python -m server``."""

import os

import uvicorn

from blogdoc.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def run() -> None:
    """Serve ``server.main:app``; ``HOST``, ``PORT`` and ``RELOAD`` come from the environment."""
    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    configure_logging()
    logger.info("Starting blogdoc server", extra={"host": host, "port": port, "reload": reload})
    uvicorn.run("server.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    run()
