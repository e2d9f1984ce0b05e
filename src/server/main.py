"""FastAPI application serving the render API."""

from fastapi import FastAPI

from blogdoc.utils.logging_config import configure_logging
from server.routers import render
from server.server_config import APP_DESCRIPTION, APP_TITLE

configure_logging()

app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION)
app.include_router(render.router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
