from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.log import configure_logging

from .api.routes import router as api_router
import lightremote.api.routes as routes_module

from .factory import create_light_and_remote
from .services.panel import RemotePanel


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info(
        "Starting %s (strict_brightness=%s)", settings.app_name, settings.strict_brightness
    )
    try:
        yield
    finally:
        logger.info("Shutdown complete")


def create_app(panel: Optional[RemotePanel] = None) -> FastAPI:
    """Each app owns its own light/remote pair."""
    if panel is None:
        panel = RemotePanel(create_light_and_remote())

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.panel = panel

    # Make the dependency function in routes resolve to this app's panel
    app.dependency_overrides[routes_module.get_panel] = lambda: panel

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("lightremote.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
