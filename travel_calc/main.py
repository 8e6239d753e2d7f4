from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from travel_calc.api.error_handlers import register_error_handlers
from travel_calc.api.health import router as health_router
from travel_calc.api.pages import router as pages_router
from travel_calc.api.routes import router as calculator_router
from travel_calc.config.logging import setup_logging
from travel_calc.config.settings import Settings, get_settings
from travel_calc.data.loaders import repository_for

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        vehicles = repository_for(settings.vehicle_table).vehicles
        logger.info("Travel calculator started with %d vehicles", len(vehicles))
        yield
        logger.info("Travel calculator shutting down")

    app = FastAPI(title="Travel Calculator", lifespan=lifespan)
    # Routes read settings through get_settings; serve the ones this app was built with.
    app.dependency_overrides[get_settings] = lambda: settings
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(pages_router)
    app.include_router(calculator_router)

    # Mounted last so that every route above wins over a same-named file.
    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="static")
        logger.info("Serving static assets from %s", settings.public_dir)
    else:
        logger.warning("Static asset directory %s not found; static serving disabled", settings.public_dir)

    return app


app = create_app()
