"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import health, routes, simulation
from .config import settings
from .services.simulation.controller import RouteController
from .services.simulation.ticker import SimulationTicker

logger = logging.getLogger(__name__)


def _load_startup_roster(controller: RouteController) -> None:
    if settings.roster_file is None:
        return
    from .data.consumers_repository import load_roster_csv
    from .services.routing.service import resolve_origin

    origin = resolve_origin(None)
    controller.load_roster(origin, load_roster_csv(settings.roster_file, origin))
    logger.info(f"Loaded startup roster from {settings.roster_file}")


def create_app(controller: RouteController | None = None) -> FastAPI:
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await app.state.ticker.stop()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.state.controller = controller or RouteController()
    app.state.ticker = SimulationTicker(app.state.controller)
    _load_startup_roster(app.state.controller)

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(routes.router, prefix=settings.api_prefix)
    app.include_router(simulation.router, prefix=settings.api_prefix)
    return app


app = create_app()
