"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/simulation", status_code=status.HTTP_200_OK)
async def health_simulation(request: Request) -> dict:
    controller = request.app.state.controller
    return {
        "service": "simulation",
        "status": controller.status.value,
        "ticker_running": request.app.state.ticker.running,
    }
