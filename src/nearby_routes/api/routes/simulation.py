"""Simulation endpoints.

All handlers are coroutines so they run on the same event loop as the
ticker task.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Request, status

from ...schemas.simulation import RosterResponse, SimulationStartRequest, SimulationStatusResponse
from ...services.simulation.controller import RouteController, SimulationStateError
from ...services.simulation.ticker import SimulationTicker

router = APIRouter(prefix="/simulation", tags=["simulation"])


def _roster_response(controller: RouteController) -> RosterResponse:
    return RosterResponse.build(controller.status.value, controller.ticks, controller.snapshot)


@router.post("/start", response_model=RosterResponse, status_code=status.HTTP_200_OK)
async def start(request: Request, payload: Optional[SimulationStartRequest] = None) -> RosterResponse:
    controller: RouteController = request.app.state.controller
    ticker: SimulationTicker = request.app.state.ticker
    origin = payload.origin.to_domain() if payload and payload.origin else None
    try:
        controller.start_simulation(origin)
    except SimulationStateError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    ticker.start()
    return _roster_response(controller)


@router.post("/stop", response_model=SimulationStatusResponse, status_code=status.HTTP_200_OK)
async def stop(request: Request) -> SimulationStatusResponse:
    controller: RouteController = request.app.state.controller
    await request.app.state.ticker.stop()
    controller.stop_simulation()
    return _status_response(request)


@router.post("/tick", response_model=RosterResponse, status_code=status.HTTP_200_OK)
async def tick(request: Request) -> RosterResponse:
    """Advance one tick immediately, independent of the timer."""
    controller: RouteController = request.app.state.controller
    controller.tick()
    return _roster_response(controller)


@router.get("/roster", response_model=RosterResponse, status_code=status.HTTP_200_OK)
async def roster(request: Request) -> RosterResponse:
    return _roster_response(request.app.state.controller)


def _status_response(request: Request) -> SimulationStatusResponse:
    controller: RouteController = request.app.state.controller
    snapshot = controller.snapshot
    return SimulationStatusResponse(
        status=controller.status.value,
        ticks=controller.ticks,
        ticker_running=request.app.state.ticker.running,
        roster_version=snapshot.version if snapshot else 0,
        stale=controller.is_stale,
        total_distance_km=controller.total_distance,
    )


@router.get("/status", response_model=SimulationStatusResponse, status_code=status.HTTP_200_OK)
async def simulation_status(request: Request) -> SimulationStatusResponse:
    return _status_response(request)
