"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status

from ...data.consumers_repository import destinations_from_records
from ...schemas.routing import RosterLoadRequest, RoutePlanRequest, RouteResultModel
from ...services.outputs.routing_formatter import route_result_to_geojson, route_result_to_json
from ...services.routing.models import RouteResult
from ...services.routing.service import plan_route, resolve_origin
from ...services.simulation.controller import RouteController, SimulationStateError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes", tags=["routes"])


def _controller(request: Request) -> RouteController:
    return request.app.state.controller


def _to_model(result: RouteResult, stale: bool = False) -> RouteResultModel:
    return RouteResultModel(**route_result_to_json(result), stale=stale)


@router.post("/plan", response_model=RouteResultModel, status_code=status.HTTP_200_OK)
def plan(payload: RoutePlanRequest) -> RouteResultModel:
    """Plan a route for the given snapshot without touching the stored roster."""
    try:
        origin = resolve_origin(payload.origin.to_domain() if payload.origin else None)
        destinations = [destination.to_domain() for destination in payload.destinations]
        return _to_model(plan_route(origin, destinations, strategy=payload.strategy))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error planning route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to plan route: {str(exc)}",
        ) from exc


@router.post("/roster", response_model=RouteResultModel, status_code=status.HTTP_200_OK)
async def load_roster(payload: RosterLoadRequest, request: Request) -> RouteResultModel:
    """Adopt nearby-consumer records as the current roster and plan it."""
    controller = _controller(request)
    try:
        origin = resolve_origin(payload.origin.to_domain() if payload.origin else None)
        destinations = destinations_from_records(payload.consumers, origin)
        return _to_model(controller.load_roster(origin, destinations))
    except SimulationStateError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/current", response_model=RouteResultModel, status_code=status.HTTP_200_OK)
async def current(request: Request) -> RouteResultModel:
    """Last computed route; ``stale`` is set once consumers have moved since planning."""
    controller = _controller(request)
    if controller.last_result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No route has been computed yet.")
    return _to_model(controller.last_result, stale=controller.is_stale)


@router.get("/current/geojson", status_code=status.HTTP_200_OK)
async def current_geojson(request: Request) -> dict:
    controller = _controller(request)
    if controller.last_result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No route has been computed yet.")
    return route_result_to_geojson(controller.last_result)


@router.post("/refresh", response_model=RouteResultModel, status_code=status.HTTP_200_OK)
async def refresh(request: Request) -> RouteResultModel:
    """Replan the current roster snapshot."""
    controller = _controller(request)
    try:
        result = controller.refresh()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No roster loaded to plan.")
    return _to_model(result)
