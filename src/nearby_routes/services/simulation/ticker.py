"""Periodic timer that drives simulation ticks on the running event loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ...config import settings
from .controller import RouteController

logger = logging.getLogger(__name__)


class SimulationTicker:
    """Calls ``controller.tick()`` every ``interval_seconds`` until stopped.

    The task shares the event loop with the API handlers, so a tick never
    interleaves with a planning call.
    """

    def __init__(self, controller: RouteController, interval_seconds: float | None = None) -> None:
        self.controller = controller
        self.interval_seconds = interval_seconds or settings.simulation_tick_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.controller.tick()
            except Exception as exc:
                logger.exception(f"Simulation tick failed: {exc}")

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info(f"Simulation ticker started ({self.interval_seconds}s period)")

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Simulation ticker stopped")
