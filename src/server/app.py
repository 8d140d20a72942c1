from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from simulation import Direction, Simulation, SimulationConfig

logger = logging.getLogger(__name__)


class CallRequest(BaseModel):
    floor_number: int
    direction: Direction


class AvailabilityUpdate(BaseModel):
    available: bool


class BuildingRequest(BaseModel):
    number_of_floors: int = Field(ge=0)
    number_of_elevators: int = Field(ge=0)


class SimulationManager:
    """Owns the running simulation and serialises every change to it."""

    def __init__(self, config: Optional[SimulationConfig] = None, random_seed: Optional[int] = None) -> None:
        self.config = config or SimulationConfig.from_env()
        self.simulation = Simulation(config=self.config, random_seed=random_seed, random_calls=True)
        self.tick_interval = self.config.tick_interval / 1000
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    async def start(self) -> None:
        if self._task is None:
            logger.info("Starting tick loop every %.3fs", self.tick_interval)
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
            logger.info("Tick loop stopped after %d ticks", self.simulation.tick_count)

    async def _run(self) -> None:
        while True:
            async with self._lock:
                self.simulation.step()
            await asyncio.sleep(self.tick_interval)

    def current_state(self) -> dict:
        return self.simulation.snapshot()

    async def submit_call(self, floor_number: int, direction: Direction) -> dict:
        async with self._lock:
            self.simulation.submit_call(floor_number, direction)
            return self.current_state()

    async def set_availability(self, elevator_id: str, available: bool) -> dict:
        async with self._lock:
            self.simulation.set_elevator_disabled(elevator_id, not available)
            state = self.current_state()
            state["elevator_id"] = elevator_id
            state["available"] = available
            return state

    async def rebuild(self, number_of_floors: int, number_of_elevators: int) -> dict:
        async with self._lock:
            self.simulation.initialize(number_of_floors, number_of_elevators)
            return self.current_state()


manager = SimulationManager()
app = FastAPI(title="Elevator Dispatch Simulation API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup() -> None:
    await manager.start()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await manager.stop()


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.post("/calls")
async def submit_call(request: CallRequest) -> dict:
    if request.direction == Direction.IDLE:
        raise HTTPException(status_code=400, detail="Hall calls must go Up or Down")
    return await manager.submit_call(request.floor_number, request.direction)


@app.post("/elevators/{elevator_id}/availability")
async def update_availability(elevator_id: str, availability: AvailabilityUpdate) -> dict:
    return await manager.set_availability(elevator_id, availability.available)


@app.post("/building")
async def rebuild(request: BuildingRequest) -> dict:
    return await manager.rebuild(request.number_of_floors, request.number_of_elevators)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
