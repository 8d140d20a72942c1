from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from .building import BuildingState
from .config import DEFAULT_CONFIG, SimulationConfig
from .elevator import Direction, ElevatorCall
from .engine import handle_tick
from .handlers import (
    current_time_ms,
    handle_call_elevator,
    handle_toggle_elevator_disabled,
    initialize_building,
)
from .passenger import generate_random_call, next_random_call_delay

logger = logging.getLogger(__name__)


class Simulation:
    """Single-writer driver around the pure building transitions.

    Holds the current ``BuildingState``, a simulated millisecond clock that
    advances by one tick interval per ``step`` and the seeded random source
    used for boarding passengers and spontaneous hall calls.
    """

    def __init__(
        self,
        config: SimulationConfig = DEFAULT_CONFIG,
        number_of_floors: Optional[float] = None,
        number_of_elevators: Optional[float] = None,
        random_seed: Optional[int] = None,
        random_calls: bool = False,
        start_time: Optional[float] = None,
    ) -> None:
        self.config = config
        self.random = random.Random(random_seed)
        self.random_calls = random_calls
        self.current_time: float = current_time_ms() if start_time is None else start_time
        self.tick_count: int = 0
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}
        self.state = BuildingState(
            number_of_floors=config.number_of_floors if number_of_floors is None else number_of_floors,
            number_of_elevators=config.number_of_elevators if number_of_elevators is None else number_of_elevators,
        )
        self._next_random_call_at = self._schedule_random_call()
        self.initialize()

    def initialize(
        self,
        number_of_floors: Optional[float] = None,
        number_of_elevators: Optional[float] = None,
    ) -> BuildingState:
        if number_of_floors is not None:
            self.state = replace(self.state, number_of_floors=number_of_floors)
        if number_of_elevators is not None:
            self.state = replace(self.state, number_of_elevators=number_of_elevators)
        self.state = initialize_building(self.state)
        return self.state

    def run(self, ticks: int) -> BuildingState:
        for _ in range(ticks):
            self.step()
        return self.state

    def step(self) -> BuildingState:
        if self.random_calls and self.current_time >= self._next_random_call_at:
            floor, direction = generate_random_call(self.state.number_of_floors, self.random)
            self.submit_call(floor, direction)
            self._next_random_call_at = self._schedule_random_call()

        previous_queue = self.state.elevator_call_queue
        self.state = handle_tick(self.state, now=self.current_time, rng=self.random, config=self.config)
        dispatched = _removed_calls(previous_queue, self.state.elevator_call_queue)
        if dispatched:
            self._emit("dispatch", {"time": self.current_time, "calls": dispatched})

        self.current_time += self.config.tick_interval
        self.tick_count += 1
        self._emit("tick", {"time": self.current_time, "tick": self.tick_count})
        return self.state

    def submit_call(self, floor_number: float, direction: Direction) -> BuildingState:
        self.state = handle_call_elevator(self.state, floor_number, direction, now=self.current_time)
        logger.debug("Call queued at floor %s going %s", floor_number, direction.value)
        self._emit("call", {"time": self.current_time, "floor_number": floor_number, "direction": direction})
        return self.state

    def set_elevator_disabled(self, elevator_id: str, is_disabled: bool) -> BuildingState:
        self.state = handle_toggle_elevator_disabled(self.state, elevator_id, is_disabled, now=self.current_time)
        self._emit(
            "availability",
            {"time": self.current_time, "elevator_id": elevator_id, "is_disabled": is_disabled},
        )
        return self.state

    def snapshot(self) -> dict:
        payload = self.state.snapshot()
        payload["time"] = self.current_time
        payload["tick"] = self.tick_count
        return payload

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)

    def _schedule_random_call(self) -> float:
        return self.current_time + next_random_call_delay(self.random, self.config)


def _removed_calls(before, after) -> List[ElevatorCall]:
    kept = {id(call) for call in after}
    return [call for call in before if call is not None and id(call) not in kept]
