"""State transitions that run outside the tick: initialise, call, disable."""
from __future__ import annotations

import logging
import math
import time
from dataclasses import replace
from typing import List, Optional, Tuple

from .building import BuildingState
from .elevator import Direction, DoorStatus, Elevator, ElevatorCall, ElevatorStatus
from .floor import Floor

logger = logging.getLogger(__name__)


def current_time_ms() -> int:
    return int(time.time() * 1000)


def initialize_building(state: BuildingState) -> BuildingState:
    """Rebuild floors and elevators from the configured counts.

    Any existing floors and elevators are replaced; the call queue is kept.
    """

    floor_count = _whole_count(state.number_of_floors)
    elevator_count = _whole_count(state.number_of_elevators)
    floors = tuple(Floor(floor_number=number) for number in range(1, floor_count + 1))
    elevators = tuple(
        Elevator(
            id=f"elevator-{number}",
            current_floor=1,
            direction=Direction.IDLE,
            door_status=DoorStatus.CLOSED,
            status_message="Idle",
            status=ElevatorStatus.IDLE,
        )
        for number in range(1, elevator_count + 1)
    )
    logger.info("Initialised building with %d floors and %d elevators", floor_count, elevator_count)
    return replace(state, floors=floors, elevators=elevators)


def handle_call_elevator(
    state: BuildingState,
    floor_number: float,
    direction: Direction,
    now: Optional[float] = None,
) -> BuildingState:
    """Light the hall lamp on ``floor_number`` and queue the call.

    The call is queued even when no such floor exists.
    """

    now = current_time_ms() if now is None else now
    floors = tuple(
        floor.with_call(direction) if floor is not None and floor.floor_number == floor_number else floor
        for floor in state.floors
    )
    call = ElevatorCall(floor_number=floor_number, direction=direction, timestamp=now)
    return replace(state, floors=floors, elevator_call_queue=state.elevator_call_queue + (call,))


def handle_toggle_elevator_disabled(
    state: BuildingState,
    elevator_id: str,
    is_disabled: bool,
    now: Optional[float] = None,
) -> BuildingState:
    """Take an elevator out of service, or put it back.

    Disabling hands every pending stop and every onboard passenger's
    destination back to the call queue and empties the car. Unknown ids leave
    the state untouched.
    """

    elevator = state.get_elevator(elevator_id)
    if elevator is None:
        return state

    if not is_disabled:
        enabled = replace(elevator, is_disabled=False, status=ElevatorStatus.IDLE)
        return replace(state, elevators=_swap(state.elevators, elevator, enabled))

    now = current_time_ms() if now is None else now
    requeued = _evacuation_calls(elevator, now)
    disabled = replace(
        elevator,
        is_disabled=True,
        destination_floors=(),
        passengers=(),
        status=ElevatorStatus.DISABLED,
    )
    logger.debug("Disabled %s, requeued floors %s", elevator_id, [call.floor_number for call in requeued])
    return replace(
        state,
        elevators=_swap(state.elevators, elevator, disabled),
        elevator_call_queue=state.elevator_call_queue + tuple(requeued),
    )


def _evacuation_calls(elevator: Elevator, now: float) -> List[ElevatorCall]:
    calls = [
        ElevatorCall(floor_number=floor, direction=_direction_from(elevator, floor), timestamp=now)
        for floor in elevator.destination_floors
    ]
    for passenger in elevator.passengers:
        floor = passenger.destination_floor
        if any(call.floor_number == floor for call in calls):
            continue
        calls.append(ElevatorCall(floor_number=floor, direction=_direction_from(elevator, floor), timestamp=now))
    return calls


def _direction_from(elevator: Elevator, floor: float) -> Direction:
    return Direction.UP if floor > elevator.current_floor else Direction.DOWN


def _swap(elevators: Tuple[Optional[Elevator], ...], old: Elevator, new: Elevator) -> Tuple[Optional[Elevator], ...]:
    return tuple(new if elevator is old else elevator for elevator in elevators)


def _whole_count(value: float) -> int:
    if value is None or not math.isfinite(value) or value <= 0:
        return 0
    return math.floor(value)
