"""The per-tick state machine.

Each car is in one of three states: doors open (loading), moving or idle.
``handle_tick`` advances every car by one tick and then drains the hall
call queue into the cheapest eligible cars.
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import replace
from typing import List, Optional, Tuple

from dispatch import find_best_elevator, get_next_destination_floor, round_floor

from .building import BuildingState
from .config import DEFAULT_CONFIG, SimulationConfig
from .elevator import Direction, DoorStatus, Elevator, ElevatorCall, ElevatorStatus
from .floor import Floor
from .handlers import current_time_ms
from .passenger import generate_random_passengers

logger = logging.getLogger(__name__)

_default_rng = random.Random()


def handle_tick(
    state: BuildingState,
    now: Optional[float] = None,
    rng: Optional[random.Random] = None,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> BuildingState:
    """Advance the building by one ``config.tick_interval``.

    ``now`` is the epoch-ms clock used to age queued calls and ``rng`` feeds
    the boarding passenger generator; both default to wall-clock time and a
    module-level generator.
    """

    now = current_time_ms() if now is None else now
    rng = _default_rng if rng is None else rng

    elevators = tuple(advance_elevator(elevator, state, rng, config) for elevator in state.elevators)
    elevators, floors, queue = drain_call_queue(
        elevators, state.floors, state.elevator_call_queue, now, config
    )
    return replace(state, elevators=elevators, floors=floors, elevator_call_queue=queue)


def advance_elevator(
    elevator: Optional[Elevator],
    state: BuildingState,
    rng: random.Random,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> Optional[Elevator]:
    if elevator is None or elevator.is_disabled:
        return elevator

    if elevator.doors_open:
        return _advance_doors_open(elevator, state, rng, config)

    if elevator.door_status == DoorStatus.CLOSED:
        if elevator.destination_floors:
            return _advance_moving(elevator, state, config)
        return replace(
            elevator,
            direction=Direction.IDLE,
            status_message="Idle",
            status=ElevatorStatus.IDLE,
        )

    return elevator


def _advance_doors_open(
    elevator: Elevator, state: BuildingState, rng: random.Random, config: SimulationConfig
) -> Elevator:
    remaining = elevator.loading_unloading_remaining_time - config.tick_interval
    floor = elevator.current_floor

    if remaining > 0:
        alighting = any(p.destination_floor == floor for p in elevator.passengers)
        return replace(
            elevator,
            loading_unloading_remaining_time=remaining,
            status_message=f"Loading/Unloading ({_seconds(remaining)}s)",
            status=ElevatorStatus.UNLOADING if alighting else ElevatorStatus.LOADING,
        )

    staying = tuple(p for p in elevator.passengers if p.destination_floor != floor)
    # Capacity is checked against the load before anyone stepped off.
    available = max(0, config.max_passengers - len(elevator.passengers))
    boarding = (
        generate_random_passengers(floor, state.number_of_floors, rng)[:available] if available > 0 else []
    )

    destinations: List[float] = list(elevator.destination_floors)
    for passenger in boarding:
        if passenger.destination_floor not in destinations:
            destinations.append(passenger.destination_floor)

    # Fractional stops are served at the floor the sequencer rounds them to.
    return replace(
        elevator,
        door_status=DoorStatus.CLOSED,
        loading_unloading_remaining_time=0,
        passengers=staying + tuple(boarding),
        destination_floors=tuple(f for f in destinations if round_floor(f) != floor),
        status_message="Idle" if elevator.is_idle else "Moving",
        status=ElevatorStatus.for_direction(elevator.direction),
    )


def _advance_moving(elevator: Elevator, state: BuildingState, config: SimulationConfig) -> Elevator:
    if elevator.movement_remaining_time > 0:
        return replace(
            elevator,
            movement_remaining_time=elevator.movement_remaining_time - config.tick_interval,
            status_message=(
                f"Moving {elevator.direction.value} ({_seconds(elevator.movement_remaining_time)}s)"
            ),
            status=ElevatorStatus.for_direction(elevator.direction),
        )

    target = get_next_destination_floor(elevator)
    if target is None:
        return replace(
            elevator,
            direction=Direction.IDLE,
            status_message="Idle",
            status=ElevatorStatus.IDLE,
        )

    if target == elevator.current_floor:
        return _open_doors(elevator, config)

    direction = Direction.UP if target > elevator.current_floor else Direction.DOWN
    new_floor = elevator.current_floor + (1 if direction == Direction.UP else -1)
    moved = replace(elevator, current_floor=new_floor, direction=direction)

    should_stop = (
        new_floor == target
        or any(p.destination_floor == new_floor for p in elevator.passengers)
        or state.has_call_at(new_floor)
    )
    if should_stop:
        return _open_doors(moved, config)

    return replace(
        moved,
        movement_remaining_time=config.floor_movement_time,
        status_message=f"Moving {direction.value}",
        status=ElevatorStatus.for_direction(direction),
    )


def _open_doors(elevator: Elevator, config: SimulationConfig) -> Elevator:
    logger.debug("%s opening doors at floor %s", elevator.id, elevator.current_floor)
    return replace(
        elevator,
        movement_remaining_time=0,
        loading_unloading_remaining_time=config.load_unload_time,
        door_status=DoorStatus.OPEN,
        status_message="Arrived, Opening Doors",
        status=ElevatorStatus.ARRIVED_OPENING,
    )


def drain_call_queue(
    elevators: Tuple[Optional[Elevator], ...],
    floors: Tuple[Optional[Floor], ...],
    queue: Tuple[Optional[ElevatorCall], ...],
    now: float,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> Tuple[Tuple[Optional[Elevator], ...], Tuple[Optional[Floor], ...], Tuple[Optional[ElevatorCall], ...]]:
    """Assign every call that has aged past the processing delay.

    Calls no car can take stay queued for a later tick; there is no aging
    boost, so a building with every car disabled keeps them forever.
    """

    remaining: List[Optional[ElevatorCall]] = []
    for call in queue:
        if call is None or call.age(now) < config.call_processing_delay:
            remaining.append(call)
            continue

        best = find_best_elevator(elevators, call.floor_number, call.direction)
        if best is None:
            remaining.append(call)
            continue

        assigned = assign_call(best, call)
        logger.debug(
            "Dispatched %s call at floor %s to %s", call.direction.value, call.floor_number, best.id
        )
        elevators = tuple(assigned if e is not None and e.id == best.id else e for e in elevators)
        floors = tuple(
            f.without_call(call.direction) if f is not None and f.floor_number == call.floor_number else f
            for f in floors
        )
    return elevators, floors, tuple(remaining)


def assign_call(elevator: Elevator, call: ElevatorCall) -> Elevator:
    """Add the call's floor to the car's stops, giving an idle car a direction."""

    direction = elevator.direction
    if elevator.is_idle:
        if call.floor_number > elevator.current_floor:
            direction = Direction.UP
        elif call.floor_number < elevator.current_floor:
            direction = Direction.DOWN

    stops = set(elevator.destination_floors)
    stops.add(call.floor_number)
    return replace(
        elevator,
        destination_floors=tuple(sorted(stops, reverse=direction != Direction.UP)),
        direction=direction,
    )


def _seconds(milliseconds: float) -> float:
    if not math.isfinite(milliseconds):
        return milliseconds
    return math.ceil(milliseconds / 1000)
