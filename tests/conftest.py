from __future__ import annotations

import random

import pytest

from simulation import BuildingState, Direction, DoorStatus, Elevator, ElevatorCall, Floor, Passenger


def make_elevator(
    elevator_id: str = "elevator-1",
    current_floor: float = 1,
    direction: Direction = Direction.IDLE,
    door_status: DoorStatus = DoorStatus.CLOSED,
    loading: float = 0,
    movement: float = 0,
    destinations=(),
    passengers=(),
    is_disabled: bool = False,
) -> Elevator:
    return Elevator(
        id=elevator_id,
        current_floor=current_floor,
        direction=direction,
        door_status=door_status,
        loading_unloading_remaining_time=loading,
        movement_remaining_time=movement,
        destination_floors=tuple(destinations),
        passengers=tuple(Passenger(destination_floor=floor) for floor in passengers),
        is_disabled=is_disabled,
    )


def make_floors(count: int, up_calls=(), down_calls=()):
    return tuple(
        Floor(
            floor_number=number,
            has_up_call=number in up_calls,
            has_down_call=number in down_calls,
        )
        for number in range(1, count + 1)
    )


def make_state(elevators=(), floors=(), queue=(), number_of_floors: float = 10) -> BuildingState:
    return BuildingState(
        number_of_floors=number_of_floors,
        number_of_elevators=len(elevators),
        elevators=tuple(elevators),
        floors=tuple(floors),
        elevator_call_queue=tuple(queue),
    )


def make_call(floor: float, direction: Direction = Direction.UP, timestamp: float = 0) -> ElevatorCall:
    return ElevatorCall(floor_number=floor, direction=direction, timestamp=timestamp)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
