from __future__ import annotations

from typing import Iterable, Optional, TypeVar

from .interface import CarView, Direction

CarT = TypeVar("CarT", bound=CarView)

STOP_BEFORE_CALL_PENALTY = 0.5
REVERSAL_DISTANCE_FACTOR = 2
QUEUED_STOP_PENALTY = 5


def calculate_elevator_cost(car: CarView, call_floor: float, call_direction: Direction) -> float:
    """Score how well ``car`` fits a hall call; lower is better.

    A car already travelling the call's way and not yet past the floor pays
    its distance plus a small penalty per stop it has to make first. Any
    other car must finish its run and turn around, so distance counts double
    and every queued stop carries a flat penalty.
    """

    if car.is_disabled:
        return float("inf")

    if car.current_floor == call_floor and car.direction == Direction.IDLE:
        return 0

    if car.direction == call_direction and _not_yet_passed(car.current_floor, call_floor, call_direction):
        cost = abs(car.current_floor - call_floor)
        for destination in car.destination_floors:
            if _before_call(destination, call_floor, call_direction):
                cost += STOP_BEFORE_CALL_PENALTY
        return cost

    cost = abs(car.current_floor - call_floor) * REVERSAL_DISTANCE_FACTOR
    cost += len(car.destination_floors) * QUEUED_STOP_PENALTY
    return cost


def find_best_elevator(
    cars: Iterable[Optional[CarT]], call_floor: float, call_direction: Direction
) -> Optional[CarT]:
    """Return the cheapest car for the call, or ``None`` if no car can take it.

    Ties go to the earliest car; missing entries are skipped.
    """

    best: Optional[CarT] = None
    min_cost = float("inf")
    for car in cars:
        if car is None:
            continue
        cost = calculate_elevator_cost(car, call_floor, call_direction)
        if cost < min_cost:
            min_cost = cost
            best = car
    return best


def _not_yet_passed(current_floor: float, call_floor: float, direction: Direction) -> bool:
    if direction == Direction.UP:
        return current_floor <= call_floor
    if direction == Direction.DOWN:
        return current_floor >= call_floor
    return False


def _before_call(destination: float, call_floor: float, direction: Direction) -> bool:
    if direction == Direction.UP:
        return destination < call_floor
    return destination > call_floor
