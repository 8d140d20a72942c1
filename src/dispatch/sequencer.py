from __future__ import annotations

import math
from typing import List, Optional, Sequence

from .interface import CarView, Direction


def sort_in_direction(floors: Sequence[float], direction: Direction, current_floor: float) -> List[float]:
    """Order floors the way a car travelling ``direction`` meets them.

    Idle cars order by distance from ``current_floor``; ties keep their
    queued order.
    """

    if direction == Direction.UP:
        return sorted(floors)
    if direction == Direction.DOWN:
        return sorted(floors, reverse=True)
    return sorted(floors, key=lambda floor: abs(current_floor - floor))


def get_next_destination_floor(car: CarView) -> Optional[int]:
    """Pick the stop the car should head for next.

    The first queued stop still ahead in the direction of travel wins. When
    every stop is behind the car the run reverses and the first stop of the
    sorted list becomes the new target.
    """

    if not car.destination_floors:
        return None

    ordered = sort_in_direction(car.destination_floors, car.direction, car.current_floor)
    for floor in ordered:
        if _ahead(floor, car.current_floor, car.direction):
            return round_floor(floor)
    return round_floor(ordered[0])


def _ahead(floor: float, current_floor: float, direction: Direction) -> bool:
    if direction == Direction.UP:
        return floor >= current_floor
    if direction == Direction.DOWN:
        return floor <= current_floor
    return False


def round_floor(floor: float) -> int:
    # Halves round toward +inf, unlike round()'s banker's rounding.
    if not math.isfinite(floor):
        return floor
    return math.floor(floor + 0.5)
