from __future__ import annotations

from .cost import calculate_elevator_cost, find_best_elevator
from .interface import CarView, Direction
from .sequencer import get_next_destination_floor, round_floor, sort_in_direction

__all__ = [
    "CarView",
    "Direction",
    "calculate_elevator_cost",
    "find_best_elevator",
    "get_next_destination_floor",
    "round_floor",
    "sort_in_direction",
]
