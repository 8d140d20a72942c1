from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

from .config import SimulationConfig
from .elevator import Direction


@dataclass(frozen=True)
class Passenger:
    """A rider inside an elevator car."""

    destination_floor: float


@dataclass(frozen=True)
class WaitingPassenger:
    """A rider waiting on a floor."""

    from_floor: float
    to_floor: float


def generate_random_passengers(
    current_floor: float, number_of_floors: float, rng: random.Random
) -> List[Passenger]:
    """Return 1-3 boarding passengers bound for floors other than ``current_floor``.

    Destinations are drawn uniformly from ``1..number_of_floors`` and redrawn
    while they match the current floor. Buildings with fewer than two whole
    floors cannot produce such a destination and yield no passengers.
    """

    top_floor = int(number_of_floors)
    if top_floor < 2:
        return []
    count = rng.randint(1, 3)
    passengers: List[Passenger] = []
    for _ in range(count):
        destination = current_floor
        while destination == current_floor:
            destination = rng.randint(1, top_floor)
        passengers.append(Passenger(destination_floor=destination))
    return passengers


def generate_random_call(number_of_floors: float, rng: random.Random) -> Tuple[int, Direction]:
    """Pick a floor and a direction for a spontaneous hall call.

    The lobby can only call up and the top floor can only call down.
    """

    top_floor = max(1, int(number_of_floors))
    floor = rng.randint(1, top_floor)
    direction = Direction.UP if rng.random() > 0.5 else Direction.DOWN
    if floor == 1:
        direction = Direction.UP
    elif floor == top_floor:
        direction = Direction.DOWN
    return floor, direction


def next_random_call_delay(rng: random.Random, config: SimulationConfig) -> float:
    return rng.uniform(config.random_call_interval_min, config.random_call_interval_max)
