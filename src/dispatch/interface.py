from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence


class Direction(str, Enum):
    """Travel direction of a car, or the requested direction of a hall call."""

    UP = "Up"
    DOWN = "Down"
    IDLE = "Idle"


class CarView(Protocol):
    """The part of an elevator that dispatch decisions look at."""

    @property
    def id(self) -> str: ...

    @property
    def current_floor(self) -> float: ...

    @property
    def direction(self) -> Direction: ...

    @property
    def destination_floors(self) -> Sequence[float]: ...

    @property
    def is_disabled(self) -> bool: ...
