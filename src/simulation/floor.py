from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .elevator import Direction
from .passenger import WaitingPassenger


@dataclass(frozen=True)
class Floor:
    """Represents a floor with its up/down hall call lamps."""

    floor_number: float
    has_up_call: bool = False
    has_down_call: bool = False
    waiting_passengers: Tuple[WaitingPassenger, ...] = ()

    def has_call(self) -> bool:
        return bool(self.has_up_call or self.has_down_call)

    def with_call(self, direction: Direction) -> "Floor":
        return replace(
            self,
            has_up_call=True if direction == Direction.UP else self.has_up_call,
            has_down_call=True if direction == Direction.DOWN else self.has_down_call,
        )

    def without_call(self, direction: Direction) -> "Floor":
        return replace(
            self,
            has_up_call=False if direction == Direction.UP else self.has_up_call,
            has_down_call=False if direction == Direction.DOWN else self.has_down_call,
        )

    def to_dict(self) -> dict:
        return {
            "floor_number": self.floor_number,
            "has_up_call": bool(self.has_up_call),
            "has_down_call": bool(self.has_down_call),
            "waiting_passengers": [
                {"from_floor": p.from_floor, "to_floor": p.to_floor} for p in self.waiting_passengers
            ],
        }
