from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple

from dispatch.interface import Direction

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .passenger import Passenger


class DoorStatus(str, Enum):
    OPEN = "Open"
    CLOSED = "Closed"


class ElevatorStatus(str, Enum):
    """Display state of a car, set by the engine on every transition."""

    IDLE = "Idle"
    MOVING_UP = "MovingUp"
    MOVING_DOWN = "MovingDown"
    LOADING = "Loading"
    UNLOADING = "Unloading"
    ARRIVED_OPENING = "ArrivedOpening"
    DISABLED = "Disabled"

    @classmethod
    def for_direction(cls, direction: Direction) -> "ElevatorStatus":
        if direction == Direction.UP:
            return cls.MOVING_UP
        if direction == Direction.DOWN:
            return cls.MOVING_DOWN
        return cls.IDLE


@dataclass(frozen=True)
class Elevator:
    """Immutable snapshot of one car; transitions produce new instances."""

    id: str
    current_floor: float = 1
    direction: Direction = Direction.IDLE
    door_status: DoorStatus = DoorStatus.CLOSED
    loading_unloading_remaining_time: float = 0
    movement_remaining_time: float = 0
    destination_floors: Tuple[float, ...] = ()
    passengers: Tuple["Passenger", ...] = ()
    is_disabled: bool = False
    status_message: str = "Idle"
    status: ElevatorStatus = ElevatorStatus.IDLE

    @property
    def doors_open(self) -> bool:
        return self.door_status == DoorStatus.OPEN

    @property
    def is_idle(self) -> bool:
        return self.direction == Direction.IDLE

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "current_floor": self.current_floor,
            "direction": self.direction.value,
            "door_status": self.door_status.value,
            "loading_unloading_remaining_time": self.loading_unloading_remaining_time,
            "movement_remaining_time": self.movement_remaining_time,
            "destination_floors": list(self.destination_floors),
            "passengers": [{"destination_floor": p.destination_floor} for p in self.passengers],
            "is_disabled": self.is_disabled,
            "status_message": self.status_message,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class ElevatorCall:
    """A hall call waiting in the dispatch queue."""

    floor_number: float
    direction: Direction
    timestamp: float = 0

    def age(self, now: float) -> float:
        return now - self.timestamp

    def to_dict(self) -> dict:
        return {
            "floor_number": self.floor_number,
            "direction": self.direction.value,
            "timestamp": self.timestamp,
        }
