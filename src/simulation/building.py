from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .display import describe_status
from .elevator import Elevator, ElevatorCall
from .floor import Floor


@dataclass(frozen=True)
class BuildingState:
    """Aggregate root of the simulation.

    Every transition takes one ``BuildingState`` and returns a new one. The
    entity tuples may hold ``None`` for missing entries; transitions carry
    those through untouched.
    """

    number_of_floors: float = 10
    number_of_elevators: float = 4
    elevators: Tuple[Optional[Elevator], ...] = ()
    floors: Tuple[Optional[Floor], ...] = ()
    elevator_call_queue: Tuple[Optional[ElevatorCall], ...] = ()

    def get_elevator(self, elevator_id: str) -> Optional[Elevator]:
        for elevator in self.elevators:
            if elevator is not None and elevator.id == elevator_id:
                return elevator
        return None

    def get_floor(self, floor_number: float) -> Optional[Floor]:
        for floor in self.floors:
            if floor is not None and floor.floor_number == floor_number:
                return floor
        return None

    def has_call_at(self, floor_number: float) -> bool:
        floor = self.get_floor(floor_number)
        return floor is not None and floor.has_call()

    def snapshot(self) -> dict:
        elevators = []
        for elevator in self.elevators:
            if elevator is None:
                elevators.append(None)
                continue
            entry = elevator.to_dict()
            entry["display"] = describe_status(elevator.status)
            elevators.append(entry)
        return {
            "number_of_floors": self.number_of_floors,
            "number_of_elevators": self.number_of_elevators,
            "floors": [floor.to_dict() if floor is not None else None for floor in self.floors],
            "elevators": elevators,
            "elevator_call_queue": [
                call.to_dict() if call is not None else None for call in self.elevator_call_queue
            ],
        }
