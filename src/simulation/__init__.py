"""Simulation primitives for the elevator dispatch simulator."""

from .building import BuildingState
from .config import DEFAULT_CONFIG, SimulationConfig
from .elevator import Direction, DoorStatus, Elevator, ElevatorCall, ElevatorStatus
from .engine import handle_tick
from .floor import Floor
from .handlers import handle_call_elevator, handle_toggle_elevator_disabled, initialize_building
from .passenger import Passenger, WaitingPassenger, generate_random_passengers
from .simulation import Simulation

__all__ = [
    "BuildingState",
    "DEFAULT_CONFIG",
    "Direction",
    "DoorStatus",
    "Elevator",
    "ElevatorCall",
    "ElevatorStatus",
    "Floor",
    "Passenger",
    "Simulation",
    "SimulationConfig",
    "WaitingPassenger",
    "generate_random_passengers",
    "handle_call_elevator",
    "handle_tick",
    "handle_toggle_elevator_disabled",
    "initialize_building",
]
