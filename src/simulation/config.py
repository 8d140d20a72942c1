from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

TICK_INTERVAL = 100
FLOOR_MOVEMENT_TIME = 10_000
LOAD_UNLOAD_TIME = 10_000
MAX_PASSENGERS = 8
RANDOM_CALL_INTERVAL_MIN = 10_000
RANDOM_CALL_INTERVAL_MAX = 30_000
CALL_PROCESSING_DELAY = 2_000

ENV_PREFIX = "ELEVATOR_SIM_"


@dataclass(frozen=True)
class SimulationConfig:
    """Timing and capacity constants shared by the engine and its drivers.

    All durations are milliseconds of simulated time.
    """

    tick_interval: int = TICK_INTERVAL
    floor_movement_time: int = FLOOR_MOVEMENT_TIME
    load_unload_time: int = LOAD_UNLOAD_TIME
    max_passengers: int = MAX_PASSENGERS
    random_call_interval_min: int = RANDOM_CALL_INTERVAL_MIN
    random_call_interval_max: int = RANDOM_CALL_INTERVAL_MAX
    call_processing_delay: int = CALL_PROCESSING_DELAY
    number_of_floors: int = 10
    number_of_elevators: int = 4

    def validate(self) -> None:
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        for name in ("floor_movement_time", "load_unload_time", "call_processing_delay"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.max_passengers < 0:
            raise ValueError("max_passengers cannot be negative")
        if self.random_call_interval_min < 0:
            raise ValueError("random_call_interval_min cannot be negative")
        if self.random_call_interval_min > self.random_call_interval_max:
            raise ValueError("random_call_interval_min must not exceed random_call_interval_max")

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        values = {key: _as_int(key, value) for key, value in data.items()}
        cfg = cls(**values)
        cfg.validate()
        return cfg

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SimulationConfig":
        """Build a config from ``ELEVATOR_SIM_<FIELD>`` variables, e.g. ``ELEVATOR_SIM_TICK_INTERVAL``."""
        environ = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is not None and raw.strip():
                values[f.name] = raw.strip()
        return cls.from_dict(values)


def _as_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


DEFAULT_CONFIG = SimulationConfig()
