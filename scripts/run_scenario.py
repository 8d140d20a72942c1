"""CLI for running offline elevator dispatch scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from simulation import Direction, Simulation, SimulationConfig

logger = logging.getLogger(__name__)


def build_simulation(config: Dict) -> Simulation:
    building_cfg = config.get("building", {})
    sim_config = SimulationConfig.from_dict(config.get("config", {}))
    return Simulation(
        config=sim_config,
        number_of_floors=building_cfg.get("number_of_floors"),
        number_of_elevators=building_cfg.get("number_of_elevators"),
        random_seed=config.get("random_seed"),
        random_calls=config.get("random_calls", False),
        start_time=config.get("start_time", 0),
    )


def _apply_scheduled_events(simulation: Simulation, events: Iterable[Dict], tick: int) -> None:
    for event in events:
        if event.get("tick") != tick:
            continue
        kind = event.get("type")
        if kind == "call":
            simulation.submit_call(event["floor_number"], Direction(event.get("direction", "Up")))
        elif kind == "outage":
            simulation.set_elevator_disabled(event["elevator_id"], True)
        elif kind == "restore":
            simulation.set_elevator_disabled(event["elevator_id"], False)
        else:
            logger.warning("Ignoring scenario event with unknown type %r at tick %s", kind, tick)


def run_simulation(simulation: Simulation, config: Dict) -> Dict:
    duration = config.get("duration", 600)
    events = config.get("events", [])
    sample_every = max(1, config.get("sample_every", 10))
    dispatches: List[Dict] = []
    simulation.on_event(
        "dispatch",
        lambda payload: dispatches.extend(
            {"time": payload["time"], **call.to_dict()} for call in payload["calls"]
        ),
    )

    samples: List[Dict] = []
    for _ in range(duration):
        _apply_scheduled_events(simulation, events, simulation.tick_count)
        simulation.step()
        if simulation.tick_count % sample_every == 0:
            samples.append(
                {
                    "tick": simulation.tick_count,
                    "queued_calls": len(simulation.state.elevator_call_queue),
                    "floors": [
                        elevator.current_floor if elevator is not None else None
                        for elevator in simulation.state.elevators
                    ],
                }
            )
    return {"samples": samples, "dispatches": dispatches}


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the final snapshot and samples as JSON",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = json.loads(args.config.read_text())
    simulation = build_simulation(config)
    history = run_simulation(simulation, config)

    results = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "duration": simulation.tick_count,
        "final_state": simulation.snapshot(),
        **history,
    }

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Duration: {results['duration']} ticks ({simulation.current_time / 1000:.1f}s simulated)")
    print(f"Calls dispatched: {len(history['dispatches'])}")
    print(f"Calls still queued: {len(simulation.state.elevator_call_queue)}")
    for elevator in simulation.state.elevators:
        if elevator is None:
            continue
        print(f"  {elevator.id}: floor {elevator.current_floor}, {elevator.status_message}")
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
