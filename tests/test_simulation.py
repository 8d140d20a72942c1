from simulation import Direction, ElevatorStatus, Simulation, SimulationConfig


def make_simulation(**kwargs) -> Simulation:
    kwargs.setdefault("number_of_floors", 6)
    kwargs.setdefault("number_of_elevators", 2)
    kwargs.setdefault("random_seed", 1)
    kwargs.setdefault("start_time", 0)
    return Simulation(**kwargs)


class TestSimulation:
    def test_builds_building_from_config(self):
        sim = Simulation(config=SimulationConfig(number_of_floors=7, number_of_elevators=3), start_time=0)
        assert len(sim.state.floors) == 7
        assert [e.id for e in sim.state.elevators] == ["elevator-1", "elevator-2", "elevator-3"]

    def test_clock_advances_by_tick_interval(self):
        sim = make_simulation()
        ticks = []
        sim.on_event("tick", ticks.append)
        sim.run(5)
        assert sim.tick_count == 5
        assert sim.current_time == 500
        assert ticks[-1] == {"time": 500, "tick": 5}

    def test_call_is_dispatched_once_it_has_aged(self):
        sim = make_simulation()
        calls, dispatches = [], []
        sim.on_event("call", calls.append)
        sim.on_event("dispatch", dispatches.append)

        sim.submit_call(4, Direction.UP)
        assert calls == [{"time": 0, "floor_number": 4, "direction": Direction.UP}]

        sim.run(20)
        assert dispatches == []
        sim.step()
        assert len(dispatches) == 1
        assert dispatches[0]["time"] == 2000
        assert dispatches[0]["calls"][0].floor_number == 4
        assert sim.state.elevator_call_queue == ()

    def test_disable_emits_availability_and_shows_in_snapshot(self):
        sim = make_simulation()
        events = []
        sim.on_event("availability", events.append)
        sim.set_elevator_disabled("elevator-2", True)

        assert events == [{"time": 0, "elevator_id": "elevator-2", "is_disabled": True}]
        snapshot = sim.snapshot()
        assert snapshot["elevators"][1]["is_disabled"] is True
        assert snapshot["elevators"][1]["status"] == ElevatorStatus.DISABLED.value
        assert snapshot["elevators"][1]["display"]["label"] == "Disabled"

        sim.set_elevator_disabled("elevator-2", False)
        assert sim.state.elevators[1].status == ElevatorStatus.IDLE

    def test_initialize_resizes_building(self):
        sim = make_simulation()
        sim.submit_call(3, Direction.DOWN)
        sim.initialize(number_of_floors=12, number_of_elevators=1)
        assert len(sim.state.floors) == 12
        assert len(sim.state.elevators) == 1
        assert len(sim.state.elevator_call_queue) == 1

    def test_snapshot_includes_clock(self):
        sim = make_simulation()
        sim.run(3)
        snapshot = sim.snapshot()
        assert snapshot["time"] == 300
        assert snapshot["tick"] == 3
        assert snapshot["elevators"][0]["display"] == {
            "label": "Idle",
            "icon": "💤",
            "color": "#6c757d",
            "css_class": "idle",
        }


class TestRandomCalls:
    def test_calls_arrive_on_schedule(self):
        config = SimulationConfig(random_call_interval_min=1000, random_call_interval_max=1000)
        sim = make_simulation(config=config, random_calls=True)
        calls = []
        sim.on_event("call", calls.append)

        sim.run(10)
        assert calls == []
        sim.run(21)
        assert [call["time"] for call in calls] == [1000, 2000, 3000]
        for call in calls:
            assert 1 <= call["floor_number"] <= 6

    def test_disabled_by_default(self):
        sim = make_simulation()
        sim.run(500)
        assert sim.state.elevator_call_queue == ()

    def test_same_seed_same_history(self):
        config = SimulationConfig(random_call_interval_min=500, random_call_interval_max=4000)

        def run():
            sim = make_simulation(config=config, random_calls=True, random_seed=9)
            sim.run(1500)
            return sim.snapshot()

        assert run() == run()
