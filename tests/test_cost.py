import math

from conftest import make_elevator

from dispatch import calculate_elevator_cost, find_best_elevator
from simulation import Direction


class TestCalculateElevatorCost:
    def test_disabled_elevator_is_never_eligible(self):
        for floor, direction in [(1, Direction.IDLE), (5, Direction.UP), (9, Direction.DOWN)]:
            elevator = make_elevator(current_floor=floor, direction=direction, is_disabled=True)
            assert math.isinf(calculate_elevator_cost(elevator, floor, Direction.UP))

    def test_idle_elevator_on_call_floor_is_perfect_match(self):
        elevator = make_elevator(current_floor=4)
        assert calculate_elevator_cost(elevator, 4, Direction.UP) == 0
        assert calculate_elevator_cost(elevator, 4, Direction.DOWN) == 0

    def test_same_direction_heading_up_counts_stops_before_call(self):
        elevator = make_elevator(current_floor=2, direction=Direction.UP, destinations=[3, 6])
        assert calculate_elevator_cost(elevator, 5, Direction.UP) == 3.5

    def test_same_direction_heading_down_counts_stops_above_call(self):
        elevator = make_elevator(current_floor=8, direction=Direction.DOWN, destinations=[6, 2])
        assert calculate_elevator_cost(elevator, 4, Direction.DOWN) == 4.5

    def test_moving_elevator_on_call_floor_same_direction(self):
        elevator = make_elevator(current_floor=5, direction=Direction.UP)
        assert calculate_elevator_cost(elevator, 5, Direction.UP) == 0

    def test_opposite_direction_pays_reversal_penalty(self):
        elevator = make_elevator(current_floor=2, direction=Direction.DOWN, destinations=[1])
        assert calculate_elevator_cost(elevator, 5, Direction.UP) == 3 * 2 + 5

    def test_idle_elevator_off_floor_pays_double_distance(self):
        elevator = make_elevator(current_floor=1)
        assert calculate_elevator_cost(elevator, 4, Direction.UP) == 6

    def test_already_passed_call_floor(self):
        up = make_elevator(current_floor=6, direction=Direction.UP, destinations=[8])
        down = make_elevator(current_floor=3, direction=Direction.DOWN, destinations=[1, 2])
        assert calculate_elevator_cost(up, 4, Direction.UP) == 2 * 2 + 5
        assert calculate_elevator_cost(down, 5, Direction.DOWN) == 2 * 2 + 10


class TestFindBestElevator:
    def test_empty_list(self):
        assert find_best_elevator([], 3, Direction.UP) is None

    def test_all_disabled(self):
        cars = [make_elevator("elevator-1", is_disabled=True), make_elevator("elevator-2", is_disabled=True)]
        assert find_best_elevator(cars, 3, Direction.UP) is None

    def test_lowest_cost_wins(self):
        far = make_elevator("elevator-1", current_floor=1)
        near = make_elevator("elevator-2", current_floor=6)
        assert find_best_elevator([far, near], 7, Direction.UP) is near

    def test_first_elevator_wins_ties(self):
        first = make_elevator("elevator-1", current_floor=2)
        second = make_elevator("elevator-2", current_floor=2)
        assert find_best_elevator([first, second], 5, Direction.DOWN) is first

    def test_disabled_elevator_skipped_even_when_closest(self):
        disabled = make_elevator("elevator-1", current_floor=5, is_disabled=True)
        enabled = make_elevator("elevator-2", current_floor=1)
        assert find_best_elevator([disabled, enabled], 5, Direction.UP) is enabled

    def test_missing_entries_are_skipped(self):
        car = make_elevator("elevator-2", current_floor=3)
        assert find_best_elevator([None, car, None], 3, Direction.UP) is car
