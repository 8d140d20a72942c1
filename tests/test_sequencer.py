from conftest import make_elevator

from dispatch import get_next_destination_floor, sort_in_direction
from simulation import Direction


def test_no_destinations():
    assert get_next_destination_floor(make_elevator(current_floor=5, direction=Direction.UP)) is None


def test_first_destination_ahead_going_up():
    elevator = make_elevator(current_floor=5, direction=Direction.UP, destinations=[3, 7, 9])
    assert get_next_destination_floor(elevator) == 7


def test_all_behind_going_up_reverses_to_lowest():
    elevator = make_elevator(current_floor=5, direction=Direction.UP, destinations=[1, 3])
    assert get_next_destination_floor(elevator) == 1


def test_first_destination_ahead_going_down():
    elevator = make_elevator(current_floor=5, direction=Direction.DOWN, destinations=[3, 7, 1])
    assert get_next_destination_floor(elevator) == 3


def test_all_behind_going_down_reverses_to_highest():
    elevator = make_elevator(current_floor=5, direction=Direction.DOWN, destinations=[7, 9])
    assert get_next_destination_floor(elevator) == 9


def test_current_floor_counts_as_ahead():
    elevator = make_elevator(current_floor=5, direction=Direction.UP, destinations=[8, 5])
    assert get_next_destination_floor(elevator) == 5


def test_idle_picks_closest():
    elevator = make_elevator(current_floor=5, destinations=[9, 4, 2])
    assert get_next_destination_floor(elevator) == 4


def test_idle_equal_distance_keeps_queue_order():
    elevator = make_elevator(current_floor=5, destinations=[7, 3])
    assert get_next_destination_floor(elevator) == 7


def test_fractional_floors_are_rounded_half_up():
    assert get_next_destination_floor(make_elevator(direction=Direction.UP, destinations=[2.5])) == 3
    assert get_next_destination_floor(make_elevator(direction=Direction.UP, destinations=[3.4])) == 3
    assert get_next_destination_floor(make_elevator(current_floor=0, destinations=[-1.5])) == -1


def test_sort_in_direction():
    floors = [4, 9, 1, 6]
    assert sort_in_direction(floors, Direction.UP, 5) == [1, 4, 6, 9]
    assert sort_in_direction(floors, Direction.DOWN, 5) == [9, 6, 4, 1]
    assert sort_in_direction(floors, Direction.IDLE, 5) == [4, 6, 9, 1]
