import pytest

from stackwork.collisions import asteroid_collision, car_fleet, get_collision_times


def test_asteroid_larger_destroys_several():
    assert asteroid_collision([10, 2, -5]) == [10]


def test_asteroid_equal_sizes_both_explode():
    assert asteroid_collision([8, -8]) == []


@pytest.mark.parametrize("asteroids", [[1, 2, 3], [-3, -2, -1], [-4, -1, 2, 7]])
def test_asteroids_that_never_meet_are_unchanged(asteroids):
    assert asteroid_collision(asteroids) == asteroids


@pytest.mark.parametrize(
    "asteroids, expected",
    [
        ([5, 10, -5], [5, 10]),
        ([-2, -1, 1, 2], [-2, -1, 1, 2]),
        ([1, -2, -2, -2], [-2, -2, -2]),
        ([3, 5, -6, 2, -1, 4, -4], [-6, 2]),
        ([6, -6, 7], [7]),
    ],
)
def test_asteroid_result_is_stable_subsequence(asteroids, expected):
    result = asteroid_collision(asteroids)
    assert result == expected
    assert not any(a > 0 and b < 0 for a, b in zip(result, result[1:]))
    remaining = iter(asteroids)
    assert all(any(x == y for y in remaining) for x in result)


def test_asteroid_input_is_not_modified():
    asteroids = [10, 2, -5]
    asteroid_collision(asteroids)
    assert asteroids == [10, 2, -5]


def test_asteroid_accepts_iterator():
    assert asteroid_collision(iter([4, 5])) == [4, 5]


def test_car_fleet_worked_example():
    assert car_fleet(12, [10, 8, 0, 5, 3], [2, 4, 1, 1, 3]) == 3


def test_car_fleet_single_car():
    assert car_fleet(10, [3], [3]) == len([3])


def test_car_fleet_no_cars():
    assert car_fleet(10, [], []) == 0


def test_car_fleet_equal_speeds_never_merge():
    positions = [0, 2, 4, 6]
    assert car_fleet(100, positions, [5] * len(positions)) == len(positions)


def test_car_fleet_fast_car_behind_slow_one_merges():
    assert car_fleet(10, [0, 5], [10, 1]) == car_fleet(10, [5], [1])


def test_car_fleet_does_not_modify_inputs():
    position = [10, 8, 0, 5, 3]
    speed = [2, 4, 1, 1, 3]
    car_fleet(12, position, speed)
    assert position == [10, 8, 0, 5, 3]
    assert speed == [2, 4, 1, 1, 3]


def test_car_fleet_count_bounded_by_cars():
    position = [1, 4, 7, 9]
    speed = [3, 1, 2, 5]
    assert 1 <= car_fleet(20, position, speed) <= len(position)


def test_car_fleet_length_mismatch():
    with pytest.raises(ValueError):
        car_fleet(10, [1, 2], [1])


def test_collision_times_worked_example():
    assert get_collision_times([[1, 2], [2, 1], [4, 3], [7, 2]]) == [1.0, -1.0, 3.0, -1.0]


def test_collision_times_last_car_never_collides():
    cars = [[0, 9], [3, 4], [5, 7], [8, 1]]
    result = get_collision_times(cars)
    assert len(result) == len(cars)
    assert result[-1] == -1.0


def test_collision_times_equal_speeds_never_collide():
    cars = [[0, 3], [2, 3], [5, 3]]
    assert get_collision_times(cars) == [-1.0] * len(cars)


def test_collision_times_slower_behind_never_collides():
    cars = [[0, 1], [2, 2], [5, 3]]
    assert get_collision_times(cars) == [-1.0] * len(cars)


def test_collision_times_are_positive_when_present():
    cars = [[3, 4], [5, 4], [6, 3], [9, 1]]
    result = get_collision_times(cars)
    assert all(t > 0 or t == -1.0 for t in result)


def test_collision_times_empty():
    assert get_collision_times([]) == []