"""Collisions between things moving along one line: asteroids and cars."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after every collision.

    The sign of a value gives its direction: positive moves right, negative
    moves left. The absolute value gives its size. When two meet, the smaller
    one explodes; equal sizes both explode. Asteroids moving the same way
    never meet.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        alive = True
        while alive and survivors and survivors[-1] > 0 and asteroid < 0:
            balance = survivors[-1] + asteroid
            if balance <= 0:
                survivors.pop()
            if balance >= 0:
                alive = False
        if alive and asteroid != 0:
            survivors.append(asteroid)
    return survivors


def _arrival_time(target: int, position: int, speed: int) -> float:
    distance = target - position
    if speed == 0:
        return math.inf if distance > 0 else math.nan
    return distance / speed


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Return how many fleets of cars arrive at ``target``.

    Cars drive toward ``target`` on one lane and cannot pass each other; a car
    that catches up with a slower one joins it as a fleet. Where several cars
    share a position, the speed given last for that position applies to all.

    Raises ValueError if ``position`` and ``speed`` differ in length.
    """
    if len(position) != len(speed):
        raise ValueError("position and speed must have the same length")
    speed_at = dict(zip(position, speed))
    times = [_arrival_time(target, p, speed_at[p]) for p in sorted(position)]

    fleets: list[float] = []
    for time in times:
        while fleets and time >= fleets[-1]:
            fleets.pop()
        fleets.append(time)
    return len(fleets)


def get_collision_times(cars: Sequence[Sequence[int]]) -> list[float]:
    """Return when each car first hits the car ahead of it, or -1.0 if never.

    Each car is ``[position, speed]`` and cars are listed in order of
    increasing position. Colliding cars merge and move on at the speed of the
    slower one.
    """
    times = [-1.0] * len(cars)
    ahead: list[int] = []
    for i in reversed(range(len(cars))):
        position, speed = cars[i][0], cars[i][1]
        while ahead and speed <= cars[ahead[-1]][1]:
            ahead.pop()
        while ahead:
            front = ahead[-1]
            front_position, front_speed = cars[front][0], cars[front][1]
            meet = (front_position - position) / (speed - front_speed)
            if times[front] == -1 or meet <= times[front]:
                times[i] = meet
                break
            ahead.pop()
        ahead.append(i)
    return times