# dungeon/utils/dungeon_math.py
"""
Small numeric helpers used by game systems and the math commands.
"""
import time
from typing import Iterable

from dungeon.config import FIBONACCI_TIME_LIMIT_SECONDS, FUZZY_COMPARE_TOLERANCE, INT32_MAX, INT32_MIN
from dungeon.game.percentage import Percentage

TIMEOUT = "TIMEOUT"

def weighted_average(first: float, second: float, first_contribution: Percentage) -> float:
    """Moves from `first` towards `second` by the given fraction."""
    return first + (second - first) * first_contribution.to_float()

def fuzzy_compare(first: float, second: float, epsilon: float = FUZZY_COMPARE_TOLERANCE) -> int:
    """Returns -1, 0 or 1, treating values within `epsilon` of each other as equal."""
    if first + epsilon < second:
        return -1
    elif first - epsilon > second:
        return 1
    return 0

def fibonacci(number: int, time_limit: float = FIBONACCI_TIME_LIMIT_SECONDS) -> str:
    """
    Finds the n-th element of the fibonacci sequence (1 -> 0, 2 -> 1, 3 -> 1, ...)
    as a decimal string, or TIMEOUT if it cannot be computed within `time_limit` seconds.
    """
    interrupt_time = time.perf_counter() + time_limit
    first, second = 0, 1
    for _ in range(1, number):
        first, second = second, first + second
        if time.perf_counter() >= interrupt_time:
            return TIMEOUT
    return str(first)

def safe_cast_to_int32(value: int) -> int:
    if value < INT32_MIN or value > INT32_MAX:
        raise ValueError(f"{value} does not fit into an integer.")
    return int(value)

def int_sum(integers: Iterable[int]) -> int:
    total = 0
    for integer in integers:
        total += integer
    return total
