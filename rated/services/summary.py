"""Presentation-neutral helpers for showing averages."""

from __future__ import annotations

from typing import List

CIRCLE_COUNT = 5


def circle_fill(average: float, count: int = CIRCLE_COUNT) -> List[float]:
    """Return how much of each rating circle an average fills.

    Circle `i` is filled by `average - i`, clamped to [0, 1], so an average of
    3.5 reads as three full circles, one half circle and one empty one.
    """

    return [max(0.0, min(1.0, average - index)) for index in range(count)]
