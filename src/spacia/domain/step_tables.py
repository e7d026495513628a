# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Ordered breakpoint tables for piecewise-constant heuristics.

Each band is (exclusive_upper_bound, value); inputs at or above the last
bound take the table's fallback value.
"""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StepTable(Generic[T]):
    """Piecewise-constant function over sorted breakpoints.

    bands: ((upper_bound, value), ...) with strictly increasing bounds.
    fallback: value for inputs >= the last upper bound.
    """
    bands: tuple[tuple[float, T], ...]
    fallback: T

    def __post_init__(self) -> None:
        bounds = [b for b, _ in self.bands]
        if any(hi <= lo for lo, hi in zip(bounds, bounds[1:])):
            raise ValueError(f"Step table bounds must be strictly increasing: {bounds}")

    @property
    def bounds(self) -> tuple[float, ...]:
        return tuple(b for b, _ in self.bands)

    def lookup(self, x: float) -> T:
        """Value of the first band whose upper bound exceeds x."""
        idx = bisect_right(self.bounds, x)
        if idx >= len(self.bands):
            return self.fallback
        return self.bands[idx][1]
