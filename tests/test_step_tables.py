# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for piecewise-constant breakpoint tables."""
import pytest

from spacia.domain.step_tables import StepTable


TABLE = StepTable(bands=((10.0, "a"), (20.0, "b"), (30.0, "c")), fallback="z")


class TestLookup:

    @pytest.mark.parametrize("x,expected", [
        (-1e9, "a"), (9.999, "a"),
        (10.0, "b"), (19.5, "b"),
        (20.0, "c"),
        (30.0, "z"), (1e9, "z"),
    ])
    def test_upper_bounds_are_exclusive(self, x, expected):
        assert TABLE.lookup(x) == expected

    def test_bounds(self):
        assert TABLE.bounds == (10.0, 20.0, 30.0)

    def test_empty_table_always_falls_back(self):
        assert StepTable(bands=(), fallback=7).lookup(123.0) == 7


class TestValidation:

    def test_non_increasing_bounds_rejected(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            StepTable(bands=((10.0, 1), (10.0, 2)), fallback=3)

    def test_decreasing_bounds_rejected(self):
        with pytest.raises(ValueError):
            StepTable(bands=((20.0, 1), (10.0, 2)), fallback=3)
