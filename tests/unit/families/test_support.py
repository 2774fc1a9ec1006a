from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from distview_core.families.support import SupportWindow


class TestSupportWindow:
    def test_unpacks_as_pair(self):
        lo, hi = SupportWindow(-4.0, 4.0)
        assert (lo, hi) == (-4.0, 4.0)
        assert SupportWindow(-4.0, 4.0) == (-4.0, 4.0)

    def test_width_and_contains(self):
        window = SupportWindow(0.0, 2.5)
        assert window.width == 2.5
        assert window.contains(0.0)
        assert window.contains(2.5)
        assert not window.contains(-0.1)

    @pytest.mark.parametrize(
        "window, expected",
        [
            (SupportWindow(-0.5, 10.5), list(range(0, 11))),
            (SupportWindow(0.5, 20.5), list(range(1, 21))),
            (SupportWindow(-0.5, 1.5), [0, 1]),
            (SupportWindow(-20.5, 0.5), list(range(-20, 1))),
            (SupportWindow(0.0, 0.0), []),
            (SupportWindow(0.2, 3.7), [1, 2, 3]),
        ],
        ids=["binomial", "geometric", "bernoulli", "negative", "empty", "fractional"],
    )
    def test_integer_points(self, window, expected):
        assert list(window.integer_points()) == expected
