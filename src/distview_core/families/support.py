from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import NamedTuple


class SupportWindow(NamedTuple):
    """
    Finite plotting window ``[lo, hi]`` of a distribution.

    The window is a heuristic range holding the visually relevant probability
    mass, not the mathematical support. It unpacks as a plain ``(lo, hi)`` pair.
    """

    lo: float
    hi: float

    @property
    def width(self) -> float:
        return self.hi - self.lo

    def contains(self, x: float) -> bool:
        return self.lo <= x <= self.hi

    def integer_points(self) -> range:
        """
        Integer outcomes covered by the window.

        Discrete windows carry a half-unit margin on each side, so the range
        is ``ceil(lo + 0.5) .. floor(hi - 0.5)`` inclusive.
        """
        first = math.ceil(self.lo + 0.5)
        last = math.floor(self.hi - 0.5)
        return range(first, last + 1)


__all__ = ["SupportWindow"]
