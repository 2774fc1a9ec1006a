"""
Curve summaries
===============

Quantities the presentation layer reads off a sampled curve: the highest
sample (drawn as the mode marker) and the probability mass the samples cover.
"""

from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, NamedTuple

import numpy as np
from scipy.integrate import trapezoid

from distview_core.types import Kind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from distview_core.families.parametric_family import ParametricFamily
    from distview_core.types import SamplePoint


class Peak(NamedTuple):
    x: float
    y: float


def peak(points: Sequence[SamplePoint]) -> Peak | None:
    """
    Highest sample of a curve.

    Returns
    -------
    Peak or None
        The first sample attaining the maximum ``y``; ``None`` for an empty
        sequence.
    """
    if not points:
        return None
    ys = np.fromiter((p.y for p in points), dtype=float, count=len(points))
    best = points[int(np.argmax(ys))]
    return Peak(float(best.x), float(best.y))


def total_probability(family: ParametricFamily, points: Sequence[SamplePoint]) -> float:
    """
    Probability mass covered by the samples.

    Continuous curves are integrated with the trapezoidal rule; discrete
    masses are summed.
    """
    if not points:
        return 0.0
    xs = np.fromiter((p.x for p in points), dtype=float, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=float, count=len(points))
    if family.kind is Kind.DISCRETE:
        return float(ys.sum())
    return float(trapezoid(ys, xs))


__all__ = ["Peak", "peak", "total_probability"]
