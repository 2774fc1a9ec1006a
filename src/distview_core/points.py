"""
Point sampler
=============

Turns a family and a parameter vector into an x-ascending sequence of
``(x, y)`` samples ready to be handed to a chart.
"""

from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

import operator
from typing import TYPE_CHECKING, cast

import numpy as np

from distview_core.types import Kind, NumericArray, SamplePoint

if TYPE_CHECKING:
    from distview_core.families.parametric_family import ParametricFamily
    from distview_core.types import ParameterVector

DEFAULT_NUM_POINTS = 300
"""Number of grid intervals for continuous families."""

X_DECIMALS = 6
"""Decimal places kept in emitted abscissae of continuous families."""

MAX_DISCRETE_OUTCOMES = 100_000
"""Largest number of integer outcomes a discrete window may enumerate."""


def compute_arrays(
    family: ParametricFamily,
    vector: ParameterVector,
    num_points: int = DEFAULT_NUM_POINTS,
) -> tuple[NumericArray, NumericArray]:
    """
    Sample a family over its support window.

    Parameters
    ----------
    family : ParametricFamily
        Family descriptor.
    vector : ParameterVector
        Ordered parameter values.
    num_points : int, default=300
        Number of grid intervals for continuous families; ignored for
        discrete families. Must be an integer.

    Returns
    -------
    tuple[NumericArray, NumericArray]
        Abscissae and densities, x-ascending. Continuous families yield
        ``num_points + 1`` equally spaced samples with ``x`` rounded to six
        decimals; discrete families yield one sample per integer outcome in
        the window. Non-finite densities are replaced by ``0``.

    Raises
    ------
    TypeError
        If ``num_points`` is not an integer.
    ValueError
        If ``num_points < 1``, the vector does not match the family, or a
        discrete window spans more than :data:`MAX_DISCRETE_OUTCOMES`
        outcomes.
    """
    num_points = operator.index(num_points)
    if num_points < 1:
        raise ValueError(f"num_points must be a positive integer, got {num_points}")

    window = family.support(vector)

    if family.kind is Kind.DISCRETE:
        outcomes = window.integer_points()
        count = max(0, outcomes.stop - outcomes.start)
        if count > MAX_DISCRETE_OUTCOMES:
            raise ValueError(
                f"{family.name}: window {tuple(window)} spans {count} outcomes, "
                f"more than {MAX_DISCRETE_OUTCOMES}"
            )
        xs = np.fromiter(outcomes, dtype=float, count=count)
        ys = np.fromiter((family.pdf(k, vector) for k in xs), dtype=float, count=xs.size)
    else:
        step = window.width / num_points
        grid = window.lo + np.arange(num_points + 1) * step
        ys = np.fromiter((family.pdf(x, vector) for x in grid), dtype=float, count=grid.size)
        xs = np.round(grid, X_DECIMALS)

    ys = np.where(np.isfinite(ys), ys, 0.0)
    return cast(NumericArray, xs), cast(NumericArray, ys)


def compute_points(
    family: ParametricFamily,
    vector: ParameterVector,
    num_points: int = DEFAULT_NUM_POINTS,
) -> list[SamplePoint]:
    """
    Chart-ready samples of a family's density or mass function.

    Same sampling as :func:`compute_arrays`, returned as a list of
    :class:`~distview_core.types.SamplePoint`.
    """
    xs, ys = compute_arrays(family, vector, num_points)
    return [SamplePoint(float(x), float(y)) for x, y in zip(xs, ys, strict=True)]


__all__ = [
    "DEFAULT_NUM_POINTS",
    "MAX_DISCRETE_OUTCOMES",
    "compute_arrays",
    "compute_points",
]
