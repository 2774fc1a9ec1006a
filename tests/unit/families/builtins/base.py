"""
Common fixtures and utilities for built-in family tests.
"""

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np

from distview_core.families.configuration import configure_families_register
from distview_core.families.parametric_family import ParametricFamily


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def family(name: str) -> ParametricFamily:
        return configure_families_register().get(name)

    @staticmethod
    def evaluate(family: ParametricFamily, xs: Any, vector: Any) -> np.ndarray[Any, Any]:
        return np.array([family.pdf(float(x), vector) for x in xs])

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))
