"""
Uniform distribution family implementation.

Contains the continuous Uniform family given by its lower and upper bounds.
"""

from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

from distview_core.families.parameters import ParamDef
from distview_core.families.parametric_family import ParametricFamily
from distview_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distview_core.families.registry import ParametricFamilyRegister
from distview_core.types import FamilyName, Kind


@parametrization
class _Standard(Parametrization):
    """
    Standard parametrization of uniform distribution.

    Parameters
    ----------
    lower : float
        Lower bound of the distribution
    upper : float
        Upper bound of the distribution
    """

    lower: float
    upper: float

    @constraint(description="lower < upper")
    def check_lower_less_than_upper(self) -> bool:
        """Check that lower bound is less than upper bound."""
        return self.lower < self.upper


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.UNIFORM):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for uniform distribution.

        f(x) = 1/(upper - lower) on [lower, upper], 0 elsewhere
        """
        parameters = cast(_Standard, parameters)
        lower, upper = parameters.lower, parameters.upper
        if lower <= x <= upper:
            return 1 / (upper - lower)
        return 0.0

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_Standard, parameters)
        return parameters.lower - 0.5, parameters.upper + 0.5

    Uniform = ParametricFamily(
        name=FamilyName.UNIFORM,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="lower", label="lower", min=-10, max=9, step=0.5, default=0),
            ParamDef(name="upper", label="upper", min=-9, max=10, step=0.5, default=1),
        ),
        parametrization=_Standard,
        window=support,
        density=pdf,
        description="Constant density between lower and upper bounds.",
    )

    ParametricFamilyRegister.register(Uniform)
