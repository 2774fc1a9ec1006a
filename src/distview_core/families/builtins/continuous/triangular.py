"""
Triangular distribution family implementation.

Piecewise linear density rising from lower to the mode c and falling
back to zero at upper.
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
class _LowerModeUpper(Parametrization):
    """
    Parameters
    ----------
    lower : float
        Left end of the support
    c : float
        Mode
    upper : float
        Right end of the support
    """

    lower: float
    c: float
    upper: float

    @constraint(description="lower < upper")
    def check_lower_less_than_upper(self) -> bool:
        return self.lower < self.upper

    @constraint(description="lower <= c <= upper")
    def check_mode_inside(self) -> bool:
        return self.lower <= self.c <= self.upper


def configure_triangular_family() -> None:
    """
    Configure and register the Triangular distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.TRIANGULAR):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_LowerModeUpper, parameters)
        lower, c, upper = parameters.lower, parameters.c, parameters.upper
        if x < lower or x > upper:
            return 0.0
        if x < c:
            return 2 * (x - lower) / ((upper - lower) * (c - lower))
        if x == c:
            return 2 / (upper - lower)
        return 2 * (upper - x) / ((upper - lower) * (upper - c))

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LowerModeUpper, parameters)
        return parameters.lower - 0.2, parameters.upper + 0.2

    Triangular = ParametricFamily(
        name=FamilyName.TRIANGULAR,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="lower", label="lower", min=-10, max=5, step=0.5, default=0),
            ParamDef(name="c", label="c (mode)", min=-9, max=9, step=0.5, default=0.5),
            ParamDef(name="upper", label="upper", min=-5, max=10, step=0.5, default=1),
        ),
        parametrization=_LowerModeUpper,
        window=support,
        density=pdf,
        description="lower is min, c is mode, upper is max.",
    )

    ParametricFamilyRegister.register(Triangular)
