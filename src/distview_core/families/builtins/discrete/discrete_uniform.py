"""
Discrete uniform distribution family implementation.
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
class _Bounds(Parametrization):
    """
    Parameters
    ----------
    lower : float
        Smallest outcome
    upper : float
        Largest outcome
    """

    lower: float
    upper: float

    @constraint(description="lower <= upper")
    def check_lower_not_above_upper(self) -> bool:
        return self.lower <= self.upper


def configure_discrete_uniform_family() -> None:
    """
    Configure and register the DiscreteUniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return

    def pmf(parameters: Parametrization, k: float) -> float:
        parameters = cast(_Bounds, parameters)
        lower, upper = parameters.lower, parameters.upper
        if k < lower or k > upper:
            return 0.0
        return 1 / (upper - lower + 1)

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_Bounds, parameters)
        return parameters.lower - 0.5, parameters.upper + 0.5

    DiscreteUniform = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        kind=Kind.DISCRETE,
        params=(
            ParamDef(name="lower", label="lower", min=-20, max=1, step=1, default=1),
            ParamDef(name="upper", label="upper", min=1, max=20, step=1, default=6),
        ),
        parametrization=_Bounds,
        window=support,
        density=pmf,
        description="Equal probability for each integer from lower to upper.",
    )

    ParametricFamilyRegister.register(DiscreteUniform)
