"""
Cauchy distribution family implementation.

The tails are heavy enough that no finite window holds almost all of the
mass; the plotting window spans eight scale units on each side.
"""

from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

import math
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
class _LocationScale(Parametrization):
    alpha: float
    beta: float

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        return self.beta > 0


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_LocationScale, parameters)
        beta = parameters.beta
        z = (x - parameters.alpha) / beta
        return 1 / (math.pi * beta * (1 + z * z))

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LocationScale, parameters)
        alpha, beta = parameters.alpha, parameters.beta
        return alpha - 8 * beta, alpha + 8 * beta

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="alpha", label="α (location)", min=-5, max=5, step=0.1, default=0),
            ParamDef(name="beta", label="β (scale)", min=0.1, max=5, step=0.1, default=1),
        ),
        parametrization=_LocationScale,
        window=support,
        density=pdf,
        description="α is location, β is scale. Heavy tails, no mean or variance.",
    )

    ParametricFamilyRegister.register(Cauchy)
