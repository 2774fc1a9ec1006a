"""
Logistic distribution family implementation.
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
    mu: float
    s: float

    @constraint(description="s > 0")
    def check_s_positive(self) -> bool:
        return self.s > 0


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """f(x) = z / (s(1+z)²), z = exp(-(x-μ)/s)"""
        parameters = cast(_LocationScale, parameters)
        s = parameters.s
        z = math.exp(-(x - parameters.mu) / s)
        return z / (s * (1 + z) ** 2)

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LocationScale, parameters)
        mu, s = parameters.mu, parameters.s
        return mu - 7 * s, mu + 7 * s

    Logistic = ParametricFamily(
        name=FamilyName.LOGISTIC,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="mu", label="μ (location)", min=-5, max=5, step=0.1, default=0),
            ParamDef(name="s", label="s (scale)", min=0.1, max=5, step=0.1, default=1),
        ),
        parametrization=_LocationScale,
        window=support,
        density=pdf,
        description="μ is location, s is scale.",
    )

    ParametricFamilyRegister.register(Logistic)
