"""
Laplace (double exponential) distribution family implementation.
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
    b: float

    @constraint(description="b > 0")
    def check_b_positive(self) -> bool:
        return self.b > 0


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """f(x) = exp(-|x-μ|/b) / (2b)"""
        parameters = cast(_LocationScale, parameters)
        b = parameters.b
        return math.exp(-abs(x - parameters.mu) / b) / (2 * b)

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LocationScale, parameters)
        mu, b = parameters.mu, parameters.b
        return mu - 6 * b, mu + 6 * b

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="mu", label="μ (mean)", min=-5, max=5, step=0.1, default=0),
            ParamDef(name="b", label="b (scale)", min=0.1, max=5, step=0.1, default=1),
        ),
        parametrization=_LocationScale,
        window=support,
        density=pdf,
        description="μ is the mean, b is the scale (diversity).",
    )

    ParametricFamilyRegister.register(Laplace)
