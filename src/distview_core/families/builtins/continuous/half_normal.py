"""
Half-normal distribution family implementation.
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
from distview_core.special import SQRT2PI
from distview_core.types import FamilyName, Kind


@parametrization
class _Scale(Parametrization):
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0


def configure_half_normal_family() -> None:
    """
    Configure and register the HalfNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.HALF_NORMAL):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """f(x) = 2/(σ√(2π)) * exp(-x²/(2σ²)) for x >= 0"""
        parameters = cast(_Scale, parameters)
        if x < 0:
            return 0.0
        sigma = parameters.sigma
        return (2 / (sigma * SQRT2PI)) * math.exp(-0.5 * (x / sigma) ** 2)

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_Scale, parameters)
        return 0.0, 4 * parameters.sigma

    HalfNormal = ParametricFamily(
        name=FamilyName.HALF_NORMAL,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="sigma", label="σ (scale)", min=0.1, max=10, step=0.1, default=1),
        ),
        parametrization=_Scale,
        window=support,
        density=pdf,
        description="σ is the scale. Only the positive half of a Normal.",
    )

    ParametricFamilyRegister.register(HalfNormal)
