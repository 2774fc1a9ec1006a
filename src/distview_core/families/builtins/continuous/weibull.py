"""
Weibull distribution family implementation.

Shape/scale parametrization.
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
class _ShapeScale(Parametrization):
    """
    Shape-scale parametrization of Weibull distribution.

    Parameters
    ----------
    alpha : float
        Shape parameter
    beta : float
        Scale parameter
    """

    alpha: float
    beta: float

    @constraint(description="alpha > 0")
    def check_alpha_positive(self) -> bool:
        return self.alpha > 0

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        return self.beta > 0


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for Weibull distribution.

        f(x) = (α/β) (x/β)^(α-1) exp(-(x/β)^α) for x > 0
        """
        parameters = cast(_ShapeScale, parameters)
        if x <= 0:
            return 0.0
        alpha, beta = parameters.alpha, parameters.beta
        ratio = x / beta
        return (alpha / beta) * ratio ** (alpha - 1) * math.exp(-(ratio**alpha))

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_ShapeScale, parameters)
        return 0.0, 4 * parameters.beta

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="alpha", label="α (shape)", min=0.1, max=10, step=0.1, default=1.5),
            ParamDef(name="beta", label="β (scale)", min=0.1, max=5, step=0.1, default=1),
        ),
        parametrization=_ShapeScale,
        window=support,
        density=pdf,
        description="α is shape, β is scale.",
    )

    ParametricFamilyRegister.register(Weibull)
