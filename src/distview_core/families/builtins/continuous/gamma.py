"""
Gamma distribution family implementation.

Shape/rate parametrization; the density is assembled in log-space.
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
from distview_core.special import log_gamma
from distview_core.types import FamilyName, Kind


@parametrization
class _ShapeRate(Parametrization):
    """
    Shape-rate parametrization of gamma distribution.

    Parameters
    ----------
    alpha : float
        Shape parameter
    beta : float
        Rate parameter (inverse scale)
    """

    alpha: float
    beta: float

    @constraint(description="alpha > 0")
    def check_alpha_positive(self) -> bool:
        return self.alpha > 0

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        return self.beta > 0


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for gamma distribution.

        f(x) = β^α x^(α-1) exp(-βx) / Γ(α) for x > 0
        """
        parameters = cast(_ShapeRate, parameters)
        if x <= 0:
            return 0.0
        alpha, beta = parameters.alpha, parameters.beta
        return math.exp(
            alpha * math.log(beta) + (alpha - 1) * math.log(x) - beta * x - log_gamma(alpha)
        )

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_ShapeRate, parameters)
        return 0.0, 20 / parameters.beta

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="alpha", label="α (shape)", min=0.1, max=10, step=0.1, default=2),
            ParamDef(name="beta", label="β (rate)", min=0.1, max=5, step=0.1, default=1),
        ),
        parametrization=_ShapeRate,
        window=support,
        density=pdf,
        description="α is the shape, β is the rate (1/scale). Mean = α/β.",
    )

    ParametricFamilyRegister.register(Gamma)
