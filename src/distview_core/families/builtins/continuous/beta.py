"""
Beta distribution family implementation.

Density on the unit interval, evaluated in log-space so that large shape
parameters neither overflow nor underflow before the final exponentiation.
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
from distview_core.special import log_beta
from distview_core.types import FamilyName, Kind


@parametrization
class _Shapes(Parametrization):
    """
    Shape parametrization of beta distribution.

    Parameters
    ----------
    alpha : float
        First shape parameter
    beta : float
        Second shape parameter
    """

    alpha: float
    beta: float

    @constraint(description="alpha > 0")
    def check_alpha_positive(self) -> bool:
        return self.alpha > 0

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        return self.beta > 0


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for beta distribution.

        f(x) = x^(α-1) (1-x)^(β-1) / B(α, β) on the open interval (0, 1)
        """
        parameters = cast(_Shapes, parameters)
        if x <= 0 or x >= 1:
            return 0.0
        alpha, beta = parameters.alpha, parameters.beta
        return math.exp(
            (alpha - 1) * math.log(x) + (beta - 1) * math.log(1 - x) - log_beta(alpha, beta)
        )

    def support(_: Parametrization) -> tuple[float, float]:
        return 0.0, 1.0

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="alpha", label="α (alpha)", min=0.1, max=10, step=0.1, default=2),
            ParamDef(name="beta", label="β (beta)", min=0.1, max=10, step=0.1, default=5),
        ),
        parametrization=_Shapes,
        window=support,
        density=pdf,
        description="α and β shape the distribution on [0,1]. α=β=1 is Uniform.",
    )

    ParametricFamilyRegister.register(Beta)
