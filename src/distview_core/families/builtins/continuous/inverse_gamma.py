"""
Inverse-gamma distribution family implementation.

Shape/scale parametrization with the density computed in log-space.

Notes
-----
The plotting window is eight times the mean β/(α-1). The mean does not
exist for α <= 1; there the window is forty times the mode β/(α+1).
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
class _ShapeScale(Parametrization):
    """
    Shape-scale parametrization of inverse-gamma distribution.

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


def configure_inverse_gamma_family() -> None:
    """
    Configure and register the InverseGamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.INVERSE_GAMMA):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for inverse-gamma distribution.

        f(x) = β^α / Γ(α) * x^(-α-1) * exp(-β/x) for x > 0
        """
        parameters = cast(_ShapeScale, parameters)
        if x <= 0:
            return 0.0
        alpha, beta = parameters.alpha, parameters.beta
        return math.exp(
            alpha * math.log(beta) - log_gamma(alpha) - (alpha + 1) * math.log(x) - beta / x
        )

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_ShapeScale, parameters)
        alpha, beta = parameters.alpha, parameters.beta
        if alpha > 1:
            return 0.0, beta / (alpha - 1) * 8
        return 0.0, beta / (alpha + 1) * 40

    InverseGamma = ParametricFamily(
        name=FamilyName.INVERSE_GAMMA,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="alpha", label="α (shape)", min=0.5, max=10, step=0.1, default=2),
            ParamDef(name="beta", label="β (scale)", min=0.1, max=10, step=0.1, default=1),
        ),
        parametrization=_ShapeScale,
        window=support,
        density=pdf,
        description="α is shape, β is scale. Support is (0, ∞).",
    )

    ParametricFamilyRegister.register(InverseGamma)
