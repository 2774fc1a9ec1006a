"""
Skew-normal distribution family implementation.

The density is twice the normal density times the normal CDF of the scaled
argument; the CDF goes through the closed-form error function approximation.
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
from distview_core.special import normal_cdf, normal_pdf
from distview_core.types import FamilyName, Kind


@parametrization
class _LocationScaleShape(Parametrization):
    """
    Parameters
    ----------
    mu : float
        Location
    sigma : float
        Scale
    alpha : float
        Skewness (shape); zero gives the normal distribution
    """

    mu: float
    sigma: float
    alpha: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0


def configure_skew_normal_family() -> None:
    """
    Configure and register the SkewNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.SKEW_NORMAL):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """f(x) = (2/σ) φ(z) Φ(αz), z = (x-μ)/σ"""
        parameters = cast(_LocationScaleShape, parameters)
        sigma = parameters.sigma
        z = (x - parameters.mu) / sigma
        return (2 / sigma) * normal_pdf(z) * normal_cdf(parameters.alpha * z)

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LocationScaleShape, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        return mu - 4 * sigma, mu + 4 * sigma

    SkewNormal = ParametricFamily(
        name=FamilyName.SKEW_NORMAL,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="mu", label="μ (location)", min=-5, max=5, step=0.1, default=0),
            ParamDef(name="sigma", label="σ (scale)", min=0.1, max=5, step=0.1, default=1),
            ParamDef(name="alpha", label="α (skew)", min=-10, max=10, step=0.5, default=3),
        ),
        parametrization=_LocationScaleShape,
        window=support,
        density=pdf,
        description="μ is location, σ is scale, α controls skewness.",
    )

    ParametricFamilyRegister.register(SkewNormal)
