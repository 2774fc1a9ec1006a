"""
Normal distribution family implementation.

Contains the Normal family in the mean/standard deviation parametrization.
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
from distview_core.special import normal_pdf
from distview_core.types import FamilyName, Kind


@parametrization
class _MeanStd(Parametrization):
    """
    Standard parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for normal distribution.

        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
        """
        parameters = cast(_MeanStd, parameters)
        return normal_pdf(x, parameters.mu, parameters.sigma)

    def support(parameters: Parametrization) -> tuple[float, float]:
        """Mean plus or minus four standard deviations."""
        parameters = cast(_MeanStd, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        return mu - 4 * sigma, mu + 4 * sigma

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="mu", label="μ (mean)", min=-10, max=10, step=0.1, default=0),
            ParamDef(name="sigma", label="σ (std dev)", min=0.1, max=10, step=0.1, default=1),
        ),
        parametrization=_MeanStd,
        window=support,
        density=pdf,
        description="μ is the mean, σ is the standard deviation.",
    )

    ParametricFamilyRegister.register(Normal)
