"""
Log-normal distribution family implementation.
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
class _LogMeanStd(Parametrization):
    """
    Parameters of the underlying normal distribution of log(X).

    Parameters
    ----------
    mu : float
        Mean of log(X)
    sigma : float
        Standard deviation of log(X)
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0


def configure_lognormal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """f(x) = exp(-(ln x - μ)²/(2σ²)) / (xσ√(2π)) for x > 0"""
        parameters = cast(_LogMeanStd, parameters)
        if x <= 0:
            return 0.0
        mu, sigma = parameters.mu, parameters.sigma
        return math.exp(-0.5 * ((math.log(x) - mu) / sigma) ** 2) / (x * sigma * SQRT2PI)

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LogMeanStd, parameters)
        return 0.0, math.exp(parameters.mu + 4 * parameters.sigma)

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="mu", label="μ (log mean)", min=-2, max=3, step=0.1, default=0),
            ParamDef(name="sigma", label="σ (log std)", min=0.1, max=2, step=0.05, default=0.5),
        ),
        parametrization=_LogMeanStd,
        window=support,
        density=pdf,
        description="μ and σ are the mean and std dev of the log. Strictly positive.",
    )

    ParametricFamilyRegister.register(LogNormal)
