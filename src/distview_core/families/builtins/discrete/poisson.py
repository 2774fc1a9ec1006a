"""
Poisson distribution family implementation.

The mass function is evaluated in log-space; k! would overflow long
before μ^k e^(-μ) / k! becomes negligible.
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
class _Rate(Parametrization):
    mu: float

    @constraint(description="mu > 0")
    def check_mu_positive(self) -> bool:
        return self.mu > 0


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    def pmf(parameters: Parametrization, k: float) -> float:
        """P(K = k) = exp(k ln μ - μ - ln k!)"""
        parameters = cast(_Rate, parameters)
        if k < 0:
            return 0.0
        mu = parameters.mu
        return math.exp(k * math.log(mu) - mu - log_gamma(k + 1))

    def support(parameters: Parametrization) -> tuple[float, float]:
        """At least 0..20, otherwise five standard deviations above the mean."""
        parameters = cast(_Rate, parameters)
        mu = parameters.mu
        return -0.5, max(20.0, mu + 5 * math.sqrt(mu)) + 0.5

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        kind=Kind.DISCRETE,
        params=(ParamDef(name="mu", label="μ (rate)", min=0.5, max=30, step=0.5, default=5),),
        parametrization=_Rate,
        window=support,
        density=pmf,
        description="μ is the expected number of events (mean = variance = μ).",
    )

    ParametricFamilyRegister.register(Poisson)
