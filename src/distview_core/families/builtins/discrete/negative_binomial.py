"""
Negative binomial distribution family implementation.

Number of failures before the n-th success; evaluated in log-space.
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
class _SuccessesProb(Parametrization):
    """
    Parameters
    ----------
    n : float
        Number of successes
    p : float
        Success probability
    """

    n: float
    p: float

    @constraint(description="n > 0")
    def check_n_positive(self) -> bool:
        return self.n > 0

    @constraint(description="0 < p < 1")
    def check_p_open_interval(self) -> bool:
        return 0 < self.p < 1


def configure_negative_binomial_family() -> None:
    """
    Configure and register the NegativeBinomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NEGATIVE_BINOMIAL):
        return

    def pmf(parameters: Parametrization, k: float) -> float:
        """
        Probability mass function for negative binomial distribution.

        P(K = k) = Γ(k+n) / (Γ(n) k!) * p^n * (1-p)^k for k >= 0
        """
        parameters = cast(_SuccessesProb, parameters)
        if k < 0:
            return 0.0
        n, p = parameters.n, parameters.p
        return math.exp(
            log_gamma(k + n)
            - log_gamma(n)
            - log_gamma(k + 1)
            + n * math.log(p)
            + k * math.log(1 - p)
        )

    def support(parameters: Parametrization) -> tuple[float, float]:
        """Mean plus four standard deviations, rounded up to an integer."""
        parameters = cast(_SuccessesProb, parameters)
        n, p = parameters.n, parameters.p
        mean = n * (1 - p) / p
        std = math.sqrt(n * (1 - p) / (p * p))
        return -0.5, math.ceil(mean + 4 * std) + 0.5

    NegativeBinomial = ParametricFamily(
        name=FamilyName.NEGATIVE_BINOMIAL,
        kind=Kind.DISCRETE,
        params=(
            ParamDef(name="n", label="n (successes)", min=1, max=30, step=1, default=5),
            ParamDef(name="p", label="p (prob)", min=0.01, max=0.99, step=0.01, default=0.5),
        ),
        parametrization=_SuccessesProb,
        window=support,
        density=pmf,
        description="n is number of successes, p is success probability.",
    )

    ParametricFamilyRegister.register(NegativeBinomial)
