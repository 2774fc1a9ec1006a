"""
Binomial distribution family implementation.

Number of successes in n independent trials with success probability p.
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
from distview_core.special import binom_coeff
from distview_core.types import FamilyName, Kind


@parametrization
class _TrialsProb(Parametrization):
    """
    Parameters
    ----------
    n : float
        Number of trials
    p : float
        Success probability
    """

    n: float
    p: float

    @constraint(description="n >= 0")
    def check_n_non_negative(self) -> bool:
        return self.n >= 0

    @constraint(description="0 <= p <= 1")
    def check_p_probability(self) -> bool:
        return 0 <= self.p <= 1


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    def pmf(parameters: Parametrization, k: float) -> float:
        """P(K = k) = C(n, k) p^k (1-p)^(n-k) for 0 <= k <= n"""
        parameters = cast(_TrialsProb, parameters)
        n, p = parameters.n, parameters.p
        if k < 0 or k > n:
            return 0.0
        return binom_coeff(n, k) * p**k * (1 - p) ** (n - k)

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_TrialsProb, parameters)
        return -0.5, parameters.n + 0.5

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        kind=Kind.DISCRETE,
        params=(
            ParamDef(name="n", label="n (trials)", min=1, max=50, step=1, default=10),
            ParamDef(name="p", label="p (prob)", min=0.01, max=0.99, step=0.01, default=0.5),
        ),
        parametrization=_TrialsProb,
        window=support,
        density=pmf,
        description="n is number of trials, p is success probability.",
    )

    ParametricFamilyRegister.register(Binomial)
