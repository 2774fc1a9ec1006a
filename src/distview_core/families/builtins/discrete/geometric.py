"""
Geometric distribution family implementation.

Counts trials up to and including the first success, so the outcomes start at one.
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
from distview_core.types import FamilyName, Kind


@parametrization
class _Prob(Parametrization):
    p: float

    @constraint(description="0 < p <= 1")
    def check_p_probability(self) -> bool:
        return 0 < self.p <= 1


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    def pmf(parameters: Parametrization, k: float) -> float:
        parameters = cast(_Prob, parameters)
        if k < 1:
            return 0.0
        p = parameters.p
        return p * (1 - p) ** (k - 1)

    def support(_: Parametrization) -> tuple[float, float]:
        return 0.5, 20.5

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        kind=Kind.DISCRETE,
        params=(
            ParamDef(name="p", label="p (prob)", min=0.01, max=0.99, step=0.01, default=0.3),
        ),
        parametrization=_Prob,
        window=support,
        density=pmf,
        description="p is the success probability. Counts trials until first success.",
    )

    ParametricFamilyRegister.register(Geometric)
