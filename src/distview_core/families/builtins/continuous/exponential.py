"""
Exponential distribution family implementation.

Contains the Exponential family in the rate parametrization.
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
from distview_core.types import FamilyName, Kind


@parametrization
class _Rate(Parametrization):
    """
    Rate parametrization of exponential distribution.

    Parameters
    ----------
    lam : float
        Rate parameter (λ > 0)
    """

    lam: float

    @constraint(description="lambda > 0")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.lam > 0


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for exponential distribution.

        f(x) = λ * exp(-λx) for x >= 0, 0 otherwise
        """
        parameters = cast(_Rate, parameters)
        if x < 0:
            return 0.0
        lam = parameters.lam
        return lam * math.exp(-lam * x)

    def support(parameters: Parametrization) -> tuple[float, float]:
        """Six mean lifetimes starting at zero."""
        parameters = cast(_Rate, parameters)
        return 0.0, 6 / parameters.lam

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        kind=Kind.CONTINUOUS,
        params=(ParamDef(name="lam", label="λ (rate)", min=0.1, max=5, step=0.1, default=1),),
        parametrization=_Rate,
        window=support,
        density=pdf,
        description="λ (lam) is the rate. Mean = 1/λ.",
    )

    ParametricFamilyRegister.register(Exponential)
