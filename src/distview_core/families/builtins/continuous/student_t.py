"""
Student's t distribution family implementation.

Location-scale t with ν degrees of freedom. The normalizing constant is the
ratio Γ((ν+1)/2) / Γ(ν/2), taken as a difference of log-gammas.
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
class _LocationScale(Parametrization):
    """
    Location-scale parametrization of Student's t distribution.

    Parameters
    ----------
    nu : float
        Degrees of freedom
    mu : float
        Location
    sigma : float
        Scale
    """

    nu: float
    mu: float
    sigma: float

    @constraint(description="nu > 0")
    def check_nu_positive(self) -> bool:
        return self.nu > 0

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0


def configure_student_t_family() -> None:
    """
    Configure and register the StudentT distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for Student's t distribution.

        f(x) = Γ((ν+1)/2) / (Γ(ν/2) √(νπ) σ) * (1 + z²/ν)^(-(ν+1)/2), z = (x-μ)/σ
        """
        parameters = cast(_LocationScale, parameters)
        nu, sigma = parameters.nu, parameters.sigma
        z = (x - parameters.mu) / sigma
        log_norm = log_gamma((nu + 1) / 2) - log_gamma(nu / 2)
        return (
            math.exp(log_norm)
            / (math.sqrt(nu * math.pi) * sigma)
            * (1 + z * z / nu) ** (-(nu + 1) / 2)
        )

    def support(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LocationScale, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        return mu - 5 * sigma, mu + 5 * sigma

    StudentT = ParametricFamily(
        name=FamilyName.STUDENT_T,
        kind=Kind.CONTINUOUS,
        params=(
            ParamDef(name="nu", label="ν (df)", min=1, max=30, step=0.5, default=5),
            ParamDef(name="mu", label="μ (mean)", min=-5, max=5, step=0.1, default=0),
            ParamDef(name="sigma", label="σ (scale)", min=0.1, max=5, step=0.1, default=1),
        ),
        parametrization=_LocationScale,
        window=support,
        density=pdf,
        description="ν is degrees of freedom, μ is location, σ is scale.",
    )

    ParametricFamilyRegister.register(StudentT)
