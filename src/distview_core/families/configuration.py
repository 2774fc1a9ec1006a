"""
Distribution Families Configuration
====================================

This module registers the built-in distribution families in catalog order:

- continuous: Normal, Beta, Gamma, HalfNormal, Exponential, Uniform, StudentT,
  LogNormal, Cauchy, Laplace, Weibull, Triangular, SkewNormal, InverseGamma,
  Logistic;
- discrete: Binomial, Poisson, NegativeBinomial, Geometric, DiscreteUniform,
  Bernoulli.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration order is the order in which selectors list the families.
- Descriptors are immutable once registered.
"""

from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from distview_core.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_binomial_family,
    configure_cauchy_family,
    configure_discrete_uniform_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_half_normal_family,
    configure_inverse_gamma_family,
    configure_laplace_family,
    configure_logistic_family,
    configure_lognormal_family,
    configure_negative_binomial_family,
    configure_normal_family,
    configure_poisson_family,
    configure_skew_normal_family,
    configure_student_t_family,
    configure_triangular_family,
    configure_uniform_family,
    configure_weibull_family,
)
from distview_core.families.registry import ParametricFamilyRegister

_CATALOG = (
    configure_normal_family,
    configure_beta_family,
    configure_gamma_family,
    configure_half_normal_family,
    configure_exponential_family,
    configure_uniform_family,
    configure_student_t_family,
    configure_lognormal_family,
    configure_cauchy_family,
    configure_laplace_family,
    configure_weibull_family,
    configure_triangular_family,
    configure_skew_normal_family,
    configure_inverse_gamma_family,
    configure_logistic_family,
    configure_binomial_family,
    configure_poisson_family,
    configure_negative_binomial_family,
    configure_geometric_family,
    configure_discrete_uniform_family,
    configure_bernoulli_family,
)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    It should be called during application startup to make distributions
    available; repeated calls return the same registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of distribution families.
    """
    for configure in _CATALOG:
        configure()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
