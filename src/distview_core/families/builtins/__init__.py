"""
Built-in distribution families for distview.

This package contains implementations of the statistical distribution families
that are available by default, split into continuous and discrete families.
"""

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"


from distview_core.families.builtins.continuous import (
    configure_beta_family,
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_half_normal_family,
    configure_inverse_gamma_family,
    configure_laplace_family,
    configure_logistic_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_skew_normal_family,
    configure_student_t_family,
    configure_triangular_family,
    configure_uniform_family,
    configure_weibull_family,
)
from distview_core.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_discrete_uniform_family,
    configure_geometric_family,
    configure_negative_binomial_family,
    configure_poisson_family,
)

__all__ = [
    "configure_normal_family",
    "configure_beta_family",
    "configure_gamma_family",
    "configure_half_normal_family",
    "configure_exponential_family",
    "configure_uniform_family",
    "configure_student_t_family",
    "configure_lognormal_family",
    "configure_cauchy_family",
    "configure_laplace_family",
    "configure_weibull_family",
    "configure_triangular_family",
    "configure_skew_normal_family",
    "configure_inverse_gamma_family",
    "configure_logistic_family",
    "configure_binomial_family",
    "configure_poisson_family",
    "configure_negative_binomial_family",
    "configure_geometric_family",
    "configure_discrete_uniform_family",
    "configure_bernoulli_family",
]
