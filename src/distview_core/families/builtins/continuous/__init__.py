"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"


from distview_core.families.builtins.continuous.beta import configure_beta_family
from distview_core.families.builtins.continuous.cauchy import configure_cauchy_family
from distview_core.families.builtins.continuous.exponential import configure_exponential_family
from distview_core.families.builtins.continuous.gamma import configure_gamma_family
from distview_core.families.builtins.continuous.half_normal import configure_half_normal_family
from distview_core.families.builtins.continuous.inverse_gamma import (
    configure_inverse_gamma_family,
)
from distview_core.families.builtins.continuous.laplace import configure_laplace_family
from distview_core.families.builtins.continuous.logistic import configure_logistic_family
from distview_core.families.builtins.continuous.lognormal import configure_lognormal_family
from distview_core.families.builtins.continuous.normal import configure_normal_family
from distview_core.families.builtins.continuous.skew_normal import configure_skew_normal_family
from distview_core.families.builtins.continuous.student_t import configure_student_t_family
from distview_core.families.builtins.continuous.triangular import configure_triangular_family
from distview_core.families.builtins.continuous.uniform import configure_uniform_family
from distview_core.families.builtins.continuous.weibull import configure_weibull_family

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
]
