"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families. Their
mass functions receive outcomes already rounded to integers.
"""

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"


from distview_core.families.builtins.discrete.bernoulli import configure_bernoulli_family
from distview_core.families.builtins.discrete.binomial import configure_binomial_family
from distview_core.families.builtins.discrete.discrete_uniform import (
    configure_discrete_uniform_family,
)
from distview_core.families.builtins.discrete.geometric import configure_geometric_family
from distview_core.families.builtins.discrete.negative_binomial import (
    configure_negative_binomial_family,
)
from distview_core.families.builtins.discrete.poisson import configure_poisson_family

__all__ = [
    "configure_binomial_family",
    "configure_poisson_family",
    "configure_negative_binomial_family",
    "configure_geometric_family",
    "configure_discrete_uniform_family",
    "configure_bernoulli_family",
]
