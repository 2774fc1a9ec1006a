"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout distview core.
"""

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from enum import StrEnum
from typing import Any, NamedTuple, TypeAlias

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution (probability mass function).
    CONTINUOUS : str
        Continuous probability distribution (probability density function).
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

ParameterVector: TypeAlias = Sequence[float]
"""Ordered parameter values, positionally aligned with a family's ``params``."""


class SamplePoint(NamedTuple):
    """
    A single chart-ready sample of a density or mass function.

    Parameters
    ----------
    x : float
        Abscissa (point or integer outcome).
    y : float
        Density or probability mass at ``x``.
    """

    x: float
    y: float


class FamilyName(StrEnum):
    # Continuous
    NORMAL = "Normal"
    BETA = "Beta"
    GAMMA = "Gamma"
    HALF_NORMAL = "HalfNormal"
    EXPONENTIAL = "Exponential"
    UNIFORM = "Uniform"
    STUDENT_T = "StudentT"
    LOG_NORMAL = "LogNormal"
    CAUCHY = "Cauchy"
    LAPLACE = "Laplace"
    WEIBULL = "Weibull"
    TRIANGULAR = "Triangular"
    SKEW_NORMAL = "SkewNormal"
    INVERSE_GAMMA = "InverseGamma"
    LOGISTIC = "Logistic"
    # Discrete
    BINOMIAL = "Binomial"
    POISSON = "Poisson"
    NEGATIVE_BINOMIAL = "NegativeBinomial"
    GEOMETRIC = "Geometric"
    DISCRETE_UNIFORM = "DiscreteUniform"
    BERNOULLI = "Bernoulli"


__all__ = [
    "Kind",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "ParameterVector",
    "SamplePoint",
    "FamilyName",
]
