"""
Distribution families.

This package provides the catalog of built-in distribution families: parameter
metadata, named parametrizations with constraints, support windows, the
family descriptor and the global registry.
"""

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"


from .configuration import configure_families_register, reset_families_register
from .parameters import ParamDef
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister
from .support import SupportWindow

__all__ = [
    "ParamDef",
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "SupportWindow",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
]
