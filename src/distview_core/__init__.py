"""
distview core
=============

Evaluation engine for plotting probability distributions: special-function
approximations, a catalog of 21 continuous and discrete families, and a point
sampler producing chart-ready density and mass curves.
"""

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .families import *
from .families import __all__ as _family_all
from .points import *
from .points import __all__ as _points_all
from .summary import *
from .summary import __all__ as _summary_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("distview-core")
__all__ = [
    "__version__",
    *_family_all,
    *_points_all,
    *_summary_all,
    *_types_all,
]

del _family_all
del _points_all
del _summary_all
del _types_all
