"""
Parameter metadata for distribution families.

Each family declares an ordered tuple of :class:`ParamDef` objects. The order
defines the positional layout of parameter vectors: ``vector[i]`` is the value
of ``params[i]``.
"""

from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParamDef:
    """
    Description of a single family parameter.

    Parameters
    ----------
    name : str
        Identifier of the parameter (``"mu"``, ``"sigma"``, ...).
    label : str
        Human-readable label for controls.
    min : float
        Lower end of the slider range.
    max : float
        Upper end of the slider range.
    step : float
        Slider increment.
    default : float
        Initial value.
    """

    name: str
    label: str
    min: float
    max: float
    step: float
    default: float

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Parameter '{self.name}': min must not exceed max")
        if not self.contains(self.default):
            raise ValueError(f"Parameter '{self.name}': default lies outside [min, max]")

    def contains(self, value: float) -> bool:
        """Check whether ``value`` lies in the declared ``[min, max]`` range."""
        return self.min <= value <= self.max

    def grid(self) -> tuple[float, float, float]:
        """Range corners and default, used for sweeping the declared domain."""
        return self.min, self.default, self.max

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = ["ParamDef"]
