"""
Distribution family descriptors.

This module contains the descriptor every built-in family is an instance of:
parameter metadata, a support-window function and a density/mass function,
bound together in one immutable table entry. Families are not subclassed;
each one is a :class:`ParametricFamily` value holding its own pure functions.
"""

from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

from distview_core.families.support import SupportWindow
from distview_core.types import Kind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any, TypeAlias

    from distview_core.families.parameters import ParamDef
    from distview_core.families.parametrizations import Parametrization
    from distview_core.types import ParameterVector

    WindowFunc: TypeAlias = Callable[[Any], tuple[float, float]]
    DensityFunc: TypeAlias = Callable[[Any, float], float]


_DEGENERATE_WINDOW = SupportWindow(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class ParametricFamily:
    """
    Immutable descriptor of a distribution family.

    Parameters
    ----------
    name : str
        Unique family identifier.
    kind : Kind
        Continuous (density) or discrete (mass function).
    params : tuple[ParamDef, ...]
        Ordered parameter metadata; defines the parameter vector layout.
    parametrization : type[Parametrization]
        Named view of the parameter vector with the family's constraints.
        Its fields must match ``params`` one to one.
    window : Callable[[Parametrization], tuple[float, float]]
        Heuristic plotting window for given parameters.
    density : Callable[[Parametrization, float], float]
        Density (continuous) or mass (discrete) formula. Discrete families
        receive the outcome already rounded to an integer.
    description : str
        Short human-readable description of the parameters.
    """

    name: str
    kind: Kind
    params: tuple[ParamDef, ...]
    parametrization: type[Parametrization]
    window: WindowFunc
    density: DensityFunc
    description: str

    def __post_init__(self) -> None:
        expected = self.parametrization.field_names()
        if self.param_names != expected:
            raise ValueError(
                f"Family '{self.name}': params {self.param_names} "
                f"do not match parametrization fields {expected}"
            )

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.params)

    @property
    def defaults(self) -> tuple[float, ...]:
        """Default parameter vector."""
        return tuple(p.default for p in self.params)

    @property
    def is_discrete(self) -> bool:
        return self.kind is Kind.DISCRETE

    def parameters(self, vector: ParameterVector) -> Parametrization:
        """
        Named view of a parameter vector.

        Raises
        ------
        ValueError
            If ``len(vector) != len(params)``.
        """
        return self.parametrization.from_vector(vector)

    def support(self, vector: ParameterVector) -> SupportWindow:
        """
        Plotting window for the given parameters.

        Returns
        -------
        SupportWindow
            ``(lo, hi)`` with ``lo <= hi``. A reversed window is reordered; a
            window that cannot be computed collapses to ``(0.0, 0.0)``. Both
            cases emit a ``UserWarning``.
        """
        params = self.parameters(vector)
        try:
            lo, hi = self.window(params)
        except (ArithmeticError, ValueError):
            # division by zero or sqrt of a negative in the window formula
            warnings.warn(
                f"{self.name}: support window undefined for {params.parameters}",
                UserWarning,
                stacklevel=2,
            )
            return _DEGENERATE_WINDOW

        if not (math.isfinite(lo) and math.isfinite(hi)):
            warnings.warn(
                f"{self.name}: non-finite support window ({lo}, {hi}) for {params.parameters}",
                UserWarning,
                stacklevel=2,
            )
            return _DEGENERATE_WINDOW

        if lo > hi:
            warnings.warn(
                f"{self.name}: reversed support window ({lo}, {hi}) for {params.parameters}",
                UserWarning,
                stacklevel=2,
            )
            lo, hi = hi, lo
        return SupportWindow(float(lo), float(hi))

    def pdf(self, x: float, vector: ParameterVector) -> float:
        """
        Density or probability mass at ``x``.

        Parameters
        ----------
        x : float
            Evaluation point. Discrete families round it half-up to the
            nearest integer first.
        vector : ParameterVector
            Ordered parameter values.

        Returns
        -------
        float
            Finite, non-negative value. ``0.0`` outside the family's domain,
            for non-finite ``x``, for parameters violating a family constraint
            and where the formula overflows.

        Raises
        ------
        ValueError
            Only if the vector length does not match ``params``.
        """
        params = self.parameters(vector)
        x = float(x)
        if math.isnan(x) or not params.is_valid():
            return 0.0

        if self.kind is Kind.DISCRETE:
            if math.isinf(x):
                return 0.0
            x = math.floor(x + 0.5)

        try:
            value = self.density(params, x)
        except (ArithmeticError, ValueError):
            # exp overflow or log(0) in the formula
            return 0.0

        if not math.isfinite(value) or value < 0.0:
            return 0.0
        return float(value)

    def resolve(self, overrides: Mapping[str, float] | None = None) -> tuple[float, ...]:
        """
        Parameter vector from defaults, with named values overriding them.

        Raises
        ------
        ValueError
            If an override names an unknown parameter.
        """
        overrides = dict(overrides or {})
        unknown = set(overrides) - set(self.param_names)
        if unknown:
            raise ValueError(f"Unknown parameters for {self.name}: {sorted(unknown)}")
        return tuple(float(overrides.get(p.name, p.default)) for p in self.params)

    def label(self, vector: ParameterVector) -> str:
        """Compact ``name=value`` listing, e.g. ``"mu=0, sigma=1.50"``."""
        self.parameters(vector)
        return ", ".join(
            f"{p.name}={_format_value(value)}" for p, value in zip(self.params, vector, strict=True)
        )

    def info(self) -> dict[str, Any]:
        """Metadata needed to build selector and slider controls."""
        return {
            "name": self.name,
            "kind": str(self.kind),
            "params": [p.as_dict() for p in self.params],
            "description": self.description,
        }


def _format_value(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.2f}"


__all__ = ["ParametricFamily"]
