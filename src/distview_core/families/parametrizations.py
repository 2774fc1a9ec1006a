"""
Named parametrizations of distribution families.

A family receives its parameters as an ordered vector. Internally every
family works with a frozen dataclass whose fields mirror that order, so the
density and support formulas read ``params.sigma`` rather than ``vector[1]``.
Constraint methods on the dataclass describe the non-degenerate parameter
domain of the family.
"""

from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import astuple, dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, Self, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from distview_core.types import ParameterVector


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for named parameter views.

    Subclasses are turned into frozen dataclasses by :func:`parametrization`;
    their field order must match the family's ``params``.
    """

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @classmethod
    def from_vector(cls, vector: ParameterVector) -> Self:
        """
        Build the named view from an ordered parameter vector.

        Raises
        ------
        ValueError
            If the vector length differs from the number of fields.
        """
        names = cls.field_names()
        if len(vector) != len(names):
            raise ValueError(
                f"{cls.__name__} expects {len(names)} parameters {names}, got {len(vector)}"
            )
        return cls(*(float(value) for value in vector))

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))  # type: ignore[arg-type]

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        return {name: getattr(self, name) for name in self.field_names()}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def to_vector(self) -> tuple[float, ...]:
        return astuple(self)  # type: ignore[call-overload]

    def is_valid(self) -> bool:
        """Check whether every constraint holds."""
        return all(c.check(self) for c in self._constraints)

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ValueError(f'Constraint "{constraint.description}" does not hold')


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


T = TypeVar("T", bound="Parametrization")


def parametrization(cls: type[T]) -> type[T]:
    """
    Class decorator finalizing a parametrization.

    Converts the class into a frozen, slotted dataclass (unless it already is
    a dataclass) and collects the methods marked with :func:`constraint`.

    Raises
    ------
    TypeError
        If a constraint is declared as a static or class method.
    """

    def _collect_constraints(klass: type[Parametrization]) -> list[ParametrizationConstraint]:
        constraints: list[ParametrizationConstraint] = []
        for name, attr in klass.__dict__.items():
            if isinstance(attr, staticmethod | classmethod) and getattr(
                attr.__func__, "__is_constraint", False
            ):
                raise TypeError(f"@constraint '{name}' must be an instance method")

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    if not is_dataclass(cls):
        cls = dataclass(slots=True, frozen=True)(cls)

    cls._constraints = _collect_constraints(cls)
    return cls


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
