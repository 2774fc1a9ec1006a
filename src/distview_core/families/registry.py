"""
Global registry for distribution families using singleton pattern.

This module implements a centralized registry that maintains references to all
defined families in catalog order, enabling easy access across the application.
"""

from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import ClassVar

    from distview_core.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """
    Singleton registry for distribution families.

    Maintains a global registry of all families, allowing them to be listed
    in registration order and accessed by name.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _registered_families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Retrieve a family by name.

        Parameters
        ----------
        name : str
            Name of the family to retrieve.

        Returns
        -------
        ParametricFamily
            The requested family.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._registered_families

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Register a new family.

        Parameters
        ----------
        family : ParametricFamily
            The family to register.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        if family.name in self._registered_families:
            raise ValueError(f"Family {family.name} already found in register")
        self._registered_families[family.name] = family

    @classmethod
    def families(cls) -> list[ParametricFamily]:
        """All registered families, in registration order."""
        return list(cls()._registered_families.values())

    @classmethod
    def names(cls) -> list[str]:
        return list(cls()._registered_families)

    def __iter__(self) -> Iterator[ParametricFamily]:
        return iter(self._registered_families.values())

    def __len__(self) -> int:
        return len(self._registered_families)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None


__all__ = ["ParametricFamilyRegister"]
