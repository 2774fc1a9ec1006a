"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from distview_core.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from distview_core.families.registry import ParametricFamilyRegister
from distview_core.types import FamilyName, Kind

CONTINUOUS = [
    "Normal",
    "Beta",
    "Gamma",
    "HalfNormal",
    "Exponential",
    "Uniform",
    "StudentT",
    "LogNormal",
    "Cauchy",
    "Laplace",
    "Weibull",
    "Triangular",
    "SkewNormal",
    "InverseGamma",
    "Logistic",
]
DISCRETE = [
    "Binomial",
    "Poisson",
    "NegativeBinomial",
    "Geometric",
    "DiscreteUniform",
    "Bernoulli",
]


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_catalog_order(self):
        """Continuous families first, then discrete, in the selector order."""
        assert self.registry.names() == CONTINUOUS + DISCRETE
        assert len(self.registry) == 21
        assert {str(name) for name in FamilyName} == set(CONTINUOUS + DISCRETE)

    def test_kinds(self):
        for family in self.registry.families():
            expected = Kind.CONTINUOUS if family.name in CONTINUOUS else Kind.DISCRETE
            assert family.kind is expected

    def test_iteration_matches_families(self):
        assert list(self.registry) == self.registry.families()

    def test_reset_families_register(self):
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        assert registry1 is not registry2
        assert registry2.names() == CONTINUOUS + DISCRETE

    def test_registry_singleton_pattern(self):
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_get_by_name(self):
        assert self.registry.get("Poisson").name == FamilyName.POISSON
        assert self.registry.get(FamilyName.BETA).name == "Beta"
        assert self.registry.contains("Laplace")
        assert not self.registry.contains("Gumbel")

    def test_unknown_family(self):
        with pytest.raises(ValueError, match="No family Gumbel found"):
            self.registry.get("Gumbel")

    def test_duplicate_registration(self):
        with pytest.raises(ValueError, match="already found in register"):
            ParametricFamilyRegister.register(self.registry.get("Normal"))

    def test_info_payload(self):
        info = self.registry.get("StudentT").info()
        assert info["name"] == "StudentT"
        assert info["kind"] == "continuous"
        assert [p["name"] for p in info["params"]] == ["nu", "mu", "sigma"]
        assert info["params"][0] == {
            "name": "nu",
            "label": "ν (df)",
            "min": 1,
            "max": 30,
            "step": 0.5,
            "default": 5,
        }
        assert info["description"] == "ν is degrees of freedom, μ is location, σ is scale."

    def test_every_family_is_well_formed(self):
        for family in self.registry.families():
            assert family.params, family.name
            assert family.description, family.name
            assert all(p.contains(p.default) for p in family.params)
            assert family.parametrization.field_names() == family.param_names
