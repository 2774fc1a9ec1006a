"""
Tests for the built-in discrete families
"""

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from .base import BaseDistributionTest


class TestDiscreteFamilies(BaseDistributionTest):
    """Test suite for the discrete catalog entries."""

    @pytest.mark.parametrize(
        "name, vector, reference, ks",
        [
            ("Binomial", [10, 0.5], stats.binom(10, 0.5), range(0, 11)),
            ("Binomial", [50, 0.01], stats.binom(50, 0.01), range(0, 51)),
            ("Poisson", [5], stats.poisson(5), range(0, 30)),
            ("Poisson", [30], stats.poisson(30), range(0, 80)),
            ("NegativeBinomial", [5, 0.5], stats.nbinom(5, 0.5), range(0, 40)),
            ("NegativeBinomial", [30, 0.05], stats.nbinom(30, 0.05), range(300, 900, 25)),
            ("Geometric", [0.3], stats.geom(0.3), range(1, 21)),
            ("DiscreteUniform", [-3, 4], stats.randint(-3, 5), range(-3, 5)),
            ("Bernoulli", [0.2], stats.bernoulli(0.2), range(0, 2)),
        ],
        ids=lambda v: v if isinstance(v, str) else None,
    )
    def test_mass_matches_reference(self, name, vector, reference, ks):
        family = self.family(name)
        ks = np.array(list(ks))
        np.testing.assert_allclose(self.evaluate(family, ks, vector), reference.pmf(ks), rtol=1e-8)

    def test_documented_scenarios(self):
        assert self.family("Binomial").pdf(5, [10, 0.5]) == pytest.approx(252 / 1024, abs=1e-6)
        assert self.family("Poisson").pdf(5, [5]) == pytest.approx(0.175467, abs=1e-6)
        assert self.family("DiscreteUniform").pdf(3, [1, 6]) == pytest.approx(1 / 6, abs=1e-6)

    def test_non_integer_points_round_to_nearest(self):
        binomial = self.family("Binomial")
        assert binomial.pdf(4.6, [10, 0.5]) == binomial.pdf(5, [10, 0.5])
        assert binomial.pdf(5.5, [10, 0.5]) == binomial.pdf(6, [10, 0.5])
        assert self.family("Bernoulli").pdf(0.49, [0.3]) == pytest.approx(0.7)

    @pytest.mark.parametrize(
        "name, vector, outside",
        [
            ("Binomial", [10, 0.5], [-1, 11, -0.6]),
            ("Poisson", [5], [-1, -3]),
            ("NegativeBinomial", [5, 0.5], [-1]),
            ("Geometric", [0.3], [0, -2, 0.4]),
            ("DiscreteUniform", [1, 6], [0, 7]),
            ("Bernoulli", [0.5], [-1, 2]),
        ],
    )
    def test_zero_outside_domain(self, name, vector, outside):
        family = self.family(name)
        for k in outside:
            assert family.pdf(k, vector) == 0.0

    def test_discrete_uniform_inverted_bounds(self):
        family = self.family("DiscreteUniform")
        assert all(family.pdf(k, [5, 1]) == 0.0 for k in range(-2, 8))

    @pytest.mark.parametrize(
        "name, vector, expected",
        [
            ("Binomial", [10, 0.5], (-0.5, 10.5)),
            ("Poisson", [5], (-0.5, 20.5)),
            ("Poisson", [30], (-0.5, 30 + 5 * math.sqrt(30) + 0.5)),
            ("NegativeBinomial", [5, 0.5], (-0.5, 18.5)),
            ("Geometric", [0.3], (0.5, 20.5)),
            ("DiscreteUniform", [1, 6], (0.5, 6.5)),
            ("Bernoulli", [0.5], (-0.5, 1.5)),
        ],
    )
    def test_support_windows(self, name, vector, expected):
        lo, hi = self.family(name).support(vector)
        assert lo == pytest.approx(expected[0])
        assert hi == pytest.approx(expected[1])
