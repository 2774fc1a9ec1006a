from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from distview_core.families import configure_families_register
from distview_core.points import compute_points
from distview_core.summary import Peak, peak, total_probability
from distview_core.types import SamplePoint


class TestPeak:
    def test_empty(self):
        assert peak([]) is None

    def test_first_maximum_wins(self):
        points = [SamplePoint(0, 0.1), SamplePoint(1, 0.5), SamplePoint(2, 0.5), SamplePoint(3, 0.2)]
        assert peak(points) == Peak(1.0, 0.5)

    def test_normal_mode(self):
        normal = configure_families_register().get("Normal")
        top = peak(compute_points(normal, [1.5, 0.8]))
        assert top is not None
        assert top.x == pytest.approx(1.5, abs=0.02)

    def test_poisson_mode(self):
        poisson = configure_families_register().get("Poisson")
        top = peak(compute_points(poisson, [3.5]))
        assert top is not None
        assert top.x == 3


class TestTotalProbability:
    def test_empty(self):
        normal = configure_families_register().get("Normal")
        assert total_probability(normal, []) == 0.0

    def test_discrete_sums(self):
        dice = configure_families_register().get("DiscreteUniform")
        assert total_probability(dice, compute_points(dice, [1, 6])) == pytest.approx(1.0)

    def test_continuous_integrates(self):
        normal = configure_families_register().get("Normal")
        points = compute_points(normal, [0, 1])
        assert total_probability(normal, points) == pytest.approx(1.0, abs=1e-3)
