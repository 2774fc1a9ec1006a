from __future__ import annotations

__author__ = "distview-core developers"
__copyright__ = "Copyright (c) 2025 distview-core developers"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import FrozenInstanceError
from typing import cast

import pytest

from distview_core.families import (
    ParamDef,
    ParametricFamily,
    Parametrization,
    SupportWindow,
    configure_families_register,
    constraint,
    parametrization,
)
from distview_core.points import compute_points
from distview_core.types import Kind


@parametrization
class _Box(Parametrization):
    lower: float
    upper: float

    @constraint(description="lower < upper")
    def check_order(self) -> bool:
        return self.lower < self.upper


def _box_density(parameters: Parametrization, x: float) -> float:
    parameters = cast(_Box, parameters)
    if parameters.lower <= x <= parameters.upper:
        return 1 / (parameters.upper - parameters.lower)
    return 0.0


def make_family(window=None, density=None, kind=Kind.CONTINUOUS) -> ParametricFamily:
    return ParametricFamily(
        name="Box",
        kind=kind,
        params=(
            ParamDef(name="lower", label="lower", min=-5, max=5, step=1, default=0),
            ParamDef(name="upper", label="upper", min=-5, max=5, step=1, default=2),
        ),
        parametrization=_Box,
        window=window or (lambda p: (p.lower - 1, p.upper + 1)),
        density=density or _box_density,
        description="Test box.",
    )


class TestDescriptor:
    def test_defaults_and_names(self):
        family = make_family()
        assert family.defaults == (0, 2)
        assert family.param_names == ("lower", "upper")
        assert not family.is_discrete

    def test_is_immutable(self):
        family = make_family()
        with pytest.raises(FrozenInstanceError):
            family.name = "Other"  # type: ignore[misc]

    def test_params_must_match_parametrization(self):
        with pytest.raises(ValueError, match="do not match parametrization fields"):
            ParametricFamily(
                name="Broken",
                kind=Kind.CONTINUOUS,
                params=(ParamDef(name="a", label="a", min=0, max=1, step=0.1, default=0.5),),
                parametrization=_Box,
                window=lambda p: (0.0, 1.0),
                density=lambda p, x: 0.0,
                description="",
            )

    def test_parameters_view(self):
        params = make_family().parameters([1, 3])
        assert isinstance(params, _Box)
        assert params.parameters == {"lower": 1.0, "upper": 3.0}


class TestPdf:
    def test_evaluates_density(self):
        family = make_family()
        assert family.pdf(1.0, [0, 2]) == pytest.approx(0.5)
        assert family.pdf(3.0, [0, 2]) == 0.0

    def test_degenerate_parameters_give_zero(self):
        family = make_family()
        assert family.pdf(0.5, [1, 0]) == 0.0
        assert family.pdf(1.0, [1, 1]) == 0.0

    @pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
    def test_non_finite_x(self, x):
        assert make_family().pdf(x, [0, 2]) == 0.0
        assert make_family(kind=Kind.DISCRETE).pdf(x, [0, 2]) == 0.0

    @pytest.mark.parametrize(
        "error", [OverflowError("exp"), ZeroDivisionError("div"), ValueError("log")]
    )
    def test_arithmetic_failures_give_zero(self, error):
        def density(parameters, x):
            raise error

        assert make_family(density=density).pdf(0.5, [0, 2]) == 0.0

    @pytest.mark.parametrize("value", [math.nan, math.inf, -1.0])
    def test_invalid_results_give_zero(self, value):
        family = make_family(density=lambda p, x: value)
        assert family.pdf(0.5, [0, 2]) == 0.0

    def test_discrete_rounds_half_up(self):
        seen = []

        def density(parameters, k):
            seen.append(k)
            return 0.25

        family = make_family(density=density, kind=Kind.DISCRETE)
        for x in (1.4, 1.5, 2.49, -0.5, -0.6):
            family.pdf(x, [0, 2])
        assert seen == [1, 2, 2, 0, -1]
        assert all(isinstance(k, int) for k in seen)

    def test_wrong_vector_length_raises(self):
        with pytest.raises(ValueError, match="expects 2 parameters"):
            make_family().pdf(0.0, [1.0])


class TestSupport:
    def test_regular_window(self):
        window = make_family().support([0, 2])
        assert isinstance(window, SupportWindow)
        assert window == (-1.0, 3.0)

    def test_reversed_window_is_reordered(self):
        with pytest.warns(UserWarning, match="reversed support window"):
            window = make_family().support([4, -4])
        assert window == (-3.0, 3.0)

    def test_undefined_window_collapses(self):
        family = make_family(window=lambda p: (0.0, 1 / (p.upper - p.lower)))
        with pytest.warns(UserWarning, match="support window undefined"):
            assert family.support([1, 1]) == (0.0, 0.0)

    def test_domain_error_in_window_collapses(self):
        family = make_family(window=lambda p: (0.0, math.sqrt(p.upper - p.lower)))
        with pytest.warns(UserWarning, match="support window undefined"):
            assert family.support([1, 0]) == (0.0, 0.0)

    @pytest.mark.parametrize("name, vector", [("Poisson", [-1.0]), ("NegativeBinomial", [5, 2.0])])
    def test_catalog_window_outside_domain_collapses(self, name, vector):
        family = configure_families_register().get(name)
        with pytest.warns(UserWarning, match="support window undefined"):
            assert family.support(vector) == (0.0, 0.0)
        with pytest.warns(UserWarning):
            assert compute_points(family, vector) == []

    def test_non_finite_window_collapses(self):
        family = make_family(window=lambda p: (0.0, math.inf))
        with pytest.warns(UserWarning, match="non-finite support window"):
            assert family.support([0, 1]) == (0.0, 0.0)


class TestResolveAndLabel:
    def test_resolve_defaults(self):
        assert make_family().resolve() == (0.0, 2.0)

    def test_resolve_overrides(self):
        assert make_family().resolve({"upper": 4}) == (0.0, 4.0)

    def test_resolve_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown parameters for Box"):
            make_family().resolve({"scale": 1.0})

    def test_label_formats_integers_plainly(self):
        normal = configure_families_register().get("Normal")
        assert normal.label([0, 1]) == "mu=0, sigma=1"
        assert normal.label([0.5, 1.25]) == "mu=0.50, sigma=1.25"

    def test_label_checks_length(self):
        with pytest.raises(ValueError):
            make_family().label([1.0])
