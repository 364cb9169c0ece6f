"""
Unit tests for the self-test providers and the property primitives.
"""

import pytest

from arbitrary_kit.core.gen import Parameters, constant
from arbitrary_kit.core.prop import (
    Prop,
    Result,
    Status,
    exception,
    falsified,
    for_all,
    implies,
    passed,
    proved,
    undecided,
)
from arbitrary_kit.core.registry import arbitrary
from arbitrary_kit.domain.check_parameters import CheckParameters
from arbitrary_kit.utilities.constants import ContractViolationError


class TestCheckParameters:
    """Test cases for the CheckParameters value object and its provider."""

    def test_defaults(self):
        """Test default values."""
        check = CheckParameters()
        assert check.min_successful_tests == 100
        assert check.min_size == 0
        assert check.max_size == 100
        assert check.workers == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_successful_tests": 0},
            {"max_discard_ratio": -0.5},
            {"min_size": -1},
            {"min_size": 10, "max_size": 9},
            {"workers": 0},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test that invalid configurations are rejected."""
        with pytest.raises(ContractViolationError):
            CheckParameters(**kwargs)

    def test_provider_invariants(self, draw_many):
        """Test the ranges of provided configurations."""
        for check in draw_many(arbitrary(CheckParameters), count=500):
            assert 10 <= check.min_successful_tests <= 200
            assert 0.2 <= check.max_discard_ratio <= 10.0
            assert 0 <= check.min_size <= 500
            assert check.min_size <= check.max_size <= check.min_size + 500
            assert 1 <= check.workers <= 4


class TestParametersProvider:
    """Test cases for provided generation parameters."""

    def test_sizes_non_negative(self, draw_many):
        """Test that provided parameters carry a valid size."""
        values = draw_many(arbitrary(Parameters), count=200)
        assert all(isinstance(value, Parameters) for value in values)
        assert all(value.size >= 0 for value in values)

    def test_independent_sources(self, params):
        """Test that each provided parameter set has its own source."""
        first = arbitrary(Parameters).apply(params)
        second = arbitrary(Parameters).apply(params)
        assert first.rng is not second.rng
        assert first.rng is not params.rng


class TestPropPrimitives:
    """Test cases for outcome primitives and combinators."""

    @pytest.mark.parametrize(
        ("prop", "status"),
        [
            (passed, Status.PASSED),
            (falsified, Status.FALSIFIED),
            (proved, Status.PROVED),
            (undecided, Status.UNDECIDED),
            (exception(None), Status.EXCEPTION),
        ],
    )
    def test_fixed_outcomes(self, params, prop, status):
        """Test that fixed properties always evaluate to their status."""
        assert prop(params).status is status

    def test_status_classification(self):
        """Test success and failure classification."""
        assert Status.PROVED.is_success()
        assert Status.EXCEPTION.is_failure()
        assert not Status.UNDECIDED.is_success()
        assert not Status.UNDECIDED.is_failure()

    def test_implies(self, params):
        """Test that a false condition gives undecided."""
        assert implies(False, True)(params).status is Status.UNDECIDED
        assert implies(True, True)(params).status is Status.PASSED
        assert implies(True, falsified)(params).status is Status.FALSIFIED

    def test_for_all_records_argument(self, params):
        """Test that for_all records the drawn value."""
        result = for_all(constant(3), lambda n: n > 5)(params)
        assert result == Result(Status.FALSIFIED, (3,))

    def test_for_all_proof_reported_as_passed(self, params):
        """Test that a proof about one drawn value counts as passed."""
        assert for_all(constant(1), lambda n: proved)(params).status is Status.PASSED

    def test_for_all_captures_exceptions(self, params):
        """Test that predicate exceptions become exception outcomes."""
        result = for_all(constant(0), lambda n: 1 / n)(params)
        assert result.status is Status.EXCEPTION
        assert isinstance(result.error, ZeroDivisionError)
        assert result.args == (0,)


class TestPropProvider:
    """Test cases for synthetic properties."""

    def test_all_outcomes_reachable(self, draw_many, make_params):
        """Test that every outcome kind is produced."""
        props = draw_many(arbitrary(Prop), count=1000)
        evaluation = make_params(seed=99)
        statuses = {prop(evaluation).status for prop in props}
        assert statuses == set(Status)

    def test_outcome_weights(self, draw_many):
        """Test that falsified and passed-like outcomes dominate."""
        props = draw_many(arbitrary(Prop), count=4000)
        falsified_share = sum(prop is falsified for prop in props) / len(props)
        exception_share = sum(prop.name == "exception" for prop in props) / len(props)
        assert 0.2 < falsified_share < 0.3
        assert 0.03 < exception_share < 0.1
