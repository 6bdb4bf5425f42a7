"""
Tests for the policy comparison report.

Tests verify that compare_policies correctly:
    - Classifies each access into an outcome kind
    - Reproduces the policy table for [1, 2, 3]
    - Counts outcomes per policy
    - Warns on truncation, reversed ranges and safe absence
"""

import pytest
from slicebound.ranges import AccessPolicy, SliceRange
from slicebound.report import (
    OutcomeKind,
    Scenario,
    compare_policies,
    evaluate,
)
from slicebound.examples import EXAMPLE_SEQUENCE, build_example_scenarios


def test_evaluate_value():
    outcome = evaluate([1, 2, 3], SliceRange(0, 5), AccessPolicy.TRUNCATING)
    assert outcome.kind == OutcomeKind.VALUE
    assert outcome.value == [1, 2, 3]
    assert outcome.policy is AccessPolicy.TRUNCATING


def test_evaluate_absent():
    outcome = evaluate([1, 2, 3], SliceRange(0, 5), AccessPolicy.SAFE)
    assert outcome.kind == OutcomeKind.ABSENT
    assert outcome.value is None


def test_evaluate_out_of_range():
    outcome = evaluate([1, 2, 3], -1, AccessPolicy.STRICT)
    assert outcome.kind == OutcomeKind.OUT_OF_RANGE


def test_evaluate_malformed():
    outcome = evaluate([1, 2, 3], SliceRange(2, 1), AccessPolicy.SAFE)
    assert outcome.kind == OutcomeKind.MALFORMED_RANGE


def test_evaluate_index_under_truncating_not_applicable():
    outcome = evaluate([1, 2, 3], 0, AccessPolicy.TRUNCATING)
    assert outcome.kind == OutcomeKind.NOT_APPLICABLE


def test_evaluate_stored_none_is_a_value():
    """A None element in bounds is a value, not absence."""
    outcome = evaluate([None], 0, AccessPolicy.SAFE)
    assert outcome.kind == OutcomeKind.VALUE
    assert outcome.value is None


def test_evaluate_type_errors_propagate():
    with pytest.raises(TypeError):
        evaluate([1, 2, 3], "0", AccessPolicy.SAFE)


class TestSliceTargets:
    """A Python slice is a range in the report, as it is in access()."""

    def test_slice_under_truncating(self):
        outcome = evaluate([1, 2, 3], slice(0, 5), AccessPolicy.TRUNCATING)
        assert outcome.kind == OutcomeKind.VALUE
        assert outcome.value == [1, 2, 3]

    def test_slice_under_safe(self):
        assert evaluate([1, 2, 3], slice(1, 3), AccessPolicy.SAFE).value == [2, 3]
        assert evaluate([1, 2, 3], slice(0, 5), AccessPolicy.SAFE).kind == OutcomeKind.ABSENT

    def test_reversed_slice(self):
        outcome = evaluate([1, 2, 3], slice(4, 3), AccessPolicy.STRICT)
        assert outcome.kind == OutcomeKind.MALFORMED_RANGE

    def test_scenario_converts_slice(self):
        scenario = Scenario("overlong", slice(0, 5))
        assert scenario.target == SliceRange(0, 5)
        assert not scenario.is_index

    def test_slice_scenario_gets_range_warnings(self):
        report = compare_policies([1, 2, 3], [Scenario("overlong", slice(0, 5))])
        assert report.get_result("overlong").outcome(AccessPolicy.TRUNCATING).value == [1, 2, 3]
        assert any("truncation shortened 0..5" in w for w in report.warnings)

    def test_evaluate_policy_by_name(self):
        outcome = evaluate([1, 2, 3], SliceRange(0, 5), "strict")
        assert outcome.policy is AccessPolicy.STRICT
        assert outcome.kind == OutcomeKind.OUT_OF_RANGE


class TestExampleTable:
    """The example report matches the policy table cell by cell."""

    @pytest.fixture
    def report(self):
        return compare_policies(EXAMPLE_SEQUENCE, build_example_scenarios())

    @pytest.mark.parametrize("name, strict, truncating, safe", [
        ("overlong", OutcomeKind.OUT_OF_RANGE, [1, 2, 3], OutcomeKind.ABSENT),
        ("before_start", OutcomeKind.OUT_OF_RANGE, [1, 2], OutcomeKind.ABSENT),
        ("in_bounds", [2], [2], [2]),
        ("past_end", OutcomeKind.OUT_OF_RANGE, [], OutcomeKind.ABSENT),
        ("reversed", OutcomeKind.MALFORMED_RANGE, OutcomeKind.MALFORMED_RANGE, OutcomeKind.MALFORMED_RANGE),
        ("first_index", 1, OutcomeKind.NOT_APPLICABLE, 1),
        ("negative_index", OutcomeKind.OUT_OF_RANGE, OutcomeKind.NOT_APPLICABLE, OutcomeKind.ABSENT),
        ("index_past_end", OutcomeKind.OUT_OF_RANGE, OutcomeKind.NOT_APPLICABLE, OutcomeKind.ABSENT),
    ])
    def test_row(self, report, name, strict, truncating, safe):
        result = report.get_result(name)
        assert result is not None
        for policy, expected in [
            (AccessPolicy.STRICT, strict),
            (AccessPolicy.TRUNCATING, truncating),
            (AccessPolicy.SAFE, safe),
        ]:
            outcome = result.outcome(policy)
            if isinstance(expected, OutcomeKind):
                assert outcome.kind == expected
            else:
                assert outcome.kind == OutcomeKind.VALUE
                assert outcome.value == expected

    def test_counts(self, report):
        strict = report.counts[AccessPolicy.STRICT]
        assert strict[OutcomeKind.VALUE] == 2
        assert strict[OutcomeKind.OUT_OF_RANGE] == 5
        assert strict[OutcomeKind.MALFORMED_RANGE] == 1

        truncating = report.counts[AccessPolicy.TRUNCATING]
        assert truncating[OutcomeKind.VALUE] == 4
        assert truncating[OutcomeKind.NOT_APPLICABLE] == 3
        assert truncating[OutcomeKind.MALFORMED_RANGE] == 1

        safe = report.counts[AccessPolicy.SAFE]
        assert safe[OutcomeKind.VALUE] == 2
        assert safe[OutcomeKind.ABSENT] == 5
        assert OutcomeKind.OUT_OF_RANGE not in safe

    def test_sequence_length(self, report):
        assert report.sequence_length == 3
        assert len(report.results) == 8

    def test_get_result_missing(self, report):
        assert report.get_result("nope") is None


class TestWarnings:
    """Warning flags."""

    def test_truncation_warning(self):
        report = compare_policies([1, 2, 3], [Scenario("overlong", SliceRange(0, 5))])
        assert any("truncation shortened 0..5 from 5 to 3" in w for w in report.warnings)

    def test_safe_absent_with_data_warning(self):
        report = compare_policies([1, 2, 3], [Scenario("before", SliceRange(-1, 2))])
        assert any("safe access is absent" in w for w in report.warnings)

    def test_no_absent_warning_when_truncation_empty(self):
        report = compare_policies([1, 2, 3], [Scenario("past_end", SliceRange(3, 4))])
        assert not any("safe access is absent" in w for w in report.warnings)
        assert any("truncation shortened" in w for w in report.warnings)

    def test_reversed_warning(self):
        report = compare_policies([1, 2, 3], [Scenario("reversed", SliceRange(4, 3))])
        assert report.warnings == ["reversed: reversed range 4..3 rejected under every policy"]

    def test_in_bounds_has_no_warnings(self):
        report = compare_policies([1, 2, 3], [
            Scenario("middle", SliceRange(1, 2)),
            Scenario("all", SliceRange(None, None)),
            Scenario("first", 0),
        ])
        assert report.warnings == []

    def test_example_warning_count(self):
        report = compare_policies(EXAMPLE_SEQUENCE, build_example_scenarios())
        # overlong x2, before_start x2, past_end x1, reversed x1
        assert len(report.warnings) == 6

    def test_add_warning_deduplicates(self):
        report = compare_policies([], [])
        report.add_warning("x")
        report.add_warning("x")
        assert report.warnings == ["x"]
