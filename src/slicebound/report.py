"""
Policy Comparison: run the same requests under every access policy.

This module evaluates named scenarios (a range or an index) against one
sequence under STRICT, TRUNCATING and SAFE, and collects:
    - The outcome of every (scenario, policy) pair
    - Outcome counts per policy
    - Warnings where the policies disagree in a way callers should know about

IMPORTANT: This is read-only analysis. It never mutates the sequence and
never swallows errors other than the two accessor failure classes.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence, Union

from slicebound.accessor import MalformedRange, OutOfRange, access, element_safe
from slicebound.ranges import AccessPolicy, SliceRange

_ABSENT = object()


class OutcomeKind(Enum):
    """What a single access produced."""
    VALUE = "value"
    ABSENT = "absent"
    OUT_OF_RANGE = "out_of_range"
    MALFORMED_RANGE = "malformed_range"
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True)
class Scenario:
    """
    A named request.

    Properties:
        name: Scenario label, unique within a report
        target: SliceRange (a slice is converted) for range access, int for index access
    """

    name: str
    target: Union[SliceRange, int]

    def __post_init__(self):
        if isinstance(self.target, slice):
            object.__setattr__(self, "target", SliceRange.from_slice(self.target))

    @property
    def is_index(self) -> bool:
        return not isinstance(self.target, SliceRange)


@dataclass
class PolicyOutcome:
    """Result of one scenario under one policy."""
    policy: AccessPolicy
    kind: OutcomeKind
    value: Any = None


@dataclass
class ScenarioResult:
    """Outcomes of one scenario under every policy."""
    scenario: Scenario
    outcomes: Dict[AccessPolicy, PolicyOutcome] = field(default_factory=dict)

    def outcome(self, policy: AccessPolicy) -> PolicyOutcome:
        return self.outcomes[policy]


@dataclass
class PolicyReport:
    """Comparison report for a set of scenarios against one sequence."""

    sequence_length: int
    results: List[ScenarioResult] = field(default_factory=list)

    # policy -> outcome kind -> count
    counts: Dict[AccessPolicy, Dict[OutcomeKind, int]] = field(default_factory=dict)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def get_result(self, name: str) -> ScenarioResult | None:
        for result in self.results:
            if result.scenario.name == name:
                return result
        return None


def evaluate(sequence: Sequence[Any], target: Union[SliceRange, slice, int], policy: AccessPolicy) -> PolicyOutcome:
    """
    Run one access and classify it.

    Safe access returning None is ABSENT; index access under TRUNCATING is
    NOT_APPLICABLE. A slice target is a range, same as in access().
    Errors other than OutOfRange/MalformedRange propagate.
    """
    policy = AccessPolicy.coerce(policy)
    if isinstance(target, slice):
        target = SliceRange.from_slice(target)
    is_index = not isinstance(target, SliceRange)
    if is_index and policy is AccessPolicy.TRUNCATING:
        return PolicyOutcome(policy, OutcomeKind.NOT_APPLICABLE)

    try:
        if is_index and policy is AccessPolicy.SAFE:
            # Sentinel so a stored None is not mistaken for absence
            value = element_safe(sequence, target, default=_ABSENT)
        else:
            value = access(sequence, target, policy)
    except MalformedRange:
        return PolicyOutcome(policy, OutcomeKind.MALFORMED_RANGE)
    except OutOfRange:
        return PolicyOutcome(policy, OutcomeKind.OUT_OF_RANGE)

    if value is _ABSENT or (value is None and not is_index and policy is AccessPolicy.SAFE):
        return PolicyOutcome(policy, OutcomeKind.ABSENT)
    return PolicyOutcome(policy, OutcomeKind.VALUE, value)


def compare_policies(sequence: Sequence[Any], scenarios: List[Scenario]) -> PolicyReport:
    """
    Evaluate every scenario under every policy.

    Warnings flag:
    - Truncation that returned fewer elements than requested
    - Reversed ranges (rejected under every policy)
    - Safe absence where truncation still found data
    """
    report = PolicyReport(sequence_length=len(sequence))
    counts: Dict[AccessPolicy, Dict[OutcomeKind, int]] = {
        policy: defaultdict(int) for policy in AccessPolicy
    }

    for scenario in scenarios:
        result = ScenarioResult(scenario=scenario)
        for policy in AccessPolicy:
            outcome = evaluate(sequence, scenario.target, policy)
            result.outcomes[policy] = outcome
            counts[policy][outcome.kind] += 1
        report.results.append(result)

        if scenario.is_index:
            continue

        truncated = result.outcome(AccessPolicy.TRUNCATING)
        safe = result.outcome(AccessPolicy.SAFE)

        if truncated.kind == OutcomeKind.MALFORMED_RANGE:
            report.add_warning(
                f"{scenario.name}: reversed range {scenario.target} rejected under every policy"
            )
            continue

        start, end = scenario.target.resolve(report.sequence_length)
        requested = max(0, end - start)
        if len(truncated.value) < requested:
            report.add_warning(
                f"{scenario.name}: truncation shortened {scenario.target} "
                f"from {requested} to {len(truncated.value)} element(s)"
            )
        if safe.kind == OutcomeKind.ABSENT and len(truncated.value) > 0:
            report.add_warning(
                f"{scenario.name}: safe access is absent but truncation found "
                f"{len(truncated.value)} element(s)"
            )

    report.counts = {policy: dict(kinds) for policy, kinds in counts.items()}
    return report
