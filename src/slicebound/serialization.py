"""
Serialization helpers for slicebound objects (SliceRange, Scenario, PolicyReport).

Scenarios round-trip losslessly through JSON/YAML via an intermediate dict.
Reports are one-way: produced subsequences are written as plain lists so
any sequence type (list, tuple, str, range) ends up in a stable shape.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from slicebound.ranges import AccessPolicy, SliceRange
from slicebound.report import (
    OutcomeKind,
    PolicyOutcome,
    PolicyReport,
    Scenario,
    ScenarioResult,
)


def range_to_dict(r: SliceRange) -> Dict[str, Any]:
    return {"start": r.start, "end": r.end}


def range_from_dict(d: Dict[str, Any]) -> SliceRange:
    return SliceRange(start=d.get("start"), end=d.get("end"))


def scenario_to_dict(s: Scenario) -> Dict[str, Any]:
    if s.is_index:
        return {"name": s.name, "kind": "index", "index": s.target}
    return {"name": s.name, "kind": "range", "range": range_to_dict(s.target)}


def scenario_from_dict(d: Dict[str, Any]) -> Scenario:
    kind = d.get("kind")
    if kind == "index":
        return Scenario(name=d["name"], target=d["index"])
    if kind == "range":
        return Scenario(name=d["name"], target=range_from_dict(d["range"]))
    raise TypeError(f"Unsupported scenario dict kind: {kind}")


def _value_to_data(value: Any) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, list, tuple, range)):
        return list(value)
    return value


def outcome_to_dict(o: PolicyOutcome) -> Dict[str, Any]:
    d: Dict[str, Any] = {"policy": o.policy.value, "kind": o.kind.value}
    if o.kind == OutcomeKind.VALUE:
        d["value"] = _value_to_data(o.value)
    return d


def outcome_from_dict(d: Dict[str, Any]) -> PolicyOutcome:
    return PolicyOutcome(
        policy=AccessPolicy(d["policy"]),
        kind=OutcomeKind(d["kind"]),
        value=d.get("value"),
    )


def result_to_dict(r: ScenarioResult) -> Dict[str, Any]:
    return {
        "scenario": scenario_to_dict(r.scenario),
        "outcomes": [outcome_to_dict(r.outcomes[p]) for p in AccessPolicy if p in r.outcomes],
    }


def report_to_dict(r: PolicyReport) -> Dict[str, Any]:
    return {
        "sequence_length": r.sequence_length,
        "results": [result_to_dict(res) for res in r.results],
        "counts": {
            policy.value: {kind.value: n for kind, n in kinds.items()}
            for policy, kinds in r.counts.items()
        },
        "warnings": list(r.warnings),
    }


def scenarios_to_json(scenarios: List[Scenario]) -> str:
    return json.dumps([scenario_to_dict(s) for s in scenarios], sort_keys=True)


def scenarios_from_json(s: str) -> List[Scenario]:
    return [scenario_from_dict(d) for d in json.loads(s)]


def scenarios_to_yaml(scenarios: List[Scenario]) -> str:
    return yaml.safe_dump([scenario_to_dict(s) for s in scenarios])


def scenarios_from_yaml(s: str) -> List[Scenario]:
    data = yaml.safe_load(s) or []
    return [scenario_from_dict(d) for d in data]


def report_to_json(r: PolicyReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_to_yaml(r: PolicyReport) -> str:
    return yaml.safe_dump(report_to_dict(r))
