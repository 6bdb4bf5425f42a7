"""
Markdown table generator for policy reports.

Converts a PolicyReport into a Markdown table with one row per scenario
and one column per access policy.

Supports two modes:
    - SIMPLE: Scenario table only
    - DETAILED: Table plus outcome counts and warnings
"""

from enum import Enum
from typing import Any, List

from slicebound.ranges import AccessPolicy
from slicebound.report import OutcomeKind, PolicyOutcome, PolicyReport, Scenario


class TableMode(Enum):
    """Rendering modes for Markdown output."""
    SIMPLE = "simple"
    DETAILED = "detailed"


_KIND_LABELS = {
    OutcomeKind.ABSENT: "absence",
    OutcomeKind.OUT_OF_RANGE: "OutOfRange",
    OutcomeKind.MALFORMED_RANGE: "MalformedRange",
    OutcomeKind.NOT_APPLICABLE: "n/a",
}


def _escape_cell(s: str) -> str:
    """Escape pipes so a value cannot split a table cell."""
    return s.replace("|", "\\|").replace("\n", " ")


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple, range)):
        return "[" + ", ".join(repr(v) for v in value) + "]"
    return repr(value)


def _outcome_label(outcome: PolicyOutcome) -> str:
    if outcome.kind == OutcomeKind.VALUE:
        return _escape_cell(_format_value(outcome.value))
    return _KIND_LABELS[outcome.kind]


def _scenario_label(scenario: Scenario) -> str:
    if scenario.is_index:
        return f"index {scenario.target}"
    return f"range {scenario.target}"


def generate_markdown(report: PolicyReport, mode: TableMode = TableMode.SIMPLE) -> str:
    """
    Generate a Markdown table for a policy report.

    Args:
        report: PolicyReport to render
        mode: Rendering mode (SIMPLE, DETAILED)

    Returns:
        Markdown text
    """
    policies = list(AccessPolicy)
    lines: List[str] = []

    header = ["Scenario", "Request"] + [p.value.capitalize() for p in policies]
    lines.append("| " + " | ".join(header) + " |")
    lines.append("|" + "---|" * len(header))

    for result in report.results:
        cells = [
            _escape_cell(result.scenario.name),
            _scenario_label(result.scenario),
        ]
        cells.extend(_outcome_label(result.outcome(p)) for p in policies)
        lines.append("| " + " | ".join(cells) + " |")

    if mode == TableMode.DETAILED:
        lines.append("")
        lines.append(f"Sequence length: {report.sequence_length}")
        lines.append("")
        lines.append("| Policy | " + " | ".join(k.value for k in OutcomeKind) + " |")
        lines.append("|" + "---|" * (len(OutcomeKind) + 1))
        for policy in policies:
            kinds = report.counts.get(policy, {})
            counts = [str(kinds.get(k, 0)) for k in OutcomeKind]
            lines.append(f"| {policy.value} | " + " | ".join(counts) + " |")

        if report.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.append("")
            for warning in report.warnings:
                lines.append(f"- {warning}")

    return "\n".join(lines) + "\n"


def save_markdown_file(report: PolicyReport, filename: str, mode: TableMode = TableMode.SIMPLE) -> None:
    """
    Generate Markdown and save to file.

    Args:
        report: PolicyReport to render
        filename: Output file path (.md extension recommended)
        mode: Rendering mode
    """
    text = generate_markdown(report, mode=mode)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(text)


__all__ = ["TableMode", "generate_markdown", "save_markdown_file"]
