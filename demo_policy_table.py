#!/usr/bin/env python3
"""
Demo: Compare strict, truncating and safe access on [1, 2, 3].

Prints the policy table in both Markdown modes and the YAML report, and
writes the DETAILED table to policy_table.md next to this script.
"""

import os

from slicebound.examples import EXAMPLE_SEQUENCE, build_example_scenarios
from slicebound.report import compare_policies
from slicebound.serialization import report_to_yaml
from slicebound.backends import generate_markdown, save_markdown_file, TableMode


def main(output_dir=None):
    if output_dir is None:
        output_dir = os.path.dirname(os.path.abspath(__file__))
    report = compare_policies(EXAMPLE_SEQUENCE, build_example_scenarios())

    print("=" * 70)
    print(f"POLICY TABLE FOR {EXAMPLE_SEQUENCE}")
    print("=" * 70)

    for mode in [TableMode.SIMPLE, TableMode.DETAILED]:
        print(f"\n{mode.value.upper()} MODE:")
        print("-" * 70)
        print(generate_markdown(report, mode=mode))

    filename = os.path.join(output_dir, "policy_table.md")
    print(f"Writing DETAILED table to: {filename}")
    save_markdown_file(report, filename, mode=TableMode.DETAILED)

    print("\nYAML REPORT:")
    print("-" * 70)
    print(report_to_yaml(report))


if __name__ == "__main__":
    main()
