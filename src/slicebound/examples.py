"""
Example scenarios for the three-element sequence [1, 2, 3].

Covers every row of the policy table: overlong, before-start, in-bounds,
past-end and reversed ranges, plus in-bounds and out-of-bounds indexes.
"""
from typing import List

from slicebound.ranges import SliceRange
from slicebound.report import Scenario

EXAMPLE_SEQUENCE = [1, 2, 3]


def build_example_scenarios() -> List[Scenario]:
    return [
        Scenario(name="overlong", target=SliceRange(0, 5)),
        Scenario(name="before_start", target=SliceRange(-1, 2)),
        Scenario(name="in_bounds", target=SliceRange(1, 2)),
        Scenario(name="past_end", target=SliceRange(3, 4)),
        Scenario(name="reversed", target=SliceRange(4, 3)),
        Scenario(name="first_index", target=0),
        Scenario(name="negative_index", target=-1),
        Scenario(name="index_past_end", target=3),
    ]
