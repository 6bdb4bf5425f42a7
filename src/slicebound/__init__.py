"""
slicebound: bounds-safe slicing and indexing for sequences.

Three access policies for a range or index that may fall outside a sequence:

    STRICT      fail fast with OutOfRange
    TRUNCATING  clamp the range to the sequence bounds
    SAFE        exact result or None (absence)

ARCHITECTURAL GUARANTEE:
------------------------
Every access is pure. The sequence is never mutated, copied beyond the
produced subsequence, or wrapped around on negative offsets.

A reversed range (start > end) is MalformedRange under every policy.
"""

from slicebound.accessor import (
    AccessError,
    BoundedAccessor,
    MalformedRange,
    OutOfRange,
    access,
    element_safe,
    element_strict,
    slice_safe,
    slice_strict,
    slice_truncating,
)
from slicebound.ranges import AccessPolicy, SliceRange

__version__ = "0.1.0"

__all__ = [
    "AccessError",
    "AccessPolicy",
    "BoundedAccessor",
    "MalformedRange",
    "OutOfRange",
    "SliceRange",
    "access",
    "element_safe",
    "element_strict",
    "slice_safe",
    "slice_strict",
    "slice_truncating",
]
