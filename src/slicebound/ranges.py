"""
Range and Policy Types for slicebound

A request against a sequence is either a single integer index or a
half-open range [start, end). The policy decides what happens when the
request falls partially or fully outside [0, len).

ARCHITECTURAL RULE:
    These objects describe a request only.
    They never touch a sequence and never clamp themselves.
    Bounds handling belongs in the accessor layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class AccessPolicy(Enum):
    """
    Behaviour when a range or index falls outside [0, len).

    STRICT:
        Fail fast with OutOfRange.
    TRUNCATING:
        Clamp the range to the sequence bounds. Ranges only.
    SAFE:
        Return the exact result, or absence (None) if anything is out of bounds.
    """

    STRICT = "strict"
    TRUNCATING = "truncating"
    SAFE = "safe"

    @classmethod
    def parse(cls, name: str) -> "AccessPolicy":
        """
        Look up a policy by value, member name or alias (case-insensitive).

        Raises:
            ValueError: If the name matches no policy
        """
        key = name.strip().lower()
        if key in _POLICY_ALIASES:
            return _POLICY_ALIASES[key]
        for policy in cls:
            if key == policy.value or key == policy.name.lower():
                return policy
        raise ValueError(f"Unknown access policy: {name!r}")

    @classmethod
    def coerce(cls, policy: "AccessPolicy | str") -> "AccessPolicy":
        """
        Accept an AccessPolicy or a policy name.

        Raises:
            ValueError: Unknown policy name
            TypeError: Neither an AccessPolicy nor a string
        """
        if isinstance(policy, cls):
            return policy
        if isinstance(policy, str):
            return cls.parse(policy)
        raise TypeError(f"Expected AccessPolicy or policy name, got {type(policy).__name__}")


_POLICY_ALIASES = {
    "fail-fast": AccessPolicy.STRICT,
    "truncate": AccessPolicy.TRUNCATING,
    "clamp": AccessPolicy.TRUNCATING,
    "optional": AccessPolicy.SAFE,
}


@dataclass(frozen=True)
class SliceRange:
    """
    A half-open range [start, end) of integer offsets.

    Examples:
        SliceRange(0, 5)       -> offsets 0, 1, 2, 3, 4
        SliceRange(-1, 2)      -> starts before the sequence
        SliceRange(None, 2)    -> prefix, everything before offset 2
        SliceRange(1, None)    -> suffix, offset 1 through the end

    Properties:
        start: First included offset, or None for "from the beginning"
        end: First excluded offset, or None for "through the end"

    IMPORTANT:
        start > end is representable on purpose.
        Whether it is an error is decided by the accessor, not here.
    """

    start: Optional[int] = None
    end: Optional[int] = None

    @classmethod
    def closed(cls, first: int, last: int) -> "SliceRange":
        """Inclusive range first...last, i.e. [first, last + 1)."""
        return cls(first, last + 1)

    @classmethod
    def prefix(cls, end: int) -> "SliceRange":
        return cls(None, end)

    @classmethod
    def suffix(cls, start: int) -> "SliceRange":
        return cls(start, None)

    @classmethod
    def from_slice(cls, slice_obj: slice) -> "SliceRange":
        """
        Convert a Python slice with no step (or step 1).

        Negative offsets are kept as-is; they do NOT count from the end.
        """
        if slice_obj.step not in (None, 1):
            raise ValueError(f"Stepped slices are not supported: step={slice_obj.step}")
        return cls(slice_obj.start, slice_obj.stop)

    @property
    def is_open(self) -> bool:
        return self.start is None or self.end is None

    @property
    def is_reversed(self) -> bool:
        """True when both ends are given and start > end."""
        return self.start is not None and self.end is not None and self.start > self.end

    def resolve(self, length: int) -> Tuple[int, int]:
        """Concrete (start, end) with open ends replaced by 0 and length."""
        start = 0 if self.start is None else self.start
        end = length if self.end is None else self.end
        return start, end

    def __str__(self) -> str:
        start = "" if self.start is None else str(self.start)
        end = "" if self.end is None else str(self.end)
        return f"{start}..{end}"
