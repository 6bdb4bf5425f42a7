"""
Bounded Accessor

Resolves a (sequence, range-or-index, policy) triple into a result:

    - STRICT      -> subsequence / element, or OutOfRange
    - TRUNCATING  -> clamped subsequence, never a bounds failure
    - SAFE        -> exact subsequence / element, or None (absence)

Reversed ranges (start > end) raise MalformedRange under every policy.
That is a caller bug, not a slice past the end, and neither clamping nor
absence is allowed to hide it.

ARCHITECTURAL RULE:
    Every operation here is pure.
    The sequence is only read (len() and one contiguous slice or item).
    Negative offsets are bounds violations. They never wrap around.
"""

from __future__ import annotations

import operator
from typing import Any, Optional, Sequence, Tuple, TypeVar, Union

from slicebound.ranges import AccessPolicy, SliceRange

T = TypeVar("T")

RangeLike = Union[SliceRange, slice, int, None]


class AccessError(Exception):
    """Base class for accessor failures."""
    pass


class OutOfRange(AccessError, IndexError):
    """Raised when a strict access exceeds [0, len)."""
    pass


class MalformedRange(AccessError, ValueError):
    """Raised when a range has start > end, whatever the policy."""
    pass


def _as_range(start: RangeLike, end: Optional[int]) -> SliceRange:
    """Normalize the (start, end) / SliceRange / slice call forms."""
    if isinstance(start, (SliceRange, slice)):
        if end is not None:
            raise TypeError("end must be omitted when passing a range object")
        rng = start if isinstance(start, SliceRange) else SliceRange.from_slice(start)
    else:
        rng = SliceRange(start, end)
    return SliceRange(
        None if rng.start is None else operator.index(rng.start),
        None if rng.end is None else operator.index(rng.end),
    )


def _resolve(rng: SliceRange, length: int) -> Tuple[int, int]:
    # Only explicit ends can be reversed; "7.." on a short sequence is a bounds issue
    if rng.is_reversed:
        raise MalformedRange(f"Malformed range {rng}: start {rng.start} > end {rng.end}")
    return rng.resolve(length)


def _in_bounds(lo: int, hi: int, length: int) -> bool:
    return 0 <= lo <= hi <= length


def slice_strict(sequence: Sequence[T], start: RangeLike, end: Optional[int] = None) -> Sequence[T]:
    """
    Return exactly sequence[start:end], failing fast on any bounds violation.

    Raises:
        MalformedRange: start > end
        OutOfRange: start < 0 or end > len(sequence)
    """
    rng = _as_range(start, end)
    length = len(sequence)
    lo, hi = _resolve(rng, length)
    if not _in_bounds(lo, hi, length):
        raise OutOfRange(f"Range {rng} is out of bounds for length {length}")
    return sequence[lo:hi]


def slice_truncating(sequence: Sequence[T], start: RangeLike, end: Optional[int] = None) -> Sequence[T]:
    """
    Return the part of [start, end) that lies inside the sequence.

    Both endpoints are clamped to [0, len). A range entirely outside the
    sequence yields an empty subsequence of the same type.

    Raises:
        MalformedRange: start > end (checked before clamping)
    """
    rng = _as_range(start, end)
    length = len(sequence)
    lo, hi = _resolve(rng, length)
    lo = max(lo, 0)
    hi = min(hi, length)
    if lo >= hi:
        return sequence[0:0]
    return sequence[lo:hi]


def slice_safe(sequence: Sequence[T], start: RangeLike, end: Optional[int] = None) -> Optional[Sequence[T]]:
    """
    Return sequence[start:end] if the whole range is in bounds, else None.

    Partial overlap is still absence. No clamping happens here.

    Raises:
        MalformedRange: start > end
    """
    rng = _as_range(start, end)
    length = len(sequence)
    lo, hi = _resolve(rng, length)
    if not _in_bounds(lo, hi, length):
        return None
    return sequence[lo:hi]


def element_strict(sequence: Sequence[T], index: int) -> T:
    """
    Return sequence[index] for 0 <= index < len(sequence).

    Raises:
        OutOfRange: index outside [0, len)
    """
    index = operator.index(index)
    length = len(sequence)
    if not 0 <= index < length:
        raise OutOfRange(f"Index {index} is out of bounds for length {length}")
    return sequence[index]


def element_safe(sequence: Sequence[T], index: int, default: Any = None) -> Optional[T]:
    """
    Return sequence[index] for 0 <= index < len(sequence), else default.

    Pass a sentinel as default when the sequence may itself hold None.
    """
    index = operator.index(index)
    if not 0 <= index < len(sequence):
        return default
    return sequence[index]


def access(sequence: Sequence[T], target: RangeLike, policy: AccessPolicy) -> Any:
    """
    Dispatch an index or a range to the operation for the given policy.

    Args:
        sequence: Sequence to read from (never mutated)
        target: int index, SliceRange or slice
        policy: AccessPolicy or policy name ("strict", "truncate", ...)

    Raises:
        ValueError: unknown policy name
        TypeError: policy of the wrong type, or index access under TRUNCATING
    """
    policy = AccessPolicy.coerce(policy)

    if isinstance(target, (SliceRange, slice)):
        if policy is AccessPolicy.STRICT:
            return slice_strict(sequence, target)
        if policy is AccessPolicy.TRUNCATING:
            return slice_truncating(sequence, target)
        if policy is AccessPolicy.SAFE:
            return slice_safe(sequence, target)
    else:
        if policy is AccessPolicy.STRICT:
            return element_strict(sequence, target)
        if policy is AccessPolicy.SAFE:
            return element_safe(sequence, target)
        if policy is AccessPolicy.TRUNCATING:
            raise TypeError("Truncating access applies to ranges only, not single indexes")
    raise ValueError(f"Unhandled access policy: {policy}")


class BoundedAccessor:
    """
    Read-only subscript wrapper applying one policy to every access.

    Example:
        >>> a = BoundedAccessor([1, 2, 3], AccessPolicy.TRUNCATING)
        >>> a[0:5]
        [1, 2, 3]
        >>> BoundedAccessor([1, 2, 3], AccessPolicy.SAFE)[3]   # None

    Slices passed through [] keep their literal offsets: a[-1:2] means
    "from offset -1", not "from the last element".
    """

    __slots__ = ("sequence", "policy")

    def __init__(self, sequence: Sequence[T], policy: AccessPolicy = AccessPolicy.STRICT):
        self.sequence = sequence
        self.policy = AccessPolicy.coerce(policy)

    def __getitem__(self, key: RangeLike) -> Any:
        return access(self.sequence, key, self.policy)

    def __len__(self) -> int:
        return len(self.sequence)

    def with_policy(self, policy: AccessPolicy) -> "BoundedAccessor":
        """Same sequence, different policy."""
        return BoundedAccessor(self.sequence, policy)

    def __repr__(self) -> str:
        return f"BoundedAccessor(len={len(self.sequence)}, policy={self.policy.value})"
