"""
Half-open interval value carried by the interval index.

An Interval covers [start, end) and carries an arbitrary payload in ``data``.
Two orderings are defined over intervals:

- the natural order (start, end, str(data)) used by tree nodes and the
  forward iterator;
- the reversed order (end desc, start desc, str(data)) used by the
  backward iterator.

In both, payload strings only break ties when both payloads are present;
an interval without payload compares equal to any other interval with the
same endpoints.
"""

from datetime import datetime
from functools import cmp_to_key
from typing import Any, Generic, Optional, TypeVar

from .timezone_utils import from_timestamp

# T represents the payload type
T = TypeVar('T')


def _compare_data(a: Any, b: Any) -> int:
    if a is None or b is None:
        return 0
    a, b = str(a), str(b)
    return (a > b) - (a < b)


class Interval(Generic[T]):
    """An interval [start, end) with associated data."""
    __slots__ = ['start', 'end', 'data']

    def __init__(self, start: int, end: int, data: Optional[T] = None):
        self.start: int = start
        self.end: int = end
        self.data: Optional[T] = data

    @property
    def start_date(self) -> datetime:
        """Start as a UTC datetime, reading the timestamp as epoch milliseconds."""
        return from_timestamp(self.start)

    @property
    def end_date(self) -> datetime:
        return from_timestamp(self.end)

    def contains(self, time: int) -> bool:
        """True if time lies in [start, end)."""
        return self.start <= time < self.end

    def intersects(self, other: 'Interval') -> bool:
        """True if the two half-open intervals share at least one point."""
        return other.end > self.start and other.start < self.end

    def compare_to(self, other: 'Interval') -> int:
        """
        Compare by start, then end, then payload string.

        Returns:
            -1, 0 or 1.
        """
        if self.start < other.start:
            return -1
        elif self.start > other.start:
            return 1
        elif self.end < other.end:
            return -1
        elif self.end > other.end:
            return 1
        return _compare_data(self.data, other.data)

    def __lt__(self, other: 'Interval') -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: 'Interval') -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: 'Interval') -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: 'Interval') -> bool:
        return self.compare_to(other) >= 0

    def __eq__(self, other):
        if isinstance(other, Interval):
            return (self.start == other.start
                    and self.end == other.end
                    and self.data == other.data)
        return NotImplemented

    def __hash__(self):
        return hash((self.start, self.end, self.data))

    def __repr__(self):
        return f"Interval({self.start}, {self.end}, {self.data!r})"

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Interval':
        return cls(
            start=data["start"],
            end=data["end"],
            data=data.get("data"),
        )


def compare_intervals(a: Interval, b: Interval) -> int:
    """Natural order: start asc, end asc, payload string asc."""
    return a.compare_to(b)


def compare_intervals_reversed(a: Interval, b: Interval) -> int:
    """Reversed order: end desc, start desc, payload string asc."""
    if a.end < b.end:
        return 1
    elif a.end > b.end:
        return -1
    elif a.start < b.start:
        return 1
    elif a.start > b.start:
        return -1
    return _compare_data(a.data, b.data)


# Sort keys for sorted containers
natural_key = cmp_to_key(compare_intervals)
reversed_key = cmp_to_key(compare_intervals_reversed)
