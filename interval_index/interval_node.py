from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from sortedcontainers import SortedKeyList

from .errors import EmptyInputError
from .interval import Interval, compare_intervals, natural_key

T = TypeVar('T')


class IntervalEntry(Generic[T]):
    """An interval stored on a node together with its occurrence count."""
    __slots__ = ['interval', 'count']

    def __init__(self, interval: Interval[T], count: int = 1):
        self.interval: Interval[T] = interval
        self.count: int = count

    def __repr__(self):
        return f"IntervalEntry({self.interval!r}, {self.count})"


def _entry_key(entry: IntervalEntry):
    return natural_key(entry.interval)


class IntervalNode(Generic[T]):
    """
    One node of a centered interval tree.

    Holds every interval of its input that straddles ``center``; intervals
    ending before the center go to the left subtree, intervals starting after
    it to the right one. Equal intervals share one entry with a count.
    """
    __slots__ = ['center', 'intervals', 'left', 'right', 'parent']

    def __init__(self, intervals: List[Interval[T]], parent: Optional['IntervalNode[T]'] = None):
        if not intervals:
            raise EmptyInputError("Cannot build an interval node from an empty list")

        self.intervals: SortedKeyList = SortedKeyList(key=_entry_key)
        self.left: Optional['IntervalNode[T]'] = None
        self.right: Optional['IntervalNode[T]'] = None
        self.parent: Optional['IntervalNode[T]'] = parent

        endpoints = set()
        for interval in intervals:
            endpoints.add(interval.start)
            endpoints.add(interval.end)
        self.center: int = self._median(endpoints)

        left: List[Interval[T]] = []
        right: List[Interval[T]] = []
        for interval in intervals:
            if interval.end < self.center:
                left.append(interval)
            elif interval.start > self.center:
                right.append(interval)
            else:
                self._add(interval)

        if left:
            self.left = IntervalNode(left, self)
        if right:
            self.right = IntervalNode(right, self)

    @classmethod
    def empty(cls, parent: Optional['IntervalNode[T]'] = None) -> 'IntervalNode[T]':
        """Sentinel node with no intervals and no children."""
        node = cls.__new__(cls)
        node.center = 0
        node.intervals = SortedKeyList(key=_entry_key)
        node.left = None
        node.right = None
        node.parent = parent
        return node

    # --- Internal Utilities ---

    @staticmethod
    def _median(endpoints) -> int:
        """Middle element of the sorted endpoint set, not interpolated."""
        ordered = sorted(endpoints)
        return ordered[len(ordered) // 2]

    def _add(self, interval: Interval[T]):
        idx = self.intervals.bisect_key_left(natural_key(interval))
        if idx < len(self.intervals):
            entry = self.intervals[idx]
            if compare_intervals(entry.interval, interval) == 0:
                entry.count += 1
                return
        self.intervals.add(IntervalEntry(interval))

    # --- Search Methods ---

    def stab(self, time: int) -> List[Interval[T]]:
        """All intervals containing time, repeated by their counts."""
        result: List[Interval[T]] = []
        for entry in self.intervals:
            interval = entry.interval
            if interval.contains(time):
                result.extend([interval] * entry.count)
            elif interval.start > time:
                break

        if time < self.center and self.left is not None:
            result.extend(self.left.stab(time))
        elif time > self.center and self.right is not None:
            result.extend(self.right.stab(time))
        return result

    def query(self, target: Interval) -> List[Interval[T]]:
        """All intervals intersecting target, repeated by their counts."""
        result: List[Interval[T]] = []
        for entry in self.intervals:
            interval = entry.interval
            if interval.intersects(target):
                result.extend([interval] * entry.count)
            elif interval.start > target.end:
                break

        if target.start < self.center and self.left is not None:
            result.extend(self.left.query(target))
        if target.end > self.center and self.right is not None:
            result.extend(self.right.query(target))
        return result

    # --- Accessors ---

    def items(self) -> Iterator[Tuple[Interval[T], int]]:
        """(interval, count) pairs in natural order."""
        for entry in self.intervals:
            yield entry.interval, entry.count

    def node_count(self) -> int:
        count = 1
        if self.left is not None:
            count += self.left.node_count()
        if self.right is not None:
            count += self.right.node_count()
        return count

    def __str__(self):
        parts = [f"{self.center}: "]
        for entry in self.intervals:
            interval = entry.interval
            parts.append(f"[{interval.start},{interval.end}]:{{")
            parts.append(f"({interval.start},{interval.end},{interval.data})" * entry.count)
            parts.append("} ")
        return "".join(parts)

    def __repr__(self):
        return f"IntervalNode(center={self.center}, entries={len(self.intervals)})"
