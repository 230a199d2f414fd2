"""
Interval tree facade.

An IntervalTree is essentially a map from intervals to payloads which can be
queried for everything associated with a point or a range of time. Changes
go to a staging list and are only folded into the tree on the next query or
explicit call to build().
"""

from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from . import debug
from .interval import Interval
from .interval_node import IntervalNode
from .iterator import IntervalTreeIterator, IteratorDirection
from .timezone_utils import TimeValue, to_timestamp

T = TypeVar('T')


def _debug_print(msg: str) -> None:
    debug.debug_print("TREE", msg)


class IntervalTree(Generic[T]):
    def __init__(self, intervals: Optional[Iterable[Interval[T]]] = None):
        self.root: IntervalNode[T] = IntervalNode.empty()
        self._intervals: List[Interval[T]] = []
        self._in_sync: bool = True
        self.size: int = 0

        if intervals is not None:
            self._intervals.extend(intervals)
            self._in_sync = False
            self.build()

    # --- Mutation ---

    def add_interval(self, start: Any, end: Optional[TimeValue] = None, data: Optional[T] = None):
        """
        Add an interval to the staging list.

        Accepts either an Interval object or start, end and data. Start and
        end may be int timestamps or datetimes. The tree is not rebuilt until
        the next query or call to build().
        """
        if isinstance(start, Interval):
            interval = start
        else:
            interval = Interval(to_timestamp(start), to_timestamp(end), data)
        self._intervals.append(interval)
        self._in_sync = False

    def remove_interval(self, interval: Interval[T]):
        """Remove the first interval equal to the given one, if any."""
        if interval in self._intervals:
            self._intervals.remove(interval)
        self._in_sync = False

    def remove_intervals(self, intervals: Iterable[Interval[T]]):
        for interval in intervals:
            if interval in self._intervals:
                self._intervals.remove(interval)
        self._in_sync = False

    def clear(self):
        self._intervals.clear()
        self._in_sync = False

    # --- Public API ---

    def get(self, start: TimeValue, end: Optional[TimeValue] = None) -> List[T]:
        """
        Payloads of all intervals containing start, or intersecting
        [start, end) when end is given. Rebuilds the tree if out of sync.
        """
        return [interval.data for interval in self.get_intervals(start, end)]

    def get_intervals(self, start: TimeValue, end: Optional[TimeValue] = None) -> List[Interval[T]]:
        """
        Stabbing query when only start is given, overlap query otherwise.
        Rebuilds the tree if out of sync.
        """
        self.build()
        if end is None:
            return self.root.stab(to_timestamp(start))
        return self.root.query(Interval(to_timestamp(start), to_timestamp(end), None))

    def get_iterator(self, border: TimeValue, direction: IteratorDirection) -> IntervalTreeIterator[T]:
        """
        Iterator over intervals starting at or after border (FORWARD) or
        ending at or before border (BACKWARD).
        """
        self.build()
        return IntervalTreeIterator(to_timestamp(border), self.root, direction)

    def iterator(self) -> Iterator[Interval[T]]:
        """Iterate over the staging list in insertion order."""
        return iter(self._intervals)

    def __iter__(self) -> Iterator[Interval[T]]:
        return self.iterator()

    def in_sync(self) -> bool:
        """True if no changes have been made since the last build."""
        return self._in_sync

    def build(self):
        """Rebuild the tree from the staging list unless already in sync."""
        if self._in_sync:
            return
        if self._intervals:
            self.root = IntervalNode(list(self._intervals))
        else:
            self.root = IntervalNode.empty()
        self._in_sync = True
        self.size = len(self._intervals)
        if debug.is_enabled():
            _debug_print(f"Rebuilt tree: {self.size} intervals, {self.root.node_count()} nodes")

    def current_size(self) -> int:
        return len(self._intervals)

    def list_size(self) -> int:
        """Number of intervals in the staging list, equal to size if in_sync()."""
        return len(self._intervals)

    def __len__(self) -> int:
        return self.list_size()

    # --- Serialization ---

    def to_dict(self) -> dict:
        return {
            "intervals": [interval.to_dict() for interval in self._intervals],
            "size": len(self._intervals),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'IntervalTree':
        return cls([Interval.from_dict(item) for item in data.get("intervals", [])])

    # --- Debug Tool ---

    def __str__(self):
        return self._node_string(self.root, 0)

    def _node_string(self, node: Optional[IntervalNode[T]], level: int) -> str:
        if node is None:
            return ""
        return ("\t" * level + str(node) + "\n"
                + self._node_string(node.left, level + 1)
                + self._node_string(node.right, level + 1))

    def verify_integrity(self):
        """Crashes if the centered tree invariants or parent links are violated."""
        def _walk(node, parent, low, high):
            if node is None:
                return 0
            if node.parent is not parent:
                raise RuntimeError(f"Parent link violation at {node.center}")
            if (low is not None and node.center <= low) or (high is not None and node.center >= high):
                raise RuntimeError(f"Center {node.center} outside its subtree bounds")

            count = 0
            for interval, occurrences in node.items():
                if not interval.start <= node.center <= interval.end:
                    raise RuntimeError(f"Interval {interval!r} does not straddle {node.center}")
                if high is not None and interval.end >= high:
                    raise RuntimeError(f"Interval {interval!r} crosses the parent center {high}")
                if low is not None and interval.start <= low:
                    raise RuntimeError(f"Interval {interval!r} crosses the parent center {low}")
                count += occurrences

            count += _walk(node.left, node, low, node.center)
            count += _walk(node.right, node, node.center, high)
            return count

        total = _walk(self.root, None, None, None)
        if self._in_sync and total != self.size:
            raise RuntimeError(f"Tree holds {total} intervals, expected {self.size}")
