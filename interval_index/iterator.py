"""
Boundary-anchored iteration over a built interval tree.

A FORWARD iterator yields every interval whose start is at or after the
border, walking the tree left to right. A BACKWARD iterator yields every
interval whose end is at or before the border, walking right to left and
ordering each node's intervals by descending end.
"""

from enum import Enum
from typing import Generic, Iterator, Optional, Set, TypeVar

from sortedcontainers import SortedKeyList

from .errors import InvalidDirectionError, UnsupportedOperationError
from .interval import Interval, reversed_key
from .interval_node import IntervalEntry, IntervalNode

T = TypeVar('T')


class IteratorDirection(Enum):
    """Walking direction of an IntervalTreeIterator."""
    FORWARD = "forward"
    BACKWARD = "backward"


def _reversed_entry_key(entry: IntervalEntry):
    return reversed_key(entry.interval)


class IntervalTreeIterator(Generic[T]):
    """
    Stateful cursor over the intervals of a tree, starting at a border.

    The cursor keeps a pointer to the node being read, an iterator over that
    node's entries and a set of nodes already consumed, so that climbing back
    up through parent links never reads a node twice.

    The tree must not be rebuilt while the iterator is in use.
    """

    def __init__(self, border: int, root: IntervalNode[T], direction: IteratorDirection):
        if not isinstance(direction, IteratorDirection):
            raise InvalidDirectionError(f"Unknown direction: {direction!r}")

        self.direction = direction
        self.left_border: Optional[int] = None
        self.right_border: Optional[int] = None

        self._current_node: Optional[IntervalNode[T]] = None
        self._current_parent: Optional[IntervalNode[T]] = None
        self._current_interval: Optional[Interval[T]] = None
        self._current_interval_count: int = 0
        self._entries: Optional[Iterator[IntervalEntry[T]]] = None
        self._found_next: Optional[Interval[T]] = None
        self._visited: Set[IntervalNode[T]] = set()

        if direction is IteratorDirection.FORWARD:
            self.left_border = border
            self._find_leftmost(root)
        else:
            self.right_border = border
            self._find_rightmost(root)

    # --- Iterator protocol ---

    def __iter__(self) -> 'IntervalTreeIterator[T]':
        return self

    def __next__(self) -> Interval[T]:
        interval = self.next()
        if interval is None:
            raise StopIteration
        return interval

    def has_next(self) -> bool:
        """Look ahead one interval; the result is kept for the next call to next()."""
        if self._found_next is None:
            self._found_next = self.next()
        return self._found_next is not None

    def next(self) -> Optional[Interval[T]]:
        """Next interval, or None once the walk is finished."""
        if self._found_next is not None:
            result = self._found_next
            self._found_next = None
            return result

        if self.direction is IteratorDirection.FORWARD:
            return self._get_next()
        return self._get_previous()

    def remove(self):
        raise UnsupportedOperationError("IntervalTreeIterator does not support remove()")

    # --- Forward walk ---

    def _find_leftmost(self, node: IntervalNode[T]):
        self._current_node = node
        self._current_parent = node.parent
        while node.center >= self.left_border and node.left is not None:
            node = node.left
            self._current_node = node
            self._current_parent = node.parent

        if node.center >= self.left_border:
            self._prime_first_entry()

    def _prime_first_entry(self):
        entries = iter(self._current_node.intervals)
        for entry in entries:
            if entry.interval.start >= self.left_border:
                self._current_interval = entry.interval
                self._current_interval_count = entry.count
                self._entries = entries
                break

    def _get_next(self) -> Optional[Interval[T]]:
        while True:
            if self._current_interval_count > 0:
                self._current_interval_count -= 1
                return self._current_interval

            if self._entries is not None:
                entry = next(self._entries, None)
                if entry is None:
                    self._entries = None
                elif entry.interval.start >= self.left_border:
                    self._current_interval = entry.interval
                    self._current_interval_count = entry.count
                continue

            node = self._current_node
            if node.right is not None and node.right.center < self.left_border:
                self._visited.add(node)
                self._current_node = node.right
                continue

            if node.right is not None:
                self._visited.add(node)
                self._find_leftmost(node.right)
                continue

            parent = self._current_parent
            while parent is not None and (parent in self._visited or parent.center < self.left_border):
                parent = parent.parent
            self._current_parent = parent

            if parent is None:
                return None

            self._current_node = parent
            self._current_parent = parent.parent
            self._entries = iter(parent.intervals)
            self._visited.add(parent)

    # --- Backward walk ---

    def _find_rightmost(self, node: IntervalNode[T]):
        # Last node reached wins; its parent is where climbing resumes
        self._current_node = node
        self._current_parent = node.parent
        while node.center <= self.right_border and node.right is not None:
            node = node.right
            self._current_node = node
            self._current_parent = node.parent

        if node.center <= self.right_border:
            self._prime_last_entry()

    @staticmethod
    def _reversed_entries(node: IntervalNode[T]) -> SortedKeyList:
        return SortedKeyList(node.intervals, key=_reversed_entry_key)

    def _prime_last_entry(self):
        entries = iter(self._reversed_entries(self._current_node))
        for entry in entries:
            if entry.interval.end <= self.right_border:
                self._current_interval = entry.interval
                self._current_interval_count = entry.count
                self._entries = entries
                break

    def _get_previous(self) -> Optional[Interval[T]]:
        while True:
            if self._current_interval_count > 0:
                self._current_interval_count -= 1
                return self._current_interval

            if self._entries is not None:
                entry = next(self._entries, None)
                if entry is None:
                    self._entries = None
                elif entry.interval.end <= self.right_border:
                    self._current_interval = entry.interval
                    self._current_interval_count = entry.count
                continue

            node = self._current_node
            if node.left is not None and node.left.center > self.right_border:
                self._visited.add(node)
                self._current_node = node.left
                continue

            if node.left is not None:
                self._visited.add(node)
                self._find_rightmost(node.left)
                continue

            parent = self._current_parent
            while parent is not None and (parent in self._visited or parent.center > self.right_border):
                parent = parent.parent
            self._current_parent = parent

            if parent is None:
                return None

            self._current_node = parent
            self._current_parent = parent.parent
            self._entries = iter(self._reversed_entries(parent))
            self._visited.add(parent)
