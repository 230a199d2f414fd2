"""
Interval Index

In-memory centered interval tree over half-open integer intervals:
- Interval value with ordering and overlap predicates (interval.py)
- Tree nodes with stabbing and overlap queries (interval_node.py)
- Lazily rebuilt tree facade (interval_tree.py)
- Border-anchored forward/backward iteration (iterator.py)
- Datetime conversion helpers (timezone_utils.py)
- JSON persistence (serialization.py) and TOML configuration (config.py)
"""

from .errors import (
    IntervalIndexError, InvalidDirectionError,
    UnsupportedOperationError, EmptyInputError,
)
from .interval import Interval
from .interval_node import IntervalNode
from .iterator import IntervalTreeIterator, IteratorDirection
from .interval_tree import IntervalTree
from .config import Config

__all__ = [
    'Interval',
    'IntervalNode',
    'IntervalTree',
    'IntervalTreeIterator',
    'IteratorDirection',
    'Config',
    # Errors
    'IntervalIndexError',
    'InvalidDirectionError',
    'UnsupportedOperationError',
    'EmptyInputError',
]
