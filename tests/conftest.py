"""Shared fixtures for the interval index tests."""

import pytest

from interval_index import Interval, IntervalTree
from interval_index import debug, timezone_utils


@pytest.fixture(autouse=True)
def reset_package_state():
    """Debug output and timezone are module globals; restore them after each test."""
    yield
    debug.set_debug(False)
    timezone_utils.set_timezone("UTC")


@pytest.fixture
def abc_tree():
    """(1,5,A), (3,7,B), (6,10,C)"""
    tree = IntervalTree()
    tree.add_interval(1, 5, "A")
    tree.add_interval(3, 7, "B")
    tree.add_interval(6, 10, "C")
    return tree


@pytest.fixture
def abcd_intervals():
    return [
        Interval(10, 20, "a"),
        Interval(15, 25, "b"),
        Interval(30, 40, "c"),
        Interval(35, 45, "d"),
    ]
