"""
Property Tests for the interval index.

Stabbing and overlap results must match a brute-force scan of the staging
list, and border-anchored iteration must cover exactly the intervals on the
right side of the border, duplicates included.
"""

from collections import Counter

from hypothesis import given, settings, strategies as st
from hypothesis.strategies import composite

from interval_index import Interval, IntervalTree, IteratorDirection

# =============================================================================
# STRATEGIES (Generators)
# =============================================================================

times = st.integers(min_value=-50, max_value=50)


@composite
def intervals(draw):
    """Intervals with start <= end and a payload from a small alphabet (to force ties)."""
    start = draw(times)
    length = draw(st.integers(min_value=0, max_value=30))
    return Interval(start, start + length, draw(st.sampled_from(["a", "b", "c"])))


@composite
def trees(draw):
    """Trees built from a list that may repeat intervals."""
    pool = draw(st.lists(intervals(), min_size=0, max_size=40))
    if pool:
        repeats = draw(st.lists(st.sampled_from(pool), max_size=10))
    else:
        repeats = []
    tree = IntervalTree()
    for interval in pool + repeats:
        tree.add_interval(interval)
    return tree


# =============================================================================
# PROPERTY TESTS
# =============================================================================

@settings(max_examples=200, deadline=None)
@given(trees(), times)
def test_stab_matches_scan(tree, t):
    expected = Counter(i for i in tree if i.contains(t))
    assert Counter(tree.get_intervals(t)) == expected


@settings(max_examples=200, deadline=None)
@given(trees(), times, st.integers(min_value=0, max_value=40))
def test_overlap_matches_scan(tree, start, length):
    query = Interval(start, start + length)
    expected = Counter(i for i in tree if i.intersects(query))
    assert Counter(tree.get_intervals(start, start + length)) == expected


@settings(max_examples=200, deadline=None)
@given(trees(), times)
def test_forward_iterator_coverage(tree, border):
    expected = Counter(i for i in tree if i.start >= border)
    assert Counter(tree.get_iterator(border, IteratorDirection.FORWARD)) == expected


@settings(max_examples=200, deadline=None)
@given(trees(), times)
def test_backward_iterator_coverage(tree, border):
    expected = Counter(i for i in tree if i.end <= border)
    assert Counter(tree.get_iterator(border, IteratorDirection.BACKWARD)) == expected


@settings(deadline=None)
@given(trees())
def test_built_tree_is_well_formed(tree):
    tree.build()
    assert tree.in_sync()
    tree.verify_integrity()


@settings(deadline=None)
@given(trees(), intervals(), times)
def test_mutation_then_query_resyncs(tree, extra, t):
    tree.build()
    tree.add_interval(extra)
    assert not tree.in_sync()
    tree.get(t)
    assert tree.in_sync()
    assert tree.size == tree.list_size()
