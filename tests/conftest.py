"""Shared graph fixtures."""

import pytest

from markov_classes.graph import Graph


@pytest.fixture
def cycle3() -> Graph:
    """1 -> 2 -> 3 -> 1, all with probability 1 (period 3)."""
    return Graph.from_edges(3, [(1, 2, 1.0), (2, 3, 1.0), (3, 1, 1.0)])


@pytest.fixture
def lazy_cycle3() -> Graph:
    """Aperiodic 3-cycle: each state stays with probability 1/2."""
    return Graph.from_edges(
        3,
        [
            (1, 1, 0.5), (1, 2, 0.5),
            (2, 2, 0.5), (2, 3, 0.5),
            (3, 3, 0.5), (3, 1, 0.5),
        ],
    )


@pytest.fixture
def absorbing_pair() -> Graph:
    """1 -> 2 and 2 -> 2: a transient state feeding an absorbing one."""
    return Graph.from_edges(2, [(1, 2, 1.0), (2, 2, 1.0)])


@pytest.fixture
def reducible10() -> Graph:
    """Ten-state chain with transient, periodic, and aperiodic classes.

    Classes: {1,2}, {3}, {5}, {7,8} transient; {4,6} persistent with
    period 2; {9,10} persistent and aperiodic.
    """
    return Graph.from_edges(
        10,
        [
            (1, 2, 0.5), (1, 3, 0.5),
            (2, 1, 0.3), (2, 4, 0.7),
            (3, 3, 0.2), (3, 5, 0.8),
            (4, 6, 1.0),
            (5, 5, 0.4), (5, 7, 0.6),
            (6, 4, 1.0),
            (7, 7, 0.5), (7, 8, 0.5),
            (8, 7, 0.9), (8, 9, 0.1),
            (9, 10, 1.0),
            (10, 9, 0.5), (10, 10, 0.5),
        ],
    )
