"""Shared fixtures."""

import pytest

from algoviz.graph import Graph


@pytest.fixture
def square_graph():
    """A, B, C, D on a square plus the diagonals A->C and B->D."""
    return Graph.from_edges(
        ["A", "B", "C", "D"],
        [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A"), ("A", "C"), ("B", "D")],
    )


@pytest.fixture
def complete_graph_4():
    ids = ["A", "B", "C", "D"]
    return Graph.from_edges(ids, [(a, b) for a in ids for b in ids if a != b])
