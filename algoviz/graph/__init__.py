"""
Graph Algorithms

Directed graph model plus exhaustive Hamilton cycle search.

Key Components:
    - Graph, Node, Edge: value-referenced directed graph
    - find_hamilton_cycles: backtracking search with a global result cap
    - trace_hamilton_search: same search, keeping every step
    - validate_hamilton_path: independent checker reporting all issues
    - graph_stats: counts, density and completeness

Usage:
    >>> from algoviz.graph import Graph, find_hamilton_cycles
    >>> g = Graph.from_edges("ABC", [("A", "B"), ("B", "C"), ("C", "A")])
    >>> find_hamilton_cycles(g, max_count=1)[0].path
    ('A', 'B', 'C', 'A')
"""

from .model import Node, Edge, Graph
from .hamilton import (
    HamiltonCycle,
    HamiltonStep,
    HamiltonSearch,
    HamiltonSearchResult,
    PathValidation,
    GraphStats,
    find_hamilton_cycles,
    trace_hamilton_search,
    validate_hamilton_path,
    graph_stats,
    DEFAULT_MAX_CYCLES,
)

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "HamiltonCycle",
    "HamiltonStep",
    "HamiltonSearch",
    "HamiltonSearchResult",
    "PathValidation",
    "GraphStats",
    "find_hamilton_cycles",
    "trace_hamilton_search",
    "validate_hamilton_path",
    "graph_stats",
    "DEFAULT_MAX_CYCLES",
]
