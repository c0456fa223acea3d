"""
Hamilton Cycle Search and Path Validation.

A Hamilton cycle visits every node exactly once and returns to where it
started. Deciding whether one exists is NP-complete, so the search here is
plain exhaustive backtracking and is only practical for small graphs
(a few dozen nodes at most).

Search Order:
    Start nodes are tried in node insertion order and successors in edge
    insertion order. Both orders are part of the contract: the same graph
    always yields the same cycles in the same order.

Search Algorithm:
    For each start node:
        1. Mark start as visited
        2. Recurse into each unvisited successor
        3. When every node is visited and the current node has an edge back
           to the start, record [start, ..., start]
        4. Unmark the node on the way back (backtrack)
    The search stops globally once `max_count` cycles have been recorded.

Validation:
    `validate_hamilton_path` is an independent checker: it never calls the
    search, and it reports every problem it finds instead of stopping at
    the first one.

Example:
    >>> g = Graph.from_edges("ABCD", [("A", "B"), ("B", "C"), ("C", "D"),
    ...                               ("D", "A"), ("A", "C"), ("B", "D")])
    >>> [''.join(c.path) for c in find_hamilton_cycles(g)]
    ['ABCDA', 'BCDAB', 'CDABC', 'DABCD']
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple
import logging

import numpy as np

from ..common.errors import ValidationError
from ..common.steps import AlgorithmStep, BACKTRACK, COMPLETE, CYCLE, VISIT
from .model import Graph

logger = logging.getLogger(__name__)

DEFAULT_MAX_CYCLES = 10


@dataclass(frozen=True)
class HamiltonCycle:
    """
    A cycle found by the search.

    Attributes:
        path: Node ids, first == last, length = node count + 1
        is_valid: Always True for cycles produced by the search
        message: Human-readable description
    """
    path: Tuple[str, ...]
    is_valid: bool
    message: str

    @property
    def key(self) -> str:
        return "-".join(self.path[:-1])


@dataclass(frozen=True)
class HamiltonStep(AlgorithmStep):
    """
    One search event.

    Attributes:
        current: Node the search is at
        path: Path from the start node to `current`
        visited: Visited node ids, in visiting order
        candidates: Unvisited successors of `current`
    """
    current: str
    path: Tuple[str, ...]
    visited: Tuple[str, ...]
    candidates: Tuple[str, ...] = ()


@dataclass
class HamiltonSearchResult:
    """
    Cycles plus the full search trace.

    Attributes:
        steps: visit / cycle / backtrack events and a final complete step
        cycles: Cycles in discovery order
    """
    steps: Tuple[HamiltonStep, ...]
    cycles: List[HamiltonCycle]

    def summary(self) -> str:
        lines = [f"Hamilton search: {len(self.cycles)} cycle(s), "
                 f"{len(self.steps)} steps"]
        lines.extend("  " + " → ".join(c.path) for c in self.cycles)
        return "\n".join(lines)


@dataclass(frozen=True)
class PathValidation:
    """
    Outcome of checking a candidate cycle.

    Attributes:
        is_valid: True iff `issues` is empty
        message: One-line verdict
        issues: Every problem found
    """
    is_valid: bool
    message: str
    issues: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GraphStats:
    """
    Basic graph statistics.

    Attributes:
        nodes: Node count
        edges: Edge count
        density: edges / (n * (n - 1)) in percent, 0 for n <= 1
        is_complete: Every ordered pair of distinct nodes has an edge
    """
    nodes: int
    edges: int
    density: float
    is_complete: bool

    @property
    def density_label(self) -> str:
        return f"{self.density:.2f}%"


class HamiltonSearch:
    """
    Exhaustive backtracking search for Hamilton cycles.

    One instance performs one search; create a new instance per run.

    Example:
        >>> search = HamiltonSearch(graph, max_count=5, record_steps=True)
        >>> result = search.run()
    """

    def __init__(self, graph: Graph, max_count: int = DEFAULT_MAX_CYCLES,
                 record_steps: bool = False):
        graph.validate()
        if max_count < 0:
            raise ValidationError(f"max_count must not be negative, got {max_count}")

        self.node_ids = graph.node_ids
        self.adjacency = graph.adjacency()
        self.max_count = max_count
        self.record_steps = record_steps

        self.cycles: List[HamiltonCycle] = []
        self.steps: List[HamiltonStep] = []
        self._seen: Set[str] = set()

    @property
    def done(self) -> bool:
        return len(self.cycles) >= self.max_count

    def run(self) -> HamiltonSearchResult:
        for start in self.node_ids:
            if self.done:
                break
            self._visit(start, [start], {start}, start)

        if self.record_steps:
            self.steps.append(HamiltonStep(
                message=f"Search finished: {len(self.cycles)} cycle(s) found",
                action=COMPLETE,
                current="",
                path=(),
                visited=(),
            ))

        logger.debug("Hamilton: %d nodes, %d cycles, %d steps",
                     len(self.node_ids), len(self.cycles), len(self.steps))
        return HamiltonSearchResult(steps=tuple(self.steps), cycles=list(self.cycles))

    def _visit(self, current: str, path: List[str], visited: Set[str],
               start: str) -> None:
        if self.done:
            return

        if len(visited) == len(self.node_ids):
            if start in self.adjacency.get(current, []):
                self._record_cycle(path, start)
            return

        candidates = [n for n in self.adjacency.get(current, []) if n not in visited]
        self._record(VISIT, current, path, candidates,
                     f"At '{current}', unvisited successors: "
                     f"{', '.join(candidates) if candidates else 'none'}")

        for neighbor in candidates:
            if self.done:
                return
            visited.add(neighbor)
            path.append(neighbor)
            self._visit(neighbor, path, visited, start)
            path.pop()
            visited.discard(neighbor)
            self._record(BACKTRACK, current, path, (),
                         f"Backtracked from '{neighbor}' to '{current}'")

    def _record_cycle(self, path: List[str], start: str) -> None:
        key = "-".join(path)
        if key in self._seen:
            return
        self._seen.add(key)
        cycle_path = tuple(path) + (start,)
        message = f"Valid Hamilton cycle: {key} → {start}"
        self.cycles.append(HamiltonCycle(path=cycle_path, is_valid=True, message=message))
        self._record(CYCLE, path[-1], cycle_path, (), message)

    def _record(self, action: str, current: str, path: Sequence[str],
                candidates: Sequence[str], message: str) -> None:
        if not self.record_steps:
            return
        self.steps.append(HamiltonStep(
            message=message,
            action=action,
            current=current,
            path=tuple(path),
            visited=tuple(dict.fromkeys(path)),
            candidates=tuple(candidates),
        ))


def find_hamilton_cycles(graph: Graph,
                         max_count: int = DEFAULT_MAX_CYCLES) -> List[HamiltonCycle]:
    """
    Find up to `max_count` Hamilton cycles.

    Raises:
        ValidationError: On an empty graph, duplicate node ids or a
            negative `max_count`
    """
    return HamiltonSearch(graph, max_count).run().cycles


def trace_hamilton_search(graph: Graph,
                          max_count: int = DEFAULT_MAX_CYCLES) -> HamiltonSearchResult:
    """Run the search and keep every visit / backtrack / cycle step."""
    return HamiltonSearch(graph, max_count, record_steps=True).run()


def validate_hamilton_path(path: Sequence[str], graph: Graph) -> PathValidation:
    """
    Check whether `path` is a Hamilton cycle of `graph`.

    Checks (all of them, not just the first failure):
        - the path is not empty
        - it starts and ends at the same node
        - excluding the closing node, it visits as many distinct nodes as
          the graph has
        - every node exists
        - every consecutive pair is an edge
    """
    if not path:
        return PathValidation(
            is_valid=False,
            message="Path is empty",
            issues=("Path contains no nodes",),
        )

    path = list(path)
    node_ids = graph.node_ids
    known = set(node_ids)
    adjacency = graph.adjacency()
    issues: List[str] = []

    if path[0] != path[-1]:
        issues.append(f"Path does not form a cycle: starts at {path[0]}, "
                      f"ends at {path[-1]}")

    unique = set(path[:-1])
    if len(unique) != len(node_ids):
        issues.append(f"Path visits {len(unique)} unique nodes, "
                      f"but graph has {len(node_ids)} nodes")

    for node_id in path:
        if node_id not in known:
            issues.append(f"Node '{node_id}' does not exist in graph")

    for source, target in zip(path, path[1:]):
        if target not in adjacency.get(source, []):
            issues.append(f"Edge from '{source}' to '{target}' does not exist")

    if issues:
        plural = "s" if len(issues) > 1 else ""
        message = f"Invalid path: {len(issues)} issue{plural} found"
    else:
        message = (f"Valid Hamilton cycle! All {len(node_ids)} nodes "
                   f"visited exactly once.")

    return PathValidation(is_valid=not issues, message=message, issues=tuple(issues))


def graph_stats(graph: Graph) -> GraphStats:
    """Node / edge counts, density and completeness."""
    n = graph.num_nodes
    max_edges = n * (n - 1)
    density = round(graph.num_edges / max_edges * 100, 2) if n > 1 else 0.0

    matrix = graph.adjacency_matrix()
    off_diagonal = ~np.eye(n, dtype=bool)
    is_complete = bool(np.all(matrix[off_diagonal]))

    return GraphStats(
        nodes=n,
        edges=graph.num_edges,
        density=density,
        is_complete=is_complete,
    )
