"""
Directed Graph Model.

Nodes are identified by string ids; edges refer to their endpoints by id
only, never by object reference. Removing a node therefore has to prune
every edge that mentions it, which `Graph.remove_node` does.

Adjacency is always derived from the edge list on demand: there is no
adjacency cache to keep in sync. Edges are one-directional; an undirected
connection needs both directions added explicitly.

Example:
    >>> g = Graph.from_edges(["A", "B", "C"], [("A", "B"), ("B", "C"), ("C", "A")])
    >>> g.adjacency()
    {'A': ['B'], 'B': ['C'], 'C': ['A']}
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..common.errors import ValidationError


@dataclass(frozen=True)
class Node:
    """
    A graph vertex.

    Attributes:
        id: Unique identifier
        label: Display label (defaults to the id)
        x, y: Canvas position, used only by renderers
    """
    id: str
    label: str = ""
    x: float = 0.0
    y: float = 0.0

    @property
    def display_label(self) -> str:
        return self.label or self.id


@dataclass(frozen=True)
class Edge:
    """
    A directed edge source -> target, referencing nodes by id.
    """
    id: str
    source: str
    target: str


@dataclass
class Graph:
    """
    Mutable directed graph with value-referenced edges.

    Attributes:
        nodes: Nodes in insertion order (this is the search order)
        edges: Edges in insertion order
    """
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    _edge_counter: int = field(default=0, repr=False, compare=False)

    @classmethod
    def from_edges(cls, node_ids: Iterable[str],
                   edge_pairs: Iterable[Tuple[str, str]]) -> 'Graph':
        """Build a graph from node ids and (source, target) pairs."""
        graph = cls()
        for node_id in node_ids:
            graph.add_node(node_id)
        for source, target in edge_pairs:
            graph.add_edge(source, target)
        return graph

    @property
    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def has_node(self, node_id: str) -> bool:
        return any(n.id == node_id for n in self.nodes)

    def has_edge(self, source: str, target: str) -> bool:
        return any(e.source == source and e.target == target for e in self.edges)

    def get_node(self, node_id: str) -> Node:
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise ValidationError(f"Node '{node_id}' does not exist in graph")

    def add_node(self, node_id: str, label: str = "",
                 x: float = 0.0, y: float = 0.0) -> Node:
        """
        Add a node.

        Raises:
            ValidationError: On an empty id or a duplicate id
        """
        if not node_id or not str(node_id).strip():
            raise ValidationError("Node id must not be empty")
        if self.has_node(node_id):
            raise ValidationError(f"Node '{node_id}' already exists")
        node = Node(id=node_id, label=label or node_id, x=x, y=y)
        self.nodes.append(node)
        return node

    def remove_node(self, node_id: str) -> None:
        """Remove a node and every edge that starts or ends at it."""
        self.get_node(node_id)
        self.nodes = [n for n in self.nodes if n.id != node_id]
        self.edges = [e for e in self.edges
                      if e.source != node_id and e.target != node_id]

    def add_edge(self, source: str, target: str,
                 edge_id: Optional[str] = None) -> Edge:
        """
        Add a directed edge source -> target.

        Raises:
            ValidationError: If an endpoint is unknown, the edge is a
                self-loop, or the same directed edge already exists
        """
        for endpoint in (source, target):
            if not self.has_node(endpoint):
                raise ValidationError(f"Node '{endpoint}' does not exist in graph")
        if source == target:
            raise ValidationError(f"Self-loop on '{source}' is not allowed")
        if self.has_edge(source, target):
            raise ValidationError(f"Edge '{source}' -> '{target}' already exists")

        if edge_id is None:
            existing = {e.id for e in self.edges}
            while edge_id is None or edge_id in existing:
                self._edge_counter += 1
                edge_id = f"edge-{self._edge_counter}"
        edge = Edge(id=edge_id, source=source, target=target)
        self.edges.append(edge)
        return edge

    def remove_edge(self, edge_id: str) -> None:
        if not any(e.id == edge_id for e in self.edges):
            raise ValidationError(f"Edge '{edge_id}' does not exist in graph")
        self.edges = [e for e in self.edges if e.id != edge_id]

    def validate(self) -> None:
        """
        Check that the graph can be searched.

        Raises:
            ValidationError: If the graph has no nodes or repeats a node id
        """
        if not self.nodes:
            raise ValidationError("Graph has no nodes")
        ids = self.node_ids
        if len(set(ids)) != len(ids):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            raise ValidationError(f"Duplicate node ids: {', '.join(duplicates)}")

    def adjacency(self) -> Dict[str, List[str]]:
        """
        Successor lists, derived from the edge list.

        Every node gets an entry (possibly empty); successors appear in
        edge insertion order.
        """
        adj: Dict[str, List[str]] = {node_id: [] for node_id in self.node_ids}
        for edge in self.edges:
            adj.setdefault(edge.source, []).append(edge.target)
        return adj

    def adjacency_matrix(self) -> np.ndarray:
        """Boolean matrix M where M[i, j] is True iff node i -> node j."""
        index = {node_id: i for i, node_id in enumerate(self.node_ids)}
        matrix = np.zeros((self.num_nodes, self.num_nodes), dtype=bool)
        for edge in self.edges:
            if edge.source in index and edge.target in index:
                matrix[index[edge.source], index[edge.target]] = True
        return matrix
