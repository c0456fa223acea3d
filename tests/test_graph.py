"""
Tests for the directed graph model
"""

import numpy as np
import pytest

from algoviz.common import ValidationError
from algoviz.graph import Graph, Node


class TestGraphEditing:
    def test_add_node_defaults_label_to_id(self):
        graph = Graph()
        node = graph.add_node("A", x=10, y=20)
        assert node.label == "A"
        assert (node.x, node.y) == (10, 20)
        assert graph.node_ids == ["A"]

    def test_duplicate_node_rejected(self):
        graph = Graph()
        graph.add_node("A")
        with pytest.raises(ValidationError, match="already exists"):
            graph.add_node("A")

    def test_empty_node_id_rejected(self):
        with pytest.raises(ValidationError):
            Graph().add_node("  ")

    def test_remove_node_prunes_dangling_edges(self, square_graph):
        square_graph.remove_node("C")
        assert square_graph.node_ids == ["A", "B", "D"]
        assert all("C" not in (e.source, e.target) for e in square_graph.edges)
        assert square_graph.num_edges == 3

    def test_remove_unknown_node(self, square_graph):
        with pytest.raises(ValidationError):
            square_graph.remove_node("Z")

    def test_edge_ids_are_generated(self):
        graph = Graph.from_edges("AB", [("A", "B"), ("B", "A")])
        assert [e.id for e in graph.edges] == ["edge-1", "edge-2"]

    def test_generated_edge_id_skips_existing(self):
        graph = Graph.from_edges("ABC", [])
        graph.add_edge("A", "B", edge_id="edge-1")
        edge = graph.add_edge("B", "C")
        assert edge.id == "edge-2"

    @pytest.mark.parametrize("source,target", [("A", "Z"), ("Z", "A"), ("A", "A"), ("A", "B")])
    def test_invalid_edges_rejected(self, source, target):
        graph = Graph.from_edges("AB", [("A", "B")])
        with pytest.raises(ValidationError):
            graph.add_edge(source, target)

    def test_reverse_edge_is_distinct(self):
        graph = Graph.from_edges("AB", [("A", "B")])
        graph.add_edge("B", "A")
        assert graph.has_edge("B", "A") and graph.has_edge("A", "B")

    def test_remove_edge(self):
        graph = Graph.from_edges("AB", [("A", "B")])
        graph.remove_edge("edge-1")
        assert graph.num_edges == 0
        with pytest.raises(ValidationError):
            graph.remove_edge("edge-1")


class TestAdjacency:
    def test_adjacency_follows_edge_order(self, square_graph):
        assert square_graph.adjacency() == {
            "A": ["B", "C"],
            "B": ["C", "D"],
            "C": ["D"],
            "D": ["A"],
        }

    def test_adjacency_is_directed(self):
        graph = Graph.from_edges("AB", [("A", "B")])
        assert graph.adjacency() == {"A": ["B"], "B": []}

    def test_adjacency_matrix(self, square_graph):
        matrix = square_graph.adjacency_matrix()
        assert matrix.shape == (4, 4)
        assert matrix.dtype == bool
        assert matrix.sum() == 6
        assert matrix[0, 1] and not matrix[1, 0]
        assert not np.any(np.diag(matrix))


class TestGraphValidation:
    def test_empty_graph(self):
        with pytest.raises(ValidationError, match="no nodes"):
            Graph().validate()

    def test_duplicate_ids_from_direct_construction(self):
        graph = Graph(nodes=[Node("A"), Node("A")])
        with pytest.raises(ValidationError, match="Duplicate"):
            graph.validate()
