"""
Hamilton Cycle Demo

Run with:
    python -m algoviz.graph.demo
"""

import argparse
import logging

from algoviz.graph import (
    Graph, graph_stats, find_hamilton_cycles, trace_hamilton_search,
    validate_hamilton_path,
)


def build_square_graph() -> Graph:
    """Four nodes on a square with two diagonals (A->C, B->D)."""
    graph = Graph()
    for node_id, x, y in [("A", 100, 100), ("B", 250, 100),
                          ("C", 250, 250), ("D", 100, 250)]:
        graph.add_node(node_id, x=x, y=y)
    for source, target in [("A", "B"), ("B", "C"), ("C", "D"),
                           ("D", "A"), ("A", "C"), ("B", "D")]:
        graph.add_edge(source, target)
    return graph


def demo_search():
    """Find cycles and print the search trace."""
    print("\n" + "=" * 70)
    print("DEMO 1: HAMILTON CYCLE SEARCH")
    print("=" * 70)

    graph = build_square_graph()
    stats = graph_stats(graph)
    print(f"\nNodes: {stats.nodes}, edges: {stats.edges}, "
          f"density: {stats.density_label}, complete: {stats.is_complete}")

    result = trace_hamilton_search(graph, max_count=5)
    for step in result.steps:
        indent = "  " * max(len(step.path) - 1, 0)
        print(f"  {indent}{step}")
    print()
    print(result.summary())
    return result


def demo_validation():
    """Check a correct and an incomplete path."""
    print("\n" + "=" * 70)
    print("DEMO 2: PATH VALIDATION")
    print("=" * 70)

    graph = build_square_graph()
    for path in (["A", "B", "C", "D", "A"], ["A", "B", "D", "A"]):
        outcome = validate_hamilton_path(path, graph)
        print(f"\n{' → '.join(path)}: {outcome.message}")
        for issue in outcome.issues:
            print(f"  - {issue}")


def demo_node_removal():
    """Removing a node prunes its edges and can destroy every cycle."""
    print("\n" + "=" * 70)
    print("DEMO 3: EDITING THE GRAPH")
    print("=" * 70)

    graph = build_square_graph()
    graph.remove_node("C")
    print(f"\nAfter removing C: {graph.num_nodes} nodes, {graph.num_edges} edges")
    cycles = find_hamilton_cycles(graph)
    print(f"Cycles: {[' → '.join(c.path) for c in cycles] or 'none'}")


def main():
    parser = argparse.ArgumentParser(description="Hamilton cycle demos")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    demo_search()
    demo_validation()
    demo_node_removal()

    print("\n✓ Graph demos complete!")


if __name__ == "__main__":
    main()
