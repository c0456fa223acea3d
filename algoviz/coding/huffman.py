"""
Huffman Coding (Greedy Tree Coder).

Huffman's algorithm builds an optimal prefix-free code bottom-up:

    1. Create one leaf per symbol, weighted by its probability
    2. Repeatedly remove the two lightest nodes and join them under a new
       parent whose weight is their sum
    3. Stop when one node (the root) remains
    4. Walk the tree: left edge = '0', right edge = '1'

Among all prefix codes for the same distribution, no other code has a
smaller expected length.

Tree Representation:
    The tree is an arena: a list of HuffmanNode records indexed by integer
    id, where internal nodes refer to their children by id. Ids are
    assigned in creation order (leaves first, in input order), which is
    also the tie-breaking order: when two nodes weigh the same, the one
    created first is taken first and becomes the left child.

Example:
    >>> result = build_huffman_coding({"A": 3, "B": 2, "C": 1})
    >>> sorted(len(c) for c in result.codes.values())
    [1, 2, 2]
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import heapq
import logging

from tabulate import tabulate

from ..common.codes import CodeResult
from ..common.steps import AlgorithmStep, COMBINE, INITIALIZE
from ..common.symbols import AlphabetLike, normalize, validate_alphabet

logger = logging.getLogger(__name__)

# Weights are raised to at least this value before normalization
MIN_WEIGHT = 0.01


@dataclass(frozen=True)
class HuffmanNode:
    """
    One node of the Huffman arena.

    Attributes:
        id: Index of this node in the arena
        weight: Normalized probability mass below this node
        char: Symbol for leaves, None for internal nodes
        left: Arena id of the left child (internal nodes only)
        right: Arena id of the right child (internal nodes only)
    """
    id: int
    weight: float
    char: Optional[str] = None
    left: Optional[int] = None
    right: Optional[int] = None

    @property
    def is_leaf(self) -> bool:
        return self.char is not None


@dataclass(frozen=True)
class HuffmanStep(AlgorithmStep):
    """
    One Huffman step.

    Attributes:
        node_id: Arena id of the node created by this step
        forest: Arena ids of the nodes still waiting to be merged,
            after this step
    """
    node_id: int
    forest: Tuple[int, ...]


@dataclass
class HuffmanResult:
    """
    Complete result of a Huffman run.

    Attributes:
        steps: All initialize / combine steps in order
        nodes: The full node arena (index == node id)
        root_id: Arena id of the root
        results: Final codes, sorted by symbol
    """
    steps: Tuple[HuffmanStep, ...]
    nodes: Tuple[HuffmanNode, ...]
    root_id: int
    results: List[CodeResult]

    @property
    def codes(self) -> Dict[str, str]:
        return {r.char: r.code for r in self.results}

    @property
    def root(self) -> HuffmanNode:
        return self.nodes[self.root_id]

    def node(self, node_id: int) -> HuffmanNode:
        return self.nodes[node_id]

    def summary(self) -> str:
        rows = [(r.char, f"{r.probability:.3f}", r.code, r.length)
                for r in self.results]
        return (
            f"Huffman coding: {len(self.results)} symbols, "
            f"{len(self.steps)} steps\n"
            + tabulate(rows, headers=["Symbol", "Probability", "Code", "Length"])
        )


def build_huffman_coding(alphabet: AlphabetLike) -> HuffmanResult:
    """
    Build a Huffman tree and extract its codes.

    Args:
        alphabet: At least two symbols with non-negative weights
            (probabilities or raw frequencies)

    Returns:
        HuffmanResult with one "initialize" step per leaf followed by one
        "combine" step per merge

    Raises:
        ValidationError: If fewer than two symbols are given or a weight
            is negative / non-finite
    """
    symbols = validate_alphabet(alphabet, min_size=2, allow_zero=True)
    normalized = normalize(symbols, floor=MIN_WEIGHT)

    nodes: List[HuffmanNode] = []
    steps: List[HuffmanStep] = []
    # Heap entries are (weight, id); equal weights pop in creation order
    heap: List[Tuple[float, int]] = []

    for sym in normalized:
        leaf = HuffmanNode(id=len(nodes), weight=sym.probability, char=sym.char)
        nodes.append(leaf)
        heap.append((leaf.weight, leaf.id))
        steps.append(HuffmanStep(
            message=f"Created leaf node for '{leaf.char}' with probability {leaf.weight:.3f}",
            action=INITIALIZE,
            node_id=leaf.id,
            forest=tuple(node_id for _, node_id in heap),
        ))

    heapq.heapify(heap)

    while len(heap) > 1:
        left_weight, left_id = heapq.heappop(heap)
        right_weight, right_id = heapq.heappop(heap)

        parent = HuffmanNode(
            id=len(nodes),
            weight=left_weight + right_weight,
            left=left_id,
            right=right_id,
        )
        nodes.append(parent)
        heapq.heappush(heap, (parent.weight, parent.id))

        steps.append(HuffmanStep(
            message=(f"Combined nodes with frequencies {left_weight:.3f} and "
                     f"{right_weight:.3f} = {parent.weight:.3f}"),
            action=COMBINE,
            node_id=parent.id,
            forest=tuple(sorted(node_id for _, node_id in heap)),
        ))

    root_id = heap[0][1]
    codes = extract_codes(nodes, root_id)
    results = sorted(
        (CodeResult(sym.char, codes[sym.char], sym.probability) for sym in normalized),
        key=lambda r: r.char,
    )

    logger.debug("Huffman: %d symbols, %d steps, root weight %.3f",
                 len(normalized), len(steps), nodes[root_id].weight)

    return HuffmanResult(
        steps=tuple(steps),
        nodes=tuple(nodes),
        root_id=root_id,
        results=results,
    )


def extract_codes(nodes: List[HuffmanNode], root_id: int) -> Dict[str, str]:
    """
    Walk the arena depth-first and collect codes.

    Left edges add '0', right edges add '1'. A tree that is a single leaf
    gets the code "0".
    """
    codes: Dict[str, str] = {}
    stack: List[Tuple[int, str]] = [(root_id, "")]

    while stack:
        node_id, prefix = stack.pop()
        node = nodes[node_id]
        if node.is_leaf:
            codes[node.char] = prefix or "0"
            continue
        # Push right first so the left subtree is visited first
        stack.append((node.right, prefix + "1"))
        stack.append((node.left, prefix + "0"))

    return codes
