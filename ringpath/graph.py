"""Graph store for degree-2 (cycle) graphs.

A graph is a plain mapping from node label to an ordered pair of neighbor
labels. The pair shape itself carries the degree-2 invariant; this module
validates session inputs, builds immutable mappings node by node, and
checks whole-graph structure once insertion is complete.

Example:
    >>> from ringpath.graph import GraphBuilder
    >>> builder = GraphBuilder(start="A")
    >>> builder.add_node("A", ("B", "C"))
    >>> builder.add_node("B", ("C", "A"))
    >>> builder.add_node("C", ("A", "B"))
    >>> graph = builder.build()
    >>> graph["B"]
    ('C', 'A')
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import Any, Dict, List, NoReturn, Optional, Set, Tuple

import networkx as nx

from ringpath.errors import InvalidArgumentError
from ringpath.logging import get_logger
from ringpath.types import CycleGraph, Label, NeighborPair

logger = get_logger(__name__)

#: Default example topology. Start is "A", end is "B".
#:
#:     A - C - B
#:     |     /
#:     D - E
DEFAULT_EXAMPLE: Tuple[Tuple[Label, Tuple[Label, Label]], ...] = (
    ("A", ("C", "D")),
    ("B", ("C", "E")),
    ("C", ("A", "B")),
    ("D", ("A", "E")),
    ("E", ("D", "B")),
)
DEFAULT_START: Label = "A"
DEFAULT_END: Label = "B"


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _fail(message: str) -> NoReturn:
    logger.debug("Validation failed: %s", message)
    raise InvalidArgumentError(message)


def validate_session_inputs(
    graph: Optional[CycleGraph], start: Optional[Label], end: Optional[Label]
) -> None:
    """Check the inputs of a path-finding session.

    Neighbor pairs are not inspected here; a single-node graph may carry an
    arbitrary value since it is never walked.

    Args:
        graph: Adjacency mapping. Must be non-empty.
        start: Start label. Must be non-empty and a key of ``graph``.
        end: End label. Must be non-empty and a key of ``graph``.

    Raises:
        InvalidArgumentError: If any check fails.
    """
    if not graph:
        _fail("Graph must contain at least one node.")
    if _is_blank(start) or _is_blank(end):
        _fail("Start and end labels must be non-empty.")
    if start not in graph:
        _fail(f"Start node '{start}' not found in graph.")
    if end not in graph:
        _fail(f"End node '{end}' not found in graph.")


def validate_neighbor_pair(neighbors: Optional[NeighborPair]) -> None:
    """Check that ``neighbors`` holds exactly two distinct non-empty labels.

    Raises:
        InvalidArgumentError: If the pair is absent or malformed.
    """
    if neighbors is None or isinstance(neighbors, str) or len(neighbors) != 2:
        _fail(f"Neighbor pair must have exactly two entries, got {neighbors!r}.")
    first, second = neighbors
    if _is_blank(first) or _is_blank(second):
        _fail(f"Neighbor labels must be non-empty, got {neighbors!r}.")
    if first == second:
        _fail(f"Neighbor labels must differ, got {neighbors!r}.")


class GraphBuilder:
    """Incrementally collect validated nodes, then freeze them into a mapping.

    ``start`` is the designated start node. It is the only node allowed to
    list itself as a neighbor during insertion.
    """

    def __init__(self, start: Optional[Label] = None) -> None:
        self.start = start
        self._nodes: Dict[Label, Tuple[Label, Label]] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, label: object) -> bool:
        return label in self._nodes

    def add_node(self, label: Label, neighbors: NeighborPair) -> None:
        """Insert or overwrite ``label`` with its neighbor pair.

        Args:
            label: Node label. Must be non-empty.
            neighbors: Exactly two distinct non-empty labels.

        Raises:
            InvalidArgumentError: If the label or pair is malformed, or if the
                node lists itself and is not the start node.
        """
        if _is_blank(label):
            _fail("Node label must be non-empty.")
        validate_neighbor_pair(neighbors)
        if label in neighbors and label != self.start:
            _fail(f"Node '{label}' cannot be its own neighbor.")
        self._nodes[label] = (neighbors[0], neighbors[1])

    def build(self) -> CycleGraph:
        """Return an immutable snapshot of the collected nodes."""
        return MappingProxyType(dict(self._nodes))


def build_default_example() -> Tuple[CycleGraph, Label, Label]:
    """Build the fixed five-node example.

    Returns:
        Tuple of (graph, start, end) with start "A" and end "B".
    """
    builder = GraphBuilder(start=DEFAULT_START)
    for label, neighbors in DEFAULT_EXAMPLE:
        builder.add_node(label, neighbors)
    graph = builder.build()
    validate_structure(graph)
    return graph, DEFAULT_START, DEFAULT_END


def validate_structure(graph: CycleGraph) -> None:
    """Validate the structural invariants of a complete cycle graph.

    Every pair is checked first. Then every neighbor must be a key, and the
    undirected view must give each node degree exactly 2. Since each node
    lists two distinct neighbors other than itself, the degree check holds
    only when adjacency is symmetric.

    Args:
        graph: Adjacency mapping to check.

    Raises:
        InvalidArgumentError: On the first violation found.
    """
    if not graph:
        _fail("Graph must contain at least one node.")
    for label, neighbors in graph.items():
        if _is_blank(label):
            _fail("Node label must be non-empty.")
        validate_neighbor_pair(neighbors)
        if label in neighbors:
            _fail(f"Node '{label}' cannot be its own neighbor.")

    for label, neighbors in graph.items():
        for neighbor in neighbors:
            if neighbor not in graph:
                _fail(f"Neighbor '{neighbor}' of node '{label}' not found in graph.")

    for label, degree in to_networkx(graph).degree():
        if degree != 2:
            _fail(
                f"Adjacency is not symmetric: node '{label}' has degree {degree} "
                "in the undirected view."
            )


def to_networkx(graph: CycleGraph) -> nx.Graph:
    """Convert an adjacency mapping into an undirected NetworkX graph.

    Malformed pairs and blank neighbor entries are skipped so unvalidated
    graphs convert too.
    """
    G = nx.Graph()
    G.add_nodes_from(graph)
    for label, neighbors in graph.items():
        if isinstance(neighbors, str) or not isinstance(neighbors, Sequence):
            continue
        for neighbor in neighbors:
            if not _is_blank(neighbor):
                G.add_edge(label, neighbor)
    return G


def cycles(graph: CycleGraph) -> List[Set[Label]]:
    """Return the node sets of the graph's disjoint cycles (components)."""
    return [set(c) for c in nx.connected_components(to_networkx(graph))]


def are_connected(graph: CycleGraph, a: Label, b: Label) -> bool:
    """Return True if ``a`` and ``b`` lie on a common cycle."""
    G = to_networkx(graph)
    if a not in G or b not in G:
        return False
    return nx.has_path(G, a, b)
