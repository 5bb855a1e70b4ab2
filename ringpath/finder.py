"""Minimum-stop path finder for cycle graphs.

Every node has exactly two neighbors, so between two nodes on the same cycle
there are at most two simple paths. The finder walks once in each direction
from the start node and returns the shorter walk.

Each walk leaves the start through one of its two neighbors, then always
steps to the current node's second neighbor. A walk stops at the end node or
when it fills its allotted ``len(graph) // 2 + 1`` slots, whichever comes
first. Slots a walk never reaches stay ``None``.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import List, Optional, Tuple

from ringpath.config import FINDER_CONFIG, PathFinderConfig
from ringpath.errors import PathNotFoundError
from ringpath.graph import (
    build_default_example,
    validate_session_inputs,
    validate_structure,
)
from ringpath.logging import get_logger
from ringpath.path import format_path, trim_to_end
from ringpath.types import Candidate, ComparisonMode, CycleGraph, Label

logger = get_logger(__name__)


def walk_capacity(graph: CycleGraph) -> int:
    """Return the number of slots allotted to each candidate walk."""
    return len(graph) // 2 + 1


def _neighbors_of(
    graph: CycleGraph, label: Optional[Label]
) -> Optional[Tuple[Label, Label]]:
    """Return the neighbor pair of ``label``, or None if it cannot be followed.

    A label that is not a key, or whose value is not a two-item sequence,
    ends the walk.
    """
    if not isinstance(label, str) or label not in graph:
        return None
    neighbors = graph[label]
    if isinstance(neighbors, str) or not isinstance(neighbors, Sequence):
        return None
    if len(neighbors) != 2:
        return None
    return neighbors[0], neighbors[1]


def walk_from(
    graph: CycleGraph, start: Label, end: Label, neighbor_index: int
) -> Candidate:
    """Walk from ``start`` through its neighbor at ``neighbor_index``.

    The walk stops early, leaving later slots unset, at a node it cannot
    follow (see ``_neighbors_of``).

    Args:
        graph: Adjacency mapping with at least two nodes.
        start: Start label.
        end: End label.
        neighbor_index: 0 to leave through the first neighbor, 1 for the second.

    Returns:
        A tuple of exactly ``walk_capacity(graph)`` slots. Unreached slots are None.
    """
    slots: List[Optional[Label]] = [None] * walk_capacity(graph)
    slots[0] = start

    current: Optional[Label] = start
    filled = 1
    # The first step is always taken, even when start is the end node
    while filled < len(slots) and (filled == 1 or current != end):
        neighbors = _neighbors_of(graph, current)
        if neighbors is None:
            logger.debug("Walk %d stopped at '%s'", neighbor_index, current)
            break
        current = neighbors[neighbor_index if filled == 1 else 1]
        slots[filled] = current
        filled += 1

    candidate = tuple(slots)
    logger.debug("Walk %d from '%s': %s", neighbor_index, start, format_path(candidate))
    return candidate


def select_shortest(
    first: Candidate,
    second: Candidate,
    end: Label,
    comparison: ComparisonMode = ComparisonMode.CAPACITY,
) -> Candidate:
    """Pick the shorter of two candidate walks, preferring ``first`` on a tie.

    With ``CAPACITY`` the allocated sizes are compared as they are. With
    ``TRIMMED`` each candidate is cut at its first occurrence of ``end``; a
    candidate that never reaches ``end`` loses, and if neither does, ``first``
    is returned untrimmed.
    """
    if comparison == ComparisonMode.CAPACITY:
        return first if len(first) <= len(second) else second

    trimmed_first = trim_to_end(first, end)
    trimmed_second = trim_to_end(second, end)
    if trimmed_first is None and trimmed_second is None:
        return first
    if trimmed_second is None:
        return trimmed_first
    if trimmed_first is None:
        return trimmed_second
    if len(trimmed_first) <= len(trimmed_second):
        return trimmed_first
    return trimmed_second


def find_minimum_stop_path(
    graph: CycleGraph,
    start: Label,
    end: Label,
    config: Optional[PathFinderConfig] = None,
) -> Candidate:
    """Compute the minimum-stop path from ``start`` to ``end``.

    Args:
        graph: Adjacency mapping. ``start`` and ``end`` must be keys.
        start: Start label.
        end: End label.
        config: Selection settings; defaults to ``FINDER_CONFIG``.

    Returns:
        The selected candidate walk.

    Raises:
        PathNotFoundError: If ``config.strict`` is set and the selected walk
            does not reach ``end``.
    """
    config = config or FINDER_CONFIG

    if len(graph) == 1:
        return (start,)

    first = walk_from(graph, start, end, 0)
    second = walk_from(graph, start, end, 1)
    chosen = select_shortest(first, second, end, config.comparison)

    if end not in chosen:
        if config.strict:
            raise PathNotFoundError(start, end)
        logger.warning(
            "End node '%s' not reached from '%s'; path has unset slots", end, start
        )
    return chosen


class MinimumStopPathFinder:
    """A query session over one graph with a fixed start and end node.

    Example:
        >>> finder = MinimumStopPathFinder.from_example()
        >>> finder.get_minimum_stop_path()
        '[A, C, B]'
    """

    def __init__(
        self,
        graph: CycleGraph,
        start: Label,
        end: Label,
        config: Optional[PathFinderConfig] = None,
    ) -> None:
        """Validate inputs and create the session.

        Args:
            graph: Non-empty mapping from label to its neighbor pair.
            start: Start label, a key of ``graph``.
            end: End label, a key of ``graph``.
            config: Selection settings; defaults to ``FINDER_CONFIG``.

        Raises:
            InvalidArgumentError: If the inputs fail validation.
        """
        self._config = config or FINDER_CONFIG
        validate_session_inputs(graph, start, end)
        if self._config.validate_structure:
            validate_structure(graph)

        self._graph: CycleGraph = MappingProxyType(dict(graph))
        self._start = start
        self._end = end

    @classmethod
    def from_example(
        cls, config: Optional[PathFinderConfig] = None
    ) -> "MinimumStopPathFinder":
        """Create a session over the built-in five-node example (A to B)."""
        graph, start, end = build_default_example()
        return cls(graph, start, end, config=config)

    @property
    def graph(self) -> CycleGraph:
        return self._graph

    @property
    def start(self) -> Label:
        return self._start

    @property
    def end(self) -> Label:
        return self._end

    @property
    def config(self) -> PathFinderConfig:
        return self._config

    def minimum_stop_path(self) -> Candidate:
        """Return the selected candidate walk as a tuple."""
        return find_minimum_stop_path(self._graph, self._start, self._end, self._config)

    def get_minimum_stop_path(self) -> str:
        """Return the minimum-stop path rendered as ``[A, C, B]``."""
        return format_path(self.minimum_stop_path())

    def __repr__(self) -> str:
        return (
            f"MinimumStopPathFinder(nodes={len(self._graph)}, "
            f"start={self._start!r}, end={self._end!r})"
        )
