"""ringpath: minimum-stop paths on cycle graphs.

Every node has exactly two neighbors and every edge has unit length, so the
graph is one or more disjoint cycles. Between two nodes on the same cycle
there are two walks; the shorter one is the minimum-stop path.

Primary API:
    MinimumStopPathFinder - Query session over (graph, start, end)
    find_minimum_stop_path() - Functional form returning the raw walk
    GraphBuilder - Build an immutable graph node by node
    PathFinderConfig - Comparison and strictness settings

Example:
    from ringpath import MinimumStopPathFinder

    finder = MinimumStopPathFinder(
        {"A": ("C", "D"), "B": ("C", "E"), "C": ("A", "B"),
         "D": ("A", "E"), "E": ("D", "B")},
        "A",
        "B",
    )
    finder.get_minimum_stop_path()  # '[A, C, B]'
"""

from __future__ import annotations

from ringpath import logging
from ringpath._version import __version__
from ringpath.config import FINDER_CONFIG, PathFinderConfig
from ringpath.errors import InvalidArgumentError, PathNotFoundError
from ringpath.finder import MinimumStopPathFinder, find_minimum_stop_path
from ringpath.graph import (
    GraphBuilder,
    are_connected,
    build_default_example,
    validate_structure,
)
from ringpath.path import format_path
from ringpath.types import ComparisonMode

__all__ = [
    "__version__",
    # Session
    "MinimumStopPathFinder",
    "find_minimum_stop_path",
    # Graph store
    "GraphBuilder",
    "build_default_example",
    "validate_structure",
    "are_connected",
    # Rendering
    "format_path",
    # Config and types
    "PathFinderConfig",
    "FINDER_CONFIG",
    "ComparisonMode",
    # Errors
    "InvalidArgumentError",
    "PathNotFoundError",
    # Utilities
    "logging",
]
