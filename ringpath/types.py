"""Type aliases and enums shared across ringpath."""

from __future__ import annotations

from enum import IntEnum
from typing import Mapping, Optional, Sequence, Tuple

#: A node (city) label. Must be a non-empty string.
Label = str

#: The two neighbors of a node. Order matters: index 0 is the "first"
#: neighbor and index 1 the "second" neighbor followed during a walk.
NeighborPair = Sequence[Label]

#: Adjacency mapping from node label to its neighbor pair.
CycleGraph = Mapping[Label, NeighborPair]

#: A candidate walk. Slots the walk never reached are ``None``.
Candidate = Tuple[Optional[Label], ...]


class ComparisonMode(IntEnum):
    """How the two candidate walks are compared when selecting a path."""

    #: Compare allocated candidate sizes; ties go to the first candidate.
    CAPACITY = 1
    #: Trim each candidate at its first occurrence of the end node and
    #: compare the trimmed lengths.
    TRIMMED = 2
