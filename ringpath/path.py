"""Helpers for candidate walks: trimming and string rendering."""

from __future__ import annotations

from typing import Optional, Sequence

from ringpath.types import Candidate, Label


def trim_to_end(
    candidate: Sequence[Optional[Label]], end: Label
) -> Optional[Candidate]:
    """Cut ``candidate`` just after the first occurrence of ``end``.

    Args:
        candidate: Walk produced by the path finder; may hold unset slots.
        end: Label of the end node.

    Returns:
        The prefix ending at ``end``, or None if ``end`` never occurs.
    """
    for idx, label in enumerate(candidate):
        if label == end:
            return tuple(candidate[: idx + 1])
    return None


def format_path(path: Optional[Sequence[Optional[Label]]]) -> str:
    """Render a path as ``[A, C, B]``.

    ``None`` renders as ``null`` and an empty path as ``[]``. Unset slots
    inside the path render as empty segments, e.g. ``[A, B, ]``.
    """
    if path is None:
        return "null"
    return "[" + ", ".join("" if label is None else str(label) for label in path) + "]"
