"""Shared graph fixtures for ringpath tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def example_graph():
    #  A - C - B
    #  |     /
    #  D - E
    return {
        "A": ("C", "D"),
        "B": ("C", "E"),
        "C": ("A", "B"),
        "D": ("A", "E"),
        "E": ("D", "B"),
    }


@pytest.fixture
def square():
    #  A - X
    #  |   |
    #  Y - B
    return {
        "A": ("X", "Y"),
        "X": ("A", "B"),
        "B": ("X", "Y"),
        "Y": ("A", "B"),
    }


@pytest.fixture
def pentagon():
    # The first-neighbor walk from A runs out of slots before reaching B.
    #
    #  A - X - Y
    #  |       |
    #  Z ----- B
    return {
        "A": ("X", "Z"),
        "X": ("A", "Y"),
        "Y": ("X", "B"),
        "B": ("Y", "Z"),
        "Z": ("A", "B"),
    }


@pytest.fixture
def two_triangles():
    # Two disjoint cycles. From A the first-neighbor walk reaches B in one
    # step, leaving two unset slots.
    #
    #    A          P
    #   / \        / \
    #  B - Z      Q - R
    return {
        "A": ("B", "Z"),
        "B": ("Z", "A"),
        "Z": ("A", "B"),
        "P": ("Q", "R"),
        "Q": ("R", "P"),
        "R": ("P", "Q"),
    }


@pytest.fixture
def two_cycle():
    # Degenerate 2-cycle: each node lists the other one twice.
    return {"A": ("B", "B"), "B": ("A", "A")}
