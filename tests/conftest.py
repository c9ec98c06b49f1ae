"""Shared graph fixtures.

Graphs are built from edge-list text with ``parse_edge_list`` so the fixtures
exercise the same path as files loaded from disk.
"""

from __future__ import annotations

import random
from typing import List

import pytest

from wgraph.graph.io import parse_edge_list


def edge_list(text: str) -> List[str]:
    """Split a dedented edge-list literal into lines."""
    return [line.strip() for line in text.strip().splitlines()]


def _random_edge_lines(
    seed: int, vertices: int, edges: int, max_cost: int = 20
) -> List[str]:
    rng = random.Random(seed)
    lines = [f"{vertices} {edges}"]
    for _ in range(edges):
        u, v = rng.sample(range(1, vertices + 1), 2)
        lines.append(f"{u} {v} {rng.randint(1, max_cost)}")
    return lines


@pytest.fixture
def random_edge_lines():
    """Factory for edge-list lines of a seeded random multigraph without self-loops."""
    return _random_edge_lines


@pytest.fixture
def square():
    # Cost:
    #      [1]
    #   1───────2
    #   │       │
    #   │[4]    │[2]
    #   │       │
    #   4───────3
    #      [3]
    return parse_edge_list(
        edge_list(
            """
            4 4
            1 2 1
            2 3 2
            3 4 3
            4 1 4
            """
        )
    )


@pytest.fixture
def two_pairs():
    # Cost:
    #      [5]         [7]
    #   1───────2   3───────4
    return parse_edge_list(
        edge_list(
            """
            4 2
            1 2 5
            3 4 7
            """
        )
    )


@pytest.fixture
def isolated():
    # Five vertices, no edges
    return parse_edge_list(["5 0"])


@pytest.fixture
def diamond():
    # Cost:
    #        [1]     [1]
    #     ┌────►2─────┐
    #     │           ▼
    #     1           4
    #     │           ▲
    #     └────►3─────┘
    #        [1]     [1]
    return parse_edge_list(
        edge_list(
            """
            4 4
            1 2 1
            1 3 1
            2 4 1
            3 4 1
            """
        )
    )


@pytest.fixture
def detour():
    # Cost:
    #      [10]
    #   1───────2───────4
    #   │       │  [1]
    #   │[1]    │[1]
    #   └───3───┘
    return parse_edge_list(
        edge_list(
            """
            4 4
            1 2 10
            1 3 1
            3 2 1
            2 4 1
            """
        )
    )


@pytest.fixture
def line5():
    # 1──2──3──4──5, unit costs
    return parse_edge_list(["5 4", "1 2 1", "2 3 1", "3 4 1", "4 5 1"])
