"""Tests for the link graph and degree centrality."""

import random

from blindfinder.analysis.graph_builder import LinkGraphBuilder
from blindfinder.domain.document import NoteConnection
from tests.fakes import make_connection


def test_cycle_centrality(cycle_connections: list[NoteConnection]) -> None:
    """Test that every note of a 3-cycle has two neighbors."""
    centrality = LinkGraphBuilder().calculate_centrality(cycle_connections)

    assert centrality == {"A": 2, "B": 2, "C": 2}


def test_dangling_target_becomes_node() -> None:
    """Test that link targets without a document still become graph nodes."""
    connections = [make_connection("A", links=["ghost"])]

    centrality = LinkGraphBuilder().calculate_centrality(connections)

    assert centrality == {"A": 1, "ghost": 1}


def test_isolated_note_has_zero_centrality() -> None:
    centrality = LinkGraphBuilder().calculate_centrality([make_connection("alone")])

    assert centrality == {"alone": 0}


def test_repeated_links_count_once() -> None:
    connections = [make_connection("A", links=["B", "B", "B"])]

    centrality = LinkGraphBuilder().calculate_centrality(connections)

    assert centrality == {"A": 1, "B": 1}


def test_self_link_adds_single_entry() -> None:
    connections = [make_connection("A", links=["A", "A"])]

    graph = LinkGraphBuilder().build_graph(connections)

    assert graph == {"A": {"A"}}


def test_graph_is_symmetric() -> None:
    """Test that every edge is recorded in both directions."""
    rng = random.Random(7)
    names = [f"n{i}" for i in range(12)]
    connections = [
        make_connection(name, links=rng.sample(names + ["x1", "x2"], k=rng.randint(0, 4)))
        for name in names
    ]

    graph = LinkGraphBuilder().build_graph(connections)

    for node, neighbors in graph.items():
        for neighbor in neighbors:
            assert node in graph[neighbor]


def test_centrality_is_independent_of_connection_order() -> None:
    connections = [
        make_connection("A", links=["B", "C"]),
        make_connection("B", links=["C"]),
        make_connection("D", links=["A", "missing"]),
    ]
    builder = LinkGraphBuilder()

    forward = builder.calculate_centrality(connections)
    backward = builder.calculate_centrality(list(reversed(connections)))

    assert forward == backward
    assert forward == {"A": 3, "B": 2, "C": 2, "D": 2, "missing": 1}


def test_empty_connections() -> None:
    assert LinkGraphBuilder().calculate_centrality([]) == {}
