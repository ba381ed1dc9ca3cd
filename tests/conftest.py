"""Shared fixtures: a small movie graph and an empty graph."""

from types import SimpleNamespace

import pytest

from propgraph import Graph


@pytest.fixture
def empty_graph() -> Graph:
    return Graph()


@pytest.fixture
def movies() -> SimpleNamespace:
    g = Graph()
    a = g.add_vertex(properties={"type": "movie", "title": "Interstellar"})
    b = g.add_vertex(properties={"type": "movie", "title": "Inception"})
    c = g.add_vertex(properties={"job": "actor", "firstName": "Matt"})
    acted_in = g.add_edge("acted_in", c, a)
    return SimpleNamespace(graph=g, a=a, b=b, c=c, acted_in=acted_in)


@pytest.fixture
def branching() -> SimpleNamespace:
    """x -> y, x -> z, w -> y."""
    g = Graph()
    x = g.add_vertex("x")
    y = g.add_vertex("y")
    z = g.add_vertex("z")
    w = g.add_vertex("w")
    g.add_edge("e", x, y)
    g.add_edge("e", x, z)
    g.add_edge("e", w, y)
    return SimpleNamespace(graph=g, x=x, y=y, z=z, w=w)
