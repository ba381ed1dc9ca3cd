"""Sample movie dataset and a walkthrough of the traversal API."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .display import format_edge, format_vertex
from .graph import Edge, Graph, Vertex


def build_movie_graph() -> Graph:
    g = Graph()

    # People
    thomas = g.add_v().property("age", "22").property("firstName", "Thomas").property("lastName", "Gouveia").build()
    nolan = g.add_v().property("age", "52").property("firstName", "Christopher").property("lastName", "Nolan").build()
    damon = g.add_v().property("job", "actor").property("firstName", "Matt").property("lastName", "Damon").build()
    chastain = (
        g.add_v().property("job", "actor").property("firstName", "Jessica").property("lastName", "Chastain").build()
    )

    # Movies
    interstellar = (
        g.add_v().property("title", "Interstellar").property("releaseDate", "2014").property("type", "movie").build()
    )
    inception = g.add_v().property("title", "Inception").property("releaseDate", "2010").property("type", "movie").build()

    oscar = g.add_v().property("distinction", "Oscar of the bests visual effects").build()

    g.add_e("directed").source(nolan).destination(interstellar).build()
    g.add_e("directed").source(nolan).destination(inception).build()
    g.add_e("acted_in").source(damon).destination(interstellar).build()
    g.add_e("acted_in").source(damon).destination(inception).build()
    g.add_e("acted_in").source(chastain).destination(interstellar).build()
    g.add_e("like").source(thomas).destination(interstellar).build()
    g.add_e("acquired").source(inception).destination(oscar).build()

    return g


def _section(out: TextIO, title: str, lines: Iterable[str]) -> None:
    bar = "=" * 44
    print(file=out)
    print(bar, file=out)
    print(title, file=out)
    print(bar, file=out)
    for line in lines:
        print(line, file=out)


def run_demo(graph: Graph, out: TextIO | None = None, *, uppercase: bool | None = None) -> None:
    """Print the sample queries.

    `uppercase` overrides `settings.uppercase_edge_labels` for this run only.
    """
    out = out or sys.stdout
    movies = graph.traversal().has("type", "movie")

    def vertices(items: Iterable[Vertex]) -> list[str]:
        return [format_vertex(v) for v in items]

    def edges(items: Iterable[Edge]) -> list[str]:
        return [format_edge(e, uppercase=uppercase) for e in items]

    _section(out, "Get all vertices of the graph", vertices(graph.traversal().execute()))
    _section(out, "Get all edges of the graph", edges(graph.all_edges()))
    _section(out, "Get all vertices with attribute type=movie", vertices(movies.execute()))
    _section(out, "Get all in edges for movies", edges(movies.in_edges()))
    _section(out, "Get all out edges for movies", edges(movies.out_edges()))
    _section(out, "Get all in vertices for movies", vertices(movies.in_().execute()))
    _section(out, "Get all out vertices for movies", vertices(movies.out().execute()))
