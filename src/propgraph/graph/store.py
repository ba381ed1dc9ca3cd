from __future__ import annotations

import logging
from dataclasses import dataclass, field
from collections.abc import Mapping

from ..traversal.pipeline import Traversal
from ..traversal.steps import SeedAll, SeedOne
from .errors import InvalidEdgeError
from .models import Edge, Vertex

logger = logging.getLogger(__name__)


class Graph:
    """In-memory property graph.

    Vertices are kept in insertion order together with an id -> position
    index; edges are kept in insertion order. Only `add_vertex` and
    `add_edge` mutate the graph.
    """

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._index: dict[str, int] = {}
        self._edges: list[Edge] = []

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"

    # --- construction ---

    def add_vertex(
        self, label: str | None = None, properties: Mapping[str, str] | None = None
    ) -> Vertex:
        vertex = Vertex(label=label, properties=properties or {})
        self._index[vertex.id] = len(self._vertices)
        self._vertices.append(vertex)
        logger.debug("Added vertex %s (label=%s, %d properties)", vertex.id, label, len(vertex.properties))
        return vertex

    def add_edge(self, label: str, source: Vertex | None, destination: Vertex | None) -> Edge:
        src = self._resolve(source, "source", label)
        dst = self._resolve(destination, "destination", label)

        edge = Edge(label=label, source=src, destination=dst)
        self._edges.append(edge)
        logger.debug("Added edge %s: %s -> %s", label, src.id, dst.id)
        return edge

    def _resolve(self, vertex: Vertex | None, role: str, label: str) -> Vertex:
        if vertex is None:
            logger.warning("Rejected edge %r: missing %s vertex", label, role)
            raise InvalidEdgeError(f"Edge {label!r} is missing its {role} vertex")

        pos = self._index.get(vertex.id)
        if pos is None or self._vertices[pos] is not vertex:
            logger.warning("Rejected edge %r: %s vertex %s is not in this graph", label, role, vertex.id)
            raise InvalidEdgeError(f"Edge {label!r}: {role} vertex {vertex.id} does not belong to this graph")
        return vertex

    def add_v(self) -> VertexBuilder:
        return VertexBuilder(self)

    def add_e(self, label: str) -> EdgeBuilder:
        return EdgeBuilder(self, label)

    # --- accessors ---

    def all_vertices(self) -> list[Vertex]:
        return list(self._vertices)

    def all_edges(self) -> list[Edge]:
        return list(self._edges)

    def get_vertex(self, vertex_id: str) -> Vertex | None:
        pos = self._index.get(vertex_id)
        return self._vertices[pos] if pos is not None else None

    def e(self) -> list[Edge]:
        return self.all_edges()

    # --- traversals ---

    def traversal(self, seed: Vertex | None = None) -> Traversal:
        """Start a pipeline from every vertex, or from `seed` only."""
        first = SeedAll() if seed is None else SeedOne(seed.id)
        return Traversal(graph=self, steps=(first,))

    def v(self, seed: Vertex | None = None) -> Traversal:
        return self.traversal(seed)


@dataclass(slots=True)
class VertexBuilder:
    """Fluent front-end for `Graph.add_vertex`."""

    graph: Graph
    _label: str | None = None
    _properties: dict[str, str] = field(default_factory=dict)

    def label(self, label: str) -> VertexBuilder:
        self._label = label
        return self

    def property(self, key: str, value: str) -> VertexBuilder:
        self._properties[key] = value
        return self

    def build(self) -> Vertex:
        return self.graph.add_vertex(self._label, self._properties)


@dataclass(slots=True)
class EdgeBuilder:
    """Fluent front-end for `Graph.add_edge`.

    Nothing is added to the graph until `build()` is called.
    """

    graph: Graph
    _label: str
    _source: Vertex | None = None
    _destination: Vertex | None = None

    def source(self, vertex: Vertex) -> EdgeBuilder:
        self._source = vertex
        return self

    def destination(self, vertex: Vertex) -> EdgeBuilder:
        self._destination = vertex
        return self

    def build(self) -> Edge:
        return self.graph.add_edge(self._label, self._source, self._destination)
