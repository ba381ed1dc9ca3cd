"""Graph store: vertices, edges and the graph that owns them."""

from .models import Edge, Vertex
from .errors import EmptyGraphError, GraphError, InvalidEdgeError
from .store import EdgeBuilder, Graph, VertexBuilder

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "VertexBuilder",
    "EdgeBuilder",
    "GraphError",
    "InvalidEdgeError",
    "EmptyGraphError",
]
