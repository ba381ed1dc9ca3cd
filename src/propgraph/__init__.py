"""propgraph: an in-memory property graph with lazy, composable traversals.

This package provides:
- A graph store owning vertices (string properties) and directed edges
- An immutable traversal pipeline (`has`, `out`, `in_`) evaluated on demand
- Plain-text rendering of vertices and edges, and a small demo CLI
"""

from .graph import (
    Edge,
    EdgeBuilder,
    EmptyGraphError,
    Graph,
    GraphError,
    InvalidEdgeError,
    Vertex,
    VertexBuilder,
)
from .traversal import Traversal

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Vertex",
    "Edge",
    "VertexBuilder",
    "EdgeBuilder",
    "Traversal",
    "GraphError",
    "InvalidEdgeError",
    "EmptyGraphError",
]
