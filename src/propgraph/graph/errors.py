from __future__ import annotations


class GraphError(Exception):
    """Base class for graph construction and traversal errors."""


class InvalidEdgeError(GraphError, ValueError):
    """An edge endpoint is missing or does not belong to the graph."""


class EmptyGraphError(GraphError, LookupError):
    """A traversal was executed against a graph with no vertices."""
