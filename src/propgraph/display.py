"""Human-readable rendering of vertices and edges."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .settings import settings

if TYPE_CHECKING:
    from .graph.models import Edge, Vertex


def format_vertex(vertex: Vertex) -> str:
    # The label, when set, is shown instead of the id
    name = vertex.label if vertex.label is not None else vertex.id
    props = ", ".join(f"{k}: {v}" for k, v in sorted(vertex.properties.items()))
    return f"[{name}] {{ {props} }}"


def format_edge(edge: Edge, *, uppercase: bool | None = None) -> str:
    if uppercase is None:
        uppercase = settings.uppercase_edge_labels
    label = edge.label.upper() if uppercase else edge.label
    return f"{format_vertex(edge.source)} --[{label}]--> {format_vertex(edge.destination)}"
