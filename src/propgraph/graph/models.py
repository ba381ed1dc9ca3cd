from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class Vertex:
    """A graph node.

    `id` is generated once and never changes. Equality and hashing only look
    at `id`, so two vertices with identical labels and properties are still
    distinct. `properties` is a read-only view.
    """

    id: str = field(default_factory=_new_id)
    label: str | None = field(default=None, compare=False)
    properties: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        for k, v in self.properties.items():
            if not isinstance(k, str) or not isinstance(v, str):
                raise TypeError(f"Vertex properties must be str -> str, got {k!r}: {v!r}")
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def __str__(self) -> str:
        from ..display import format_vertex

        return format_vertex(self)


@dataclass(frozen=True, slots=True, eq=False)
class Edge:
    """A directed, labelled edge. Compared by identity."""

    label: str
    source: Vertex
    destination: Vertex

    def __str__(self) -> str:
        from ..display import format_edge

        return format_edge(self)
