"""Traversal steps.

Each step is a small frozen description. `apply_step` is the single
interpreter: it maps a working set (ordered, duplicates allowed) to a new
working set, reading the graph but never changing it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from ..graph.models import Vertex

if TYPE_CHECKING:
    from ..graph.store import Graph


@dataclass(frozen=True, slots=True)
class SeedAll:
    pass


@dataclass(frozen=True, slots=True)
class SeedOne:
    vertex_id: str


@dataclass(frozen=True, slots=True)
class HasProperty:
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class ExpandOut:
    pass


@dataclass(frozen=True, slots=True)
class ExpandIn:
    pass


Step = Union[SeedAll, SeedOne, HasProperty, ExpandOut, ExpandIn]


def apply_step(step: Step, working: list[Vertex], graph: Graph) -> list[Vertex]:
    if isinstance(step, SeedAll):
        return graph.all_vertices()

    if isinstance(step, SeedOne):
        return [v for v in graph.all_vertices() if v.id == step.vertex_id]

    if isinstance(step, HasProperty):
        return [v for v in working if v.properties.get(step.key) == step.value]

    if isinstance(step, ExpandOut):
        edges = graph.all_edges()
        out: list[Vertex] = []
        for vertex in working:
            out.extend(e.destination for e in edges if e.source == vertex)
        return out

    if isinstance(step, ExpandIn):
        edges = graph.all_edges()
        out = []
        for vertex in working:
            out.extend(e.source for e in edges if e.destination == vertex)
        return out

    raise TypeError(f"Unknown traversal step: {step!r}")
