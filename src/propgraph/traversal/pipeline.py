from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from ..graph.errors import EmptyGraphError
from ..graph.models import Edge, Vertex
from .steps import ExpandIn, ExpandOut, HasProperty, Step, apply_step

if TYPE_CHECKING:
    from ..graph.store import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Traversal:
    """An immutable pipeline of steps bound to a graph.

    `has`, `out` and `in_` return a new, longer traversal and leave this one
    untouched. Nothing is evaluated until `execute`, `in_edges` or
    `out_edges` is called.
    """

    graph: Graph
    steps: tuple[Step, ...] = ()

    def _append(self, step: Step) -> Traversal:
        return replace(self, steps=self.steps + (step,))

    def has(self, key: str, value: str) -> Traversal:
        return self._append(HasProperty(key, value))

    def out(self) -> Traversal:
        return self._append(ExpandOut())

    def in_(self) -> Traversal:
        return self._append(ExpandIn())

    def execute(self) -> list[Vertex]:
        vertices = self.graph.all_vertices()
        if not vertices:
            raise EmptyGraphError("Graph must contain at least one vertex to execute a traversal")

        working = [vertices[0]]
        for step in self.steps:
            working = apply_step(step, working, self.graph)

        logger.debug("Executed %d steps -> %d vertices", len(self.steps), len(working))
        return working

    def in_edges(self) -> list[Edge]:
        """Edges whose destination is in the result of `execute()`."""
        result = set(self.execute())
        return [e for e in self.graph.all_edges() if e.destination in result]

    def out_edges(self) -> list[Edge]:
        """Edges whose source is in the result of `execute()`."""
        result = set(self.execute())
        return [e for e in self.graph.all_edges() if e.source in result]
