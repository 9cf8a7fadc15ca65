"""Edge value types.

`EdgeRecord` is the concrete immutable (terminal, weight) pair returned by the
graph. `WeightedEdge` is the capability protocol the algorithms rely on: any
object exposing ``terminal`` and ``weight`` will do.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Protocol, runtime_checkable

NodeID = Hashable
Weight = int


@runtime_checkable
class WeightedEdge(Protocol):
    """Anything with a terminal vertex and an integer weight."""

    @property
    def terminal(self) -> NodeID: ...

    @property
    def weight(self) -> Weight: ...


@dataclass(frozen=True)
class EdgeRecord:
    """Outgoing edge of a vertex.

    Attributes:
        terminal: Vertex the edge points to.
        weight: Integer cost of traversing the edge.
    """

    terminal: NodeID
    weight: Weight
