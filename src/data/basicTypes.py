from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional, Union


class VColor(Enum):
    WHITE = 0 # unvisited
    GRAY = 1 # discovered, children still in progress
    BLACK = 2 # finished


@dataclass(frozen=True)
class Vertex:
    id: int


@dataclass(frozen=True)
class Edge:
    # A (possibly directed) weighted edge: from -> / <-> to
    node_from: int
    node_to: int
    weight: int = 0

    def reversed(self) -> 'Edge':
        return Edge(self.node_to, self.node_from, self.weight)

    @classmethod
    def coerce(cls, edge: Union['Edge', tuple]) -> 'Edge':
        if isinstance(edge, Edge):
            return edge
        if len(edge) not in (2, 3):
            raise RuntimeError(f'Improper edge definition: {edge}')
        return cls(*edge)


@dataclass
class VertexAttributes:
    color: VColor = VColor.WHITE
    # Id of the discovering vertex, None for traversal roots
    parent: Optional[int] = None
    t_discover: int = 0
    t_finish: int = 0


class VisitRecord(NamedTuple):
    vertex_id: int
    t_discover: int
    t_finish: int
    parent: Optional[int]


@dataclass
class TraversalState:
    """
    Attribute table for a single traversal

    Holds the per-vertex color/parent/timestamps and the logical clock.
    A new table is built for every dfs / dfsForest call, so nothing
    survives from one traversal to the next.
    """
    attrs: dict[int, VertexAttributes] = field(default_factory=dict)
    time: int = 0
    back_edges: list[Edge] = field(default_factory=list)

    @classmethod
    def fresh(cls, vertex_ids) -> 'TraversalState':
        return cls({vid: VertexAttributes() for vid in vertex_ids})

    def tick(self) -> int:
        self.time += 1
        return self.time

    def __getitem__(self, vertex_id: int) -> VertexAttributes:
        return self.attrs[vertex_id]

    def record(self, vertex_id: int) -> VisitRecord:
        a = self.attrs[vertex_id]
        return VisitRecord(vertex_id, a.t_discover, a.t_finish, a.parent)
