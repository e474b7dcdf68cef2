import logging
from typing import Iterable, Union

from termcolor import colored

from src.data.basicTypes import Edge, TraversalState, Vertex


class Graph:


    def __init__(
            self,
            edges: Iterable[Union[Edge, tuple]],
            directed: bool = True,
            parent_context=None,
            graph_config=None,
        ):
        self.directed = directed
        self.parent_context = parent_context
        self.graph_config = graph_config
        if self.graph_config is None:
            self.graph_config = {}

        if self.parent_context is not None:
            self.log = self.parent_context.log
        else:
            self.log = logging.getLogger('graphs.log')

        # Vertices of G, in order of first appearance
        self.vertices: dict[int, Vertex] = {}
        # Adjacency list of G (vertex id -> outgoing edges, input order)
        self.adj: dict[int, list[Edge]] = {}
        # Edges exactly as given
        self.edges: list[Edge] = []

        for edge in edges:
            edge = Edge.coerce(edge)
            self._registerVertex(edge.node_from)
            self._registerVertex(edge.node_to)
            self.edges.append(edge)
            self.adj[edge.node_from].append(edge)
            if not self.directed and edge.node_from != edge.node_to:
                self.adj[edge.node_to].append(edge.reversed())

        # Populated by every traversal
        self.state: TraversalState = TraversalState.fresh(self.vertices)

        self.log.debug(colored(
            f'Built {"directed" if self.directed else "undirected"} graph with {len(self.vertices)} vertices and {len(self.edges)} edges',
            'blue',
        ))

    def _registerVertex(self, vertex_id: int) -> None:
        if vertex_id not in self.vertices:
            self.vertices[vertex_id] = Vertex(vertex_id)
            self.adj[vertex_id] = []

    def vertexIds(self) -> list[int]:
        return list(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, vertex_id) -> bool:
        return vertex_id in self.vertices

    def __repr__(self) -> str:
        kind = 'directed' if self.directed else 'undirected'
        return f'<Graph {kind} |V|={len(self.vertices)} |E|={len(self.edges)}>'

    # DFS engine
    from ._dfs import (
        resetAttributes,
        visit,
        _dfsTrees,
        dfs,
        dfsForest,
        hasCycle,
        topologicalSort,
    )

    from ._transpose import (
        transpose,
    )

    from ._scc import (
        scc,
    )

    # Graphviz / DOT output
    from ._output import (
        makeDotGraph,
        toDot,
        outputGraphviz,
    )
