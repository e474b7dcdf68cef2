"""Exceptions raised by graph traversals."""


class GraphError(Exception):
    """Base exception for graph operations."""


class UnknownVertexError(GraphError, KeyError):
    """Raised when a traversal root or order list names a vertex the graph does not hold."""

    def __init__(self, vertex_id):
        super().__init__(vertex_id)
        self.vertex_id = vertex_id

    def __str__(self):
        return f'Vertex {self.vertex_id!r} is not part of the graph'


class TraversalStateError(GraphError, RuntimeError):
    """Raised when the DFS state machine meets a finished vertex on top of its stack.

    This indicates corrupted traversal state, not bad input.
    """


class GraphCycleError(GraphError, ValueError):
    """Raised when a topological order is requested for a cyclic graph."""
