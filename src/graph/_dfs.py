from typing import Iterable, Iterator, Optional

from termcolor import colored

from src.data.basicTypes import TraversalState, VColor, VisitRecord
from src.graph.errors import GraphCycleError, TraversalStateError, UnknownVertexError


def resetAttributes(self) -> TraversalState:
    # Every traversal gets its own attribute table and clock
    self.state = TraversalState.fresh(self.vertices)
    return self.state


def visit(self, root: int) -> list[int]:
    '''
    Iterative DFS from a single root on the current traversal state

    Does not reset any attributes - call resetAttributes() first, or use
    dfs() / dfsForest() which do it for you.

    Each stack frame is [vertex id, iterator over its adjacency list,
    whether the tree edge back to the parent still has to be skipped].
    The color of the vertex on top of the stack drives the transition:
      WHITE -> discover it
      GRAY  -> push its next white neighbour, or finish it if there is none
      BLACK -> corrupted state, never happens in a correct traversal

    Returns the vertex ids of the tree rooted at `root` in finish order
    (root last).
    '''
    if root not in self.vertices:
        raise UnknownVertexError(root)

    state = self.state
    result = []
    stack = [[root, iter(self.adj[root]), not self.directed]]

    while stack:
        frame = stack[-1]
        u, neighbours = frame[0], frame[1]
        u_attrs = state[u]

        if u_attrs.color is VColor.WHITE:
            u_attrs.color = VColor.GRAY
            u_attrs.t_discover = state.tick()

        elif u_attrs.color is VColor.GRAY:
            for edge in neighbours:
                v = edge.node_to
                v_attrs = state[v]
                if v_attrs.color is VColor.WHITE:
                    v_attrs.parent = u
                    stack.append([v, iter(self.adj[v]), not self.directed])
                    break
                if v_attrs.color is VColor.GRAY:
                    # Undirected: the first edge back to the parent is the tree edge itself
                    if frame[2] and v == u_attrs.parent:
                        frame[2] = False
                        continue
                    state.back_edges.append(edge)
            else:
                # All children of u are done processing
                u_attrs.t_finish = state.tick()
                u_attrs.color = VColor.BLACK
                stack.pop()
                result.append(u)

        else:
            raise TraversalStateError(
                f'Invalid / unexpected color {u_attrs.color.name} for vertex {u} on top of the DFS stack'
            )

    return result


def _dfsTrees(self, order: Optional[Iterable[int]]) -> Iterator[list[int]]:
    # Resets the attributes, then yields each DFS tree (finish order) in the order its root was started
    state = self.resetAttributes()
    if order is None:
        order = list(self.vertices)

    for root in order:
        if root not in self.vertices:
            raise UnknownVertexError(root)
        if state[root].color is VColor.WHITE:
            self.log.debug(colored(f'Starting DFS tree at vertex {root}', 'blue'))
            yield self.visit(root)


def dfs(
        self,
        order: Optional[Iterable[int]] = None,
        topological_order: bool = False,
        warn_on_cycle: bool = True,
    ) -> list[VisitRecord]:
    '''
    Performs DFS over the whole graph, updating the traversal state

    Roots are taken from `order` (default: vertex insertion order).
    Returns the visited vertices ordered by finishing time, or by
    descending finishing time when `topological_order` is set.

    Cycles are not rejected: on a cyclic graph the reversed finish order
    is returned anyway and is not a true topological order. A warning is
    logged in that case; use topologicalSort() for a strict version.
    '''
    finished = []
    for tree in self._dfsTrees(order):
        finished.extend(tree)

    if topological_order:
        # Last finished should be first, first finished should be last
        finished.reverse()
        if warn_on_cycle and self.state.back_edges:
            back_edge = self.state.back_edges[0]
            self.log.warning(colored(
                f'Topological order requested on a cyclic graph (back edge {back_edge.node_from} -> {back_edge.node_to})',
                'yellow',
            ))

    return [self.state.record(vertex_id) for vertex_id in finished]


def dfsForest(self, order: Optional[Iterable[int]] = None) -> list[set[int]]:
    # One vertex set per DFS tree, in the order the trees were started
    return [set(tree) for tree in self._dfsTrees(order)]


def hasCycle(self) -> bool:
    self.dfs()
    return len(self.state.back_edges) > 0


def topologicalSort(self) -> list[int]:
    if not self.directed:
        raise NotImplementedError('Topological order is only defined for directed graphs')

    records = self.dfs(topological_order=True, warn_on_cycle=False)
    if self.state.back_edges:
        back_edge = self.state.back_edges[0]
        raise GraphCycleError(
            f'Graph contains a cycle (back edge {back_edge.node_from} -> {back_edge.node_to})'
        )
    return [r.vertex_id for r in records]
