from termcolor import colored


def scc(self) -> list[set[int]]:
    '''
    Strongly connected components (Kosaraju)

    1. DFS on the graph, vertices by descending finish time
    2. DFS forest on the transposed graph, roots taken in that order
    Every tree of the second pass is exactly one component. Components are
    returned in the order they were discovered by the second pass.

    On an undirected graph this yields the connected components.
    '''
    forward_result = self.dfs(topological_order=True, warn_on_cycle=False)
    node_order = [r.vertex_id for r in forward_result]

    # The transposed graph owns its own traversal state
    transposed_graph = self.transpose()
    components = transposed_graph.dfsForest(node_order)

    self.log.debug(colored(f'Found {len(components)} strongly connected components', 'green'))
    return components
