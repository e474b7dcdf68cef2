from termcolor import colored


def transpose(self) -> 'Graph':
    # Same vertex set, every edge reversed; the source graph is left untouched
    reversed_edges = [edge.reversed() for edge in self.edges]
    self.log.debug(colored(f'Transposing graph with {len(reversed_edges)} edges', 'blue'))

    return type(self)(
        reversed_edges,
        directed=self.directed,
        parent_context=self.parent_context,
        graph_config=self.graph_config,
    )
