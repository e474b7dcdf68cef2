import itertools
from typing import Iterable, Optional, Union

import graphviz
from termcolor import colored


DEFAULT_COMPONENT_COLORS = ['#e6194b', '#3cb44b', '#4363d8', '#f58231', '#911eb4', '#42d4f4']


def nodeName(vertex_id: int, id_as_char: bool = False) -> str:
    # 1 -> 'a', 2 -> 'b', ... 26 -> 'z'; other ids stay numeric
    if id_as_char and 1 <= vertex_id <= 26:
        return chr(vertex_id + 0x60)
    return str(vertex_id)


def makeDotGraph(
        self,
        id_as_char: Optional[bool] = None,
        components: Optional[Iterable[Iterable[int]]] = None,
    ) -> Union[graphviz.Digraph, graphviz.Graph]:
    if id_as_char is None:
        id_as_char = self.graph_config.get('ID_AS_CHAR', False)

    graph_cls = graphviz.Digraph if self.directed else graphviz.Graph
    graph_attr = {}
    if 'ORIENTATION' in self.graph_config:
        graph_attr['rankdir'] = self.graph_config['ORIENTATION']
    if 'BACKGROUND_COLOR' in self.graph_config:
        graph_attr['bgcolor'] = self.graph_config['BACKGROUND_COLOR']
    g = graph_cls(
        engine='dot',
        strict=False,  # Keep parallel edges
        graph_attr=graph_attr,
    )

    node_style = {}
    if 'GENERAL_FONT' in self.graph_config:
        node_style['fontname'] = self.graph_config['GENERAL_FONT']
    if 'NODE_FONTSIZE' in self.graph_config:
        node_style['fontsize'] = str(self.graph_config['NODE_FONTSIZE'])
    edge_style = {}
    if 'GENERAL_FONT' in self.graph_config:
        edge_style['fontname'] = self.graph_config['GENERAL_FONT']
    if 'EDGE_FONTSIZE' in self.graph_config:
        edge_style['fontsize'] = str(self.graph_config['EDGE_FONTSIZE'])

    # Draw each component as its own cluster
    clustered = set()
    if components is not None:
        color_cycler = itertools.cycle(self.graph_config.get('COMPONENT_COLOR_CYCLE', DEFAULT_COMPONENT_COLORS))
        for i, component in enumerate(components):
            cluster_color = next(color_cycler)
            with g.subgraph(name=f'cluster_{i}') as c:
                self.log.debug(colored(f'Creating cluster {i} for {sorted(component)}'))
                c.attr(color=cluster_color)
                for vertex_id in sorted(component):
                    c.node(nodeName(vertex_id, id_as_char), **node_style)
                    clustered.add(vertex_id)

    # Vertices outside any cluster
    for vertex_id in self.vertices:
        if vertex_id not in clustered:
            g.node(nodeName(vertex_id, id_as_char), **node_style)

    for edge in self.edges:
        kwargs = dict(edge_style)
        if edge.weight > 0:
            kwargs['label'] = str(edge.weight)
        g.edge(
            nodeName(edge.node_from, id_as_char),
            nodeName(edge.node_to, id_as_char),
            **kwargs,
        )

    return g


def toDot(
        self,
        id_as_char: Optional[bool] = None,
        components: Optional[Iterable[Iterable[int]]] = None,
    ) -> str:
    return self.makeDotGraph(id_as_char, components).source


def outputGraphviz(
        self,
        graph_name: str,
        components: Optional[Iterable[Iterable[int]]] = None,
        directory: str = 'output/',
    ) -> str:
    # Renders the graph with the graphviz binary, returns the path of the rendered file
    g = self.makeDotGraph(components=components)
    return g.render(
        filename=graph_name,
        directory=directory,
        view=self.graph_config.get('VIEW_ON_COMPLETION', False),
        format=self.graph_config.get('OUTPUT_FORMAT', 'png'),
        engine='dot',
    )
