# Standard libraries
import argparse
import logging
import os
import traceback
from pathlib import Path
from typing import Literal

# Pypi libraries
import yaml
from termcolor import colored, cprint

# Internal libraries
from src.data.samples import SAMPLE_GRAPHS
from src.graph import Graph
from src.graph._output import nodeName


ALGORITHMS = ['dfs', 'topological', 'scc']


class ProgramContext:


    def __init__(self, default_config_path: str = 'config_graph_algos.yaml') -> None:
        self.default_config_path = default_config_path
        self.load_graph_config(default_config_path)
        streamhandler_level = self.graph_config.get('STREAMHANDLER_LEVEL', 'INFO')

        self.log = logging.getLogger('graphs.log')
        self.log.setLevel(logging.DEBUG)

        if streamhandler_level == 'DEBUG':
            fmtstring = '%(pathname)s:%(lineno)s %(levelname)s %(message)s'
        else:
            fmtstring = '%(filename)s:%(lineno)s %(levelname)s %(message)s'
        formatter = logging.Formatter(
            fmt=fmtstring,
            datefmt='%Y-%m-%dT%H:%M:%S%z', # ISO 8601
        )

        # Drop handlers left by a previous context
        for old_handler in list(self.log.handlers):
            self.log.removeHandler(old_handler)

        handler = logging.StreamHandler() # outputs to stderr
        handler.setFormatter(formatter)
        handler.setLevel(logging.getLevelName(streamhandler_level))
        if streamhandler_level == 'DEBUG':
            # https://stackoverflow.com/a/74605301
            class PackagePathFilter(logging.Filter):
                def filter(self, record: logging.LogRecord) -> Literal[True]:
                    record.pathname = record.pathname.replace(os.getcwd(),"")
                    return True
            handler.addFilter(PackagePathFilter())
        self.log.addHandler(handler)

        self.algorithm = 'dfs'


    def load_graph_config(self, config_path: str) -> None:
        with open(config_path, 'r') as f:
            self.graph_config = yaml.safe_load(f) or {}


    def build_graph(self, sample_name: str) -> Graph:
        if sample_name not in SAMPLE_GRAPHS:
            raise Exception(f'Unknown sample graph "{sample_name}". Expected one of: {", ".join(SAMPLE_GRAPHS)}.')
        edges, directed = SAMPLE_GRAPHS[sample_name]
        return Graph(edges, directed=directed, parent_context=self, graph_config=self.graph_config)


    def format_vertex(self, vertex_id: int) -> str:
        return nodeName(vertex_id, self.graph_config.get('ID_AS_CHAR', False))


    def run_one(self, sample_name: str) -> list[str]:
        # Runs the selected algorithm on one sample, prints and returns the output lines
        g = self.build_graph(sample_name)
        lines = []
        components = None

        if self.algorithm == 'dfs':
            for record in g.dfs():
                lines.append(f'Node {self.format_vertex(record.vertex_id)}:\t{record.t_discover} to {record.t_finish}')
        elif self.algorithm == 'topological':
            order = g.topologicalSort()
            lines.append(' -> '.join(self.format_vertex(v) for v in order))
        elif self.algorithm == 'scc':
            components = g.scc()
            for i, component in enumerate(components):
                members = ', '.join(self.format_vertex(v) for v in sorted(component))
                lines.append(f'Component {i}: {{{members}}}')
        else:
            raise Exception(f'Invalid algorithm "{self.algorithm}". Expected one of: {", ".join(ALGORITHMS)}.')

        cprint(f'{sample_name} ({self.algorithm})', 'blue')
        for line in lines:
            print(line)

        if self.graph_config.get('RENDER_GRAPHS', False):
            path = g.outputGraphviz(f'{sample_name}_{self.algorithm}', components=components)
            self.log.info(colored(f'Rendered {path}', 'green'))

        return lines


    def run_noninteractive(self, samples: list[str]) -> None:
        for sample_name in samples:
            try:
                self.run_one(sample_name)
            except Exception as e:
                cprint(traceback.format_exc(), 'red')
                self.log.error(colored(f'Error running {self.algorithm} on sample "{sample_name}": {e}', 'red'))


    def run(self) -> None:

        parser = argparse.ArgumentParser()
        parser.add_argument('--config', type=str, default=self.default_config_path, help='Path to the global .yaml configuration file.')
        parser.add_argument('--algorithm', type=str, default='dfs', choices=ALGORITHMS, help='Algorithm to run on each sample graph.')
        parser.add_argument('--render', action='store_true', help='Render every sample graph with graphviz (overrides RENDER_GRAPHS).')
        parser.add_argument('--no_view_on_completion', action='store_true', help='Override the VIEW_ON_COMPLETION config setting to False. Useful when running mass jobs.')
        parser.add_argument('samples', type=str, nargs='*', help=f'Sample graphs to process (default: all). Available: {", ".join(SAMPLE_GRAPHS)}.')

        args = parser.parse_args()

        if not Path(args.config).exists():
            raise Exception(f'Config file not found: {args.config}')
        self.load_graph_config(args.config)
        self.algorithm = args.algorithm

        if args.render:
            self.graph_config['RENDER_GRAPHS'] = True
        if args.no_view_on_completion:
            self.graph_config['VIEW_ON_COMPLETION'] = False

        samples = args.samples if args.samples else list(SAMPLE_GRAPHS)
        self.run_noninteractive(samples)


if __name__ == '__main__':
    pc = ProgramContext()
    pc.run()
