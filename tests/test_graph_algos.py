import logging
import sys
from pathlib import Path

import pytest

from graph_algos import ProgramContext
from src.data.samples import SAMPLE_GRAPHS


TEST_CONFIG = str(Path(__file__).parent / 'test_config.yaml')


@pytest.fixture
def program_context():
    return ProgramContext(TEST_CONFIG)


def test_config_loaded(program_context):
    assert program_context.graph_config['RENDER_GRAPHS'] is False
    assert program_context.algorithm == 'dfs'


def test_build_graph_uses_context(program_context):
    g = program_context.build_graph('undirected_example')
    assert g.directed is False
    assert g.log is program_context.log
    assert g.graph_config is program_context.graph_config


def test_dfs_output(program_context, capsys):
    lines = program_context.run_one('dfs_example')

    assert len(lines) == 10
    assert lines[0] == 'Node 3:\t3 to 4'
    assert lines[-1] == 'Node 9:\t17 to 20'
    assert 'Node 9:\t17 to 20' in capsys.readouterr().out


def test_scc_output(program_context):
    program_context.algorithm = 'scc'
    assert program_context.run_one('scc_example') == [
        'Component 0: {1, 2, 5}',
        'Component 1: {3, 4}',
        'Component 2: {6, 7}',
        'Component 3: {8}',
    ]


def test_scc_output_as_chars(program_context):
    program_context.algorithm = 'scc'
    program_context.graph_config['ID_AS_CHAR'] = True
    assert program_context.run_one('scc_example')[0] == 'Component 0: {a, b, e}'


def test_topological_output(program_context):
    program_context.algorithm = 'topological'
    lines = program_context.run_one('dag_example')
    assert len(lines) == 1
    assert lines[0].split(' -> ')[0] == '1'


def test_unknown_sample_raises(program_context):
    with pytest.raises(Exception, match='Unknown sample graph'):
        program_context.run_one('missing')


def test_noninteractive_logs_failures(program_context, caplog):
    program_context.algorithm = 'topological'
    with caplog.at_level(logging.ERROR, logger='graphs.log'):
        program_context.run_noninteractive(['scc_example', 'dag_example'])

    assert 'Error running topological on sample "scc_example"' in caplog.text
    assert 'dag_example' not in caplog.text


def test_cli_runs_selected_samples(program_context, monkeypatch, capsys):
    monkeypatch.setattr(sys, 'argv', ['graph_algos.py', '--config', TEST_CONFIG, '--algorithm', 'scc', 'scc_example'])
    program_context.run()

    out = capsys.readouterr().out
    assert 'Component 3: {8}' in out
    assert 'dfs_example' not in out


def test_cli_defaults_to_all_samples(program_context, monkeypatch, capsys):
    monkeypatch.setattr(sys, 'argv', ['graph_algos.py', '--config', TEST_CONFIG])
    program_context.run()

    out = capsys.readouterr().out
    for sample_name in SAMPLE_GRAPHS:
        assert sample_name in out


def test_format_vertex_matches_dot_names(program_context):
    program_context.graph_config['ID_AS_CHAR'] = True
    assert program_context.format_vertex(2) == 'b'
    assert program_context.format_vertex(-1000) == '-1000'
