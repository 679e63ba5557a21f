"""Testes do script scripts/run_algorithms.py."""

import importlib.util
from pathlib import Path

import pytest

from algoritmos_grafos import WeightedGraph, save_graph_json

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "run_algorithms.py"


@pytest.fixture(scope="module")
def run_algorithms():
    spec = importlib.util.spec_from_file_location("run_algorithms", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def graph_file(scenario_graph, tmp_path):
    return save_graph_json(scenario_graph, tmp_path / "grafo.json")


def test_dijkstra_command(run_algorithms, graph_file, capsys):
    """Imprime caminho e custo."""
    assert run_algorithms.main([str(graph_file), "dijkstra", "A", "D"]) == 0
    out = capsys.readouterr().out
    assert "Caminho: A -> B -> C -> D" in out
    assert "Custo: 4" in out


def test_dijkstra_no_path(run_algorithms, disconnected_graph, tmp_path, capsys):
    """Sem caminho, informa e sai com 0."""
    path = save_graph_json(disconnected_graph, tmp_path / "desconexo.json")
    assert run_algorithms.main([str(path), "dijkstra", "A", "C"]) == 0
    assert "Nenhum caminho" in capsys.readouterr().out


def test_prim_command(run_algorithms, graph_file, capsys):
    """Imprime arestas da árvore e peso total."""
    assert run_algorithms.main([str(graph_file), "--repetitions", "2", "prim", "A"]) == 0
    out = capsys.readouterr().out
    assert "Peso total: 4" in out
    assert "4 de 4 nós" in out


def test_integer_node_ids(run_algorithms, tmp_path, capsys):
    """Ids inteiros do JSON casam com os argumentos da linha de comando."""
    path = save_graph_json(WeightedGraph.from_edges([(1, 2, 1), (2, 3, 2)]), tmp_path / "inteiros.json")
    assert run_algorithms.main([str(path), "dijkstra", "1", "3"]) == 0
    captured = capsys.readouterr()
    assert "Caminho: 1 -> 2 -> 3" in captured.out
    assert "Custo: 3" in captured.out
    assert "Aviso" not in captured.err

    assert run_algorithms.main([str(path), "prim", "2"]) == 0
    out = capsys.readouterr().out
    assert "3 de 3 nós" in out
    assert "Peso total: 3" in out


def test_resolve_node_prefers_exact_match(run_algorithms):
    """Nó com o mesmo texto tem prioridade; sem correspondência volta o texto."""
    graph = WeightedGraph.from_edges([("1", 1, 4)])
    assert run_algorithms.resolve_node(graph, "1") == "1"
    assert run_algorithms.resolve_node(graph, "Z") == "Z"


def test_unknown_node_warns(run_algorithms, graph_file, capsys):
    """Nó inexistente gera aviso em stderr."""
    assert run_algorithms.main([str(graph_file), "dijkstra", "A", "Z"]) == 0
    captured = capsys.readouterr()
    assert "Aviso: nó 'Z'" in captured.err
    assert "Nenhum caminho" in captured.out


@pytest.mark.parametrize("repetitions", ["0", "-2"])
def test_rejects_non_positive_repetitions(run_algorithms, graph_file, capsys, repetitions):
    """--repetitions < 1: erro de uso (código 2) com mensagem em stderr."""
    with pytest.raises(SystemExit) as excinfo:
        run_algorithms.main([str(graph_file), "--repetitions", repetitions, "prim", "A"])
    assert excinfo.value.code == 2
    assert "--repetitions" in capsys.readouterr().err


def test_missing_graph_file(run_algorithms, tmp_path, capsys):
    """Arquivo inexistente: código 1."""
    assert run_algorithms.main([str(tmp_path / "x.json"), "prim", "A"]) == 1
    assert "não encontrado" in capsys.readouterr().err
