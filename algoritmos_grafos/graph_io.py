"""
Leitura e gravação de grafos em JSON (formato node-link do NetworkX, chave "edges").

O campo "directed" do JSON decide entre grafo direcionado e não direcionado;
o peso de cada aresta fica em config.WEIGHT_KEY.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

import networkx as nx

from .graph import WeightedGraph, from_networkx

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _json_serializable(obj: Any) -> Any:
    """Converte valores para tipos nativos JSON (ex.: numpy.float64 -> float)."""
    if hasattr(obj, "item"):  # numpy scalar
        return obj.item()
    if isinstance(obj, dict):
        return {k: _json_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_serializable(v) for v in obj]
    return obj


def graph_to_data(graph: WeightedGraph) -> dict:
    """Dicionário node-link pronto para json.dump."""
    data = nx.node_link_data(graph.to_networkx(), edges="edges")
    return _json_serializable(data)


def graph_from_data(data: dict) -> WeightedGraph:
    G = nx.node_link_graph(data, directed=bool(data.get("directed", False)), multigraph=False, edges="edges")
    return from_networkx(G)


def save_graph_json(graph: WeightedGraph, output_path: PathLike) -> Path:
    """Grava o grafo em .json (cria o diretório se preciso) e retorna o caminho."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(graph_to_data(graph), f, ensure_ascii=False, indent=2)
    logger.debug("Grafo salvo em %s (%d nós)", output_path, len(graph))
    return output_path


def load_graph_json(input_path: PathLike) -> WeightedGraph:
    """Carrega um grafo gravado por save_graph_json (ou qualquer JSON node-link com "edges")."""
    input_path = Path(input_path)
    if not input_path.is_file():
        raise FileNotFoundError(f"Arquivo de grafo não encontrado: {input_path}")
    with open(input_path, encoding="utf-8") as f:
        data = json.load(f)
    graph = graph_from_data(data)
    logger.debug("Grafo carregado de %s: %r", input_path, graph)
    return graph
