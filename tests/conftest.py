"""
Configuração do pytest e fixtures compartilhadas.

Grafos pequenos com respostas conhecidas, um grafo de adjacência que não usa NetworkX
(para exercitar o contrato AdjacencyGraph) e referências por força bruta.
"""

from __future__ import annotations

import itertools
import math
import random
from typing import Dict, Hashable, List, Optional, Sequence, Set, Tuple

import pytest

from algoritmos_grafos import WeightedGraph


class MatrixGraph:
    """Grafo por matriz de adjacência; None marca ausência de aresta."""

    def __init__(self, labels: Sequence[Hashable], matrix: Sequence[Sequence[Optional[float]]]) -> None:
        self._labels = list(labels)
        self._index = {label: i for i, label in enumerate(self._labels)}
        self._matrix = [list(row) for row in matrix]

    def nodes(self) -> Set[Hashable]:
        return set(self._labels)

    def adjacent(self, node: Hashable) -> List[Tuple[Hashable, float]]:
        i = self._index.get(node)
        if i is None:
            return []
        return [(self._labels[j], w) for j, w in enumerate(self._matrix[i]) if w is not None]


def random_graph(
    seed: int,
    n_nodes: int = 6,
    p_edge: float = 0.5,
    max_weight: int = 9,
    directed: bool = False,
    connected: bool = False,
) -> WeightedGraph:
    """
    Grafo aleatório reprodutível com pesos inteiros em [0, max_weight].
    Com connected=True começa por um caminho aleatório passando por todos os nós.
    """
    rng = random.Random(seed)
    nodes = [f"n{i}" for i in range(n_nodes)]
    graph = WeightedGraph(directed=directed)
    for n in nodes:
        graph.add_node(n)
    if connected:
        order = nodes[:]
        rng.shuffle(order)
        for u, v in zip(order[:-1], order[1:]):
            graph.add_edge(u, v, rng.randint(0, max_weight))
    pairs = itertools.permutations(nodes, 2) if directed else itertools.combinations(nodes, 2)
    for u, v in pairs:
        if rng.random() < p_edge and not graph.has_edge(u, v):
            graph.add_edge(u, v, rng.randint(0, max_weight))
    return graph


def brute_force_distance(graph: WeightedGraph, origin: Hashable, target: Hashable) -> float:
    """Menor custo entre todos os caminhos simples (enumeração por DFS)."""
    if origin == target:
        return 0
    best = math.inf

    def visit(node: Hashable, cost: float, seen: Set[Hashable]) -> None:
        nonlocal best
        for neighbor, w in graph.adjacent(node):
            if neighbor in seen:
                continue
            if neighbor == target:
                best = min(best, cost + w)
                continue
            visit(neighbor, cost + w, seen | {neighbor})

    visit(origin, 0, {origin})
    return best


def brute_force_mst_weight(graph: WeightedGraph) -> Optional[float]:
    """Peso mínimo entre todos os subconjuntos de n-1 arestas que conectam o grafo."""
    nodes = list(graph)
    edges = graph.edges()
    if len(nodes) <= 1:
        return 0
    best: Optional[float] = None
    for subset in itertools.combinations(edges, len(nodes) - 1):
        parent: Dict[Hashable, Hashable] = {n: n for n in nodes}

        def find(x: Hashable) -> Hashable:
            while parent[x] != x:
                parent[x] = parent[parent[x]]
                x = parent[x]
            return x

        acyclic = True
        for u, v, _ in subset:
            ru, rv = find(u), find(v)
            if ru == rv:
                acyclic = False
                break
            parent[ru] = rv
        if acyclic:
            total = sum(w for _, _, w in subset)
            if best is None or total < best:
                best = total
    return best


@pytest.fixture
def scenario_graph() -> WeightedGraph:
    """A-B(1), B-C(2), A-C(4), C-D(1), não direcionado."""
    return WeightedGraph.from_edges([
        ("A", "B", 1),
        ("B", "C", 2),
        ("A", "C", 4),
        ("C", "D", 1),
    ])


@pytest.fixture
def disconnected_graph() -> WeightedGraph:
    """Componentes {A, B} e {C, D} sem arestas entre eles."""
    return WeightedGraph.from_edges([("A", "B", 3), ("C", "D", 2)])


@pytest.fixture
def seven_node_graph() -> WeightedGraph:
    """Grafo de 7 nós; caminho mínimo A -> B é A, C, E, B (custo 6)."""
    return WeightedGraph.from_edges([
        ("A", "C", 3),
        ("A", "F", 2),
        ("C", "F", 2),
        ("C", "E", 1),
        ("C", "D", 4),
        ("F", "E", 3),
        ("F", "B", 6),
        ("F", "G", 5),
        ("E", "B", 2),
        ("D", "B", 1),
        ("B", "G", 2),
    ])


@pytest.fixture
def prim_graph() -> WeightedGraph:
    """Grafo de 7 nós cuja árvore geradora mínima pesa 24."""
    return WeightedGraph.from_edges([
        ("B", "A", 2),
        ("B", "C", 4),
        ("B", "E", 3),
        ("A", "C", 3),
        ("A", "D", 3),
        ("C", "E", 1),
        ("C", "F", 6),
        ("D", "F", 7),
        ("E", "F", 8),
        ("F", "G", 9),
    ])


@pytest.fixture
def matrix_graph() -> MatrixGraph:
    """Mesmo grafo do cenário A-B(1), B-C(2), A-C(4), C-D(1) por matriz de adjacência."""
    labels = ["A", "B", "C", "D"]
    matrix = [
        [None, 1, 4, None],
        [1, None, 2, None],
        [4, 2, None, 1],
        [None, None, 1, None],
    ]
    return MatrixGraph(labels, matrix)
