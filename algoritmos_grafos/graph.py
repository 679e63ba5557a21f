"""
Modelagem do grafo ponderado usado por Dijkstra e Prim.

Os algoritmos dependem apenas da capacidade AdjacencyGraph: nodes() e adjacent(node).
WeightedGraph é a implementação concreta, apoiada em NetworkX (nx.Graph ou nx.DiGraph):
- não direcionado: cada aresta é vista a partir das duas pontas;
- direcionado: a aresta (u, v) aparece apenas em adjacent(u).

Pesos devem ser não negativos. Isso é pré-condição dos algoritmos, não é verificado aqui
(ver validate_non_negative_weights).
"""

from __future__ import annotations

import math
from typing import (
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Protocol,
    Sequence,
    Set,
    Tuple,
    Union,
    runtime_checkable,
)

import networkx as nx

from . import config
from .errors import NegativeWeightError

Node = Hashable
Weight = Union[int, float]
Edge = Tuple[Node, Node, Weight]


@runtime_checkable
class AdjacencyGraph(Protocol):
    """Capacidade mínima consultada pelos algoritmos."""

    def nodes(self) -> Set[Node]:
        ...

    def adjacent(self, node: Node) -> Sequence[Tuple[Node, Weight]]:
        ...


class WeightedGraph:
    """Grafo ponderado (direcionado ou não) sobre NetworkX."""

    def __init__(self, directed: bool = False) -> None:
        self._G: nx.Graph = nx.DiGraph() if directed else nx.Graph()

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Edge],
        nodes: Iterable[Node] = (),
        directed: bool = False,
    ) -> "WeightedGraph":
        """
        Monta o grafo a partir de triplas (origem, destino, peso).
        Extremidades ainda não vistas são adicionadas como nós antes da aresta.
        """
        graph = cls(directed=directed)
        for node in nodes:
            graph.add_node(node)
        for u, v, w in edges:
            graph.add_node(u)
            graph.add_node(v)
            graph.add_edge(u, v, w)
        return graph

    @property
    def directed(self) -> bool:
        return self._G.is_directed()

    # --- contrato AdjacencyGraph ---

    def nodes(self) -> Set[Node]:
        return set(self._G.nodes())

    def adjacent(self, node: Node) -> List[Tuple[Node, Weight]]:
        """Arestas de saída de node como (vizinho, peso); vazio se node não existir."""
        if node not in self._G:
            return []
        return [
            (neighbor, d.get(config.WEIGHT_KEY, config.DEFAULT_EDGE_WEIGHT))
            for neighbor, d in self._G.adj[node].items()
        ]

    # --- mutação (fora da execução dos algoritmos) ---

    def add_node(self, node: Node) -> None:
        self._G.add_node(node)

    def remove_node(self, node: Node) -> None:
        """Remove node e suas arestas incidentes; ignora nós inexistentes."""
        if node in self._G:
            self._G.remove_node(node)

    def add_edge(self, u: Node, v: Node, weight: Weight) -> None:
        """
        Adiciona a aresta u -> v. As duas extremidades precisam existir.
        Arestas paralelas não são guardadas: se (u, v) já existe, fica o menor peso.
        Para trocar o peso de uma aresta, remova-a antes (remove_edge).
        """
        missing = [n for n in (u, v) if n not in self._G]
        if missing:
            raise nx.NodeNotFound(f"Nó(s) {missing} não existem no grafo.")
        if self._G.has_edge(u, v) and self.weight(u, v) <= weight:
            return
        self._G.add_edge(u, v, **{config.WEIGHT_KEY: weight})

    def remove_edge(self, u: Node, v: Node) -> None:
        if self._G.has_edge(u, v):
            self._G.remove_edge(u, v)

    # --- consultas ---

    def has_edge(self, u: Node, v: Node) -> bool:
        return self._G.has_edge(u, v)

    def weight(self, u: Node, v: Node) -> Weight:
        """Peso da aresta (u, v); inf se ela não existir."""
        if not self._G.has_edge(u, v):
            return math.inf
        return self._G.edges[u, v].get(config.WEIGHT_KEY, config.DEFAULT_EDGE_WEIGHT)

    def edges(self) -> List[Edge]:
        """Arestas como (u, v, peso); no grafo não direcionado cada aresta aparece uma vez."""
        return [
            (u, v, d.get(config.WEIGHT_KEY, config.DEFAULT_EDGE_WEIGHT))
            for u, v, d in self._G.edges(data=True)
        ]

    def number_of_edges(self) -> int:
        return self._G.number_of_edges()

    def total_weight(self) -> Weight:
        return sum(w for _, _, w in self.edges())

    def to_networkx(self) -> nx.Graph:
        """Cópia do grafo NetworkX interno (para algoritmos de referência, layout, etc.)."""
        return self._G.copy()

    def _edge_map(self) -> Dict[Union[Tuple[Node, Node], FrozenSet[Node]], Weight]:
        if self.directed:
            return {(u, v): w for u, v, w in self.edges()}
        return {frozenset((u, v)): w for u, v, w in self.edges()}

    def __contains__(self, node: object) -> bool:
        return node in self._G

    def __len__(self) -> int:
        return self._G.number_of_nodes()

    def __iter__(self) -> Iterator[Node]:
        return iter(self._G.nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return (
            self.directed == other.directed
            and self.nodes() == other.nodes()
            and self._edge_map() == other._edge_map()
        )

    def __repr__(self) -> str:
        kind = "direcionado" if self.directed else "não direcionado"
        return f"WeightedGraph({kind}, {len(self)} nós, {self.number_of_edges()} arestas)"


def from_networkx(
    G: nx.Graph,
    weight: str = config.WEIGHT_KEY,
    default: Optional[Weight] = None,
) -> WeightedGraph:
    """
    Converte um grafo NetworkX, lendo o peso do atributo `weight` (ou `default`).
    Em MultiGraph/MultiDiGraph as arestas paralelas viram uma só, com o menor peso.
    """
    if default is None:
        default = config.DEFAULT_EDGE_WEIGHT
    graph = WeightedGraph(directed=G.is_directed())
    for n in G.nodes():
        graph.add_node(n)
    for u, v, d in G.edges(data=True):
        graph.add_edge(u, v, d.get(weight, default))
    return graph


def ordered_nodes(graph: AdjacencyGraph) -> List[Node]:
    """Nós em ordem de inserção quando o grafo a conhece (WeightedGraph); senão, nodes()."""
    if isinstance(graph, WeightedGraph):
        return list(graph)
    return list(graph.nodes())


def _edge_weight(graph: AdjacencyGraph, u: Node, v: Node) -> Optional[Weight]:
    weights = [w for n, w in graph.adjacent(u) if n == v]
    if not weights:
        return None
    return min(weights)


def path_cost(graph: AdjacencyGraph, path: Sequence[Node]) -> Weight:
    """Custo total de um caminho (lista de nós); inf se dois nós consecutivos não forem adjacentes."""
    if len(path) < 2:
        return 0
    total: Weight = 0
    for u, v in zip(path[:-1], path[1:]):
        w = _edge_weight(graph, u, v)
        if w is None:
            return math.inf
        total += w
    return total


def validate_non_negative_weights(graph: AdjacencyGraph) -> None:
    """Levanta NegativeWeightError na primeira aresta com peso negativo."""
    for u in ordered_nodes(graph):
        for v, w in graph.adjacent(u):
            if w < 0:
                raise NegativeWeightError(u, v, w)
