"""
Algoritmo de Prim: árvore geradora mínima a partir de um nó de origem.

Mesmo padrão de expansão gulosa do Dijkstra, mas a fronteira guarda arestas
(origem, destino, peso) ordenadas pelo peso, e não nós. Arestas cujo destino já está
na árvore formariam ciclo e são descartadas no pop.
Em grafo desconexo o resultado cobre apenas o componente de origin.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .. import config
from ..errors import SearchCancelled
from ..frontier import PriorityFrontier
from ..graph import AdjacencyGraph, Edge, Node, Weight, WeightedGraph, ordered_nodes, validate_non_negative_weights
from ..metrics import SearchStats

logger = logging.getLogger(__name__)


def minimum_spanning_tree(
    graph: AdjacencyGraph,
    origin: Node,
    *,
    should_stop: Optional[Callable[[], bool]] = None,
    stats: Optional[SearchStats] = None,
    check_weights: Optional[bool] = None,
) -> Tuple[WeightedGraph, Weight]:
    """
    Retorna (árvore, peso_total). A árvore é um WeightedGraph não direcionado com origin,
    cada nó alcançado e a aresta que o ligou à árvore.

    should_stop, stats e check_weights têm o mesmo papel que em dijkstra.shortest_path.
    """
    if check_weights is None:
        check_weights = config.CHECK_WEIGHTS
    if check_weights:
        validate_non_negative_weights(graph)

    tree = WeightedGraph(directed=False)
    tree.add_node(origin)

    frontier: PriorityFrontier[Edge] = PriorityFrontier()
    for neighbor, weight in graph.adjacent(origin):
        frontier.insert((origin, neighbor, weight), weight)

    total: Weight = 0
    stale = 0
    relaxations = 0

    while frontier:
        if should_stop is not None and should_stop():
            raise SearchCancelled(f"Prim interrompido com {len(tree)} nós na árvore")

        (source, dest, weight), _ = frontier.pop_min()
        if dest in tree:
            stale += 1
            continue

        tree.add_node(dest)
        tree.add_edge(source, dest, weight)
        total += weight

        for neighbor, w in graph.adjacent(dest):
            frontier.insert((dest, neighbor, w), w)
            relaxations += 1

    if stats is not None:
        stats.finalized = len(tree)
        stats.stale_skipped = stale
        stats.relaxations = relaxations
        stats.frontier_peak = frontier.peak_size
    logger.debug(
        "Prim a partir de %r: %d nós, peso total %r, %d arestas descartadas",
        origin, len(tree), total, stale,
    )
    return tree, total


def minimum_spanning_forest(
    graph: AdjacencyGraph,
    *,
    should_stop: Optional[Callable[[], bool]] = None,
    stats: Optional[SearchStats] = None,
    check_weights: Optional[bool] = None,
) -> List[Tuple[WeightedGraph, Weight]]:
    """
    Floresta geradora mínima: roda Prim a partir de cada nó ainda não coberto
    (na ordem de iteração dos nós) até cobrir o grafo inteiro.
    Em stats os contadores somam todos os componentes; frontier_peak é o maior pico.
    Para grafos direcionados o resultado depende da ordem (Prim assume grafo não direcionado).
    """
    if check_weights is None:
        check_weights = config.CHECK_WEIGHTS
    if check_weights:
        validate_non_negative_weights(graph)
    if stats is not None:
        stats.reset()

    forest: List[Tuple[WeightedGraph, Weight]] = []
    covered = set()
    component_stats = SearchStats()
    for node in ordered_nodes(graph):
        if node in covered:
            continue
        tree, total = minimum_spanning_tree(
            graph, node, should_stop=should_stop, stats=component_stats, check_weights=False,
        )
        if stats is not None:
            stats.finalized += component_stats.finalized
            stats.stale_skipped += component_stats.stale_skipped
            stats.relaxations += component_stats.relaxations
            stats.frontier_peak = max(stats.frontier_peak, component_stats.frontier_peak)
        covered.update(tree)
        forest.append((tree, total))
    if len(forest) > 1:
        logger.debug("Grafo desconexo: floresta com %d componentes", len(forest))
    return forest
