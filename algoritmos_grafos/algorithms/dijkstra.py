"""
Algoritmo de Dijkstra: implementação manual.
Caminho de custo mínimo em grafo com pesos não negativos, com parada assim que o alvo é finalizado.
Usa apenas o contrato do grafo (nodes/adjacent) e a PriorityFrontier (min-heap com
entradas obsoletas descartadas no pop, sem decrease-key).
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Set, Tuple

from .. import config
from ..errors import SearchCancelled
from ..frontier import PriorityFrontier
from ..graph import AdjacencyGraph, Node, Weight, validate_non_negative_weights
from ..metrics import SearchStats

logger = logging.getLogger(__name__)

_NO_TARGET = object()


def _expand(
    graph: AdjacencyGraph,
    origin: Node,
    target: object,
    should_stop: Optional[Callable[[], bool]],
    stats: Optional[SearchStats],
    check_weights: Optional[bool],
) -> Tuple[Dict[Node, Weight], Dict[Node, Node], Set[Node]]:
    """
    Expande a fronteira a partir de origin até finalizar target (ou esgotar a fronteira).
    Retorna (dist, prev, known). dist guarda o melhor valor conhecido de cada nó alcançado;
    só os nós em known têm valor final.
    """
    if check_weights is None:
        check_weights = config.CHECK_WEIGHTS
    if check_weights:
        validate_non_negative_weights(graph)

    frontier: PriorityFrontier = PriorityFrontier()
    dist: Dict[Node, Weight] = {origin: 0}
    prev: Dict[Node, Node] = {}
    known: Set[Node] = set()
    stale = 0
    relaxations = 0

    frontier.insert(origin, 0)

    while target not in known:
        if should_stop is not None and should_stop():
            raise SearchCancelled(f"Dijkstra interrompido com {len(known)} nós finalizados")

        entry = frontier.pop_min()
        if entry is None:
            break
        node, value = entry

        if node in known:
            stale += 1
            continue
        known.add(node)

        for neighbor, weight in graph.adjacent(node):
            candidate = weight + value
            if neighbor not in dist or candidate < dist[neighbor]:
                dist[neighbor] = candidate
                prev[neighbor] = node
                frontier.insert(neighbor, candidate)
                relaxations += 1

    if stats is not None:
        stats.finalized = len(known)
        stats.stale_skipped = stale
        stats.relaxations = relaxations
        stats.frontier_peak = frontier.peak_size
    logger.debug(
        "Dijkstra a partir de %r: %d nós finalizados, %d entradas obsoletas, pico da fronteira %d",
        origin, len(known), stale, frontier.peak_size,
    )
    return dist, prev, known


def _backtrack(prev: Dict[Node, Node], origin: Node, target: Node) -> List[Node]:
    path: List[Node] = [target]
    while path[-1] != origin:
        path.append(prev[path[-1]])
    path.reverse()
    return path


def shortest_path(
    origin: Node,
    target: Node,
    graph: AdjacencyGraph,
    *,
    should_stop: Optional[Callable[[], bool]] = None,
    stats: Optional[SearchStats] = None,
    check_weights: Optional[bool] = None,
) -> Optional[List[Node]]:
    """
    Retorna um caminho mínimo de origin a target (lista de nós, origin primeiro)
    ou None se target não for alcançável a partir de origin.

    should_stop: consultado uma vez por iteração; se retornar True levanta SearchCancelled.
    stats: SearchStats preenchido com os contadores da execução.
    check_weights: valida pesos não negativos antes da busca (padrão: config.CHECK_WEIGHTS).
    """
    _, prev, known = _expand(graph, origin, target, should_stop, stats, check_weights)
    if target not in known:
        logger.debug("Nenhum caminho de %r para %r", origin, target)
        return None
    return _backtrack(prev, origin, target)


def shortest_path_length(
    origin: Node,
    target: Node,
    graph: AdjacencyGraph,
    *,
    should_stop: Optional[Callable[[], bool]] = None,
    stats: Optional[SearchStats] = None,
    check_weights: Optional[bool] = None,
) -> Optional[Weight]:
    """Custo do caminho mínimo de origin a target, ou None se não houver caminho."""
    dist, _, known = _expand(graph, origin, target, should_stop, stats, check_weights)
    if target not in known:
        return None
    return dist[target]


def single_source_distances(
    origin: Node,
    graph: AdjacencyGraph,
    *,
    should_stop: Optional[Callable[[], bool]] = None,
    stats: Optional[SearchStats] = None,
    check_weights: Optional[bool] = None,
) -> Dict[Node, Weight]:
    """Distância mínima de origin a cada nó alcançável (nós inalcançáveis ficam de fora)."""
    dist, _, known = _expand(graph, origin, _NO_TARGET, should_stop, stats, check_weights)
    return {node: d for node, d in dist.items() if node in known}
