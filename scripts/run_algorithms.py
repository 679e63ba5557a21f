#!/usr/bin/env python3
"""
Roda Dijkstra ou Prim sobre um grafo salvo em JSON (node-link) e mostra resultado e latência.

Uso:
    python scripts/run_algorithms.py <grafo.json> dijkstra <origem> <destino>
    python scripts/run_algorithms.py <grafo.json> prim <origem>

Opções:
    --repetitions N   repete a execução N vezes para medir a latência média
    --verbose, -v     logging em nível DEBUG
"""
import argparse
import logging
import sys
from pathlib import Path

from algoritmos_grafos import (
    SearchStats,
    load_graph_json,
    measure_latency_ms,
    minimum_spanning_tree,
    path_cost,
    shortest_path,
)
from algoritmos_grafos.config import LOG_DATEFMT, LOG_FORMAT, configure_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dijkstra e Prim sobre um grafo JSON (node-link).")
    parser.add_argument("graph", type=Path, help="arquivo .json do grafo")
    parser.add_argument("--repetitions", type=int, default=1, help="repetições para medir latência (padrão: 1)")
    parser.add_argument("--verbose", "-v", action="store_true", help="logging detalhado")
    sub = parser.add_subparsers(dest="algorithm", required=True)

    p_dijkstra = sub.add_parser("dijkstra", help="caminho mínimo entre dois nós")
    p_dijkstra.add_argument("origin")
    p_dijkstra.add_argument("target")

    p_prim = sub.add_parser("prim", help="árvore geradora mínima a partir de um nó")
    p_prim.add_argument("origin")

    args = parser.parse_args(argv)
    if args.repetitions < 1:
        parser.error("--repetitions deve ser >= 1")
    return args


def resolve_node(graph, name: str):
    """
    Nó do grafo correspondente ao texto da linha de comando.
    JSON preserva ids inteiros, então "1" precisa casar com o nó 1.
    Sem correspondência, devolve o próprio texto.
    """
    if name in graph:
        return name
    for node in graph:
        if str(node) == name:
            return node
    return name


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    else:
        configure_logging()

    if not args.graph.is_file():
        print(f"Erro: arquivo de grafo não encontrado: {args.graph}", file=sys.stderr)
        return 1
    graph = load_graph_json(args.graph)
    stats = SearchStats()

    origin = resolve_node(graph, args.origin)

    if args.algorithm == "dijkstra":
        target = resolve_node(graph, args.target)
        for node in (origin, target):
            if node not in graph:
                print(f"Aviso: nó {node!r} não existe no grafo", file=sys.stderr)
        elapsed, path = measure_latency_ms(
            lambda: shortest_path(origin, target, graph, stats=stats),
            repetitions=args.repetitions,
        )
        if path is None:
            print(f"Nenhum caminho de {args.origin} para {args.target}.")
        else:
            print(f"Caminho: {' -> '.join(map(str, path))}")
            print(f"Custo: {path_cost(graph, path):g}")
    else:
        elapsed, (tree, total) = measure_latency_ms(
            lambda: minimum_spanning_tree(graph, origin, stats=stats),
            repetitions=args.repetitions,
        )
        print(f"Árvore geradora mínima a partir de {args.origin}: {len(tree)} de {len(graph)} nós")
        for u, v, w in tree.edges():
            print(f"  {u} - {v} ({w:g})")
        print(f"Peso total: {total:g}")

    print(f"Latência média: {elapsed:.3f} ms ({args.repetitions} repetições)")
    print(f"Estatísticas: {stats.as_dict()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
