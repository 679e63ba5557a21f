"""
Erros do pacote. Derivam da hierarquia de exceções do NetworkX, como os erros de validação de nós.

Caminho inexistente (Dijkstra) e árvore parcial (Prim) não são erros: são resultados normais.
"""

from __future__ import annotations

from typing import Any

import networkx as nx


class GraphAlgorithmError(nx.NetworkXException):
    """Base dos erros levantados pelos algoritmos deste pacote."""


class NegativeWeightError(GraphAlgorithmError, ValueError):
    """Aresta com peso negativo encontrada durante a validação de pesos."""

    def __init__(self, source: Any, target: Any, weight: Any) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(f"Aresta ({source!r}, {target!r}) tem peso negativo: {weight!r}")


class SearchCancelled(GraphAlgorithmError):
    """Busca interrompida porque should_stop() retornou verdadeiro."""
