"""
Métricas de execução dos algoritmos:

- SearchStats: contadores de uma execução (nós finalizados, entradas obsoletas descartadas,
  relaxações, pico da fronteira). Preenchido por Dijkstra e Prim quando passado em `stats`.
- Latência: tempo médio de execução em milissegundos, para comparar algoritmos e grafos.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Tuple


@dataclass
class SearchStats:
    """Contadores de uma execução da expansão gulosa da fronteira."""

    finalized: int = 0
    stale_skipped: int = 0
    relaxations: int = 0
    frontier_peak: int = 0

    def reset(self) -> None:
        self.finalized = 0
        self.stale_skipped = 0
        self.relaxations = 0
        self.frontier_peak = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


def measure_latency_ms(
    fn: Callable[[], Any],
    repetitions: int = 1,
) -> Tuple[float, Any]:
    """
    Mede o tempo de execução de fn() em milissegundos.
    Retorna (tempo_medio_ms, resultado da última chamada).
    """
    if repetitions < 1:
        raise ValueError("repetitions deve ser >= 1")
    start = time.perf_counter()
    result = None
    for _ in range(repetitions):
        result = fn()
    elapsed = (time.perf_counter() - start) / repetitions * 1000
    return elapsed, result
