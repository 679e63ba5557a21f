"""
Fronteira de prioridade: min-heap (heapq) de entradas (valor, sequência, item).

Não há decrease-key. Para melhorar o valor de um item, insere-se uma nova entrada;
as antigas ficam obsoletas e quem consome a fronteira as descarta ao retirá-las
(o item já foi finalizado). A sequência de inserção desempata valores iguais, de forma
determinística, e evita comparar os itens entre si (nós não precisam ser ordenáveis).
"""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from typing import Any, Generic, Hashable, List, Optional, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)


class PriorityFrontier(Generic[T]):
    """Fila de prioridade mínima com remoção preguiçosa."""

    def __init__(self) -> None:
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()
        # (item, valor) -> quantas entradas ainda devem ser ignoradas ao chegar ao topo
        self._removed: Counter = Counter()
        self._live = 0
        self.peak_size = 0

    def insert(self, item: T, value: Any) -> None:
        """Registra um valor candidato para item; entradas anteriores não são tocadas."""
        heapq.heappush(self._heap, (value, next(self._counter), item))
        self._live += 1
        if self._live > self.peak_size:
            self.peak_size = self._live

    def remove(self, item: T, value: Any) -> bool:
        """
        Descarta uma entrada viva (item, value). A entrada continua no heap e é
        pulada quando chegar ao topo. Retorna False se não houver entrada viva igual.
        """
        key = (item, value)
        alive = sum(1 for v, _, i in self._heap if v == value and i == item)
        if alive - self._removed[key] <= 0:
            return False
        self._removed[key] += 1
        self._live -= 1
        return True

    def _discard_removed(self) -> None:
        while self._heap:
            value, _, item = self._heap[0]
            key = (item, value)
            if not self._removed[key]:
                return
            heapq.heappop(self._heap)
            self._removed[key] -= 1
            if not self._removed[key]:
                del self._removed[key]

    def pop_min(self) -> Optional[Tuple[T, Any]]:
        """Retira e retorna (item, valor) de menor valor; None se a fronteira estiver vazia."""
        self._discard_removed()
        if not self._heap:
            return None
        value, _, item = heapq.heappop(self._heap)
        self._live -= 1
        return item, value

    def peek_min(self) -> Optional[Tuple[T, Any]]:
        self._discard_removed()
        if not self._heap:
            return None
        value, _, item = self._heap[0]
        return item, value

    def __len__(self) -> int:
        return self._live

    def __bool__(self) -> bool:
        return self._live > 0

    def __repr__(self) -> str:
        return f"PriorityFrontier({self._live} entradas, pico={self.peak_size})"
