"""
Configuração do pacote: parâmetros lidos do ambiente (ou do .env carregado em __init__).

Variáveis:
- ALGORITMOS_GRAFOS_LOG_LEVEL: nível usado por configure_logging() (padrão WARNING).
- ALGORITMOS_GRAFOS_CHECK_WEIGHTS: se "1"/"true", Dijkstra e Prim validam pesos não negativos.
- ALGORITMOS_GRAFOS_DEFAULT_WEIGHT: peso de arestas importadas sem atributo de peso.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

# Chave do atributo de peso nas arestas NetworkX / JSON node-link
WEIGHT_KEY = "weight"

LOG_LEVEL = os.environ.get("ALGORITMOS_GRAFOS_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

_TRUE_VALUES = ("1", "true", "yes", "on", "sim")


def _env_flag(name: str, default: bool = False) -> bool:
    """Lê uma variável de ambiente booleana ("1", "true", "sim", ...)."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_number(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    number = float(value)
    return int(number) if number.is_integer() else number


# Padrão do parâmetro check_weights dos algoritmos
CHECK_WEIGHTS = _env_flag("ALGORITMOS_GRAFOS_CHECK_WEIGHTS")

# Peso usado quando a aresta não traz WEIGHT_KEY
DEFAULT_EDGE_WEIGHT = _env_number("ALGORITMOS_GRAFOS_DEFAULT_WEIGHT", 1)


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configura o logging raiz (basicConfig) com o formato do projeto.
    Sem argumento, usa LOG_LEVEL. O pacote nunca instala handlers ao ser importado.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
