# Algoritmos clássicos em grafos ponderados
# Dijkstra (caminho mínimo) e Prim (árvore geradora mínima) sobre uma fronteira de prioridade

from pathlib import Path

from dotenv import load_dotenv

# Carrega .env da raiz do projeto (antes de config ler o ambiente)
_package_dir = Path(__file__).resolve().parent
_root = _package_dir.parent
for _candidate in [_root, _root.parent]:
    _env_file = _candidate / ".env"
    if _env_file.is_file():
        load_dotenv(_env_file)
        break

from .errors import GraphAlgorithmError, NegativeWeightError, SearchCancelled
from .frontier import PriorityFrontier
from .graph import (
    AdjacencyGraph,
    WeightedGraph,
    from_networkx,
    path_cost,
    validate_non_negative_weights,
)
from .algorithms import (
    minimum_spanning_forest,
    minimum_spanning_tree,
    shortest_path,
    shortest_path_length,
    single_source_distances,
)
from .graph_io import load_graph_json, save_graph_json
from .metrics import SearchStats, measure_latency_ms

__version__ = "0.1.0"

__all__ = [
    "AdjacencyGraph",
    "WeightedGraph",
    "from_networkx",
    "path_cost",
    "validate_non_negative_weights",
    "PriorityFrontier",
    "shortest_path",
    "shortest_path_length",
    "single_source_distances",
    "minimum_spanning_tree",
    "minimum_spanning_forest",
    "load_graph_json",
    "save_graph_json",
    "SearchStats",
    "measure_latency_ms",
    "GraphAlgorithmError",
    "NegativeWeightError",
    "SearchCancelled",
]
