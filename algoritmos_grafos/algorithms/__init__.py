from .dijkstra import shortest_path, shortest_path_length, single_source_distances
from .prim import minimum_spanning_forest, minimum_spanning_tree

__all__ = [
    "shortest_path",
    "shortest_path_length",
    "single_source_distances",
    "minimum_spanning_tree",
    "minimum_spanning_forest",
]
