from .graph_helper import build_cytoscape_elements, display_graph

__all__ = ["build_cytoscape_elements", "display_graph"]
