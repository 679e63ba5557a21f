"""
Helpers para exibição de grafos com Dash Cytoscape: posições, elementos e app.

Destaques:
- path (retorno de shortest_path): arestas do caminho com in_path=True e largura maior;
- tree (retorno de minimum_spanning_tree): arestas da árvore com in_tree=True;
- origin/target: classes "origin" e "target" nos nós.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Hashable, List, Optional, Sequence, Set, Tuple

import dash_cytoscape as cyto  # type: ignore[reportMissingImports]
from dash import Dash, Input, Output, html

from ..graph import WeightedGraph

Position = Tuple[float, float]

# Canvas em pixels para layout
_LAYOUT_CANVAS_WIDTH: float = 800.0
_LAYOUT_CANVAS_HEIGHT: float = 600.0
_LAYOUT_PADDING: float = 40.0

# Raio mínimo em px ao redor de cada nó (distância centro a centro >= 2 * NODE_RADIUS_PX)
NODE_RADIUS_PX: float = 30.0


def _escape_cytoscape_id(node_id: str) -> str:
    """Escapa id de nó para uso em seletor Cytoscape (ex.: pontos viram \\.)."""
    return node_id.replace("\\", "\\\\").replace(".", "\\.").replace(":", "\\:")


def circular_positions(nodes: Sequence[Hashable], radius: float = 1.0) -> Dict[Hashable, Position]:
    """Nós distribuídos num círculo, na ordem recebida."""
    n = len(nodes)
    if n == 0:
        return {}
    if n == 1:
        return {nodes[0]: (0.0, 0.0)}
    step = 2 * math.pi / n
    return {node: (radius * math.cos(i * step), radius * math.sin(i * step)) for i, node in enumerate(nodes)}


def scale_positions_to_canvas(
    positions: Dict[Hashable, Position],
    width: float = _LAYOUT_CANVAS_WIDTH,
    height: float = _LAYOUT_CANVAS_HEIGHT,
    padding: float = _LAYOUT_PADDING,
) -> Dict[Hashable, Position]:
    """Escala posições (unidades arbitrárias) para o canvas em pixels, respeitando padding."""
    if not positions:
        return {}
    xs = [p[0] for p in positions.values()]
    ys = [p[1] for p in positions.values()]
    min_x, min_y = min(xs), min(ys)
    range_x = (max(xs) - min_x) or 1.0
    range_y = (max(ys) - min_y) or 1.0
    inner_w = width - 2 * padding
    inner_h = height - 2 * padding
    return {
        n: (padding + (x - min_x) / range_x * inner_w, padding + (y - min_y) / range_y * inner_h)
        for n, (x, y) in positions.items()
    }


def spread_positions(
    positions: Dict[Hashable, Position],
    min_distance: Optional[float] = None,
    iterations: int = 8,
    factor: float = 0.4,
) -> Dict[Hashable, Position]:
    """Afasta nós muito próximos mantendo o formato geral (evita sobreposição).
    min_distance: distância mínima centro a centro (px). Se None, usa 2 * NODE_RADIUS_PX.
    """
    if min_distance is None:
        min_distance = 2.0 * NODE_RADIUS_PX
    pos = {n: (float(x), float(y)) for n, (x, y) in positions.items()}
    nodes = list(pos)
    for _ in range(iterations):
        disp = {n: [0.0, 0.0] for n in nodes}
        for i, u in enumerate(nodes):
            for v in nodes[i + 1:]:
                dx = pos[u][0] - pos[v][0]
                dy = pos[u][1] - pos[v][1]
                d = math.hypot(dx, dy)
                if 1e-6 < d < min_distance:
                    push = factor * (min_distance - d) / 2
                    dx, dy = dx / d * push, dy / d * push
                    disp[u][0] += dx
                    disp[u][1] += dy
                    disp[v][0] -= dx
                    disp[v][1] -= dy
        pos = {n: (pos[n][0] + disp[n][0], pos[n][1] + disp[n][1]) for n in nodes}
    return pos


def _pairs(path: Optional[Sequence[Hashable]], directed: bool) -> Set[Any]:
    if not path or len(path) < 2:
        return set()
    if directed:
        return set(zip(path[:-1], path[1:]))
    return {frozenset(p) for p in zip(path[:-1], path[1:])}


def _edge_key(u: Hashable, v: Hashable, directed: bool) -> Any:
    return (u, v) if directed else frozenset((u, v))


def build_cytoscape_elements(
    graph: WeightedGraph,
    positions: Optional[Dict[Hashable, Position]] = None,
    path: Optional[Sequence[Hashable]] = None,
    tree: Optional[WeightedGraph] = None,
    origin: Optional[Hashable] = None,
    target: Optional[Hashable] = None,
) -> List[Dict[str, Any]]:
    """Monta a lista de elementos (nós + arestas) no formato do Dash Cytoscape.
    Sem positions, os nós ficam num círculo escalado para o canvas.
    Arestas recebem label com o peso; edge_opacity 1.0 para arestas destacadas
    (caminho ou árvore) e 0.3 para as demais quando há destaque.
    """
    directed = graph.directed
    if positions is None:
        positions = scale_positions_to_canvas(circular_positions(list(graph)))
    path_edges = _pairs(path, directed)
    tree_edges = set()
    if tree is not None:
        tree_edges = {_edge_key(u, v, directed) for u, v, _ in tree.edges()}
        if directed:
            # a árvore é não direcionada; vale para os dois sentidos
            tree_edges |= {(v, u) for u, v in tree_edges}
    highlighting = bool(path_edges or tree_edges)

    elements: List[Dict[str, Any]] = []
    for n in graph:
        x, y = positions.get(n, (0.0, 0.0))
        node_elem: Dict[str, Any] = {
            "data": {"id": str(n), "label": str(n)},
            "position": {"x": x, "y": y},
        }
        classes = []
        if n == origin:
            classes.append("origin")
        if n == target:
            classes.append("target")
        if classes:
            node_elem["classes"] = " ".join(classes)
        elements.append(node_elem)

    for u, v, w in graph.edges():
        key = _edge_key(u, v, directed)
        data: Dict[str, Any] = {
            "id": f"{u}->{v}",
            "source": str(u),
            "target": str(v),
            "weight": w,
            "label": f"{w:g}" if isinstance(w, (int, float)) else str(w),
        }
        if key in path_edges:
            data["in_path"] = True
        if key in tree_edges:
            data["in_tree"] = True
        emphasized = key in path_edges or key in tree_edges
        data["edge_opacity"] = 1.0 if emphasized or not highlighting else 0.3
        elements.append({"data": data})
    return elements


def _stylesheet(directed: bool, origin: Optional[Hashable], target: Optional[Hashable]) -> List[Dict[str, Any]]:
    edge_style: Dict[str, Any] = {
        "line-color": "#999",
        "width": 2,
        "curve-style": "bezier",
        "label": "data(label)",
        "font-size": "11px",
        "color": "#eee",
        "opacity": "data(edge_opacity)",
    }
    if directed:
        edge_style.update({"target-arrow-shape": "triangle", "target-arrow-color": "#999"})
    stylesheet: List[Dict[str, Any]] = [
        {
            "selector": "node",
            "style": {
                "content": "data(label)",
                "background-color": "#87CEEB",
                "color": "#ffffff",
                "font-size": "12px",
                "text-valign": "bottom",
                "text-halign": "center",
                "text-margin-y": 10,
            },
        },
        {"selector": "edge", "style": edge_style},
        {"selector": "edge[in_tree]", "style": {"line-color": "#3b82f6", "target-arrow-color": "#3b82f6", "width": 5}},
        {"selector": "edge[in_path]", "style": {"line-color": "#f59e0b", "target-arrow-color": "#f59e0b", "width": 6}},
        {"selector": "node.origin", "style": {"background-color": "#14532d"}},
        {"selector": "node.target", "style": {"background-color": "#ef4444"}},
    ]
    # Reforço por id (as classes nem sempre chegam antes do primeiro render no notebook)
    if origin is not None:
        stylesheet.append({
            "selector": "#" + _escape_cytoscape_id(str(origin)),
            "style": {"background-color": "#14532d"},
        })
    if target is not None:
        stylesheet.append({
            "selector": "#" + _escape_cytoscape_id(str(target)),
            "style": {"background-color": "#ef4444"},
        })
    return stylesheet


def display_graph(
    graph: WeightedGraph,
    positions: Optional[Dict[Hashable, Position]] = None,
    path: Optional[Sequence[Hashable]] = None,
    tree: Optional[WeightedGraph] = None,
    origin: Optional[Hashable] = None,
    target: Optional[Hashable] = None,
    height: str = "550px",
    width: str = "100%",
    iframe_height: int = 700,
    display_in_notebook: bool = True,
    run: bool = True,
) -> Dash:
    """
    Gera um grafo interativo com Dash Cytoscape e exibe no notebook (inline)
    ou no navegador. path/tree destacam o retorno de shortest_path/minimum_spanning_tree.

    positions: posições em unidades arbitrárias (escaladas para o canvas e espalhadas).
    run=False apenas monta e retorna o app Dash.
    """
    if positions is None:
        positions = circular_positions(list(graph))
    positions = spread_positions(scale_positions_to_canvas(positions))

    elements = build_cytoscape_elements(
        graph, positions=positions, path=path, tree=tree, origin=origin, target=target,
    )

    app = Dash(__name__)
    app.layout = html.Div([
        cyto.Cytoscape(
            id="cytoscape-graph",
            elements=elements,
            layout={"name": "preset", "fit": True, "padding": 30},
            style={"width": width, "height": height, "backgroundColor": "#404040"},
            stylesheet=_stylesheet(graph.directed, origin, target),
        ),
        html.Div(
            id="cytoscape-hover-output",
            style={"marginTop": "8px", "fontSize": "12px", "minHeight": "24px"},
        ),
    ])

    @app.callback(
        Output("cytoscape-hover-output", "children"),
        Input("cytoscape-graph", "mouseoverNodeData"),
        Input("cytoscape-graph", "mouseoverEdgeData"),
    )
    def display_hover(node_data, edge_data):
        if node_data is not None:
            return f"Nó: {node_data.get('label', node_data.get('id', ''))}"
        if edge_data is not None:
            return f"Aresta: {edge_data.get('source', '')} → {edge_data.get('target', '')} (peso {edge_data.get('label', '')})"
        return "Passe o mouse sobre um nó ou aresta para ver detalhes."

    if run:
        if display_in_notebook:
            app.run(jupyter_mode="inline", jupyter_height=iframe_height, use_reloader=False)
        else:
            app.run(use_reloader=False)
    return app
