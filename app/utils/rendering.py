from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from app.algorithms.kruskal import Edge, MSTResult, is_spanning_tree
from app.utils.graph_loader import count_components

DISCONNECTED_NOTE = (
    "Nota: no se pudo formar un árbol de expansión completo. "
    "Es posible que el grafo no sea conexo."
)


def circular_layout(num_vertices: int, size: float = 600.0) -> List[Tuple[float, float]]:
    """
    Posiciones (x, y) de los vértices sobre una circunferencia, empezando
    arriba y avanzando en sentido horario sobre el lienzo.
    """
    if num_vertices <= 0:
        return []
    radius = size * 0.4
    center = size / 2
    angles = np.arange(num_vertices) / num_vertices * 2 * np.pi - np.pi / 2
    xs = center + radius * np.cos(angles)
    ys = center + radius * np.sin(angles)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def describe_edge(edge: Edge) -> str:
    return f"Servidor {edge.source} <--> Servidor {edge.destination} (Costo: {edge.weight})"


def _in_mst_flags(edges: Sequence[Edge], mst_edges: Sequence[Edge]) -> List[bool]:
    # Las aristas repetidas se marcan tantas veces como fueron seleccionadas
    pending: Dict[Edge, int] = {}
    for e in mst_edges:
        pending[e] = pending.get(e, 0) + 1
    flags = []
    for e in edges:
        if pending.get(e, 0) > 0:
            pending[e] -= 1
            flags.append(True)
        else:
            flags.append(False)
    return flags


def render_result(
    num_vertices: int,
    edges: Sequence[Edge],
    result: MSTResult,
    size: float = 600.0,
) -> Dict[str, Any]:
    """
    Arma el payload que dibuja el lienzo: nodos con coordenadas, todas las
    aristas (marcando las del MST), costo total y la nota de conectividad.
    """
    positions = circular_layout(num_vertices, size)
    spanning = is_spanning_tree(result, num_vertices)
    note = None if spanning else DISCONNECTED_NOTE

    lines = [describe_edge(e) for e in result.edges]
    if note:
        lines.append(note)

    return {
        "num_vertices": num_vertices,
        "nodes": [{"id": i, "x": x, "y": y} for i, (x, y) in enumerate(positions)],
        "edges": [
            {**e._asdict(), "in_mst": flag}
            for e, flag in zip(edges, _in_mst_flags(edges, result.edges))
        ],
        "mst_edges": [e._asdict() for e in result.edges],
        "total_cost": result.cost,
        "is_spanning_tree": spanning,
        "components": count_components(num_vertices, edges),
        "note": note,
        "lines": lines,
    }


def format_report(num_vertices: int, result: MSTResult) -> str:
    """Reporte en texto plano del MST (para la línea de comandos)."""
    out = [f"Costo total: {result.cost}", "Conexiones del MST:"]
    out += [f"  {describe_edge(e)}" for e in result.edges]
    if not is_spanning_tree(result, num_vertices):
        out.append(DISCONNECTED_NOTE)
    return "\n".join(out)
