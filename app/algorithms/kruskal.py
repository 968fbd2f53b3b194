import logging
from typing import Iterable, List, NamedTuple, Tuple, Union

from app.algorithms.errors import InvalidArgumentError, VertexIndexError, is_vertex_index
from app.algorithms.union_find import DisjointSetUnion

logger = logging.getLogger(__name__)

Number = Union[int, float]


class Edge(NamedTuple):
    source: int
    destination: int
    weight: Number


class MSTResult(NamedTuple):
    edges: List[Edge]
    cost: Number


def _validate(num_vertices, edges):
    if num_vertices < 0:
        raise InvalidArgumentError(f"El número de vértices no puede ser negativo (V={num_vertices}).")
    for edge in edges:
        for v in (edge.source, edge.destination):
            if not is_vertex_index(v) or not 0 <= v < num_vertices:
                raise VertexIndexError(v, num_vertices)


def kruskal_mst(num_vertices: int, edges: Iterable[Union[Edge, Tuple[int, int, Number]]]) -> MSTResult:
    """
    Implementación del algoritmo de Kruskal.
    Parámetros:
        num_vertices: número total de vértices (V >= 0)
        edges: aristas (u, v, peso); se aceptan tuplas o Edge.
               Se permiten lazos y aristas paralelas.
    Retorna:
        MSTResult con las aristas seleccionadas (en orden de selección) y el
        costo total. Si el grafo no es conexo el resultado es un bosque con
        menos de V - 1 aristas; no es un error.
    """
    all_edges = [Edge(*e) for e in edges]
    _validate(num_vertices, all_edges)

    # sorted() es estable: a igual peso se conserva el orden de entrada
    sorted_edges = sorted(all_edges, key=lambda e: e.weight)

    dsu = DisjointSetUnion(num_vertices)
    result: List[Edge] = []
    total_cost = 0

    for edge in sorted_edges:
        if len(result) == num_vertices - 1:
            break
        if dsu.union(edge.source, edge.destination):
            result.append(edge)
            total_cost += edge.weight

    logger.debug(
        "Kruskal: V=%d, %d aristas, %d seleccionadas, costo=%s",
        num_vertices, len(all_edges), len(result), total_cost,
    )
    return MSTResult(result, total_cost)


def is_spanning_tree(result: MSTResult, num_vertices: int) -> bool:
    """True si el resultado conecta todos los vértices (V - 1 aristas)."""
    return len(result.edges) >= max(num_vertices - 1, 0)
