import logging
import math
from typing import List, Sequence

import networkx as nx
import pandas as pd

from app.algorithms.kruskal import Edge

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("source", "destination", "weight")


def load_edges(path) -> List[Edge]:
    """
    Carga la lista de aristas desde un CSV.
    - Columnas obligatorias: 'source', 'destination', 'weight'
    - Los vértices deben ser enteros; el peso puede ser entero o real (finito)
    - Una fila incompleta o inválida se rechaza indicando su número de arista
    Retorna: lista de Edge en el orden del archivo
    """
    edges_df = pd.read_csv(path)

    missing = [c for c in REQUIRED_COLUMNS if c not in edges_df.columns]
    if missing:
        raise ValueError(f"Faltan columnas en '{path}': {', '.join(missing)}")

    # Valores no numéricos quedan como NaN y se rechazan abajo
    values = edges_df[list(REQUIRED_COLUMNS)].apply(pd.to_numeric, errors="coerce")

    edges = []
    for i, (source, destination, weight) in enumerate(values.itertuples(index=False), start=1):
        if pd.isna(source) or pd.isna(destination) or pd.isna(weight):
            raise ValueError(f"Arista {i} inválida: faltan valores o no son numéricos.")
        if not (float(source).is_integer() and float(destination).is_integer()):
            raise ValueError(f"Arista {i} inválida: los vértices deben ser enteros.")
        if not math.isfinite(weight):
            raise ValueError(f"Arista {i} inválida: el peso debe ser un número finito.")

        if float(weight).is_integer():
            weight = int(weight)
        else:
            weight = float(weight)
        edges.append(Edge(int(source), int(destination), weight))

    logger.info("Aristas cargadas desde %s: %d", path, len(edges))
    return edges


def infer_num_vertices(edges: Sequence[Edge]) -> int:
    """Número de vértices implícito: el mayor índice usado + 1."""
    if not edges:
        return 0
    return max(max(e.source, e.destination) for e in edges) + 1


def build_graph(num_vertices: int, edges: Sequence[Edge]) -> nx.MultiGraph:
    """
    Construye el grafo no dirigido (se conservan aristas paralelas y lazos).
    """
    G = nx.MultiGraph()
    G.add_nodes_from(range(num_vertices))
    for e in edges:
        G.add_edge(e.source, e.destination, weight=e.weight)
    return G


def count_components(num_vertices: int, edges: Sequence[Edge]) -> int:
    """Cantidad de componentes conexas del grafo."""
    if num_vertices == 0:
        return 0
    return nx.number_connected_components(build_graph(num_vertices, edges))
