from typing import List

from app.algorithms.errors import InvalidArgumentError, VertexIndexError, is_vertex_index


class DisjointSetUnion:
    """
    Implementación de Union–Find (Disjoint Set Union) sobre los enteros [0, n).
    Usa compresión de caminos y unión por rango.
    """

    def __init__(self, n: int):
        if n < 0:
            raise InvalidArgumentError(f"El número de elementos no puede ser negativo (n={n}).")
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self.count = n

    def __len__(self):
        return len(self.parent)

    def _check(self, v):
        if not is_vertex_index(v) or not 0 <= v < len(self.parent):
            raise VertexIndexError(v, len(self.parent))

    def _root(self, v):
        if self.parent[v] != v:
            self.parent[v] = self._root(self.parent[v])  # Compresión de caminos
        return self.parent[v]

    def find(self, v: int) -> int:
        """Encuentra el representante (raíz) del conjunto que contiene a 'v'."""
        self._check(v)
        return self._root(v)

    def union(self, a: int, b: int) -> bool:
        """
        Une los conjuntos que contienen a 'a' y 'b'.
        Retorna False si ya estaban en el mismo conjunto (no modifica nada).
        """
        self._check(a)
        self._check(b)
        rootA = self._root(a)
        rootB = self._root(b)
        if rootA == rootB:
            return False

        if self.rank[rootA] < self.rank[rootB]:
            self.parent[rootA] = rootB
        elif self.rank[rootA] > self.rank[rootB]:
            self.parent[rootB] = rootA
        else:
            # Empate: la raíz de 'a' queda como padre
            self.parent[rootB] = rootA
            self.rank[rootA] += 1
        self.count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """Verifica si 'a' y 'b' pertenecen al mismo conjunto."""
        return self.find(a) == self.find(b)
