import numbers


class InvalidArgumentError(ValueError):
    """Argumento inválido (p. ej. un número negativo de vértices)."""


class VertexIndexError(IndexError):
    """Índice de vértice fuera del rango [0, n)."""

    def __init__(self, index, size):
        super().__init__(f"Vértice {index} fuera de rango: debe estar entre 0 y {size - 1}.")
        self.index = index
        self.size = size


def is_vertex_index(v) -> bool:
    """True si 'v' es un entero (no booleano) utilizable como índice."""
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)
