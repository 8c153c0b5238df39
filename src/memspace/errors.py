"""
src/memspace/errors.py
Jerarquía de errores del simulador de memoria.
"""


class MemSpaceError(Exception):
    """Raíz de todos los errores propios de memspace."""
    pass


class ListIndexError(MemSpaceError, IndexError):
    """Índice fuera del rango válido de una operación posicional de BlockList."""

    def __init__(self, index: int, size: int, upper_inclusive: bool = False):
        self.index = index
        self.size = size
        bound = f"[0, {size}]" if upper_inclusive else f"[0, {size})"
        super().__init__(f"Índice {index} fuera de rango {bound}")


class BlockNotFoundError(MemSpaceError, LookupError):
    """El bloque (o la celda) buscado no pertenece a la lista."""
    pass
