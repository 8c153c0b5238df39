"""
src/memspace/memory/block.py
Bloque de Memoria: par (dirección base, longitud).
No tiene almacenamiento detrás; solo describe un rango contiguo de direcciones.
"""


class MemoryBlock:
    """
    Rango [base_address, base_address + length).
    Mutable: malloc y defrag reescriben base/longitud in situ, porque el mismo
    objeto puede estar referenciado a la vez por un cursor y por una lista.
    """
    __slots__ = ('base_address', 'length')

    def __init__(self, base_address: int, length: int):
        if base_address < 0:
            raise ValueError(f"base_address debe ser >= 0, no {base_address}")
        if length < 0:
            raise ValueError(f"length debe ser >= 0, no {length}")
        self.base_address = base_address
        self.length = length

    @property
    def end(self) -> int:
        """Primera dirección posterior al bloque."""
        return self.base_address + self.length

    def is_adjacent_to(self, other: 'MemoryBlock') -> bool:
        """True si `other` empieza justo donde termina este bloque."""
        return self.end == other.base_address

    # --- PYTHON MAGIC METHODS ---

    def __eq__(self, other):
        """Igualdad por valor: ambos campos coinciden."""
        if not isinstance(other, MemoryBlock):
            return NotImplemented
        return (self.base_address == other.base_address
                and self.length == other.length)

    # Mutable con igualdad por valor -> no hashable
    __hash__ = None

    def __str__(self):
        return f"({self.base_address},{self.length})"

    def __repr__(self):
        return f"MemoryBlock({self.base_address}, {self.length})"
