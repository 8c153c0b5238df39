"""
src/memspace/ds/list.py
Estructura de Datos Mutable: Lista Simplemente Enlazada de Bloques.
Inserción O(1) en cabeza y cola, acceso por índice O(index).
"""
from typing import Optional, Iterator
from ..memory.block import MemoryBlock
from ..errors import ListIndexError, BlockNotFoundError
from ..settings import BLOCK_SEPARATOR


class ListNode:
    """Celda de la lista: un bloque y el enlace a la siguiente celda."""
    __slots__ = ('block', 'next')

    def __init__(self, block: MemoryBlock, next: Optional['ListNode'] = None):
        self.block = block
        self.next = next

    def __str__(self):
        return str(self.block)

    def __repr__(self):
        return f"ListNode({self.block!r})"


class ListIterator:
    """
    Cursor vivo hacia delante.
    No hay protección: mutar la lista mientras hay un cursor abierto
    es comportamiento indefinido.
    """
    __slots__ = ('current',)

    def __init__(self, first: Optional[ListNode]):
        self.current = first

    def has_next(self) -> bool:
        return self.current is not None

    def next(self) -> MemoryBlock:
        """Devuelve el bloque actual y avanza una celda."""
        if self.current is None:
            raise StopIteration
        block = self.current.block
        self.current = self.current.next
        return block

    def __iter__(self) -> 'ListIterator':
        return self

    def __next__(self) -> MemoryBlock:
        return self.next()


class BlockList:
    """
    Lista enlazada simple con punteros a cabeza y cola.
    Invariant: size == 0 <=> head is None <=> tail is None, y tail.next is None.
    Cada celda pertenece a una única lista.
    """
    __slots__ = ('_head', '_tail', '_size')

    def __init__(self):
        self._head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0

    def first(self) -> Optional[ListNode]:
        return self._head

    def last(self) -> Optional[ListNode]:
        return self._tail

    def size(self) -> int:
        return self._size

    # --- ACCESO POSICIONAL ---

    def node_at(self, index: int) -> Optional[ListNode]:
        """
        Celda en la posición `index`. El rango válido es [0, size]:
        index == size devuelve None (el hueco "después del último"),
        que es lo que necesita insert_at.
        """
        if index < 0 or index > self._size:
            raise ListIndexError(index, self._size, upper_inclusive=True)
        curr = self._head
        for _ in range(index):
            curr = curr.next
        return curr

    def block_at(self, index: int) -> MemoryBlock:
        """Bloque en la posición `index`. Rango estricto [0, size)."""
        self._check_index(index)
        return self.node_at(index).block

    def index_of(self, block: MemoryBlock) -> int:
        """Búsqueda lineal por igualdad de valor. -1 si no está."""
        curr = self._head
        index = 0
        while curr is not None:
            if curr.block == block:
                return index
            curr = curr.next
            index += 1
        return -1

    # --- INSERCIÓN ---

    def insert_at(self, index: int, block: MemoryBlock):
        """
        Inserta `block` antes de la posición `index` (rango [0, size]).
        O(1) en los extremos, O(index) en el interior.
        """
        if index < 0 or index > self._size:
            raise ListIndexError(index, self._size, upper_inclusive=True)
        if index == 0:
            self.insert_first(block)
        elif index == self._size:
            self.insert_last(block)
        else:
            prev = self.node_at(index - 1)
            prev.next = ListNode(block, prev.next)
            self._size += 1

    def insert_first(self, block: MemoryBlock):
        node = ListNode(block, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert_last(self, block: MemoryBlock):
        node = ListNode(block)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    # --- BORRADO ---

    def remove_node(self, node: ListNode):
        """
        Desenlaza la celda `node`.
        La cabeza es O(1); la cola y el interior requieren localizar el
        predecesor recorriendo la lista (no hay puntero hacia atrás).
        El predecesor se busca por identidad de celda, no por valor: dos
        bloques iguales (p.ej. de longitud cero) no se confunden.
        """
        if node is None:
            raise BlockNotFoundError("No se puede borrar una celda nula")

        if node is self._head:
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            prev = self._head
            while prev is not None and prev.next is not node:
                prev = prev.next
            if prev is None:
                raise BlockNotFoundError(f"La celda {node!r} no pertenece a esta lista")
            prev.next = node.next
            if node is self._tail:
                self._tail = prev

        node.next = None
        self._size -= 1

    def remove_at(self, index: int):
        """Borra la celda en `index`. Rango estricto [0, size)."""
        self._check_index(index)
        self.remove_node(self.node_at(index))

    def remove_block(self, block: MemoryBlock):
        """
        Borra la primera celda cuyo bloque es igual a `block`.
        A diferencia de MemorySpace.free, la ausencia es un error.
        """
        index = self.index_of(block)
        if index == -1:
            raise BlockNotFoundError(f"El bloque {block} no está en la lista")
        self.remove_at(index)

    # --- RECORRIDO ---

    def iterator(self) -> ListIterator:
        """Cursor vivo desde la cabeza."""
        return ListIterator(self._head)

    def total_length(self) -> int:
        """Suma de las longitudes de todos los bloques."""
        return sum(block.length for block in self)

    def _check_index(self, index: int):
        if index < 0 or index >= self._size:
            raise ListIndexError(index, self._size)

    # --- PYTHON MAGIC METHODS ---

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[MemoryBlock]:
        return self.iterator()

    def __contains__(self, block) -> bool:
        return self.index_of(block) != -1

    def __str__(self):
        """Formato de depuración: "(0,10), (10,10)". Vacía -> ""."""
        return BLOCK_SEPARATOR.join(str(block) for block in self)

    def __repr__(self):
        return f"BlockList[{self}]"
