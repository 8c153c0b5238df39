"""
src/memspace/memory/space.py
Espacio de Memoria Gestionado (First-Fit).
Dos listas de bloques: libres y asignados. malloc/free mueven capacidad
entre ellas; defrag fusiona bloques libres contiguos bajo demanda.

Modelo de propiedad: un bloque pertenece a una sola lista en cada momento.
Al transferirlo se mueve el MISMO objeto, nunca una copia.
Sin candados: uso exclusivamente mono-hilo.
"""
import logging
from typing import Dict, Any
from ..ds.list import BlockList
from ..settings import NULL_ADDRESS, LIST_SEPARATOR
from .block import MemoryBlock

logger = logging.getLogger(__name__)


class MemorySpace:
    """
    Simulador de un rango de direcciones [0, max_size).
    Invariant (para llamadas que nunca liberan dos veces ni direcciones
    desconocidas): la suma de longitudes de ambas listas es max_size y
    ningún par de rangos se solapa.
    """
    __slots__ = ('_max_size', '_free', '_allocated')

    def __init__(self, max_size: int):
        if max_size < 0:
            raise ValueError(f"max_size debe ser >= 0, no {max_size}")
        self._max_size = max_size
        self._allocated = BlockList()
        # Un único bloque libre que cubre todo el espacio
        self._free = BlockList()
        self._free.insert_last(MemoryBlock(0, max_size))

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def free_list(self) -> BlockList:
        return self._free

    @property
    def allocated_list(self) -> BlockList:
        return self._allocated

    def malloc(self, length: int) -> int:
        """
        Reserva `length` palabras con política first-fit.
        Retorna la dirección base, o NULL_ADDRESS si ningún bloque libre
        tiene longitud suficiente (sin efectos secundarios).

        - Coincidencia exacta: el bloque libre pasa tal cual a `allocated`.
        - Bloque mayor: se crea un bloque nuevo al principio del libre y
          el libre se encoge in situ (base += length, length -= length).

        length == 0 está permitido: produce un bloque asignado degenerado.
        """
        if length < 0:
            raise ValueError(f"length debe ser >= 0, no {length}")

        node = self._free.first()
        while node is not None:
            found = node.block
            if found.length >= length:
                address = found.base_address
                if found.length == length:
                    self._free.remove_node(node)
                    self._allocated.insert_last(found)
                else:
                    self._allocated.insert_last(MemoryBlock(address, length))
                    found.base_address += length
                    found.length -= length
                logger.debug("malloc(%d) -> %d", length, address)
                return address
            node = node.next

        logger.debug("malloc(%d) falló: ningún bloque libre es suficiente", length)
        return NULL_ADDRESS

    def free(self, address: int):
        """
        Devuelve a `free` el primer bloque asignado con base `address`.
        El bloque vuelve entero y al final de la lista; no se fusiona.
        Una dirección que no está asignada es un no-op silencioso.
        """
        node = self._allocated.first()
        while node is not None:
            if node.block.base_address == address:
                block = node.block
                self._allocated.remove_node(node)
                self._free.insert_last(block)
                logger.debug("free(%d): %s liberado", address, block)
                return
            node = node.next
        logger.debug("free(%d): dirección no asignada, se ignora", address)

    def defrag(self):
        """
        Fusiona bloques libres contiguos in situ.

        Para cada posición i se recorren las posiciones j > i; si el bloque j
        empieza donde termina el acumulado de i, se absorbe y se borra (sin
        avanzar j, porque el borrado desplaza la lista). Mientras i haya
        absorbido algo se repite el barrido en i; solo entonces se avanza.
        La lista libre no se ordena por dirección.
        Nunca toca `allocated` ni se invoca automáticamente desde malloc.
        """
        i = 0
        while i < self._free.size():
            current = self._free.block_at(i)
            merged = False
            j = i + 1
            while j < self._free.size():
                candidate = self._free.block_at(j)
                if current.is_adjacent_to(candidate):
                    logger.debug("defrag: %s absorbe %s", current, candidate)
                    current.length += candidate.length
                    self._free.remove_at(j)
                    merged = True
                else:
                    j += 1
            if not merged:
                i += 1

    def stats(self) -> Dict[str, Any]:
        """Introspección del estado del espacio."""
        free_total = self._free.total_length()
        largest = max((block.length for block in self._free), default=0)
        return {
            "max_size": self._max_size,
            "free": free_total,
            "allocated": self._allocated.total_length(),
            "free_blocks": self._free.size(),
            "allocated_blocks": self._allocated.size(),
            "largest_free": largest,
            "fragmentation": 1.0 - (largest / free_total) if free_total else 0.0,
        }

    def __str__(self):
        """Lista libre, salto de línea, lista asignada."""
        return f"{self._free}{LIST_SEPARATOR}{self._allocated}"

    def __repr__(self):
        return (f"MemorySpace(max_size={self._max_size}, "
                f"free=[{self._free}], allocated=[{self._allocated}])")
