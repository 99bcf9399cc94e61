"""
Orden manual de listas (proyectos, experiencia, tecnologías).

Cada fila lleva una columna entera 'order'. Mover un elemento una posición
arriba o abajo reordena la lista en memoria y vuelve a numerar todas las
filas como (posición + 1) * 10.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

ORDER_STEP = 10


class Direction(str, Enum):
    up = "up"
    down = "down"


def target_index(index: int, direction: Direction, length: int) -> Optional[int]:
    """Nuevo índice del elemento, o None si el movimiento se sale de la lista."""
    if index < 0 or index >= length:
        return None
    new_index = index - 1 if Direction(direction) == Direction.up else index + 1
    if new_index < 0 or new_index >= length:
        return None
    return new_index


def move_item(items: Sequence[Any], index: int, direction: Direction) -> Optional[List[Any]]:
    """
    Devuelve una lista nueva con el elemento desplazado una posición.

    None significa "no hacer nada" (primer elemento hacia arriba, último hacia
    abajo). La secuencia de entrada no se modifica.
    """
    new_index = target_index(index, direction, len(items))
    if new_index is None:
        return None
    moved = list(items)
    item = moved.pop(index)
    moved.insert(new_index, item)
    return moved


def order_for_position(position: int) -> int:
    return (position + 1) * ORDER_STEP


def renumber(items: Sequence[Any]) -> List[Dict[str, Any]]:
    """Filas {id, order} con el orden 10, 20, 30... de la secuencia dada."""
    return [
        {"id": item.id, "order": order_for_position(position)}
        for position, item in enumerate(items)
    ]


def next_order(count: int) -> int:
    """Orden por defecto para una fila nueva al final de la lista."""
    return order_for_position(count)
