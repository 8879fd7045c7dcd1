"""Индексированная бинарная min-куча вершин"""

from typing import List, Optional

from ...errors import HeapInvariantError
from ..graph.graph import GraphW
from ..graph.vertex import NO_VERTEX


def distance_less(a: Optional[int], b: Optional[int]) -> bool:
    """
    Сравнение расстояний с учетом бесконечности.

    None (бесконечность) никогда не меньше известного расстояния.

    Args:
        a: Первое расстояние
        b: Второе расстояние

    Returns:
        True если a < b
    """
    return a is not None and (b is None or a < b)


class IndexedMinHeap:
    """
    Очередь с приоритетами по идентификаторам вершин.

    Ключ - текущее предварительное расстояние вершины (vertex.distance).
    Позиция каждой вершины хранится в vertex.heap_index, что дает
    проверку принадлежности за O(1) и decrease_key за O(log n).

    Массив слотов индексируется с 1: родитель слота i - i // 2,
    дети - 2i и 2i + 1.
    """

    def __init__(self, graph: GraphW):
        """
        Args:
            graph: Граф, вершины которого хранят ключи и позиции
        """
        self._graph = graph
        self._slots: List[int] = [NO_VERTEX]  # Слот 0 не используется

    def __len__(self) -> int:
        return len(self._slots) - 1

    def __contains__(self, v: int) -> bool:
        return self.contains(v)

    def contains(self, v: int) -> bool:
        """Находится ли вершина в куче"""
        record = self._graph.get(v)
        return record is not None and record.heap_index != 0

    def peek(self) -> Optional[int]:
        """Вершина с минимальным расстоянием или None для пустой кучи"""
        return self._slots[1] if len(self) else None

    def insert(self, v: int):
        """
        Добавить вершину новым листом и поднять ее.

        Args:
            v: Идентификатор вершины
        """
        record = self._graph.vertex(v)
        if record.heap_index != 0:
            raise HeapInvariantError(f"Вершина {v} уже в куче")

        self._slots.append(v)
        record.heap_index = len(self._slots) - 1
        self._sift_up(record.heap_index)

    def extract_min(self) -> Optional[int]:
        """
        Извлечь вершину с минимальным расстоянием.

        Последний лист переносится в корень и опускается.

        Returns:
            Идентификатор вершины или None для пустой кучи
        """
        if not len(self):
            return None

        root = self._slots[1]
        last = self._slots.pop()
        self._graph.vertex(root).heap_index = 0

        if len(self):
            self._set(1, last)
            self._sift_down(1)

        return root

    def decrease_key(self, v: int):
        """
        Восстановить порядок после уменьшения расстояния вершины.

        Расстояния в алгоритме только уменьшаются, поэтому
        достаточно подъема.

        Args:
            v: Идентификатор вершины, расстояние которой уже уменьшено
        """
        record = self._graph.get(v)
        if record is None or record.heap_index == 0:
            raise HeapInvariantError(f"decrease_key для вершины {v} вне кучи")
        self._sift_up(record.heap_index)

    def validate(self):
        """
        Проверить свойство кучи и согласованность индекса позиций.

        Raises:
            HeapInvariantError: при любом нарушении
        """
        size = len(self)
        for i in range(1, size + 1):
            record = self._graph.get(self._slots[i])
            if record is None or record.heap_index != i:
                raise HeapInvariantError(f"Слот {i}: индекс позиции не совпадает")
            if i > 1 and distance_less(self._key(i), self._key(i // 2)):
                raise HeapInvariantError(f"Слот {i} меньше родителя {i // 2}")

        indexed = sum(1 for record in self._graph if record.heap_index != 0)
        if indexed != size:
            raise HeapInvariantError(
                f"Вершин с позицией: {indexed}, элементов в куче: {size}"
            )

    def _key(self, i: int) -> Optional[int]:
        return self._graph.vertex(self._slots[i]).distance

    def _set(self, i: int, v: int):
        self._slots[i] = v
        self._graph.vertex(v).heap_index = i

    def _swap(self, a: int, b: int):
        va, vb = self._slots[a], self._slots[b]
        self._set(a, vb)
        self._set(b, va)

    def _sift_up(self, i: int) -> int:
        while i > 1:
            parent = i // 2
            if not distance_less(self._key(i), self._key(parent)):
                break
            self._swap(i, parent)
            i = parent
        return i

    def _sift_down(self, i: int) -> int:
        size = len(self)
        while True:
            child = 2 * i
            if child > size:
                break  # Лист

            # Меньший из двух детей
            if child + 1 <= size and distance_less(self._key(child + 1), self._key(child)):
                child += 1

            if not distance_less(self._key(child), self._key(i)):
                break
            self._swap(i, child)
            i = child
        return i
