"""Алгоритм Дейкстры для поиска кратчайшего пути"""

import logging
from typing import Dict, Optional

from ...errors import InvariantViolation
from ..graph.graph import GraphW
from ..graph.shortest_path_tree import ShortestPath, ShortestPathTree
from ..graph.vertex import NO_VERTEX
from .indexed_heap import IndexedMinHeap

logger = logging.getLogger(__name__)


class Dijkstra:
    """
    Алгоритм Дейкстры на индексированной min-куче.

    Состояние обхода (расстояние, предшественник, посещенность)
    записывается прямо в вершины графа, поэтому каждый запуск
    требует нового графа.
    """

    def __init__(self, graph: GraphW, start: int, target: Optional[int] = None):
        """
        Инициализация и выполнение алгоритма Дейкстры.

        Args:
            graph: Граф (все стоимости ребер > 0)
            start: Начальная вершина
            target: Целевая вершина. Поиск останавливается, как только
                    она оказывается минимумом очереди. Если None -
                    считаются расстояния до всех достижимых вершин
        """
        self._graph = graph
        self._start = start
        self._target = target

        # Статистика запуска
        self.extracted = 0
        self.relaxed = 0
        self._exhausted = False

        # Выполнить алгоритм
        self._search()

    def _search(self):
        """Выполнить поиск кратчайших путей"""
        graph = self._graph

        # Граф не должен содержать состояние прошлого запуска
        for record in graph:
            if (record.distance is not None or record.visited
                    or record.prev != NO_VERTEX or record.heap_index != 0):
                raise InvariantViolation(
                    f"Вершина {record.id} уже содержит состояние обхода; "
                    f"для нового запуска нужен новый граф"
                )

        heap = IndexedMinHeap(graph)

        graph.vertex(self._start).distance = 0
        heap.insert(self._start)

        while len(heap):
            # Цель в вершине кучи - ее расстояние уже итоговое
            if heap.peek() == self._target:
                break

            v = heap.extract_min()
            current = graph.vertex(v)
            current.visited = True
            self.extracted += 1

            # Релаксация всех соседей
            for edge in current.edges:
                neighbour = graph.vertex(edge.end_v)
                if neighbour.visited:
                    continue

                candidate = current.distance + edge.cost
                if neighbour.distance is None:
                    neighbour.distance = candidate
                    neighbour.prev = v
                    heap.insert(neighbour.id)
                    self.relaxed += 1
                elif candidate < neighbour.distance:
                    neighbour.distance = candidate
                    neighbour.prev = v
                    heap.decrease_key(neighbour.id)
                    self.relaxed += 1

        self._exhausted = not len(heap)

        logger.debug(
            f"Dijkstra {self._start}->{self._target}: "
            f"извлечено {self.extracted}, релаксаций {self.relaxed}, "
            f"в очереди осталось {len(heap)}"
        )

    @property
    def exhausted(self) -> bool:
        """Очередь опустошена - расстояния всех вершин итоговые"""
        return self._exhausted

    def is_final(self, v: int) -> bool:
        """
        Являются ли расстояние и предшественник вершины итоговыми.

        После остановки на цели итоговые только извлеченные вершины
        и сама цель; остальные значения предварительные.
        """
        if self._exhausted or v == self._target:
            return True
        record = self._graph.get(v)
        return record is not None and record.visited

    def _require_final(self, v: int):
        if not self.is_final(v):
            raise ValueError(
                f"Расстояние до вершины {v} не итоговое: "
                f"поиск остановлен на цели {self._target}"
            )

    @property
    def distances(self) -> Dict[int, int]:
        """
        Расстояния до всех достигнутых вершин.

        Если поиск остановлен на цели, сюда входят и предварительные
        расстояния вершин, оставшихся в очереди (см. is_final).
        """
        return {
            record.id: record.distance
            for record in self._graph
            if record.distance is not None
        }

    @property
    def predecessors(self) -> Dict[int, int]:
        """Предшественники всех достигнутых вершин, кроме начальной"""
        return {
            record.id: record.prev
            for record in self._graph
            if record.prev != NO_VERTEX
        }

    def has_path_to(self, v: int) -> bool:
        """
        Проверка существования пути до вершины.

        Args:
            v: Идентификатор вершины

        Returns:
            True если путь существует

        Raises:
            ValueError: вершина не итоговая (поиск остановлен раньше)
        """
        return self.distance_to(v) is not None

    def distance_to(self, v: int) -> Optional[int]:
        """
        Получить итоговое расстояние до вершины.

        Args:
            v: Идентификатор вершины

        Returns:
            Расстояние или None, если вершина недостижима

        Raises:
            ValueError: вершина не итоговая (поиск остановлен раньше)
        """
        self._require_final(v)
        record = self._graph.get(v)
        return record.distance if record is not None else None

    def predecessor_of(self, v: int) -> int:
        """Предшественник вершины (NO_VERTEX если не задан)"""
        record = self._graph.get(v)
        return record.prev if record is not None else NO_VERTEX

    def tree(self) -> ShortestPathTree:
        """Дерево кратчайших путей по итоговым вершинам запуска"""
        final = {v: d for v, d in self.distances.items() if self.is_final(v)}
        predecessors = {v: p for v, p in self.predecessors.items() if v in final}
        return ShortestPathTree(final, predecessors, self._graph.v)

    def get_path(self, target: Optional[int] = None) -> Optional[ShortestPath]:
        """
        Восстановить путь от начальной вершины.

        Args:
            target: Целевая вершина (по умолчанию - цель запуска)

        Returns:
            Путь или None если пути нет

        Raises:
            ValueError: вершина не итоговая (поиск остановлен раньше)
        """
        if target is None:
            target = self._target
        self._require_final(target)
        return self.tree().get_path(self._start, target)
