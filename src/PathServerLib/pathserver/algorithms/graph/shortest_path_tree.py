"""Дерево кратчайших путей"""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from ...errors import PathInvariantError
from .vertex import NO_VERTEX


@dataclass(frozen=True)
class ShortestPath:
    """Восстановленный путь: вершины от начала до цели и его длина"""

    vertices: Tuple[int, ...]
    distance: int

    @property
    def start(self) -> int:
        return self.vertices[0]

    @property
    def target(self) -> int:
        return self.vertices[-1]

    def __len__(self) -> int:
        return len(self.vertices)


class ShortestPathTree:
    """
    Дерево кратчайших путей.

    Используется для восстановления путей после выполнения
    алгоритма Дейкстры по ссылкам на предшественников.
    """

    def __init__(
        self,
        distances: Mapping[int, int],
        predecessors: Mapping[int, int],
        vertex_count: int
    ):
        """
        Инициализация дерева кратчайших путей.

        Args:
            distances: Итоговые расстояния достигнутых вершин
            predecessors: prev[v] - вершина, из которой пришли в v
            vertex_count: Общее число вершин графа (граница обратного хода)
        """
        self._distances = distances
        self._predecessors = predecessors
        self._vertex_count = vertex_count

    def get_path(self, start: int, target: int) -> Optional[ShortestPath]:
        """
        Восстановить путь от start до target.

        Путь от вершины до самой себя - одна вершина с длиной 0,
        независимо от наличия предшественника.

        Args:
            start: Начальная вершина
            target: Целевая вершина

        Returns:
            Путь или None если пути нет

        Raises:
            PathInvariantError: обратный ход длиннее числа вершин (цикл)
        """
        if start == target:
            return ShortestPath((start,), 0)

        path = [target]
        cursor = target
        steps = 0

        while cursor != start:
            prev = self._predecessors.get(cursor, NO_VERTEX)
            if prev == NO_VERTEX:
                return None

            steps += 1
            if steps > self._vertex_count:
                raise PathInvariantError(
                    f"Цикл в предшественниках при обратном ходе от {target}"
                )

            path.append(prev)
            cursor = prev

        path.reverse()
        return ShortestPath(tuple(path), self._distances[target])
