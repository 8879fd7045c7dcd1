"""Взвешенный ориентированный граф"""

from typing import Dict, Iterator, List, Optional

from .base_edge import BaseEdge
from .vertex import Vertex, MAX_VERTEX_ID


class GraphW:
    """
    Взвешенный ориентированный граф со списками смежности.

    Вершины хранятся в словаре по идентификатору и создаются
    при первом обращении, поэтому память зависит только от
    реально встреченных вершин, а не от всего 16-битного диапазона.
    """

    def __init__(self):
        self._vertices: Dict[int, Vertex] = {}
        self._e = 0  # Количество ребер

    @property
    def v(self) -> int:
        """Количество вершин"""
        return len(self._vertices)

    @property
    def e(self) -> int:
        """Количество ребер"""
        return self._e

    def vertex(self, v: int) -> Vertex:
        """
        Получить запись вершины, создав ее при необходимости.

        Args:
            v: Идентификатор вершины

        Returns:
            Запись вершины
        """
        record = self._vertices.get(v)
        if record is None:
            if not 0 <= v <= MAX_VERTEX_ID:
                raise ValueError(f"Неверный идентификатор вершины: {v}")
            record = Vertex(v)
            self._vertices[v] = record
        return record

    def get(self, v: int) -> Optional[Vertex]:
        """Запись вершины или None, если вершина не встречалась"""
        return self._vertices.get(v)

    def add_edge(self, edge: BaseEdge):
        """
        Добавить ребро в конец списка начальной вершины.

        Кратные ребра не схлопываются.

        Args:
            edge: Ребро для добавления
        """
        if not 0 <= edge.end_v <= MAX_VERTEX_ID:
            raise ValueError(f"Неверный идентификатор вершины: {edge.end_v}")
        self.vertex(edge.start_v).edges.append(edge)
        self._e += 1

    def adj(self, v: int) -> List[BaseEdge]:
        """
        Получить список смежных ребер для вершины.

        Args:
            v: Идентификатор вершины

        Returns:
            Список ребер, исходящих из вершины v (пустой для неизвестной)
        """
        record = self._vertices.get(v)
        return record.edges if record is not None else []

    def clear(self):
        """Освободить все вершины и ребра"""
        self._vertices.clear()
        self._e = 0

    def __contains__(self, v: int) -> bool:
        return v in self._vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self):
        return f"GraphW(v={self.v}, e={self._e})"
