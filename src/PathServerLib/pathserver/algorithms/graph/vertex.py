"""Запись вершины: исходящие ребра и метаданные обхода"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .base_edge import BaseEdge

# Идентификатор 0 недопустим и означает "нет вершины"
NO_VERTEX = 0
MAX_VERTEX_ID = 65535


class VertexState(Enum):
    """Состояние вершины в алгоритме Дейкстры"""

    UNDISCOVERED = "undiscovered"  # Расстояние неизвестно
    FRONTIER = "frontier"          # В очереди, расстояние предварительное
    FINALIZED = "finalized"        # Извлечена из очереди, расстояние итоговое


@dataclass
class Vertex:
    """
    Вершина графа.

    Хранит собственный список исходящих ребер и состояние обхода.
    distance = None означает бесконечность (вершина еще не достигнута).
    heap_index = 0 означает, что вершины нет в куче.
    """

    id: int
    edges: List[BaseEdge] = field(default_factory=list)

    # Метаданные обхода
    distance: Optional[int] = None
    visited: bool = False
    prev: int = NO_VERTEX
    heap_index: int = 0

    @property
    def state(self) -> VertexState:
        """Текущее состояние вершины"""
        if self.visited:
            return VertexState.FINALIZED
        if self.distance is None:
            return VertexState.UNDISCOVERED
        return VertexState.FRONTIER
