"""Обработка одного запроса кратчайшего пути"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional, Union

from ..algorithms.graph.shortest_path_tree import ShortestPath
from ..algorithms.pathfinding.dijkstra import Dijkstra
from ..protocols.graph_decoder import MAX_EDGE_COUNT, decode_graph
from ..protocols.response_encoder import encode_response

logger = logging.getLogger(__name__)


@dataclass
class ShortestPathResult:
    """Результат запроса"""

    start: int
    target: int
    path: Optional[ShortestPath] = None

    @property
    def found(self) -> bool:
        return self.path is not None


class ShortestPathService:
    """
    Сервис кратчайших путей.

    Цепочка: кадр -> граф -> Дейкстра -> восстановление пути -> ответ.
    Граф и состояние обхода создаются на каждый вызов и не
    переживают его, так что один экземпляр сервиса можно
    использовать из нескольких потоков.
    """

    def __init__(self, max_edges: int = MAX_EDGE_COUNT, nul_terminated: bool = False):
        """
        Args:
            max_edges: Наибольшее допустимое число ребер в кадре
            nul_terminated: Добавлять нулевой байт в конец ответа
        """
        self.max_edges = max_edges
        self.nul_terminated = nul_terminated

    def solve(self, source: Union[bytes, bytearray, BinaryIO]) -> ShortestPathResult:
        """
        Прочитать кадр и найти кратчайший путь.

        Args:
            source: Байты кадра или поток с методом read(n)

        Returns:
            ShortestPathResult (path = None, если пути нет)

        Raises:
            WireFormatError: кадр неполный или слишком большой
            InvariantViolation: ошибка в логике ядра
        """
        request = decode_graph(source, max_edges=self.max_edges)
        graph = request.graph

        try:
            dijkstra = Dijkstra(graph, request.start, request.target)
            path = dijkstra.get_path(request.target)
        finally:
            graph.clear()

        return ShortestPathResult(request.start, request.target, path)

    def handle(self, source: Union[bytes, bytearray, BinaryIO]) -> bytes:
        """
        Обработать запрос и вернуть байты ответа.

        Args:
            source: Байты кадра или поток с методом read(n)

        Returns:
            Закодированный ответ
        """
        result = self.solve(source)

        if result.found:
            logger.info(
                f"Path {result.start}->{result.target}: "
                f"{len(result.path)} vertices, distance {result.path.distance}"
            )
        else:
            logger.info(f"No path {result.start}->{result.target}")

        return encode_response(
            result.path,
            result.start,
            result.target,
            nul_terminated=self.nul_terminated
        )


def shortest_path(data: bytes, nul_terminated: bool = False) -> bytes:
    """Обработать один кадр с настройками по умолчанию"""
    return ShortestPathService(nul_terminated=nul_terminated).handle(data)
