"""
Декодер входного кадра протокола.

Формат кадра (все поля - 16-битные беззнаковые, big-endian):

    start_id | target_id | edge_count N
    N раз: src_id | dest_id | cost

Порядок байт фиксирован как сетевой, независимо от платформы.
"""

import io
import logging
import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Tuple, Union

from ..algorithms.graph.base_edge import BaseEdge
from ..algorithms.graph.graph import GraphW
from ..errors import EdgeLimitExceeded, IncompleteInput

logger = logging.getLogger(__name__)

HEADER = struct.Struct(">HHH")
EDGE_RECORD = struct.Struct(">HHH")

# Поле edge_count 16-битное, больше ребер не объявить
MAX_EDGE_COUNT = 0xFFFF

EdgeSpec = Union[BaseEdge, Tuple[int, int, int]]


@dataclass
class GraphRequest:
    """Декодированный запрос: начальная и целевая вершины и граф"""

    start: int
    target: int
    graph: GraphW


def _read_exact(source: BinaryIO, size: int, field: str) -> bytes:
    """Прочитать ровно size байт, дочитывая короткие чтения до EOF"""
    data = source.read(size)
    if data is None:
        data = b""

    while len(data) < size:
        chunk = source.read(size - len(data))
        if not chunk:
            raise IncompleteInput(field, size, len(data))
        data += chunk

    return data


def decode_graph(
    source: Union[bytes, bytearray, BinaryIO],
    max_edges: int = MAX_EDGE_COUNT
) -> GraphRequest:
    """
    Прочитать запрос из потока байт.

    Читается ровно столько байт, сколько объявлено в заголовке.
    Идентификаторы и стоимости не проверяются на ноль - корректность
    кадра остается на стороне клиента.

    Args:
        source: Байты или объект с методом read(n)
        max_edges: Наибольшее допустимое число ребер в заголовке

    Returns:
        GraphRequest с заполненными списками смежности

    Raises:
        IncompleteInput: поток закончился раньше объявленного
        EdgeLimitExceeded: заголовок объявляет слишком много ребер
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    start, target, count = HEADER.unpack(_read_exact(source, HEADER.size, "header"))
    if count > max_edges:
        raise EdgeLimitExceeded(count, max_edges)

    logger.debug(f"Заголовок: start={start}, target={target}, edges={count}")

    graph = GraphW()
    for n in range(count):
        record = _read_exact(source, EDGE_RECORD.size, f"edge[{n}]")
        graph.add_edge(BaseEdge(*EDGE_RECORD.unpack(record)))

    return GraphRequest(start, target, graph)


def _check_u16(name: str, value: int) -> int:
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{name}={value} вне диапазона 16-битного поля")
    return value


def encode_request(start: int, target: int, edges: Iterable[EdgeSpec]) -> bytes:
    """
    Собрать кадр запроса.

    Args:
        start: Начальная вершина
        target: Целевая вершина
        edges: Ребра - BaseEdge или кортежи (src, dest, cost)

    Returns:
        Байты кадра в формате, который читает decode_graph
    """
    records = []
    for edge in edges:
        if isinstance(edge, BaseEdge):
            edge = edge.as_tuple()
        src, dest, cost = edge
        records.append(EDGE_RECORD.pack(
            _check_u16("src", src),
            _check_u16("dest", dest),
            _check_u16("cost", cost),
        ))

    header = HEADER.pack(
        _check_u16("start", start),
        _check_u16("target", target),
        _check_u16("edge_count", len(records)),
    )
    return header + b"".join(records)
