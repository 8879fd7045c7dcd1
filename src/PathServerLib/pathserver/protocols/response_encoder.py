"""Текстовое представление ответа"""

from typing import Optional

from ..algorithms.graph.shortest_path_tree import ShortestPath

LINE_TERMINATOR = "\n"


def format_path(path: ShortestPath) -> str:
    """'1->3->2->5 (20)' без перевода строки"""
    return "->".join(str(v) for v in path.vertices) + f" ({path.distance})"


def format_no_path(start: int, target: int) -> str:
    return f"No path from '{start}' to '{target}'"


def encode_response(
    path: Optional[ShortestPath],
    start: int,
    target: int,
    nul_terminated: bool = False
) -> bytes:
    """
    Закодировать ответ сервиса.

    Args:
        path: Найденный путь или None
        start: Начальная вершина запроса
        target: Целевая вершина запроса
        nul_terminated: Добавить завершающий нулевой байт,
                        как делал исходный сервис

    Returns:
        ASCII-байты ответа с переводом строки в конце
    """
    text = format_path(path) if path is not None else format_no_path(start, target)
    data = (text + LINE_TERMINATOR).encode("ascii")
    return data + b"\0" if nul_terminated else data
