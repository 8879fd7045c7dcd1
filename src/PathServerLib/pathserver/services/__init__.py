"""Сервисы PathServer"""

from .shortest_path_service import (
    ShortestPathResult,
    ShortestPathService,
    shortest_path
)

__all__ = ['ShortestPathResult', 'ShortestPathService', 'shortest_path']
