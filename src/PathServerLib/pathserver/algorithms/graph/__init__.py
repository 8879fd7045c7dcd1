"""Базовые структуры графа"""

from .base_edge import BaseEdge
from .vertex import Vertex, VertexState, NO_VERTEX, MAX_VERTEX_ID
from .graph import GraphW
from .shortest_path_tree import ShortestPath, ShortestPathTree

__all__ = [
    'BaseEdge',
    'Vertex',
    'VertexState',
    'NO_VERTEX',
    'MAX_VERTEX_ID',
    'GraphW',
    'ShortestPath',
    'ShortestPathTree',
]
