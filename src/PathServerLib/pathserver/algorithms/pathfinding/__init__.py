"""Алгоритмы поиска кратчайших путей"""

from .indexed_heap import IndexedMinHeap, distance_less
from .dijkstra import Dijkstra

__all__ = ['IndexedMinHeap', 'distance_less', 'Dijkstra']
