"""Ребро ориентированного графа"""


class BaseEdge:
    """
    Ориентированное ребро взвешенного графа.

    Ребро принадлежит начальной вершине (start_v) и ведет
    в конечную (end_v). Стоимость (cost) - целое число [1, 65535].
    """

    __slots__ = ('start_v', 'end_v', 'cost')

    def __init__(self, start_v: int = 0, end_v: int = 0, cost: int = 0):
        self.start_v = start_v  # Начальная вершина
        self.end_v = end_v      # Конечная вершина
        self.cost = cost        # Стоимость перехода

    def as_tuple(self) -> tuple:
        """Ребро в виде (start_v, end_v, cost)"""
        return (self.start_v, self.end_v, self.cost)

    def __repr__(self):
        return f"Edge({self.start_v} -> {self.end_v}, cost={self.cost})"

    def __eq__(self, other):
        if not isinstance(other, BaseEdge):
            return False
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())
