"""
Тесты индексированной min-кучи.

Свойство кучи и согласованность индекса позиций проверяются
через validate() после каждой операции.
"""

import random

import pytest

from pathserver.algorithms.graph.graph import GraphW
from pathserver.algorithms.pathfinding.indexed_heap import IndexedMinHeap, distance_less
from pathserver.errors import HeapInvariantError


def make_heap(distances):
    """Куча над графом, в котором вершинам заданы расстояния"""
    graph = GraphW()
    for v, distance in distances.items():
        graph.vertex(v).distance = distance
    return graph, IndexedMinHeap(graph)


def drain(heap):
    order = []
    while len(heap):
        order.append(heap.extract_min())
        heap.validate()
    return order


# ==================== Сравнение с бесконечностью ====================

class TestDistanceLess:
    """Сравнение расстояний, где None - бесконечность"""

    def test_numeric_order(self):
        assert distance_less(1, 2)
        assert not distance_less(2, 1)
        assert not distance_less(3, 3)

    def test_infinity_is_never_smaller(self):
        assert distance_less(0, None)
        assert distance_less(65535, None)
        assert not distance_less(None, 0)
        assert not distance_less(None, None)


# ==================== Операции кучи ====================

class TestIndexedMinHeap:
    """Тесты операций кучи"""

    def test_empty_heap(self):
        _, heap = make_heap({})

        assert len(heap) == 0
        assert heap.peek() is None
        assert heap.extract_min() is None

    def test_insert_sets_position(self):
        graph, heap = make_heap({5: 10})
        heap.insert(5)

        assert 5 in heap
        assert heap.contains(5)
        assert graph.vertex(5).heap_index == 1
        assert heap.peek() == 5

    def test_extract_in_distance_order(self):
        distances = {1: 40, 2: 10, 3: 30, 4: 20, 5: 50}
        graph, heap = make_heap(distances)
        for v in distances:
            heap.insert(v)
            heap.validate()

        assert drain(heap) == [2, 4, 3, 1, 5]
        assert all(record.heap_index == 0 for record in graph)

    def test_extract_clears_position(self):
        graph, heap = make_heap({1: 3, 2: 1})
        heap.insert(1)
        heap.insert(2)

        assert heap.extract_min() == 2
        assert 2 not in heap
        assert graph.vertex(2).heap_index == 0
        assert graph.vertex(1).heap_index == 1

    def test_unknown_distance_sinks(self):
        """Вершина с бесконечным расстоянием не поднимается выше известных"""
        _, heap = make_heap({1: None, 2: 7, 3: None, 4: 2})
        for v in (1, 2, 3, 4):
            heap.insert(v)
            heap.validate()

        order = drain(heap)
        assert order[:2] == [4, 2]
        assert set(order[2:]) == {1, 3}

    def test_zero_distance_is_a_real_distance(self):
        """Расстояние 0 - минимум, а не бесконечность"""
        _, heap = make_heap({1: 5, 2: 0})
        heap.insert(1)
        heap.insert(2)

        assert heap.peek() == 2

    def test_decrease_key_moves_up(self):
        graph, heap = make_heap({1: 10, 2: 20, 3: 30, 4: 40})
        for v in (1, 2, 3, 4):
            heap.insert(v)

        graph.vertex(4).distance = 5
        heap.decrease_key(4)
        heap.validate()

        assert heap.peek() == 4
        assert drain(heap) == [4, 1, 2, 3]

    def test_decrease_key_from_infinity(self):
        graph, heap = make_heap({1: None, 2: 8})
        heap.insert(1)
        heap.insert(2)

        graph.vertex(1).distance = 3
        heap.decrease_key(1)
        heap.validate()

        assert heap.peek() == 1

    def test_decrease_key_absent_vertex(self):
        """decrease_key для вершины вне кучи - нарушение контракта"""
        graph, heap = make_heap({1: 1, 2: 2})
        heap.insert(1)

        with pytest.raises(HeapInvariantError):
            heap.decrease_key(2)
        with pytest.raises(HeapInvariantError):
            heap.decrease_key(99)

    def test_double_insert(self):
        _, heap = make_heap({1: 1})
        heap.insert(1)

        with pytest.raises(HeapInvariantError):
            heap.insert(1)

    def test_validate_detects_broken_order(self):
        graph, heap = make_heap({1: 1, 2: 2})
        heap.insert(1)
        heap.insert(2)

        # Изменение ключа без decrease_key ломает порядок
        graph.vertex(2).distance = 0
        with pytest.raises(HeapInvariantError):
            heap.validate()

    def test_validate_detects_position_desync(self):
        graph, heap = make_heap({1: 1, 2: 2})
        heap.insert(1)
        heap.insert(2)

        graph.vertex(2).heap_index = 1
        with pytest.raises(HeapInvariantError):
            heap.validate()

    def test_random_operations_keep_invariant(self, seed_random):
        """Свойство кучи после каждой операции на случайной последовательности"""
        graph = GraphW()
        heap = IndexedMinHeap(graph)
        popped = []

        for v in range(1, 301):
            graph.vertex(v).distance = random.choice([None, random.randint(0, 1000)])

        pending = list(range(1, 301))
        random.shuffle(pending)

        for step in range(2000):
            action = random.random()
            if pending and action < 0.4:
                heap.insert(pending.pop())
            elif len(heap) and action < 0.8:
                v = random.choice([r.id for r in graph if r.heap_index])
                current = graph.vertex(v).distance
                if current is None:
                    graph.vertex(v).distance = random.randint(0, 1000)
                else:
                    graph.vertex(v).distance = random.randint(0, current)
                heap.decrease_key(v)
            elif len(heap):
                popped.append(graph.vertex(heap.extract_min()).distance)
                # Извлеченный минимум не больше оставшихся
                if len(heap):
                    assert not distance_less(graph.vertex(heap.peek()).distance, popped[-1])
            heap.validate()


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
