"""
Конфигурация pytest и общие фикстуры для всех тестов.

Этот файл автоматически загружается pytest перед запуском тестов.
"""

import pytest
import sys
from pathlib import Path

# Добавляем путь к модулю pathserver в sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathserver.algorithms.graph.base_edge import BaseEdge
from pathserver.algorithms.graph.graph import GraphW


# ==================== Маркеры тестов ====================

def pytest_configure(config):
    """Регистрация пользовательских маркеров"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Автоматически добавляем маркер "unit" к тестам без других маркеров"""
    for item in items:
        if not any(mark.name in ["integration", "slow"] for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


# ==================== Графы ====================

# Классический граф из 6 вершин
CLASSIC_EDGES = [
    (1, 2, 14),
    (1, 3, 9),
    (1, 4, 7),
    (2, 5, 9),
    (3, 2, 2),
    (3, 6, 11),
    (4, 3, 10),
    (4, 6, 15),
    (6, 5, 6),
]


def build_graph(edges) -> GraphW:
    """Граф из списка (src, dest, cost)"""
    graph = GraphW()
    for src, dest, cost in edges:
        graph.add_edge(BaseEdge(src, dest, cost))
    return graph


@pytest.fixture
def classic_edges():
    return list(CLASSIC_EDGES)


@pytest.fixture
def classic_graph():
    """
    Классический граф для тестирования.

    Ребра:
        1->2:14  1->3:9   1->4:7
        2->5:9   3->2:2   3->6:11
        4->3:10  4->6:15  6->5:6

    Кратчайшие расстояния от 1:
        1:0  2:11  3:9  4:7  5:20  6:20
    """
    return build_graph(CLASSIC_EDGES)


@pytest.fixture
def disconnected_graph():
    """Граф из одного ребра 1 -> 2"""
    return build_graph([(1, 2, 5)])


@pytest.fixture
def make_graph():
    """Фабрика графов из списка (src, dest, cost)"""
    return build_graph


# ==================== Настройки для случайных тестов ====================

@pytest.fixture
def seed_random():
    """Фиксация seed для воспроизводимости случайных тестов"""
    import random
    random.seed(42)
    yield
    # Восстановление случайности после теста
    random.seed()
