"""Исключения сервиса кратчайших путей"""


class PathServerError(Exception):
    """Базовое исключение PathServer"""


class WireFormatError(PathServerError, ValueError):
    """Входной кадр не соответствует формату протокола"""


class IncompleteInput(WireFormatError):
    """Поток закончился раньше, чем было прочитано объявленное поле"""

    def __init__(self, field: str, expected: int, received: int):
        self.field = field
        self.expected = expected
        self.received = received
        super().__init__(
            f"Неполный ввод: поле '{field}' требует {expected} байт, "
            f"получено {received}"
        )


class EdgeLimitExceeded(WireFormatError):
    """Заголовок объявляет больше ребер, чем разрешено"""

    def __init__(self, declared: int, limit: int):
        self.declared = declared
        self.limit = limit
        super().__init__(
            f"Объявлено ребер: {declared}, допустимо не более {limit}"
        )


class InvariantViolation(PathServerError, AssertionError):
    """Нарушен внутренний инвариант - ошибка в логике ядра, а не во вводе"""


class HeapInvariantError(InvariantViolation):
    """Рассинхронизация кучи и индекса позиций"""


class PathInvariantError(InvariantViolation):
    """Цикл в ссылках на предшественников"""
