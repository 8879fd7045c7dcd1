"""
Пакет тестов для PathServer.

Структура:
- test_graph_algorithms.py - граф, Дейкстра, восстановление пути
- test_indexed_heap.py - индексированная min-куча
- test_protocols.py - декодер кадра и кодировщик ответа
- test_services.py - обработка запроса целиком
- test_server.py - TCP сервер (интеграционные)

Запуск:
    pytest Tests/ -v
    pytest Tests/ -m "not integration"
"""
