"""
Протокол обмена с клиентом.

- Декодирование бинарного кадра с графом
- Кодирование текстового ответа
"""

from .graph_decoder import (
    GraphRequest,
    MAX_EDGE_COUNT,
    decode_graph,
    encode_request
)

from .response_encoder import (
    encode_response,
    format_path,
    format_no_path
)

__all__ = [
    'GraphRequest',
    'MAX_EDGE_COUNT',
    'decode_graph',
    'encode_request',
    'encode_response',
    'format_path',
    'format_no_path',
]
