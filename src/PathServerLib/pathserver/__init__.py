"""PathServer - кратчайший путь в ориентированном графе по бинарному кадру"""

from .errors import (
    PathServerError,
    WireFormatError,
    IncompleteInput,
    EdgeLimitExceeded,
    InvariantViolation,
    HeapInvariantError,
    PathInvariantError
)
from .services.shortest_path_service import ShortestPathService, shortest_path

__version__ = "1.0.0"

__all__ = [
    'PathServerError',
    'WireFormatError',
    'IncompleteInput',
    'EdgeLimitExceeded',
    'InvariantViolation',
    'HeapInvariantError',
    'PathInvariantError',
    'ShortestPathService',
    'shortest_path',
]
