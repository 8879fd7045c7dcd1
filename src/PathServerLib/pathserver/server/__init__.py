"""TCP service and client for PathServer."""

from .tcp_server import ShortestPathServer, create_server, run
from .client import query, send_frame

__all__ = ['ShortestPathServer', 'create_server', 'run', 'query', 'send_frame']
