"""
TCP front end for the shortest path service.

One request frame per connection: read the frame, write one response,
close. Each connection is served on its own thread.
"""
import logging
import socket
import socketserver
import time
from typing import Optional, Tuple

from ..errors import InvariantViolation, WireFormatError
from ..services.shortest_path_service import ShortestPathService

logger = logging.getLogger(__name__)


class FrameReader:
    """
    Read side of a connection bounded by a deadline for the whole frame.

    The read timeout limits a single recv; the frame timeout limits the
    sum of all recvs for one request.
    """

    def __init__(self, rfile, connection: socket.socket,
                 read_timeout: Optional[float], frame_timeout: float):
        self._rfile = rfile
        self._connection = connection
        self._read_timeout = read_timeout
        self._deadline = time.monotonic() + frame_timeout

    def read(self, size: int) -> bytes:
        remaining = self._deadline - time.monotonic()
        if remaining <= 0:
            raise socket.timeout("frame deadline exceeded")
        if self._read_timeout is not None:
            remaining = min(remaining, self._read_timeout)
        self._connection.settimeout(remaining)
        # read1 returns after at most one recv, so the deadline is rechecked
        return self._rfile.read1(size)


class ShortestPathRequestHandler(socketserver.StreamRequestHandler):
    """Serves a single shortest path request."""

    def setup(self):
        # StreamRequestHandler.setup applies self.timeout to the socket
        self.timeout = self.server.read_timeout
        super().setup()

    def _frame_source(self):
        if not self.server.frame_timeout:
            return self.rfile
        return FrameReader(
            self.rfile, self.connection,
            self.server.read_timeout, self.server.frame_timeout
        )

    def handle(self):
        peer = "%s:%s" % self.client_address[:2]
        try:
            response = self.server.service.handle(self._frame_source())
        except WireFormatError as e:
            logger.warning(f"Rejected request from {peer}: {e}")
            return
        except socket.timeout:
            logger.warning(f"Read timeout from {peer}")
            return
        except ConnectionError as e:
            logger.warning(f"Connection error from {peer}: {e}")
            return
        except (InvariantViolation, MemoryError):
            logger.exception(f"Shortest path error for {peer}")
            return

        self.wfile.write(response)
        logger.debug(f"Sent {len(response)} bytes to {peer}")


class ShortestPathServer(socketserver.ThreadingTCPServer):
    """Threaded TCP server holding the shared, stateless service."""

    allow_reuse_address = True
    daemon_threads = True

    def __init__(
        self,
        address: Tuple[str, int],
        service: Optional[ShortestPathService] = None,
        read_timeout: Optional[float] = None,
        frame_timeout: Optional[float] = None
    ):
        self.service = service or ShortestPathService()
        self.read_timeout = read_timeout
        self.frame_timeout = frame_timeout
        super().__init__(address, ShortestPathRequestHandler)

    @property
    def port(self) -> int:
        return self.server_address[1]

    def handle_error(self, request, client_address):
        # Errors the handler did not catch
        logger.exception(f"Unhandled error for {client_address}")


def create_server(
    host: str,
    port: int,
    read_timeout: Optional[float] = None,
    max_edges: int = 0xFFFF,
    nul_terminated: bool = False,
    frame_timeout: Optional[float] = None
) -> ShortestPathServer:
    """Create a bound server. Port 0 picks an ephemeral port."""
    service = ShortestPathService(max_edges=max_edges, nul_terminated=nul_terminated)
    return ShortestPathServer(
        (host, port),
        service=service,
        read_timeout=read_timeout,
        frame_timeout=frame_timeout
    )


def run(
    host: str,
    port: int,
    read_timeout: Optional[float] = None,
    max_edges: int = 0xFFFF,
    nul_terminated: bool = False,
    frame_timeout: Optional[float] = None
):
    """Serve until interrupted."""
    with create_server(
        host, port, read_timeout, max_edges, nul_terminated, frame_timeout
    ) as server:
        logger.info(f"Listening on {host}:{server.port}")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down")
