"""
Minimal client for the PathServer TCP service.
"""
import socket
from typing import Iterable

from ..protocols.graph_decoder import EdgeSpec, encode_request


def send_frame(host: str, port: int, frame: bytes, timeout: float = 10.0) -> bytes:
    """Send a raw frame and read the reply until the server closes."""
    with socket.create_connection((host, port), timeout=timeout) as sock:
        try:
            sock.sendall(frame)
            sock.shutdown(socket.SHUT_WR)
        except (ConnectionResetError, BrokenPipeError):
            return b""

        chunks = []
        while True:
            try:
                chunk = sock.recv(4096)
            except ConnectionResetError:
                # Server dropped a rejected frame with unread bytes pending
                break
            if not chunk:
                break
            chunks.append(chunk)

    return b"".join(chunks)


def query(
    host: str,
    port: int,
    start: int,
    target: int,
    edges: Iterable[EdgeSpec],
    timeout: float = 10.0
) -> str:
    """
    Ask the server for the shortest path.

    Returns the response line without the trailing newline/NUL,
    or an empty string if the server closed without answering.
    """
    reply = send_frame(host, port, encode_request(start, target, edges), timeout)
    return reply.rstrip(b"\0").decode("ascii").rstrip("\n")
