"""
Reads the raw request from a client socket and splits its request-line into
method, path and version tokens. Headers and body are never looked at.

The request stays as bytes throughout: nothing is decoded except for logging,
and tokens are separated by ASCII whitespace only.
"""
import socket
from dataclasses import dataclass
from typing import Final, List, Optional

RECV_BUFFER_SIZE: Final[int] = 2048

@dataclass
class RequestLine:
    """
    Tokens of the first line of a request, None where the line ran short
    """
    method: Optional[bytes]
    path: Optional[bytes]
    http_version: Optional[bytes]

    def __str__(self) -> str:
        tokens = (self.method, self.path, self.http_version)
        return " ".join((token or b"").decode("utf-8", errors="replace") for token in tokens)

def read_request(client_socket: socket.socket) -> bytes:
    # Single recv: a request-line longer than the buffer is cut off, not waited for
    request_data = client_socket.recv(RECV_BUFFER_SIZE)

    if not request_data:
        raise EOFError("Connection closed before any request data was received")

    return request_data

def parse_request_line(payload: bytes) -> RequestLine:
    start_line = payload.split(b"\n", maxsplit=1)[0]
    tokens: List[Optional[bytes]] = list(start_line.split()[:3])
    tokens += [None] * (3 - len(tokens))

    method, path, version = tokens

    return RequestLine(method=method, path=path, http_version=version)
