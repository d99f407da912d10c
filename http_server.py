import socket
from typing import Final

from healthcheck.http_request import parse_request_line, read_request
from healthcheck.http_response import response_for

HOST: Final[str] = "0.0.0.0"  # all interfaces
PORT: Final[int] = 80
LISTEN_BACKLOG: Final[int] = 5

def create_listener(host: str, port: int) -> socket.socket:
    server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    server_socket.bind((host, port))
    server_socket.listen(LISTEN_BACKLOG)

    return server_socket

def handle_connection(client_socket: socket.socket) -> None:
    """
    Serve one request and close the connection.

    Errors are not caught here: a reset, a broken pipe or an empty read
    propagates up and takes the whole server down with it.
    """
    try:
        request_line = parse_request_line(read_request(client_socket))

        print(request_line)

        client_socket.sendall(response_for(request_line))
    finally:
        client_socket.close()

def serve_forever(server_socket: socket.socket) -> None:
    # One connection at a time, a slow client blocks everyone behind it
    while True:
        client_socket, _ = server_socket.accept()
        handle_connection(client_socket)

def run_server(host: str = HOST, port: int = PORT) -> None:
    server_socket = create_listener(host, port)

    print(f"Server listening on http://{host}:{port}")

    try:
        serve_forever(server_socket)
    finally:
        server_socket.close()

if __name__ == "__main__":
    run_server(HOST, PORT)
