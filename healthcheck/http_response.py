"""
Builds the two canned responses. Both are sent without a reason phrase and
without a Content-Length header.
"""
from typing import Final, Optional

from healthcheck.http_request import RequestLine

HTTP_VERSION: Final[str] = "HTTP/1.1"
HEALTHCHECK_PATH: Final[bytes] = b"/healthcheck"
CONTENT_TYPE: Final[str] = "text/html"

HEALTHCHECK_BODY: Final[str] = "OK\r\n"
GREETING_BODY: Final[str] = "Well, hello there!\r\n"

def create_response(body: str) -> bytes:
    response = f"{HTTP_VERSION} 200\r\n"
    response += f"Content-Type: {CONTENT_TYPE}\r\n"
    response += "\r\n"
    response += body

    return response.encode("utf-8")

def is_healthcheck(path: Optional[bytes]) -> bool:
    return path == HEALTHCHECK_PATH

def response_for(request_line: RequestLine) -> bytes:
    if is_healthcheck(request_line.path):
        return create_response(HEALTHCHECK_BODY)
    else:
        return create_response(GREETING_BODY)
