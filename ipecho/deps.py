from fastapi import Request
from fastapi.datastructures import Headers

from .resolver import format_peer


# Peer address of the TCP connection, in "host:port" form
def peer_address(request: Request) -> str:
    if request.client is None:
        # e.g. served over a unix socket
        return ""
    return format_peer(request.client.host, request.client.port)


def request_headers(request: Request) -> Headers:
    return request.headers
