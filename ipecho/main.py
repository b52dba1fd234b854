# ipecho/main.py
import logging

from fastapi import FastAPI, Depends
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.datastructures import Headers

from . import config
from .deps import peer_address, request_headers
from .resolver import InvalidAddress, resolve_any, resolve_from_connection

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 36

# -------------------------------------------------------------------
# FastAPI app
# -------------------------------------------------------------------
app = FastAPI(
    title="ipecho",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.get("/", response_class=PlainTextResponse)
def return_ip(
    headers: Headers = Depends(request_headers),
    peer: str = Depends(peer_address),
):
    """
    Client IP, trusting forwarding headers when present.
    Falls back to the connection's peer address.
    """
    try:
        ip = resolve_any(headers, peer, validate=config.VALIDATE_FORWARDED)
    except InvalidAddress as e:
        logger.warning("Could not resolve client IP from peer %r: %s", peer, e)
        return str(e)

    logger.debug("Resolved client IP %s (peer %s)", ip, peer)
    return ip


@app.get("/full", response_class=PlainTextResponse)
def return_full_info(
    headers: Headers = Depends(request_headers),
    peer: str = Depends(peer_address),
):
    """Every request header (uppercased, sorted), then the source IP."""
    lines = [
        f"{name} : {headers.get(name)}\n"
        for name in sorted({k.upper() for k in headers.keys()})
    ]
    body = "".join(lines)

    try:
        ip = resolve_from_connection(peer)
    except InvalidAddress as e:
        logger.warning("Could not resolve source IP from peer %r: %s", peer, e)
        return body + str(e)

    return body + f"{SEPARATOR}\nSource IP : {ip}\n"


@app.get("/source-ip", response_class=PlainTextResponse)
def return_source_ip(peer: str = Depends(peer_address)):
    # Headers are ignored entirely here
    try:
        return resolve_from_connection(peer)
    except InvalidAddress as e:
        logger.warning("Could not resolve source IP from peer %r: %s", peer, e)
        return str(e)


# Must stay last so it only catches paths the routes above don't.
@app.get("/{path:path}", include_in_schema=False)
def redirect_to_root(path: str):
    # Temporary, so the path can be given a meaning later
    return RedirectResponse("/", status_code=307)
