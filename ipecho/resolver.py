# ipecho/resolver.py
"""
Turn what the server knows about a connection into a bare client IP.

Two sources are supported:
  - the peer address of the TCP connection ("host:port"), which the client
    cannot forge
  - forwarding headers set by proxies, which ANY client can set to anything

Only use the header path when the service sits behind a proxy you control.
"""
import ipaddress
import re
from enum import Enum
from typing import List, Mapping, Optional


class InvalidAddress(ValueError):
    """The peer string did not parse as a valid IPv4/IPv6 address."""


class IPFamily(str, Enum):
    IPV4 = "IPv4"
    IPV6 = "IPv6"


# Checked in this order; the first non-empty one wins.
FORWARDING_HEADERS: List[str] = [
    "X-Forwarded-For",
    "X-Real-Ip",
    "X-True-Client-Ip",
    "True-Client-Ip",
    "X-Originating-Ip",
    "X-Remote-Ip",
    "X-Remote-Addr",
]

_BRACKETED = re.compile(r"\[(.*)\]")


# ---------------- PEER ADDRESS ----------------


def classify(peer: str) -> IPFamily:
    """
    An IPv4 peer has exactly one colon (between host and port). An IPv6 peer
    has at least two in the host part alone, plus the one before the port.
    """
    if peer.count(":") < 2:
        return IPFamily.IPV4
    return IPFamily.IPV6


def extract_ipv4(peer: str) -> str:
    """192.168.113.1:51234 -> 192.168.113.1"""
    host = peer.split(":", 1)[0]
    try:
        ipaddress.IPv4Address(host)
    except ValueError:
        raise InvalidAddress("error parsing IPv4 address") from None
    return host


def extract_ipv6(peer: str) -> str:
    """[::1]:51234 -> ::1"""
    m = _BRACKETED.search(peer)
    if not m:
        raise InvalidAddress("error parsing IPv6 address")

    host = m.group(1)
    try:
        ipaddress.IPv6Address(host)
    except ValueError:
        raise InvalidAddress("error parsing IPv6 address") from None
    return host


def resolve_from_connection(peer: str) -> str:
    """Bare IP of the connected client. Headers are never consulted."""
    if classify(peer) is IPFamily.IPV4:
        return extract_ipv4(peer)
    return extract_ipv6(peer)


def format_peer(host: Optional[str], port: Optional[int]) -> str:
    """
    ASGI servers hand us (host, port) separately; put them back into the
    "host:port" / "[host]:port" form the extractors expect.
    """
    if not host:
        return ""
    if ":" in host:
        return f"[{host}]:{port or 0}"
    return f"{host}:{port or 0}"


# ---------------- FORWARDING HEADERS ----------------


def is_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def resolve_from_headers(headers: Mapping[str, str]) -> Optional[str]:
    """
    Return the first non-empty forwarding header value, or None.

    `headers` must do case-insensitive lookups (Starlette's Headers does).
    The value is returned as sent by the client; it is NOT checked to be an
    IP address. Callers decide whether to trust it.
    """
    for name in FORWARDING_HEADERS:
        value = headers.get(name)
        if value:
            return value
    return None


def resolve_any(
    headers: Mapping[str, str],
    peer: str,
    validate: bool = True,
) -> str:
    """
    Best-effort client IP: forwarding headers first, peer address otherwise.

    With validate=True a header value that is not a single well-formed IP
    (e.g. a "a, b" X-Forwarded-For chain) is ignored and the peer address
    is used instead. With validate=False the header value is returned as-is.
    """
    ip = resolve_from_headers(headers)
    if ip is None:
        return resolve_from_connection(peer)
    if validate and not is_ip(ip):
        return resolve_from_connection(peer)
    return ip
