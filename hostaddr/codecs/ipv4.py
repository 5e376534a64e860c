"""Dotted-quad IPv4 parsing and rendering."""
from __future__ import annotations

from typing import Any

from .common import checked_groups, parse_int, parse_port

OCTET_COUNT = 4
OCTET_MAX = 255
EMPTY_ADDRESS = "0.0.0.0"

_ALLOWED = frozenset("0123456789.:")


def check_octets(values: Any) -> tuple[int, ...]:
    return checked_groups(values, OCTET_COUNT, OCTET_MAX)


def parse_ipv4(text: str) -> tuple[tuple[int, ...], int]:
    """Split ``D.D.D.D[:P]`` into its octets and port.

    Returns ``((), 0)`` when the address part is malformed. A port that does
    not parse is dropped to 0 without rejecting the address.
    """
    if not text or not set(text) <= _ALLOWED:
        return (), 0
    pieces = text.split(":")
    fields = pieces[0].split(".")
    if len(fields) != OCTET_COUNT:
        return (), 0
    octets = []
    for field in fields:
        value = parse_int(field)
        if value is not None and value <= OCTET_MAX:
            octets.append(value)
    if len(octets) != OCTET_COUNT:
        return (), 0
    port = parse_port(pieces[1]) if len(pieces) > 1 else 0
    return tuple(octets), port


def format_ipv4(octets: tuple[int, ...]) -> str:
    if not octets:
        return EMPTY_ADDRESS
    return ".".join(str(octet) for octet in octets)


def format_ipv4_with_port(octets: tuple[int, ...], port: int) -> str:
    address = format_ipv4(octets)
    if port > 0:
        return f"{address}:{port}"
    return address
