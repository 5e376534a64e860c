"""Colon-hex IPv6 parsing and rendering.

Accepted input is eight hextets separated by ``:``, where a single ``::`` may
stand in for one or more zero hextets. The address may be wrapped in brackets,
and only a bracketed address can carry a port (``[addr]:port``).
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils.substrings import find_all
from .common import checked_groups, parse_int, parse_port

HEXTET_COUNT = 8
HEXTET_MAX = 0xFFFF
SHORTCUT = "::"
EMPTY_COMPRESSED = "::"
EMPTY_PADDED = ":".join(["0000"] * HEXTET_COUNT)

_ALLOWED = frozenset("0123456789ABCDEF:[]")
# Eight hextets need seven separators; a trailing port can add one more.
_MIN_UNSHORTENED_PIECES = 8


def check_hextets(values: Any) -> tuple[int, ...]:
    return checked_groups(values, HEXTET_COUNT, HEXTET_MAX)


def parse_ipv6(text: str) -> tuple[tuple[int, ...], int]:
    """Split an IPv6 address (and bracketed port) into hextets and port.

    Returns ``((), 0)`` on any syntax error. Port errors are not syntax errors:
    a port that does not parse is reported as 0.
    """
    if not text:
        return (), 0
    target = text.upper()
    shortcut_count = len(find_all(target, SHORTCUT))
    if shortcut_count > 1 or not set(target) <= _ALLOWED:
        return (), 0
    if shortcut_count == 0 and len(target.split(":")) < _MIN_UNSHORTENED_PIECES:
        return (), 0

    located = _unwrap(target)
    if located is None:
        return (), 0
    address, port = located

    hextets = _expand(address)
    if len(hextets) != HEXTET_COUNT:
        return (), 0
    return hextets, port


def _unwrap(target: str) -> Optional[tuple[str, int]]:
    """Strip ``[...]`` from ``target``; return the address text and port."""
    open_at = target.find("[")
    close_at = target.find("]")
    if open_at < 0:
        if close_at >= 0:
            return None
        return target, 0
    if close_at < open_at:
        return None
    port = 0
    tail = target[close_at:]
    colon_at = tail.find(":")
    if len(tail) > 2 and colon_at >= 0:
        port = parse_port(tail[colon_at + 1:])
    return target[open_at + 1:close_at], port


def _expand(address: str) -> tuple[int, ...]:
    hits = find_all(address, SHORTCUT)
    cut = hits[0] if hits else len(address)
    before = _hextet_values(address[:cut])
    after = _hextet_values(address[cut:])
    total = len(before) + len(after)
    if total > HEXTET_COUNT:
        return ()
    composed = before + [0] * (HEXTET_COUNT - total) + after
    if any(value > HEXTET_MAX for value in composed):
        return ()
    return tuple(composed)


def _hextet_values(chunk: str) -> list[int]:
    # Empty or unparseable pieces are skipped, not rejected.
    values = []
    for piece in chunk.split(":"):
        value = parse_int(piece, 16)
        if value is not None:
            values.append(value)
    return values


def longest_zero_run(hextets: tuple[int, ...]) -> tuple[int, int]:
    """Return ``(start, stop)`` of the longest run of zero hextets.

    The earliest run wins a tie. ``start == stop`` when there is no zero.
    """
    best_start, best_stop = 0, 0
    run_start: Optional[int] = None
    for index, value in enumerate(hextets):
        if value == 0:
            if run_start is None:
                run_start = index
            continue
        if run_start is not None:
            if index - run_start > best_stop - best_start:
                best_start, best_stop = run_start, index
            run_start = None
    if run_start is not None and len(hextets) - run_start > best_stop - best_start:
        best_start, best_stop = run_start, len(hextets)
    return best_start, best_stop


def format_ipv6(hextets: tuple[int, ...], padded: bool = False) -> str:
    if padded:
        if not hextets:
            return EMPTY_PADDED
        return ":".join(f"{value:04x}" for value in hextets)
    if not hextets:
        return EMPTY_COMPRESSED

    start, stop = longest_zero_run(hextets)
    if stop - start == len(hextets):
        return EMPTY_COMPRESSED
    tokens = [f"{value:x}" for value in hextets]
    if start == stop:
        return ":".join(tokens)
    tokens[start:stop] = [""]
    text = ":".join(tokens)
    if stop == len(hextets):
        text += ":"
    elif start == 0:
        text = ":" + text
    return text


def format_ipv6_with_port(hextets: tuple[int, ...], port: int, padded: bool = False) -> str:
    address = format_ipv6(hextets, padded)
    if port > 0:
        return f"[{address}]:{port}"
    return address
