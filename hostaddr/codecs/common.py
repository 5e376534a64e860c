"""Helpers shared by the IPv4 and IPv6 codecs."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

# Digit strings past a signed 64-bit integer count as unparseable.
INT_LIMIT = 2**63 - 1

DECIMAL_DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")


def parse_int(text: str, base: int = 10) -> Optional[int]:
    digits = DECIMAL_DIGITS if base == 10 else HEX_DIGITS
    if not text or not set(text) <= digits:
        return None
    value = int(text, base)
    if value > INT_LIMIT:
        return None
    return value


def parse_port(text: str) -> int:
    """Decode a port substring; anything unparseable means "no port"."""
    value = parse_int(text)
    return value if value is not None else 0


def checked_groups(values: Any, arity: int, upper: int) -> tuple[int, ...]:
    """Return ``values`` as a tuple, or ``()`` unless every element fits.

    The check is all-or-nothing: one bad element or a wrong length empties
    the whole sequence.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        return ()
    if len(values) != arity:
        return ()
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            return ()
        if not 0 <= value <= upper:
            return ()
    return tuple(values)


def checked_port(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value
