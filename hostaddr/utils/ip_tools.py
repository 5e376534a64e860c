"""Raising wrappers around the dispatcher for callers that want an error."""
from __future__ import annotations

from typing import Optional

from ..models.records import HostAddress
from ..services.dispatcher import parse_address


def require_address(value: str, padded: Optional[bool] = None) -> HostAddress:
    record = parse_address(value.strip(), padded=padded)
    if record is None:
        raise ValueError("Invalid IP address")
    return record


def normalize_ip(value: str, padded: Optional[bool] = None) -> str:
    return require_address(value, padded=padded).address_and_port
