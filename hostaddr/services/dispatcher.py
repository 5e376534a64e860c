"""Pick the address family for a piece of text or a list of groups.

IPv4 is always tried first; the IPv6 parser only sees input the IPv4 parser
rejected. Neither parser raises: an unusable value comes back as ``None``.
"""
from __future__ import annotations

from typing import Optional, Sequence, Union

from ..config import get_settings
from ..logging_config import logger
from ..models.records import HostAddress, IPv4Record, IPv6Record


def _padding(padded: Optional[bool]) -> bool:
    if padded is None:
        return get_settings().ipv6_padded
    return padded


def _accept(record: HostAddress, source: object) -> HostAddress:
    logger.debug("address.parsed", family=record.family.value, source=source)
    return record


def parse_address(
    value: Union[str, Sequence[int]],
    padded: Optional[bool] = None,
) -> Optional[HostAddress]:
    if not isinstance(value, str):
        return parse_address_groups(value, padded=padded)

    ipv4 = IPv4Record.from_text(value)
    if ipv4.is_valid_address:
        return _accept(ipv4, value)
    ipv6 = IPv6Record.from_text(value, padded=_padding(padded))
    if ipv6.is_valid_address:
        return _accept(ipv6, value)
    logger.debug("address.rejected", source=value)
    return None


def parse_address_groups(
    groups: Sequence[int],
    port: int = 0,
    padded: Optional[bool] = None,
) -> Optional[HostAddress]:
    ipv4 = IPv4Record.from_groups(groups, port=port)
    if ipv4.is_valid_address:
        return _accept(ipv4, groups)
    ipv6 = IPv6Record.from_groups(groups, port=port, padded=_padding(padded))
    if ipv6.is_valid_address:
        return _accept(ipv6, groups)
    logger.debug("address.rejected", source=groups)
    return None
