"""Address value types returned by the parsers."""
from __future__ import annotations

from abc import abstractmethod
from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from ..codecs.common import checked_port
from ..codecs.ipv4 import OCTET_COUNT, check_octets, format_ipv4, format_ipv4_with_port, parse_ipv4
from ..codecs.ipv6 import HEXTET_COUNT, check_hextets, format_ipv6, format_ipv6_with_port, parse_ipv6


class AddressFamily(str, Enum):
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    INVALID = "invalid"


class AddressRecord(BaseModel):
    """Immutable address value shared by both families.

    ``groups`` is either empty (invalid) or exactly the family's arity, with
    every element in range. Records cannot be edited in place; the ``with_*``
    helpers build a new record and run the same checks again.
    """

    model_config = ConfigDict(frozen=True)

    family_tag: ClassVar[AddressFamily]

    groups: Tuple[int, ...] = ()
    port: int = 0

    @classmethod
    @abstractmethod
    def _check_groups(cls, values: Any) -> Tuple[int, ...]:
        ...

    @model_validator(mode="before")
    @classmethod
    def _enforce_invariants(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        values = dict(data)
        groups = cls._check_groups(values.get("groups", ()))
        values["groups"] = groups
        values["port"] = checked_port(values.get("port", 0)) if groups else 0
        return values

    @classmethod
    def from_groups(cls, groups: Sequence[int], port: int = 0, **extra: Any):
        return cls(groups=groups, port=port, **extra)

    @property
    def is_empty(self) -> bool:
        return not self.groups

    @property
    def is_valid_address(self) -> bool:
        return len(self.groups) == self.arity

    @property
    def is_v6(self) -> bool:
        return False

    @property
    def family(self) -> AddressFamily:
        return self.family_tag if self.groups else AddressFamily.INVALID

    @property
    @abstractmethod
    def arity(self) -> int:
        ...

    @property
    @abstractmethod
    def address(self) -> str:
        ...

    @property
    @abstractmethod
    def address_and_port(self) -> str:
        ...

    def with_groups(self, groups: Sequence[int]):
        return self._rebuild(groups=groups)

    def with_port(self, port: int):
        return self._rebuild(port=port)

    def _rebuild(self, **changes: Any):
        return type(self).model_validate({**self.model_dump(), **changes})

    def __str__(self) -> str:
        return self.address_and_port

    # Rendering flags such as IPv6 padding are not part of identity.
    def _identity(self) -> Tuple[Any, ...]:
        return (self.family_tag, self.groups, self.port)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressRecord):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())


class IPv4Record(AddressRecord):
    family_tag: ClassVar[AddressFamily] = AddressFamily.IPV4

    version: Literal[4] = 4

    @classmethod
    def _check_groups(cls, values: Any) -> Tuple[int, ...]:
        return check_octets(values)

    @classmethod
    def from_text(cls, text: str) -> "IPv4Record":
        groups, port = parse_ipv4(text)
        return cls(groups=groups, port=port)

    @property
    def arity(self) -> int:
        return OCTET_COUNT

    @property
    def address(self) -> str:
        return format_ipv4(self.groups)

    @property
    def address_and_port(self) -> str:
        return format_ipv4_with_port(self.groups, self.port)


class IPv6Record(AddressRecord):
    family_tag: ClassVar[AddressFamily] = AddressFamily.IPV6

    version: Literal[6] = 6
    padded: bool = False

    @classmethod
    def _check_groups(cls, values: Any) -> Tuple[int, ...]:
        return check_hextets(values)

    @classmethod
    def from_text(cls, text: str, padded: bool = False) -> "IPv6Record":
        groups, port = parse_ipv6(text)
        return cls(groups=groups, port=port, padded=padded)

    @property
    def arity(self) -> int:
        return HEXTET_COUNT

    @property
    def is_v6(self) -> bool:
        return True

    @property
    def address(self) -> str:
        return format_ipv6(self.groups, self.padded)

    @property
    def address_and_port(self) -> str:
        return format_ipv6_with_port(self.groups, self.port, self.padded)

    def with_padded(self, padded: bool) -> "IPv6Record":
        return self._rebuild(padded=padded)


HostAddress = Annotated[Union[IPv4Record, IPv6Record], Field(discriminator="version")]

host_address_adapter: TypeAdapter[HostAddress] = TypeAdapter(HostAddress)


def load_record(data: Any) -> HostAddress:
    """Rebuild a record from its ``model_dump()`` form, picking the variant by ``version``."""
    return host_address_adapter.validate_python(data)
