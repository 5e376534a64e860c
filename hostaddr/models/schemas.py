"""Request and response bodies for the HTTP service."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .records import HostAddress


class BaseSchema(BaseModel):
    """Base schema with attribute extraction enabled."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class SystemHealth(BaseSchema):
    status: str
    components: Dict[str, str] = Field(default_factory=dict)


class AddressResponse(BaseSchema):
    family: str
    groups: List[int]
    port: int = 0
    padded: bool = False
    address: str
    address_and_port: str

    @classmethod
    def from_record(cls, record: HostAddress) -> "AddressResponse":
        return cls(
            family=record.family.value,
            groups=list(record.groups),
            port=record.port,
            padded=getattr(record, "padded", False),
            address=record.address,
            address_and_port=record.address_and_port,
        )


class ParseRequest(BaseSchema):
    value: Optional[str] = None
    groups: Optional[List[int]] = None
    port: int = 0
    padded: Optional[bool] = None

    @model_validator(mode="after")
    def _one_source(self) -> "ParseRequest":
        if (self.value is None) == (self.groups is None):
            raise ValueError("Provide exactly one of 'value' or 'groups'")
        return self


class BatchRequest(BaseSchema):
    values: List[str] = Field(default_factory=list)
    padded: Optional[bool] = None


class BatchItem(BaseSchema):
    value: str
    valid: bool
    result: Optional[AddressResponse] = None


class BatchResponse(BaseSchema):
    count: int
    valid_count: int
    items: List[BatchItem] = Field(default_factory=list)
