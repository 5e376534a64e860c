from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from ..logging_config import logger
from ..models.schemas import AddressResponse, BatchItem, BatchRequest, BatchResponse, ParseRequest
from ..services.dispatcher import parse_address, parse_address_groups
from ..utils.ip_tools import require_address

router = APIRouter(prefix="/api/v1/addresses", tags=["addresses"])


@router.get("/parse", response_model=AddressResponse)
async def parse_text(
    value: str = Query(..., min_length=1),
    padded: Optional[bool] = Query(default=None),
) -> AddressResponse:
    record = require_address(value, padded=padded)
    return AddressResponse.from_record(record)


@router.post("/parse", response_model=AddressResponse)
async def parse_body(payload: ParseRequest) -> AddressResponse:
    if payload.groups is not None:
        record = parse_address_groups(payload.groups, port=payload.port, padded=payload.padded)
        if record is None:
            raise ValueError("Invalid IP address")
    else:
        record = require_address(payload.value or "", padded=payload.padded)
    return AddressResponse.from_record(record)


@router.post("/batch", response_model=BatchResponse)
async def parse_batch(payload: BatchRequest) -> BatchResponse:
    items: list[BatchItem] = []
    for value in payload.values:
        record = parse_address(value.strip(), padded=payload.padded)
        result = AddressResponse.from_record(record) if record is not None else None
        items.append(BatchItem(value=value, valid=record is not None, result=result))
    valid_count = sum(1 for item in items if item.valid)
    logger.info("addresses.batch", count=len(items), valid=valid_count)
    return BatchResponse(count=len(items), valid_count=valid_count, items=items)
