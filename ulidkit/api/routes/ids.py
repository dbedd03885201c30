"""ULID generation, inspection and conversion routes."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ulidkit.core import InvalidUlidError, UlidError, decode_timestamp, from_binary, is_valid, to_binary
from ulidkit.utils.timestamp import format_timestamp, now_millis

router = APIRouter(prefix="/api/v1", tags=["ids"])

# These will be set by app.py
_generator = None
_max_batch = 1000


def init(generator, max_batch):
    """Initialize with generator reference and batch limit."""
    global _generator, _max_batch
    _generator = generator
    _max_batch = max_batch


def _bad_request(exc):
    return HTTPException(status_code=400, detail=exc.to_dict())


def describe(value):
    """Break a ULID into timestamp, age and binary components."""
    timestamp = decode_timestamp(value)
    try:
        rendered = format_timestamp(timestamp)
    except (OverflowError, OSError, ValueError):
        # past datetime's year 9999
        rendered = None
    return {
        "id": value.upper(),
        "timestamp": timestamp,
        "timestamp_seconds": timestamp // 1000,
        "datetime": rendered,
        "age_ms": now_millis() - timestamp,
        "binary": to_binary(value).hex(),
    }


@router.get("/ulid")
async def generate(count: int = Query(1, ge=1), seed_time: Optional[int] = Query(None, ge=0)):
    """Generate one or more ULIDs in increasing order."""
    if count > _max_batch:
        raise HTTPException(status_code=400, detail=f"count exceeds {_max_batch}")
    try:
        ids = [_generator.generate(seed_time) for _ in range(count)]
    except UlidError as exc:
        raise _bad_request(exc)
    return {"ids": ids}


@router.get("/ulid/{value}/valid")
async def validate(value: str):
    """Report whether the value is a well-formed ULID."""
    return {"id": value, "valid": is_valid(value)}


@router.get("/ulid/{value}")
async def inspect(value: str):
    """Decode a ULID into its components."""
    try:
        return describe(value)
    except UlidError as exc:
        raise _bad_request(exc)


@router.get("/binary/{hex_value}")
async def from_hex(hex_value: str, strict: bool = False):
    """Convert a 32 digit hex binary ULID back to text."""
    try:
        data = bytes.fromhex(hex_value)
    except ValueError:
        raise _bad_request(InvalidUlidError("binary ULID must be hex", value=hex_value))
    try:
        return {"id": from_binary(data, strict=strict)}
    except UlidError as exc:
        raise _bad_request(exc)
