"""Stateless validation and formatting helpers shared by the routers."""

import re
from datetime import UTC, datetime
from typing import Annotated

from pydantic import PlainSerializer

TIMESTAMP_EXAMPLE = "2025-08-20T18:00:00Z"
MAX_ID = 2**31 - 1

_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)


def is_valid_email(email: str) -> bool:
    """Light email check.

    Accepts a single ``@`` at a positive index followed, at least two
    bytes later, by a ``.`` that is not the last byte.
    Lengths and positions count UTF-8 bytes. Not RFC 5322.
    """
    raw = email.encode()
    if len(raw) < 6:
        return False
    at, dot = -1, -1
    for i, byte in enumerate(raw):
        if byte == ord("@"):
            if at != -1:
                return False
            at = i
        if byte == ord(".") and at != -1 and i > at + 1:
            dot = i
    return at > 0 and dot > at + 1 and dot < len(raw) - 1


def truncate(value: str, max_len: int) -> str:
    """Cut ``value`` to ``max_len`` characters, ending with "..." when shortened."""
    if len(value) <= max_len:
        return value
    if max_len < 3:
        return value[: max(max_len, 0)]
    return value[: max_len - 3] + "..."


def blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def parse_timestamp(value: str) -> datetime:
    """Parse a strict RFC 3339 timestamp and normalize it to UTC.

    Raises ``ValueError`` for anything else, including dates without an offset.
    """
    if not _RFC3339_RE.match(value):
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")
    return datetime.fromisoformat(value).astimezone(UTC)


def as_utc(value: datetime) -> datetime:
    # sqlite hands timestamps back without tzinfo; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_timestamp(value: datetime) -> str:
    return as_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_positive_id(value: str) -> int | None:
    """Return the id encoded in a path segment, or None if it is not a positive integer."""
    if not value.isascii() or not value.isdigit():
        return None
    parsed = int(value)
    # ids are 32-bit integer columns
    return parsed if 0 < parsed <= MAX_ID else None


Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str)]
