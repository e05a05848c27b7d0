from __future__ import annotations

import hashlib
from datetime import datetime, timezone


def as_utc(dt: datetime) -> datetime:
    """Return dt as an aware UTC datetime. Naive values are taken to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_rfc3339_milli(dt: datetime) -> str:
    """Format a datetime as RFC3339 with millisecond precision in UTC.

    Naive datetimes are assumed to already be UTC.

    Examples:
        >>> format_rfc3339_milli(datetime(2024, 1, 2, 3, 4, 5, 678900, tzinfo=timezone.utc))
        '2024-01-02T03:04:05.678Z'
    """
    dt = as_utc(dt)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from start to end, rounding half-days to even.

    Python's round() rounds half to even, so 36h -> 2 and 60h -> 2.
    """
    hours = (end - start).total_seconds() / 3600
    return int(round(hours / 24))


def hash_token_for_namespace(token: str, prefix_length: int = 12) -> str:
    """Hash a token to a short identifier that is safe to log.

    Uses SHA3-256 and returns the first N characters of the hex digest.

    Args:
        token: The token to hash (e.g., an API access token)
        prefix_length: Number of hex characters to use from the hash (default: 12)

    Returns:
        Hashed prefix suitable for log lines
    """
    hash_obj = hashlib.sha3_256(token.encode("utf-8"))
    return hash_obj.hexdigest()[:prefix_length]
