"""
String helpers: base-36 encoding and booking reference generation.
"""

import secrets
import string
from datetime import datetime
from typing import Optional

from venture_booking.utils.date_utils import now_utc

BASE36_ALPHABET = string.digits + string.ascii_uppercase


def to_base36(value: int) -> str:
    """Encode a non-negative integer in upper-case base 36."""
    if value < 0:
        raise ValueError("Only non-negative integers can be encoded")
    if value == 0:
        return "0"

    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def random_base36(length: int) -> str:
    return "".join(secrets.choice(BASE36_ALPHABET) for _ in range(length))


def generate_booking_reference(
    prefix: str = "BK",
    at: Optional[datetime] = None,
    suffix_length: int = 4,
) -> str:
    """
    Build a human-readable booking reference.

    Format: <PREFIX>-<base36 epoch milliseconds>-<random base36 suffix>,
    e.g. BK-LZ3K9Q2A-7F1C. Uniqueness is enforced by the database; callers
    regenerate on a collision.
    """
    moment = at or now_utc()
    millis = int(moment.timestamp() * 1000)
    return f"{prefix.upper()}-{to_base36(millis)}-{random_base36(suffix_length)}"
