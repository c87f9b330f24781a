"""Caller identity handling.

Identities are opaque strings (typically hex account addresses). The only
check performed on them is equality, after normalization, against the
stored organizer and the attendance records.
"""
import re

from fastapi import Header

ZERO_IDENTITY = "0x" + "0" * 40

_ZERO_PATTERN = re.compile(r"^0x0+$")


def normalize_identity(identity: str | None) -> str:
    """Strip surrounding whitespace and lower-case an identity."""
    if identity is None:
        return ""
    return identity.strip().lower()


def is_zero_identity(identity: str | None) -> bool:
    """Return True for a blank identity or an all-zero address."""
    normalized = normalize_identity(identity)
    return not normalized or bool(_ZERO_PATTERN.match(normalized))


async def get_caller(x_caller: str = Header(..., min_length=1)) -> str:
    """Dependency returning the normalized identity of the calling party."""
    return normalize_identity(x_caller)
