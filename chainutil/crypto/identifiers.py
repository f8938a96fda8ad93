"""
Identifier Generation
Random, RFC 4122 version-4 shaped identifiers.

Identifiers are 16 bytes from the OS CSPRNG with the variant and version
bits overwritten, rendered as lowercase 8-4-4-4-12 hex. Nothing is
tracked between calls; uniqueness is probabilistic.
"""
from __future__ import annotations

import logging
import os
import re
import uuid
from typing import Callable, Optional

from chainutil.schemas.errors import RandomSourceException

logger = logging.getLogger(__name__)

UUID_BYTES: int = 16

RandomSource = Callable[[int], bytes]

_UUID4_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


def _read_random(random_source: RandomSource, size: int) -> bytes:
    try:
        data = random_source(size)
    except (OSError, NotImplementedError) as e:
        logger.critical("Secure random source unavailable: %s", e)
        raise RandomSourceException(
            f"Error generating UUID: secure random source unavailable: {e}",
            cause=e,
        ) from e
    if len(data) != size:
        logger.critical("Secure random source returned %d of %d bytes", len(data), size)
        raise RandomSourceException(
            f"Error generating UUID: short read from random source ({len(data)} of {size} bytes)",
            details={"expected": size, "actual": len(data)},
        )
    return data


def generate_uuid(random_source: Optional[RandomSource] = None) -> str:
    """
    Generate a random version-4 UUID string.

    Args:
        random_source: Callable returning n secure random bytes.
            Defaults to os.urandom.

    Returns:
        36-char lowercase identifier, e.g. "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"
        where y is one of 8, 9, a, b.

    Raises:
        RandomSourceException: If the random source cannot supply bytes.
            The exception is fatal and is never retried here.
    """
    raw = bytearray(_read_random(random_source or os.urandom, UUID_BYTES))

    # variant bits; see RFC 4122 section 4.1.1
    raw[8] = (raw[8] & 0x3F) | 0x80

    # version 4 (pseudo-random); see RFC 4122 section 4.1.3
    raw[6] = (raw[6] & 0x0F) | 0x40

    return str(uuid.UUID(bytes=bytes(raw)))


def is_uuid4(value: str) -> bool:
    """Check that a string has the exact shape generate_uuid() produces."""
    return bool(_UUID4_RE.match(value))


__all__ = [
    "UUID_BYTES",
    "RandomSource",
    "generate_uuid",
    "is_uuid4",
]
