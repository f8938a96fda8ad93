"""
Schemas & Canonicalization
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Canonical serialization API
from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    ensure_utc,
    format_datetime_canonical,
    loads_canonical,
)

# Error models and exceptions
from .errors import (
    CanonicalizationException,
    ChainError,
    ChainException,
    ConfigException,
    DecodeException,
    EncodeException,
    ErrorCodes,
    FileCreateException,
    FileOpenException,
    PersistenceIOException,
    RandomSourceException,
    TimestampException,
)

# Timestamps
from .timestamp import (
    NANOS_PER_SECOND,
    Timestamp,
    create_utc_timestamp,
)

__all__ = [
    # Canonical
    "CANONICAL_JSON_SEPARATORS",
    "canonical_equals",
    "canonicalize_value",
    "dumps_canonical",
    "ensure_utc",
    "format_datetime_canonical",
    "loads_canonical",
    # Errors
    "CanonicalizationException",
    "ChainError",
    "ChainException",
    "ConfigException",
    "DecodeException",
    "EncodeException",
    "ErrorCodes",
    "FileCreateException",
    "FileOpenException",
    "PersistenceIOException",
    "RandomSourceException",
    "TimestampException",
    # Timestamps
    "NANOS_PER_SECOND",
    "Timestamp",
    "create_utc_timestamp",
]
