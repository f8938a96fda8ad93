"""
Hashing Utilities
Content digests and text encodings used for integrity checks across chainutil.

This module provides:
- SHAKE-256 content digests squeezed to a fixed 64 bytes
- Canonical hashing for objects (via dumps_canonical)
- Standard base64 and 0x-prefixed hex encodings

Security/Determinism Notes:
- The digest length is fixed system-wide; never change DIGEST_SIZE
- No salt or key: equal inputs always produce equal digests
- All operations are deterministic
"""
from __future__ import annotations

import base64
import binascii
import hashlib
from typing import Any

from chainutil.schemas.canonical import dumps_canonical

# Output length of compute_crypto_hash, in bytes
DIGEST_SIZE: int = 64


def compute_crypto_hash(data: bytes) -> bytes:
    """
    Compute the content digest of raw bytes.

    This is the single place the hash algorithm is chosen: SHAKE-256
    squeezed to DIGEST_SIZE bytes.

    Args:
        data: Raw bytes to hash (may be empty)

    Returns:
        64-byte digest

    Example:
        >>> compute_crypto_hash(b"").hex()[:16]
        '46b9dd2b0ba88d13'
    """
    return hashlib.shake_256(data).digest(DIGEST_SIZE)


def hash_canonical(obj: Any) -> bytes:
    """
    Hash an object using canonical JSON serialization.

    Rule: digest = compute_crypto_hash(dumps_canonical(obj).encode("utf-8"))

    Args:
        obj: Any object that can be canonically serialized
             (Pydantic model, dict, list, primitives)

    Raises:
        CanonicalizationException: If object cannot be canonically serialized
    """
    canonical_json = dumps_canonical(obj)
    return compute_crypto_hash(canonical_json.encode("utf-8"))


def hash_concat(left: bytes, right: bytes) -> bytes:
    """Hash the concatenation of two byte sequences."""
    return compute_crypto_hash(left + right)


def encode_b64(data: bytes) -> str:
    """
    Base64-encode bytes with the standard, padded alphabet.

    Example:
        >>> encode_b64(bytes([0, 1, 2]))
        'AAEC'
    """
    return base64.b64encode(data).decode("ascii")


def decode_b64(text: str) -> bytes:
    """
    Decode standard, padded base64 text.

    Raises:
        ValueError: If the text contains characters outside the alphabet
                    or has incorrect padding
    """
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 string: {e}") from e


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "DIGEST_SIZE",
    "compute_crypto_hash",
    "hash_canonical",
    "hash_concat",
    "encode_b64",
    "decode_b64",
    "to_hex",
    "from_hex",
]
