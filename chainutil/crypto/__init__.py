"""
Core cryptographic utilities.

Content hashing, text encodings and random identifiers.
"""
from .hashing import (
    DIGEST_SIZE,
    compute_crypto_hash,
    hash_canonical,
    hash_concat,
    encode_b64,
    decode_b64,
    to_hex,
    from_hex,
)
from .identifiers import (
    UUID_BYTES,
    generate_uuid,
    is_uuid4,
)

__all__ = [
    "DIGEST_SIZE",
    "compute_crypto_hash",
    "hash_canonical",
    "hash_concat",
    "encode_b64",
    "decode_b64",
    "to_hex",
    "from_hex",
    "UUID_BYTES",
    "generate_uuid",
    "is_uuid4",
]
