"""
chainutil

Identity, integrity and durability primitives: content hashing, random
identifiers, UTC timestamps and object persistence to local storage.
"""

from chainutil.crypto import (
    DIGEST_SIZE,
    compute_crypto_hash,
    encode_b64,
    generate_uuid,
)
from chainutil.schemas import (
    ChainException,
    DecodeException,
    EncodeException,
    FileCreateException,
    FileOpenException,
    PersistenceIOException,
    RandomSourceException,
    Timestamp,
    create_utc_timestamp,
)
from chainutil.storage import (
    FILE_MODE,
    Persistable,
    PersistableModel,
    encode_save_to_disk,
    load_decode_from_disk,
    load_from_disk,
    save_to_disk,
)

__version__ = "0.1.0"

__all__ = [
    "DIGEST_SIZE",
    "compute_crypto_hash",
    "encode_b64",
    "generate_uuid",
    "ChainException",
    "DecodeException",
    "EncodeException",
    "FileCreateException",
    "FileOpenException",
    "PersistenceIOException",
    "RandomSourceException",
    "Timestamp",
    "create_utc_timestamp",
    "FILE_MODE",
    "Persistable",
    "PersistableModel",
    "encode_save_to_disk",
    "load_decode_from_disk",
    "load_from_disk",
    "save_to_disk",
]
