"""
Storage

Raw byte files and structured object persistence.
"""

from .raw import (
    FILE_MODE,
    load_from_disk,
    save_to_disk,
)
from .objects import (
    Persistable,
    PersistableModel,
    decode_object,
    encode_object,
    encode_save_to_disk,
    load_decode_from_disk,
)

__all__ = [
    # Raw
    "FILE_MODE",
    "load_from_disk",
    "save_to_disk",
    # Objects
    "Persistable",
    "PersistableModel",
    "decode_object",
    "encode_object",
    "encode_save_to_disk",
    "load_decode_from_disk",
]
