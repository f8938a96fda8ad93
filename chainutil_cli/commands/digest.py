"""
CLI Hash Command

Print the 64-byte content digest of a file or a text argument.

Usage:
    chainutil hash ./out.bin
    chainutil hash --text "hello" --hex
"""

from __future__ import annotations

import logging
from argparse import Namespace

from chainutil.crypto.hashing import compute_crypto_hash, encode_b64, to_hex
from chainutil.storage.raw import load_from_disk

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0


def hash_cmd(args: Namespace) -> int:
    """Execute the hash command."""
    if args.text is not None:
        data = args.text.encode("utf-8")
    else:
        path = args.runtime_config.storage.resolve(args.file)
        data = load_from_disk(path)

    digest = compute_crypto_hash(data)
    logger.debug("Hashed %d bytes", len(data))
    print(to_hex(digest) if args.hex else encode_b64(digest))
    return EXIT_SUCCESS
