"""
CLI Blob Commands

Write and read raw byte files through the raw byte store.

Usage:
    chainutil blob write out.bin --hex 010203
    chainutil blob read out.bin --hex
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace

from chainutil.crypto.hashing import decode_b64, encode_b64
from chainutil.storage.raw import load_from_disk, save_to_disk

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def _parse_payload(args: Namespace) -> bytes:
    if args.hex is not None:
        text = args.hex[2:] if args.hex.startswith("0x") else args.hex
        return bytes.fromhex(text)
    return decode_b64(args.b64)


def blob_write_cmd(args: Namespace) -> int:
    """Execute the blob write command."""
    try:
        data = _parse_payload(args)
    except ValueError as e:
        print(f"Error: Invalid payload: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    path = args.runtime_config.storage.resolve(args.path)
    save_to_disk(path, data)
    logger.info("Wrote %d bytes to %s", len(data), path)
    print(f"Wrote {len(data)} bytes to {path}")
    return EXIT_SUCCESS


def blob_read_cmd(args: Namespace) -> int:
    """Execute the blob read command."""
    path = args.runtime_config.storage.resolve(args.path)
    data = load_from_disk(path)
    print(data.hex() if args.hex else encode_b64(data))
    return EXIT_SUCCESS
