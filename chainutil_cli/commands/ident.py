"""
CLI UUID Command

Print freshly generated version-4 identifiers, one per line.

Usage:
    chainutil uuid -n 5
"""

from __future__ import annotations

import sys
from argparse import Namespace

from chainutil.crypto.identifiers import generate_uuid

EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def uuid_cmd(args: Namespace) -> int:
    """Execute the uuid command."""
    if args.count < 1:
        print("Error: --count must be at least 1", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # RandomSourceException is fatal and propagates to main()
    for _ in range(args.count):
        print(generate_uuid())
    return EXIT_SUCCESS
