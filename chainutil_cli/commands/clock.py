"""
CLI Now Command

Print the current UTC time as RFC 3339 text or as a {seconds, nanos} record.
"""

from __future__ import annotations

import json
from argparse import Namespace

from chainutil.schemas.timestamp import create_utc_timestamp

EXIT_SUCCESS = 0


def now_cmd(args: Namespace) -> int:
    """Execute the now command."""
    ts = create_utc_timestamp()
    if args.json:
        print(json.dumps(ts.to_dict()))
    else:
        print(ts.to_rfc3339())
    return EXIT_SUCCESS
