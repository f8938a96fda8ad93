"""
Module execution entry point.

Allows running with: python -m chainutil_cli
"""

import sys
from chainutil_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
