"""
chainutil CLI

Command-line interface for chainutil.

Usage:
    python -m chainutil_cli hash FILE
    python -m chainutil_cli uuid
    python -m chainutil_cli now
"""

__version__ = "0.1.0"
