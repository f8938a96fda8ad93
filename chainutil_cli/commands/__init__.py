"""
CLI command modules.
"""

from chainutil_cli.commands import blob, clock, digest, ident

__all__ = ["blob", "clock", "digest", "ident"]
