"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m chainutil_cli hash FILE [--hex]
    python -m chainutil_cli hash --text "hello" [--hex]
    python -m chainutil_cli uuid [-n COUNT]
    python -m chainutil_cli now [--json]
    python -m chainutil_cli blob write PATH --hex 010203
    python -m chainutil_cli blob read PATH [--hex]
    python -m chainutil_cli config --show | --init [--path chainutil.yaml]

Environment Variables:
    CHAINUTIL_LOG_LEVEL     Log level (default: INFO)
    CHAINUTIL_LOG_FILE      Optional log file
    CHAINUTIL_STORAGE_DIR   Base directory for relative blob paths
    CHAINUTIL_DEBUG         Print tracebacks on error (true/false)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from chainutil.config import RuntimeConfig, get_default_config_template
from chainutil.schemas.errors import ChainException
from chainutil_cli import __version__
from chainutil_cli.commands import blob, clock, digest, ident


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_FATAL = 3


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def load_config(config_path: Path | None) -> RuntimeConfig:
    """Load config from an optional YAML file, then overlay environment variables."""
    if config_path is not None:
        return RuntimeConfig.from_yaml(config_path).with_env_overrides()
    return RuntimeConfig.from_env()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="chainutil",
        description="chainutil - hash content, mint identifiers and timestamps, and read/write blobs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Compute the 64-byte content digest of a file or text",
    )
    source = hash_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", type=str, help="File to hash")
    source.add_argument("--text", type=str, help="Hash this UTF-8 text instead of a file")
    hash_parser.add_argument(
        "--hex",
        action="store_true",
        default=False,
        help="Print 0x-prefixed hex instead of base64",
    )
    hash_parser.set_defaults(func=digest.hash_cmd)

    # --- uuid command ---
    uuid_parser = subparsers.add_parser(
        "uuid",
        help="Generate random version-4 identifiers",
    )
    uuid_parser.add_argument(
        "--count", "-n",
        type=int,
        default=1,
        help="Number of identifiers to print (default: 1)",
    )
    uuid_parser.set_defaults(func=ident.uuid_cmd)

    # --- now command ---
    now_parser = subparsers.add_parser(
        "now",
        help="Print the current UTC timestamp",
    )
    now_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print {seconds, nanos} JSON instead of RFC 3339 text",
    )
    now_parser.set_defaults(func=clock.now_cmd)

    # --- blob command ---
    blob_parser = subparsers.add_parser(
        "blob",
        help="Read or write raw byte files",
    )
    blob_subparsers = blob_parser.add_subparsers(dest="blob_action", help="Blob action")

    blob_write = blob_subparsers.add_parser("write", help="Write bytes to a file")
    blob_write.add_argument("path", type=str, help="Target file")
    payload = blob_write.add_mutually_exclusive_group(required=True)
    payload.add_argument("--hex", type=str, help="Bytes as hex (optional 0x prefix)")
    payload.add_argument("--b64", type=str, help="Bytes as standard base64")
    blob_write.set_defaults(func=blob.blob_write_cmd)

    blob_read = blob_subparsers.add_parser("read", help="Print the bytes of a file")
    blob_read.add_argument("path", type=str, help="Source file")
    blob_read.add_argument("--hex", action="store_true", default=False, help="Print hex instead of base64")
    blob_read.set_defaults(func=blob.blob_read_cmd)

    blob_parser.set_defaults(func=lambda args: blob_parser.print_help() or EXIT_SUCCESS)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="chainutil.yaml",
        help="Path for config file (default: chainutil.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (CHAINUTIL_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: chainutil config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0=success, 1=error, 3=fatal)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except (OSError, ChainException) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(level=args.log_level or config.logging.level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except ChainException as e:
        if config.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_FATAL if e.fatal else EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
