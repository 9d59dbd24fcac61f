"""CLI entry point: python -m unit_conversion_mcp."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from unit_conversion_mcp import LOG_LEVELS, TRANSPORTS, serve

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "UNIT_CONVERSION_MCP_LOG_LEVEL"


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the unit-conversion-mcp CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m unit_conversion_mcp",
        description="Launch an MCP server that converts values between physical units.",
    )

    # Transport options
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="Transport type (default: stdio).",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host address for the HTTP transport (default: 127.0.0.1).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for the HTTP transport (default: 8000, range: 1-65535).",
    )

    # Server options
    parser.add_argument(
        "--name",
        default="unit-conversion-mcp",
        help='MCP server name (default: "unit-conversion-mcp", max 255 chars).',
    )
    parser.add_argument(
        "--version",
        default=None,
        help="MCP server version (default: package version).",
    )

    # Logging
    env_level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=env_level if env_level in LOG_LEVELS else "INFO",
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or INFO).",
    )

    return parser


def main() -> None:
    """CLI entry point for launching the unit conversion server.

    Exit codes:
        0 - Normal shutdown
        1 - Invalid arguments (port out of range, name too long)
        2 - Startup failure (argparse error, serve() exception)
    """
    parser = _build_parser()
    args = parser.parse_args()

    if args.port < 1 or args.port > 65535:
        print(f"Error: --port must be in range 1-65535, got {args.port}.", file=sys.stderr)
        sys.exit(1)

    if len(args.name) > 255:
        print(
            f"Error: --name must be at most 255 characters, got {len(args.name)}.",
            file=sys.stderr,
        )
        sys.exit(1)

    # stdout carries the JSON-RPC stream, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        serve(
            transport=args.transport,
            host=args.host,
            port=args.port,
            name=args.name,
            version=args.version,
        )
    except Exception:
        logger.exception("Server startup failed.")
        sys.exit(2)


if __name__ == "__main__":
    main()
