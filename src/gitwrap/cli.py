#!/usr/bin/env python3
"""
Command-line interface for GitWrap.

Usage:
    gitwrap wrapped octocat                 # Summary for the default year
    gitwrap wrapped octocat --year 2024     # Summary for 2024
    gitwrap wrapped octocat --card          # Include card highlights
    gitwrap serve --port 8000               # Run the API with uvicorn
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from .core.config import get_settings, setup_logging
from .core.errors import WrappedError

logger = logging.getLogger("gitwrap.cli")


async def cmd_wrapped_async(args: argparse.Namespace) -> int:
    from .providers.github import GitHubClient
    from .services.card import build_highlights
    from .services.wrapped import StatsAggregator

    async with GitHubClient(token=args.token) as github:
        aggregator = StatsAggregator(github)
        try:
            summary = await aggregator.aggregate(args.username, args.year)
        except WrappedError as e:
            logger.debug(f"Aggregation failed: {e!r}")
            print(f"Error: {e.message}", file=sys.stderr)
            return 1

    payload = summary.to_payload()
    if args.card:
        payload["card"] = build_highlights(summary).model_dump(by_alias=True)

    for failure in summary.partial_failures:
        logger.warning(f"Skipped {failure.source}: {failure.reason}")

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def cmd_wrapped(args: argparse.Namespace) -> int:
    """Print the year-in-review summary for a user."""
    return asyncio.run(cmd_wrapped_async(args))


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "gitwrap.api.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitwrap",
        description="GitHub year-in-review statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    wrapped_parser = subparsers.add_parser("wrapped", help="Print a user's summary as JSON")
    wrapped_parser.add_argument("username", help="GitHub login")
    wrapped_parser.add_argument("--year", type=int, default=None, help="Calendar year")
    wrapped_parser.add_argument("--card", action="store_true", help="Include card highlights")
    wrapped_parser.add_argument(
        "--token",
        default=None,
        help="GitHub token (defaults to GITHUB_TOKEN / GITHUB_PERSONAL_ACCESS_TOKEN)",
    )
    wrapped_parser.set_defaults(func=cmd_wrapped)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
