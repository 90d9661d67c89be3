#!/usr/bin/env python3
"""
adfontem CLI - Find the original videos behind reposts and reactions.

Usage:
    adfontem check "look at this https://youtu.be/VIDEO_ID"
    adfontem extract description.txt
    adfontem duration PT1H2M3S
    adfontem validate-config
"""

import argparse
import asyncio
import json
import sys

from adfontem.config.loader import AdFontemConfig, load_config
from adfontem.extraction.finder import OriginalContentFinder
from adfontem.extraction.patterns import extract_original_content_links
from adfontem.operations.processor import process_message
from adfontem.utils.formatting import format_duration, parse_duration
from adfontem.utils.logging import configure_logging
from adfontem.youtube.metadata import YouTubeMetadataClient


def _load(args) -> AdFontemConfig:
    config = load_config()
    if config.debug and not args.debug:
        configure_logging(debug=True)
    return config


def _cmd_check(args):
    """Handle the check subcommand: process one chat message."""
    config = _load(args)
    if not config.youtube_api_key:
        print("ERROR: YOUTUBE_API_KEY is not set", file=sys.stderr)
        sys.exit(1)

    metadata_client = YouTubeMetadataClient(api_key=config.youtube_api_key)
    finder = OriginalContentFinder(config)
    reply = asyncio.run(process_message(args.message, metadata_client, finder))

    if reply:
        print(reply)
    else:
        print("No original content found.")


def _cmd_extract(args):
    """Handle the extract subcommand: print links found in a description."""
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            description = f.read()
    else:
        description = sys.stdin.read()

    if args.regex_only:
        links = extract_original_content_links(description)
    else:
        finder = OriginalContentFinder(_load(args))
        links = asyncio.run(finder.find_links(description))

    for link in links:
        print(link)


def _cmd_duration(args):
    """Handle the duration subcommand."""
    for value in args.durations:
        print(f"{value}: {format_duration(parse_duration(value))}")


def _cmd_validate_config(args):
    """Handle the validate-config subcommand."""
    config = _load(args)
    result = config.validate()

    print(f"Config source: {config.source.value}")
    print(f"Extraction mode: {config.extraction_mode.value}")
    print(json.dumps(config.sanitized(), indent=2))

    for warning in result.warnings:
        print(f"  WARNING: {warning}")
    for error in result.errors:
        print(f"  ERROR: {error}")

    if result.is_valid:
        print("\nConfig is valid.")
        sys.exit(0)
    print(f"\nConfig has {len(result.errors)} error(s).")
    sys.exit(1)


def main():
    parser = argparse.ArgumentParser(
        description="Find the original videos behind reposts and reactions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s check "https://youtu.be/VIDEO_ID"
    %(prog)s extract description.txt
    %(prog)s extract --regex-only < description.txt
    %(prog)s duration PT1H2M3S PT45S
    %(prog)s validate-config
        """,
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    check_parser = subparsers.add_parser(
        "check",
        help="Look up a chat message's YouTube link and print the reply",
    )
    check_parser.add_argument("message", help="Chat message text or a YouTube URL")

    extract_parser = subparsers.add_parser(
        "extract",
        help="Print original-content links found in a video description",
    )
    extract_parser.add_argument(
        "file", nargs="?", help="Description file (default: read stdin)"
    )
    extract_parser.add_argument(
        "--regex-only", action="store_true",
        help="Only use the regex patterns, never the LLM",
    )

    duration_parser = subparsers.add_parser(
        "duration",
        help="Format ISO 8601 durations (e.g., PT1H2M3S)",
    )
    duration_parser.add_argument("durations", nargs="+", help="Duration strings")

    subparsers.add_parser(
        "validate-config",
        help="Show resolved configuration and check it",
    )

    args = parser.parse_args()
    configure_logging(debug=args.debug)

    if args.command == "check":
        _cmd_check(args)
    elif args.command == "extract":
        _cmd_extract(args)
    elif args.command == "duration":
        _cmd_duration(args)
    elif args.command == "validate-config":
        _cmd_validate_config(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
