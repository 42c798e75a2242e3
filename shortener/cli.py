#!/usr/bin/env python3
"""
Command-line interface for URL shortener.

Usage:
    url-shortener shorten <url> [--validity MINUTES] [--shortcode CODE]
    url-shortener resolve <shortcode>
    url-shortener list
    url-shortener stats
    url-shortener serve
"""

import argparse
import json
import sys
from typing import List, Optional

from shortener_web.server import serve

from .bootstrap import build_service, build_store
from .config import Config, load_config
from .exceptions import ShortenerError
from .common.logging_config import setup_logging
from .common.timeutils import to_iso_z


class URLShortenerCLI:
    """Command-line interface for URL shortener."""

    def __init__(self, config: Config, verbose: bool = False):
        """Initialize CLI."""
        self.config = config
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.store = build_store(config, self.logger)
        self.service = build_service(config, self.store, self.logger)

    def _print_error(self, message: str) -> int:
        print(json.dumps({
            "success": False,
            "error": message,
        }, indent=2), file=sys.stderr)
        return 1

    def shorten(self, url: str, validity: Optional[str] = None, shortcode: Optional[str] = None) -> int:
        """Shorten a URL."""
        try:
            result = self.service.shorten(url, validity=validity, shortcode=shortcode)
        except ShortenerError as e:
            return self._print_error(str(e))

        print(json.dumps({
            "success": True,
            **result.to_dict(),
            "message": f"Successfully shortened URL to: {result.shortcode}",
        }, indent=2))
        return 0

    def resolve(self, shortcode: str) -> int:
        """Get original URL for a live shortcode."""
        try:
            original_url = self.service.resolve(shortcode)
        except ShortenerError as e:
            return self._print_error(str(e))

        print(json.dumps({
            "success": True,
            "shortcode": shortcode,
            "original_url": original_url,
        }, indent=2))
        return 0

    def list_urls(self) -> int:
        """List stored URLs."""
        try:
            entries = self.service.list_entries()
        except ShortenerError as e:
            return self._print_error(str(e))

        print(json.dumps({
            "success": True,
            "count": len(entries),
            "urls": [
                {
                    "shortcode": entry.shortcode,
                    "original_url": entry.original_url,
                    "expiry": to_iso_z(entry.expiry),
                    "expired": self.service.is_expired(entry),
                }
                for entry in entries
            ],
        }, indent=2))
        return 0

    def stats(self) -> int:
        """Print statistics."""
        try:
            statistics = self.service.get_statistics()
        except ShortenerError as e:
            return self._print_error(str(e))

        print(json.dumps({"success": True, "statistics": statistics}, indent=2))
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="url-shortener",
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL (valid for 30 minutes)
  %(prog)s shorten https://example.com/long/url

  # Shorten with custom shortcode, valid for 5 minutes
  %(prog)s shorten https://example.com/long/url --shortcode mylink --validity 5

  # Get original URL
  %(prog)s resolve mylink

  # Run the web app
  %(prog)s serve
        """
    )

    parser.add_argument(
        "--storage-path",
        help="JSON document holding the url map (default: from STORAGE_PATH env)"
    )
    parser.add_argument(
        "--storage-key",
        help="Key the url map is stored under (default: from STORAGE_KEY env or urlMap)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--validity", help="Validity in minutes (default 30)")
    shorten_parser.add_argument("--shortcode", help="Custom shortcode")

    resolve_parser = subparsers.add_parser("resolve", help="Get original URL")
    resolve_parser.add_argument("shortcode", help="Shortcode to lookup")

    subparsers.add_parser("list", help="List stored URLs")
    subparsers.add_parser("stats", help="Count live and expired URLs")
    subparsers.add_parser("serve", help="Run the web app")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    overrides = {}
    if args.storage_path:
        overrides["storage_path"] = args.storage_path
    if args.storage_key:
        overrides["storage_key"] = args.storage_key
    config = load_config(**overrides)

    if args.command == "serve":
        logger = setup_logging(
            level="DEBUG" if args.verbose else config.log_level,
            log_file=config.log_file,
            json_format=config.log_json,
        )
        serve(config, logger)
        return 0

    cli = URLShortenerCLI(config, verbose=args.verbose)

    if args.command == "shorten":
        return cli.shorten(args.url, args.validity, args.shortcode)
    elif args.command == "resolve":
        return cli.resolve(args.shortcode)
    elif args.command == "list":
        return cli.list_urls()
    elif args.command == "stats":
        return cli.stats()

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
