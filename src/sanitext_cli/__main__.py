"""
Sanitext CLI entry point.

Usage:
    sanitext check --rule RULE [--shape auto|text|list|map] [VALUE]
    sanitext parse --rule RULE
    sanitext --help
    sanitext --version
"""

import argparse
import sys

from sanitext_cli.commands import SHAPE_CHOICES, check_command, parse_command
from sanitext_core.utils.logger_factory import configure_logging


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sanitext", description="Sanitize text, lists and maps against a rule"
    )

    parser.add_argument("--version", action="version", version="%(prog)s 1.0.0")
    parser.add_argument(
        "--log-level", default=None, help="Log level (default: SANITEXT_LOG_LEVEL or INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # check command
    check_parser = subparsers.add_parser("check", help="Validate a value and print the result")
    check_parser.add_argument("--rule", default="", help="Rule string, e.g. 'min=3,max=40'")
    check_parser.add_argument(
        "--shape",
        choices=SHAPE_CHOICES,
        default="auto",
        help="Value shape (default: auto, JSON with text fallback)",
    )
    check_parser.add_argument("value", nargs="?", help="Value to validate (default: stdin)")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Print the parameters of a rule")
    parse_parser.add_argument("--rule", required=True, help="Rule string")

    args = parser.parse_args()

    configure_logging(level=args.log_level)

    if args.command == "check":
        sys.exit(check_command(args.rule, args.value, shape=args.shape))
    elif args.command == "parse":
        sys.exit(parse_command(args.rule))
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    main()
