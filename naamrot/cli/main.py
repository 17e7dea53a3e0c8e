"""
Naamrot CLI — Command-line interface for conversions.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from naamrot import __version__
from naamrot.core.context import ConvertRequest
from naamrot.core.engine import Engine
from naamrot.ir.serialization import to_json
from naamrot.rules.loader import get_ruleset, list_rulesets, load_ruleset_from_path
from naamrot.rules.models import Ruleset


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="naamrot",
        description="Rewrite English text in Naamrot spelling",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"naamrot {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert text")
    convert_parser.add_argument(
        "input",
        type=str,
        help="Input text or path to file (use - for stdin)",
    )
    convert_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )
    convert_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json (full result with per-part rules)",
    )
    ruleset_group = convert_parser.add_mutually_exclusive_group()
    ruleset_group.add_argument(
        "--ruleset",
        type=str,
        default="default",
        help="Bundled ruleset name (default: default)",
    )
    ruleset_group.add_argument(
        "--rules",
        type=str,
        default=None,
        help="Path to a ruleset YAML file",
    )

    # Logging configuration
    convert_parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or NAAMROT_LOG_LEVEL env var)",
    )
    convert_parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels (pipeline,tokens,exceptions,stages,ruleset,system). Default: all",
    )

    subparsers.add_parser("rulesets", help="List bundled rulesets")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "convert":
        return run_convert(args)

    if args.command == "rulesets":
        for name in list_rulesets():
            print(name)
        return 0

    return 0


def read_input(value: str) -> str:
    """Literal text, a file path, or - for stdin."""
    if value == "-":
        return sys.stdin.read()
    # Only check as path if it's short enough to be a valid path
    if len(value) < 256 and "\n" not in value and Path(value).is_file():
        return Path(value).read_text(encoding="utf-8")
    return value


def resolve_ruleset(args: argparse.Namespace) -> Ruleset:
    if args.rules:
        return load_ruleset_from_path(args.rules)
    return get_ruleset(args.ruleset)


def run_convert(args: argparse.Namespace) -> int:
    """Run convert command."""
    from naamrot.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(level=args.log_level, channels=channels, force=True)

    try:
        ruleset = resolve_ruleset(args)
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    text = read_input(args.input)
    engine = Engine(ruleset)
    result = engine.transform(ConvertRequest(text=text))

    if args.format == "json":
        output = to_json(result)
    else:
        output = result.rendered_text or ""
        for diag in result.diagnostics:
            print(f"[{diag.level.value}] {diag.code}: {diag.message}", file=sys.stderr)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
    else:
        print(output)

    return 0 if result.status.value == "success" else 1


if __name__ == "__main__":
    sys.exit(main())
