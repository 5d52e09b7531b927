"""Main CLI entry point for the u8scan command-line tool.

Provides subcommands for inspecting, filtering, sanitizing and benchmarking
UTF-8 input read from a file or standard input.
"""

import argparse
import json
import sys
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from u8scan import __version__
from u8scan.api.access import at
from u8scan.api.algorithms import copy_from, copy_if, copy_n, copy_until, copy_while
from u8scan.character.encoding import BOMAction, CharInfo, has_bom
from u8scan.character.predicates import PREDICATES, negate
from u8scan.character.stream import make_char_range
from u8scan.character.transformation import (
    quoted_str,
    to_lower_ascii_str,
    to_upper_ascii_str,
    transform_chars,
)
from u8scan.scanning.scanner import CharScanner, replace_invalid
from u8scan.shared.config import GlobalConfig, ScanConfig
from u8scan.shared.errors import CharIndexError
from u8scan.shared.logging import configure_logging, get_logger
from u8scan.tools.benchmarks import OPERATIONS, ScanBenchmark, build_corpora

logger = get_logger(__name__, None, "cli")

COUNTED_CLASSES = ["ascii", "utf8", "invalid", "digit", "alpha", "whitespace", "emoji"]

FILTER_MODES = {
    "if": copy_if,
    "until": copy_until,
    "from": copy_from,
    "while": copy_while,
    "drop": lambda data, pred, **kwargs: copy_if(data, negate(pred), **kwargs),
}


def read_input(source: str) -> bytes:
    """Read raw bytes from a path, or from standard input for ``-``."""
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def write_output(data: bytes) -> None:
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def describe_char(info: CharInfo) -> Dict[str, Any]:
    """JSON-ready view of a character descriptor."""
    return {
        "start_offset": info.start_offset,
        "byte_length": info.byte_length,
        "scalar_value": info.scalar_value,
        "codepoint": f"U+{info.scalar_value:04X}",
        "is_ascii": info.is_ascii,
        "is_valid": info.is_valid,
    }


def collect_info(data: bytes, utf8_mode: bool = True, validate: bool = True) -> Dict[str, Any]:
    """Gather length, BOM and character class counts for ``data``."""
    counts = dict.fromkeys(COUNTED_CLASSES, 0)
    predicates = [(name, PREDICATES[name]) for name in COUNTED_CLASSES]
    characters = 0
    for info in make_char_range(data, utf8_mode=utf8_mode, validate=validate):
        characters += 1
        for name, predicate in predicates:
            if predicate(info):
                counts[name] += 1

    return {
        "bytes": len(data),
        "characters": characters,
        "has_bom": has_bom(data),
        "empty": characters == 0,
        "counts": counts,
    }


def format_info(info: Dict[str, Any], format_type: str) -> str:
    if format_type == "json":
        return json.dumps(info, indent=2)

    lines = [
        f"Bytes: {info['bytes']}",
        f"Characters: {info['characters']}",
        f"BOM: {'yes' if info['has_bom'] else 'no'}",
        f"Empty: {'yes' if info['empty'] else 'no'}",
        "-" * 30,
    ]
    for name, count in info["counts"].items():
        lines.append(f"{name:>12}: {count}")
    return "\n".join(lines)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="u8scan",
        description="Character-level inspection and filtering of UTF-8 input"
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )
    parser.add_argument(
        "--no-correlation-id",
        action="store_true",
        help="Do not tag log records with a per-run correlation ID"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_source(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "source",
            nargs="?",
            default="-",
            help="Input file (default: - for standard input)"
        )

    def add_decoding_options(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--ascii",
            action="store_true",
            help="Treat every byte as one character"
        )
        sub.add_argument(
            "--no-validate",
            action="store_true",
            help="Trust continuation bytes without validating them"
        )

    # Info command
    info_parser = subparsers.add_parser("info", help="Show length and character counts")
    add_source(info_parser)
    add_decoding_options(info_parser)
    info_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)"
    )

    # At command
    at_parser = subparsers.add_parser("at", help="Describe the character at an index")
    at_parser.add_argument("index", type=int, help="Character index (0-based)")
    add_source(at_parser)
    add_decoding_options(at_parser)

    # Filter command
    filter_parser = subparsers.add_parser("filter", help="Copy characters by predicate")
    add_source(filter_parser)
    filter_parser.add_argument(
        "--predicate", "-p",
        choices=sorted(PREDICATES),
        required=True,
        help="Character class to select on"
    )
    filter_parser.add_argument(
        "--mode", "-m",
        choices=list(FILTER_MODES),
        default="if",
        help="Selection policy (default: if)"
    )

    # Head command
    head_parser = subparsers.add_parser("head", help="Copy the first N characters")
    add_source(head_parser)
    head_parser.add_argument(
        "-n",
        type=int,
        default=10,
        help="Number of characters (default: 10)"
    )

    # Sanitize command
    sanitize_parser = subparsers.add_parser(
        "sanitize", help="Replace invalid UTF-8 bytes"
    )
    add_source(sanitize_parser)
    add_decoding_options(sanitize_parser)
    sanitize_parser.add_argument(
        "--replacement", "-r",
        default="\uFFFD",
        help="Replacement text for each invalid byte (default: U+FFFD)"
    )
    sanitize_parser.add_argument(
        "--bom",
        choices=["ignore", "copy"],
        default="ignore",
        help="Drop or keep a leading BOM (default: ignore)"
    )
    sanitize_parser.add_argument(
        "--max-output",
        type=int,
        default=0,
        help="Maximum output size in bytes (default: unlimited)"
    )
    sanitize_parser.add_argument(
        "--stats",
        action="store_true",
        help="Print scan metrics as JSON to stderr"
    )

    # Case command
    case_parser = subparsers.add_parser("case", help="Convert ASCII letter case")
    add_source(case_parser)
    case_group = case_parser.add_mutually_exclusive_group(required=True)
    case_group.add_argument("--upper", action="store_true", help="Uppercase A-Z")
    case_group.add_argument("--lower", action="store_true", help="Lowercase a-z")

    # Quote command
    quote_parser = subparsers.add_parser("quote", help="Quote and escape the input")
    add_source(quote_parser)
    quote_parser.add_argument("--start", default='"', help="Opening delimiter")
    quote_parser.add_argument("--end", default='"', help="Closing delimiter")
    quote_parser.add_argument("--escape", default="\\", help="Escape character")

    # Bench command
    bench_parser = subparsers.add_parser("bench", help="Benchmark scan operations")
    bench_parser.add_argument(
        "--operation",
        action="append",
        choices=list(OPERATIONS),
        help="Operation to time (repeatable, default: all)"
    )
    bench_parser.add_argument(
        "--corpus",
        action="append",
        choices=list(build_corpora(1)),
        help="Corpus to use (repeatable, default: all)"
    )
    bench_parser.add_argument(
        "--runs",
        type=int,
        default=5,
        help="Timed runs per operation (default: 5)"
    )
    bench_parser.add_argument(
        "--repeat",
        type=int,
        default=2000,
        help="Corpus size multiplier (default: 2000)"
    )

    return parser


def cmd_info(args: argparse.Namespace) -> int:
    """Handle info command."""
    data = read_input(args.source)
    info = collect_info(data, not args.ascii, not args.no_validate)
    print(format_info(info, args.format))
    return 0


def cmd_at(args: argparse.Namespace) -> int:
    """Handle at command."""
    data = read_input(args.source)
    try:
        info = at(data, args.index, not args.ascii, not args.no_validate)
    except CharIndexError as e:
        print(f"Error: {e} (index {args.index}, length {e.length})", file=sys.stderr)
        return 1
    print(json.dumps(describe_char(info), indent=2))
    return 0


def cmd_filter(args: argparse.Namespace) -> int:
    """Handle filter command."""
    data = read_input(args.source)
    select = FILTER_MODES[args.mode]
    write_output(select(data, PREDICATES[args.predicate]))
    return 0


def cmd_head(args: argparse.Namespace) -> int:
    """Handle head command."""
    if args.n < 0:
        print("Error: -n must be >= 0", file=sys.stderr)
        return 1
    write_output(copy_n(read_input(args.source), args.n))
    return 0


def cmd_sanitize(args: argparse.Namespace) -> int:
    """Handle sanitize command."""
    try:
        config = ScanConfig(
            utf8_mode=not args.ascii,
            bom_action=BOMAction(args.bom),
            validate_utf8=not args.no_validate,
            max_output_size=args.max_output,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    scanner = CharScanner(config, args.correlation_id)
    output = scanner.scan(read_input(args.source), replace_invalid(args.replacement))
    write_output(output)

    if args.stats:
        print(json.dumps(scanner.last_metrics.to_dict(), indent=2), file=sys.stderr)
    return 0


def cmd_case(args: argparse.Namespace) -> int:
    """Handle case command."""
    convert = to_upper_ascii_str if args.upper else to_lower_ascii_str
    write_output(b"".join(transform_chars(read_input(args.source), convert)))
    return 0


def cmd_quote(args: argparse.Namespace) -> int:
    """Handle quote command."""
    try:
        quoted = quoted_str(read_input(args.source), args.start, args.end, args.escape)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    write_output(quoted)
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    """Handle bench command."""
    try:
        benchmark = ScanBenchmark(
            args.correlation_id, benchmark_runs=args.runs, repeat=args.repeat
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    suite = benchmark.run(args.operation, args.corpus)
    print(json.dumps(suite.generate_report(), indent=2))
    return 0 if all(r.success for r in suite.results) else 1


COMMANDS = {
    "info": cmd_info,
    "at": cmd_at,
    "filter": cmd_filter,
    "head": cmd_head,
    "sanitize": cmd_sanitize,
    "case": cmd_case,
    "quote": cmd_quote,
    "bench": cmd_bench,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Set up logging verbosity
    global_config = GlobalConfig(enable_correlation_tracking=not args.no_correlation_id)
    if args.verbose:
        global_config.logging_level = "DEBUG"
    elif args.quiet:
        global_config.logging_level = "ERROR"
    configure_logging(global_config.logging_level)
    args.correlation_id = (
        str(uuid.uuid4())[:8] if global_config.enable_correlation_tracking else None
    )

    try:
        return COMMANDS[args.command](args)
    except OSError as e:
        logger.error(
            "Could not read input", extra={"source": getattr(args, "source", None)}
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
