"""CLI interface for the sequence splitter."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from sequence_splitter import __version__
from sequence_splitter.application.configuration import (
    CHARACTER_CLASSES,
    ConfigurationError,
    load_config,
    splitter_for_delimiter,
    with_cli_overrides,
)
from sequence_splitter.application.splitting import chunk_by_sizes, chunk_every, split
from sequence_splitter.domain.models import DelimiterDisposition, Splitter
from sequence_splitter.shared.logging import configure_logger

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError("size must be positive")
    return number


def _size_list(value: str) -> List[int]:
    try:
        sizes = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma separated integers: {value!r}") from None
    if any(size < 0 for size in sizes):
        raise argparse.ArgumentTypeError("sizes must be non-negative")
    return sizes


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="sequence-splitter",
        description="Split text on delimiters with fine control over delimiters and blank fields",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split on a separator, dropping blank fields
  %(prog)s --on ", " --drop-blanks --text "a, b, , c"

  # Keep each delimiter attached to the chunk it ends
  %(prog)s --one-of ".!?" --disposition keep_with_preceding --input notes.txt

  # Fixed size chunks, one per line
  %(prog)s --chunk-every 80 --format lines --input notes.txt
        """,
    )
    parser.add_argument("--version", action="version", version=__version__)

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", "-t", help="Text to split (default: read --input or stdin)")
    source.add_argument("--input", "-i", type=Path, help="File to split")

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--on", help="Split on this exact substring")
    mode.add_argument("--one-of", dest="one_of", help="Split on any one of these characters")
    mode.add_argument(
        "--when",
        choices=sorted(CHARACTER_CLASSES),
        help="Split on characters of this class",
    )
    mode.add_argument("--config", "-c", type=Path, help="JSON file describing the splitter")
    mode.add_argument(
        "--chunk-every",
        type=_positive_int,
        metavar="N",
        help="Cut the text into chunks of N characters",
    )
    mode.add_argument(
        "--chunk-sizes",
        type=_size_list,
        metavar="N,N,...",
        help="Cut consecutive chunks of the given sizes",
    )

    parser.add_argument(
        "--disposition",
        "-d",
        choices=[d.value for d in DelimiterDisposition],
        help="What to do with delimiters (default: drop)",
    )
    parser.add_argument("--condense", action="store_true", help="Treat runs of delimiters as one")
    parser.add_argument(
        "--drop-init-blank", action="store_true", help="Drop a blank chunk at the start"
    )
    parser.add_argument(
        "--drop-final-blank", action="store_true", help="Drop a blank chunk at the end"
    )
    parser.add_argument(
        "--drop-blanks",
        action="store_true",
        help="Drop every blank chunk (condense plus both end trims)",
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=["json", "lines"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--json-logs", action="store_true", help="Emit log records as JSON")
    return parser


def build_splitter(args: argparse.Namespace) -> Splitter:
    """Turn parsed arguments into a splitter."""
    if args.config is not None:
        base = load_config(args.config)
    else:
        base = splitter_for_delimiter(on=args.on, one_of_chars=args.one_of, when=args.when)
    return with_cli_overrides(
        base,
        {
            "delimiter_disposition": args.disposition,
            "condense": args.condense,
            "drop_init_blank": args.drop_init_blank,
            "drop_final_blank": args.drop_final_blank,
            "drop_blanks": args.drop_blanks,
        },
    )


def read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.input is not None:
        return args.input.read_text(encoding="utf-8")
    return sys.stdin.read()


def render(chunks: Sequence[str], output_format: str) -> str:
    if output_format == "lines":
        return "\n".join(chunks)
    return json.dumps(list(chunks), ensure_ascii=False)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command line arguments (for testing)

    Returns:
        Exit code (0 for success, 2 for bad configuration or input)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    chunk_mode = args.chunk_every is not None or args.chunk_sizes is not None
    if chunk_mode and (
        args.disposition
        or args.condense
        or args.drop_init_blank
        or args.drop_final_blank
        or args.drop_blanks
    ):
        parser.error(
            "delimiter policy options cannot be combined with --chunk-every or --chunk-sizes"
        )
    configure_logger(logging.DEBUG if args.verbose else logging.WARNING, json_mode=args.json_logs)

    try:
        text = read_text(args)
        if args.chunk_every is not None:
            chunks = chunk_every(args.chunk_every, text)
        elif args.chunk_sizes is not None:
            chunks = chunk_by_sizes(args.chunk_sizes, text)
        else:
            splitter = build_splitter(args)
            logger.debug("Using splitter %s", splitter.to_dict())
            chunks = split(splitter, text)
    except (ConfigurationError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(render(chunks, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
