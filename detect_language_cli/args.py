"""CLI argument builder for detect-language."""

import argparse
from typing import List, Optional

from detect_language import __version__
from detect_language.sources import DEFAULT_SAMPLE_LIMIT


def non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {parsed}")
    return parsed


def add_shared_arguments(parser: argparse.ArgumentParser, *, prog: str = "detect-language") -> argparse.ArgumentParser:
    parser.add_argument(
        "--minimum-relative-distance",
        type=float,
        default=None,
        help="Minimum confidence distance between the two most likely languages, in [0.0, 0.99). Uses the detector default if omitted.",
    )
    parser.add_argument("--low-accuracy-mode", action="store_true", help="Trade accuracy for speed and memory (trigram models only)")
    parser.add_argument("--preload", action="store_true", help="Load all language models up front instead of on first use")
    parser.add_argument("--spoken-language-only", action="store_true", help="Only consider languages that are still spoken")
    parser.add_argument(
        "--max-output-languages",
        type=non_negative_int,
        default=None,
        metavar="N",
        help="Write at most N detected languages (default: all)",
    )
    parser.add_argument(
        "--max-input-sample-bytes",
        type=non_negative_int,
        default=DEFAULT_SAMPLE_LIMIT,
        metavar="BYTES",
        help=f"Read at most BYTES bytes from stdin before classifying (default: {DEFAULT_SAMPLE_LIMIT})",
    )
    parser.add_argument("--config", default=None, help="Path to YAML or JSON config file for defaults (default: $DETECT_LANGUAGE_CONFIG)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (specify multiple times for more verbosity)")
    parser.add_argument("--version", action="version", version=f"{prog} {__version__}")
    return parser


def build_parser(prog: str = "detect-language") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Detect the language of the text read from stdin and write one JSON object per candidate language to stdout.",
    )
    return add_shared_arguments(parser, prog=prog)


def parse_explicit_args(argv: Optional[List[str]] = None, prog: str = "detect-language") -> argparse.Namespace:
    """Parse ``argv`` keeping only the options actually given on the command line."""
    parser = build_parser(prog=prog)
    # pylint: disable=protected-access
    for action in parser._actions:
        action.default = argparse.SUPPRESS
    return parser.parse_args(argv, namespace=argparse.Namespace())
