"""Single-run execution helpers for the CLI."""

from typing import BinaryIO

from detect_language.detector import build_detector
from detect_language.pipeline import detect_stream

from .configure import make_config, resolve_limits


def run_detection(*, args, stdin: BinaryIO, stdout: BinaryIO) -> int:
    """
    Validate the options, build the detector, classify stdin and write stdout.

    Configuration errors are raised before the detector is built or any
    input is read.

    Returns:
        int: The number of records written.
    """
    config = make_config(args)
    sample_limit, result_limit = resolve_limits(args)
    detector = build_detector(config)
    return detect_stream(detector, stdin, stdout, limit=sample_limit, result_limit=result_limit)
