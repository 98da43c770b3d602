"""Drivers running a detector over a bounded input stream into a JSON Lines sink."""

import sys
from typing import BinaryIO, Optional

from lingua import LanguageDetector

from .detection import reader_to_languages
from .format import to_writer_all
from .sources import DEFAULT_SAMPLE_LIMIT


def detect_stream(
    detector: LanguageDetector,
    stream_in: BinaryIO,
    stream_out: BinaryIO,
    limit: int = DEFAULT_SAMPLE_LIMIT,
    result_limit: Optional[int] = None,
) -> int:
    """
    Classify at most ``limit`` bytes of ``stream_in`` and write the results to ``stream_out``.

    Returns:
        int: The number of records written.
    """
    detected = reader_to_languages(detector, stream_in, limit=limit)
    return to_writer_all(detected, stream_out, limit=result_limit)


def print_detected_from_stdin(detector: LanguageDetector, limit: int = DEFAULT_SAMPLE_LIMIT, result_limit: Optional[int] = None) -> int:
    return detect_stream(detector, sys.stdin.buffer, sys.stdout.buffer, limit=limit, result_limit=result_limit)
