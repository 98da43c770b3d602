import json
import sys
from typing import BinaryIO, Iterable, Iterator, List, Optional, TextIO, Union

from ..detection import DetectedLanguage
from .writer import DetectionWriter, write_all


def format_detected(detected: DetectedLanguage) -> bytes:
    """Serialize one record to a complete, newline-terminated JSON line; NaN and infinity raise ValueError."""
    return (json.dumps(detected.to_dict(), ensure_ascii=False, allow_nan=False) + "\n").encode("utf-8")


class JsonLinesDetectionWriter(DetectionWriter):
    """
    Writes one JSON object per line to a binary stream.

    Each line is fully serialized before it is handed to the stream, so a
    record that fails to serialize never leaves a partial line behind. The
    stream is flushed on close but never closed; the caller owns it.
    """

    out: BinaryIO

    def __init__(self, out: BinaryIO):
        self.out = out
        self._is_open = False

    def open(self):
        self._is_open = True

    def close(self):
        if not self._is_open:
            return
        self._is_open = False
        self.out.flush()

    def write(self, detected: DetectedLanguage):
        self.out.write(format_detected(detected))


class DetectionParser:
    def parse(self, in_file: Union[TextIO, BinaryIO]) -> Iterator[DetectedLanguage]:
        """
        Parse JSON lines produced by ``JsonLinesDetectionWriter``.

        Blank lines are skipped.

        Raises:
            ValueError: If a line is not a valid detected language record.
        """
        for line_number, line in enumerate(in_file, start=1):
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Line {line_number} is not valid JSON: {exc}") from exc
            if not isinstance(data, dict):
                raise ValueError(f"Line {line_number} is not a JSON object")
            try:
                yield DetectedLanguage.from_dict(data)
            except ValueError as exc:
                raise ValueError(f"Line {line_number}: {exc}") from exc


def read_detections(in_file: Union[TextIO, BinaryIO]) -> List[DetectedLanguage]:
    return list(DetectionParser().parse(in_file))


def to_writer_all(records: Iterable[DetectedLanguage], out: BinaryIO, limit: Optional[int] = None) -> int:
    return write_all(records, JsonLinesDetectionWriter(out), limit=limit)


def to_stdout_all(records: Iterable[DetectedLanguage], limit: Optional[int] = None) -> int:
    return to_writer_all(records, sys.stdout.buffer, limit=limit)
