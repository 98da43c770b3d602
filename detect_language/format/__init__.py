from .jsonl import DetectionParser, JsonLinesDetectionWriter, format_detected, read_detections, to_stdout_all, to_writer_all
from .writer import DetectionWriter, write_all

__all__ = [
    "DetectionParser",
    "DetectionWriter",
    "JsonLinesDetectionWriter",
    "format_detected",
    "read_detections",
    "to_stdout_all",
    "to_writer_all",
    "write_all",
]
