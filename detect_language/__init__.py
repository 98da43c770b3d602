"""
Bounded-sample natural language identification with JSON Lines output.
"""

__version__ = "0.1.0"

from .config import Config, LanguageUniverse
from .detection import DetectedLanguage, classify, reader_to_languages, stdin_to_languages
from .detector import build_detector, build_from_all_languages, build_from_all_spoken_languages, build_from_builder
from .errors import ConfigError, DetectLanguageError, InputDecodeError, TooGreatDistance, TooSmallDistance
from .pipeline import detect_stream, print_detected_from_stdin

__all__ = [
    "Config",
    "ConfigError",
    "DetectedLanguage",
    "DetectLanguageError",
    "InputDecodeError",
    "LanguageUniverse",
    "TooGreatDistance",
    "TooSmallDistance",
    "build_detector",
    "build_from_all_languages",
    "build_from_all_spoken_languages",
    "build_from_builder",
    "classify",
    "detect_stream",
    "print_detected_from_stdin",
    "reader_to_languages",
    "stdin_to_languages",
]
