"""
Language classification of a text sample.

The detector is any object exposing ``compute_language_confidence_values``
with lingua's contract: a list of confidence values, each carrying a
``language`` and a ``value`` in [0.0, 1.0], conventionally sorted by
descending confidence.
"""

import dataclasses
import logging
from typing import Any, BinaryIO, Dict, Iterator, Mapping

from lingua import IsoCode639_1, IsoCode639_3, Language, LanguageDetector

from .sources import DEFAULT_SAMPLE_LIMIT, StdinTextSource, TextSource

LOG = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class DetectedLanguage:
    language: Language
    iso_639_1: IsoCode639_1
    iso_639_3: IsoCode639_3
    confidence: float

    @classmethod
    def from_language(cls, language: Language, confidence: float) -> "DetectedLanguage":
        return cls(
            language=language,
            iso_639_1=language.iso_code_639_1,
            iso_639_3=language.iso_code_639_3,
            confidence=confidence,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lang": self.language.name.title(),
            "iso_639_1": self.iso_639_1.name.lower(),
            "iso_639_3": self.iso_639_3.name.lower(),
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DetectedLanguage":
        """Inverse of ``to_dict``; raises ValueError on unknown names or codes."""
        try:
            return cls(
                language=getattr(Language, str(data["lang"]).upper()),
                iso_639_1=getattr(IsoCode639_1, str(data["iso_639_1"]).upper()),
                iso_639_3=getattr(IsoCode639_3, str(data["iso_639_3"]).upper()),
                confidence=float(data["confidence"]),
            )
        except (KeyError, AttributeError) as exc:
            raise ValueError(f"Not a detected language record: {dict(data)}") from exc


def classify(detector: LanguageDetector, text: str) -> Iterator[DetectedLanguage]:
    """
    Yield one record per candidate language, in the order the detector returns them.

    Empty or unclassifiable text yields nothing.
    """
    confidence_values = detector.compute_language_confidence_values(text)
    LOG.debug("Detector returned %d candidate(s) for %d characters", len(confidence_values), len(text))
    for confidence_value in confidence_values:
        yield DetectedLanguage.from_language(confidence_value.language, confidence_value.value)


def reader_to_languages(detector: LanguageDetector, stream: BinaryIO, limit: int = DEFAULT_SAMPLE_LIMIT) -> Iterator[DetectedLanguage]:
    # the sample is read before returning so that I/O errors surface here
    return source_to_languages(detector, TextSource(stream=stream, limit=limit))


def stdin_to_languages(detector: LanguageDetector, limit: int = DEFAULT_SAMPLE_LIMIT) -> Iterator[DetectedLanguage]:
    return source_to_languages(detector, StdinTextSource(limit=limit))


def source_to_languages(detector: LanguageDetector, source: TextSource) -> Iterator[DetectedLanguage]:
    text = source.read_sample()
    LOG.info("Classifying %d characters from %s", len(text), source.source_name)
    return classify(detector, text)
