import pathlib
import sys
from collections import namedtuple
from typing import List, Sequence, Tuple

import pytest
from lingua import Language

# Ensure our workspace version of the packages is imported, not any installed one.
REPO_ROOT = str((pathlib.Path(__file__).parent.parent).resolve())
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

FakeConfidenceValue = namedtuple("FakeConfidenceValue", ["language", "value"])


class FakeDetector:
    """Stands in for lingua's LanguageDetector and records what it was asked."""

    def __init__(self, candidates: Sequence[Tuple[Language, float]] = ()):
        self.candidates = [FakeConfidenceValue(language, value) for language, value in candidates]
        self.texts: List[str] = []

    def compute_language_confidence_values(self, text: str):
        self.texts.append(text)
        return list(self.candidates)


THREE_CANDIDATES = (
    (Language.ENGLISH, 0.7),
    (Language.FRENCH, 0.2),
    (Language.GERMAN, 0.1),
)


@pytest.fixture
def fake_detector() -> FakeDetector:
    return FakeDetector(THREE_CANDIDATES)


@pytest.fixture
def empty_detector() -> FakeDetector:
    return FakeDetector(())


@pytest.fixture
def make_detector():
    return FakeDetector
