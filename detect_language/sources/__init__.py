from .stdinsource import StdinTextSource
from .textsource import DEFAULT_SAMPLE_LIMIT, TextSource, read_bounded

__all__ = [
    "DEFAULT_SAMPLE_LIMIT",
    "StdinTextSource",
    "TextSource",
    "read_bounded",
]
