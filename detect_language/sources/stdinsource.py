import sys

from .textsource import DEFAULT_SAMPLE_LIMIT, TextSource


class StdinTextSource(TextSource):
    def __init__(self, limit: int = DEFAULT_SAMPLE_LIMIT, encoding: str = "utf-8"):
        super().__init__(stream=sys.stdin.buffer, limit=limit, encoding=encoding, source_name="stdin")
