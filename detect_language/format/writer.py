from abc import ABC, abstractmethod
import itertools
import logging
from typing import Iterable, Optional

from ..detection import DetectedLanguage

LOG = logging.getLogger(__name__)


class DetectionWriter(ABC):
    def __enter__(self) -> "DetectionWriter":
        self.open()
        return self

    def __exit__(self, ex_type, ex_value, ex_traceback):
        self.close()
        return False

    @abstractmethod
    def open(self):
        pass

    @abstractmethod
    def close(self):
        pass

    @abstractmethod
    def write(self, detected: DetectedLanguage):
        pass


def write_all(records: Iterable[DetectedLanguage], writer: DetectionWriter, limit: Optional[int] = None) -> int:
    """
    Write ``records`` in order, stopping after ``limit`` records when set.

    The writer is opened and closed here, so its sink is flushed on every
    exit path.

    Returns:
        int: The number of records written.
    """
    if limit is not None:
        records = itertools.islice(records, limit)

    count = 0
    with writer:
        for detected in records:
            writer.write(detected)
            count += 1
    LOG.info("Wrote %d detected language(s)", count)
    return count
