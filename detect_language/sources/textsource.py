import logging
from typing import BinaryIO

from ..errors import InputDecodeError

LOG = logging.getLogger(__name__)

DEFAULT_SAMPLE_LIMIT = 1048576


def read_bounded(stream: BinaryIO, limit: int, encoding: str = "utf-8") -> str:
    """
    Read at most ``limit`` bytes from ``stream`` and decode them.

    Reaching the end of the stream before ``limit`` is not an error; the
    shorter sample is returned as is.

    Args:
        stream (BinaryIO): Binary stream to read from.
        limit (int): Maximum number of bytes to read.
        encoding (str): Text encoding of the sample.

    Returns:
        str: The decoded sample.

    Raises:
        OSError: If reading from the stream fails.
        InputDecodeError: If the bytes are not valid ``encoding`` text.
    """
    if limit < 0:
        raise ValueError(f"Sample limit must be non-negative, got {limit}")

    input_data = bytearray()
    while len(input_data) < limit:
        chunk = stream.read(limit - len(input_data))
        if not chunk:
            # End of stream
            break
        input_data.extend(chunk)

    LOG.debug("Read %d of at most %d bytes", len(input_data), limit)
    try:
        return input_data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise InputDecodeError(f"Input is not valid {encoding} text: {exc}") from exc


class TextSource:
    source_name: str
    stream: BinaryIO
    limit: int
    encoding: str

    def __init__(self, stream: BinaryIO, limit: int = DEFAULT_SAMPLE_LIMIT, encoding: str = "utf-8", source_name: str = "stream"):
        self.source_name = source_name
        self.stream = stream
        self.limit = limit
        self.encoding = encoding

    def read_sample(self) -> str:
        """Read and decode at most ``limit`` bytes; the stream is left open for its owner."""
        return read_bounded(self.stream, self.limit, self.encoding)
