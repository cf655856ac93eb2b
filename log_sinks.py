import gzip
from typing import IO, Optional

COMPRESSION_LEVEL = 9


class PlainFileSink:
    """Text file opened for append or truncate."""

    compressed = False

    def __init__(self, path: str, append: bool = False):
        self.path = path
        self._handle: Optional[IO[str]] = open(
            path, "a" if append else "w", encoding="utf-8"
        )

    def write(self, line: str) -> None:
        if self._handle is None:
            raise ValueError(f"sink for '{self.path}' is closed")
        self._handle.write(line)
        self._handle.flush()

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        handle.close()


class CompressedFileSink(PlainFileSink):
    """Gzip stream written at maximum compression.

    Appending adds a new gzip member to the existing file; readers such as
    ``gzip.open`` decompress all members as one stream.
    """

    compressed = True

    def __init__(self, path: str, append: bool = False):
        self.path = path
        self._handle = gzip.open(
            path,
            "at" if append else "wt",
            compresslevel=COMPRESSION_LEVEL,
            encoding="utf-8",
        )

    def write(self, line: str) -> None:
        # buffered until close
        if self._handle is None:
            raise ValueError(f"sink for '{self.path}' is closed")
        self._handle.write(line)


def open_sink(path: str, append: bool, compressed: bool) -> PlainFileSink:
    if compressed:
        return CompressedFileSink(path, append=append)
    return PlainFileSink(path, append=append)
