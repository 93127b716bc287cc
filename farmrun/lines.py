"""Line-by-line reading from a file descriptor or a binary stream."""

from __future__ import annotations

import os
from typing import BinaryIO, Iterator, Union

BUFFER_SIZE = 42

Source = Union[int, BinaryIO]


class LineReader:
    """Reads a source in chunks of ``buffer_size`` bytes and hands out lines.

    Each line keeps its trailing newline; the final line may lack one.
    Bytes read past the end of a line are kept for the next call.
    """

    def __init__(
        self,
        source: Source,
        buffer_size: int = BUFFER_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, int) and not isinstance(source, bool) and source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        self.source = source
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._leftovers = b""
        self._eof = False

    def _read_chunk(self) -> bytes:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)
        chunk = self.source.read(self.buffer_size)
        if isinstance(chunk, str):
            chunk = chunk.encode(self.encoding)
        return chunk or b""

    def _fill(self) -> None:
        while not self._eof and b"\n" not in self._leftovers:
            chunk = self._read_chunk()
            if not chunk:
                self._eof = True
                break
            self._leftovers += chunk

    def read_line(self) -> str | None:
        """The next line, or None once the source is exhausted."""
        try:
            self._fill()
        except OSError:
            self._leftovers = b""
            raise
        if not self._leftovers:
            return None
        end = self._leftovers.find(b"\n")
        if end < 0:
            line, self._leftovers = self._leftovers, b""
        else:
            line = self._leftovers[: end + 1]
            self._leftovers = self._leftovers[end + 1 :]
        return line.decode(self.encoding)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line