"""Reading a file descriptor one line at a time.

A line is returned with its trailing newline, if it had one. At end of input
the reader returns None. Data is pulled from the descriptor in chunks of
``buffer_size`` bytes, and whatever follows a line is kept for the next call.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import BinaryIO, Dict, Iterator, List, Optional, Union

Source = Union[int, BinaryIO]

BUFFER_SIZE = 1
BONUS_BUFFER_SIZE = 10
MAX_FD = 1024

_NEWLINE = b"\n"
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _check_buffer_size(buffer_size: int) -> int:
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
        raise TypeError(f"buffer size must be an int, got {type(buffer_size).__name__}")
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    return buffer_size


def _check_source(fd: Source) -> Source:
    if isinstance(fd, bool):
        raise TypeError("fd must be a file descriptor or a binary stream")
    if isinstance(fd, int):
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        return fd
    if not callable(getattr(fd, "read", None)):
        raise TypeError("fd must be a file descriptor or a binary stream")
    return fd


class LineReader:
    """Reads successive lines from a file descriptor or binary stream."""

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        self.fd = _check_source(fd)
        self.buffer_size = _check_buffer_size(buffer_size)
        self._pending = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self.fd, int):
            return os.read(self.fd, self.buffer_size)
        chunk = self.fd.read(self.buffer_size)
        return chunk or b""

    def _fill(self) -> None:
        while _NEWLINE not in self._pending:
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> Optional[str]:
        """The next line with its newline, or None at end of input."""
        self._fill()
        if not self._pending:
            return None
        index = self._pending.find(_NEWLINE)
        end = len(self._pending) if index < 0 else index + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode(_ENCODING, _ERRORS)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int, buffer_size: int = BONUS_BUFFER_SIZE) -> Optional[str]:
    """The next line from descriptor fd, keeping separate state per descriptor.

    Descriptors must lie in the range 0..MAX_FD-1. None is returned at end of
    input, and the state kept for that descriptor is dropped.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"fd must be an int, got {type(fd).__name__}")
    if fd < 0 or fd >= MAX_FD:
        raise ValueError(f"file descriptor {fd} out of range 0..{MAX_FD - 1}")
    _check_buffer_size(buffer_size)
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd, buffer_size)
    else:
        reader.buffer_size = buffer_size
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None or not reader._pending:
        _readers.pop(fd, None)
    return line


def main(argv: Optional[List[str]] = None) -> int:
    """Print a file line by line."""
    parser = argparse.ArgumentParser(description="Print a file line by line.")
    parser.add_argument("path", nargs="?", default="test.txt")
    parser.add_argument("--buffer-size", type=int, default=BUFFER_SIZE)
    args = parser.parse_args(argv)
    try:
        fd = os.open(args.path, os.O_RDONLY)
    except OSError as exc:
        print(f"{args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        for line in LineReader(fd, args.buffer_size):
            sys.stdout.write(line)
    finally:
        os.close(fd)
    return 0