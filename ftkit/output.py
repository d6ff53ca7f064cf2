"""Writing characters, strings and numbers to a stream or file descriptor.

The target may be a text stream with a ``write`` method or an integer file
descriptor. Text sent to a descriptor is encoded as UTF-8. When no target is
given, standard output is used.
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO, Union

Target = Union[int, TextIO, None]

_BYTE_MASK = 0xFF


def _write(text: str, file: Target) -> None:
    if file is None:
        file = sys.stdout
    if isinstance(file, bool):
        raise TypeError("file must be a stream or a file descriptor")
    if isinstance(file, int):
        if file < 0:
            raise ValueError(f"invalid file descriptor {file}")
        data = text.encode("utf-8")
        while data:
            written = os.write(file, data)
            data = data[written:]
        return
    file.write(text)


def _require_str(s: object) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s


def put_char(c: Union[int, str], file: Target = None) -> None:
    """Write one character; an integer is reduced to its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write(c, file)
        return
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    code = c & _BYTE_MASK
    if isinstance(file, int) and not isinstance(file, bool):
        if file < 0:
            raise ValueError(f"invalid file descriptor {file}")
        os.write(file, bytes([code]))
        return
    _write(chr(code), file)


def put_str(s: str, file: Target = None) -> None:
    """Write s."""
    _write(_require_str(s), file)


def put_endl(s: Optional[str], file: Target = None) -> None:
    """Write s followed by a newline; nothing at all when s is None."""
    if s is None:
        return
    _write(_require_str(s) + "\n", file)


def put_nbr(n: int, file: Target = None) -> None:
    """Write the decimal representation of n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write(str(n), file)