"""String helpers: conversion, searching, bounded copying and splitting.

Single characters may be given either as a one-character string or as an
integer code; an integer is reduced to its low byte.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_BYTE_MASK = 0xFF
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _char(c: CharLike) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return chr(c & _BYTE_MASK)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if none."""
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < end and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Decimal representation of n."""
    return str(int(n))


def str_len(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def str_dup(s: str) -> str:
    """A copy of s."""
    return str(s)


def str_chr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first c in s; the NUL character matches the end of s."""
    ch = _char(c)
    if ch == "\0":
        found = s.find(ch)
        return len(s) if found < 0 else found
    found = s.find(ch)
    return None if found < 0 else found


def str_rchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last c in s; the NUL character matches the end of s."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    found = s.rfind(ch)
    return None if found < 0 else found


def str_ncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the difference of the first mismatch."""
    _non_negative("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def str_nstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in the first length characters of big, or None."""
    _non_negative("length", length)
    if not little:
        return 0
    found = big[:length].find(little)
    return None if found < 0 else found


def str_lcpy(src: str, size: int) -> Tuple[str, int]:
    """The part of src that fits a buffer of size slots, and len(src).

    One slot is reserved for the terminator, so at most size - 1 characters
    are kept.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def str_lcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size slots.

    Returns the resulting text and the length the full concatenation would
    have had; when size does not exceed len(dst), dst is left unchanged and
    the length reported is size + len(src).
    """
    _non_negative("size", size)
    dst_len = min(len(dst), size)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start; "" past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def str_join(s1: str, s2: str) -> str:
    """Concatenation of s1 and s2."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def str_trim(s: str, charset: str) -> str:
    """s without leading and trailing characters found in charset."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be strings")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """Non-empty fields of s separated by runs of sep."""
    if not isinstance(s, str):
        raise TypeError("s must be a string")
    return [word for word in s.split(_char(sep)) if word]


def str_mapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of f(index, char) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def str_iteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call f(index, char) on each item; a non-None result replaces it in place."""
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement