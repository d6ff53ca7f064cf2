"""Formatted output with the conversions %c, %s, %p, %d, %i, %u, %x, %X and %%.

Integer conversions follow 32-bit C semantics: %d and %i show the value as a
signed 32-bit integer, %u, %x and %X as an unsigned one. Pointers are shown
as 64-bit addresses. An unknown conversion is written back as the percent
sign followed by the character.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Optional, Union

from ftkit.output import Target, put_str

_BYTE_MASK = 0xFF
_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return n


def _as_int32(n: int) -> int:
    value = _require_int(n) & _UINT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def _as_uint32(n: int) -> int:
    return _require_int(n) & _UINT32_MASK


def format_char(c: Union[int, str]) -> str:
    """One character; an integer is reduced to its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c) & _BYTE_MASK)


def format_str(s: Optional[str]) -> str:
    """The string itself, or "(null)" for None."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s


def format_ptr(address: Any) -> str:
    """An address as 0x followed by lower-case hex, or "(nil)" for a null one.

    An integer is taken as the address itself; any other object other than
    None is represented by its identity.
    """
    if address is None:
        return "(nil)"
    if isinstance(address, int) and not isinstance(address, bool):
        value = address & _UINT64_MASK
    else:
        value = id(address) & _UINT64_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def format_nbr(n: int) -> str:
    """Decimal form of n taken as a signed 32-bit integer."""
    return str(_as_int32(n))


def format_unsigned(n: int) -> str:
    """Decimal form of n taken as an unsigned 32-bit integer."""
    return str(_as_uint32(n))


def format_hex(n: int, spec: str) -> str:
    """Hex form of n as an unsigned 32-bit integer.

    Lower-case digits when spec is "x", upper-case otherwise.
    """
    return format(_as_uint32(n), "x" if spec == "x" else "X")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_ptr,
    "d": format_nbr,
    "i": format_nbr,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, "x"),
    "X": lambda n: format_hex(n, "X"),
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Render fmt with args and return the resulting text.

    Extra arguments are ignored; too few raise TypeError, and a format that
    ends in a lone percent sign raises ValueError.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    pieces = []
    chars = iter(fmt)
    arg_iter = iter(args)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(arg_iter, spec)))
        else:
            pieces.append("%" + spec)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Target = None) -> int:
    """Write the rendered text to file (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    put_str(text, file)
    return len(text)