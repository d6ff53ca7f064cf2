# ftkit

Small, dependency-free helpers for characters, byte buffers, strings,
singly linked lists, printf-style formatting and reading input line by line.

## Modules

- `ftkit.chars`: ASCII classification and case conversion. Each function
  takes an integer code or a one-character string: `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print` return a bool; `to_upper` and
  `to_lower` return a value of the same kind as their argument.
- `ftkit.memory`: byte-buffer helpers on `bytearray` and bytes-like objects:
  `mem_set`, `bzero`, `mem_copy`, `mem_move` (overlap-safe copy inside one
  buffer), `mem_chr` (index or `None`), `mem_cmp` (difference of the first
  differing bytes) and `calloc` (a zero-filled `bytearray`). Counts past the
  end of a buffer raise `ValueError`.
- `ftkit.strings`: `atoi`, `itoa`, `str_len`, `str_dup`, `str_chr`,
  `str_rchr`, `str_ncmp`, `str_nstr`, `str_lcpy`, `str_lcat`, `substr`,
  `str_join`, `str_trim`, `split`, `str_mapi` and `str_iteri`. Searches
  return an index or `None`; `str_lcpy` and `str_lcat` return the resulting
  text together with the length the untruncated result would have had.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream, an integer file descriptor (UTF-8 encoded), or standard
  output when no target is given.
- `ftkit.linked`: `Node`, `LinkedList` (`push_front`, `push_back`, `last`,
  `len()`, iteration, `for_each`, `clear`, `map`) and `delete_node`.
- `ftkit.printf`: `sprintf` and `printf` with the conversions
  `%c %s %p %d %i %u %x %X %%`, plus the per-conversion helpers
  `format_char`, `format_str`, `format_ptr`, `format_nbr`,
  `format_unsigned` and `format_hex`. Integers follow 32-bit signed or
  unsigned wrap-around; `None` prints as `(null)` for `%s` and `(nil)` for
  `%p`; an unknown conversion is written back unchanged.
- `ftkit.lines`: `LineReader` reads lines (newline kept) from a file
  descriptor or binary stream in chunks of `buffer_size` bytes;
  `get_next_line(fd)` keeps separate state for each descriptor from 0 to
  1023.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.strings import split, str_trim, atoi, str_lcpy
from ftkit.printf import sprintf
from ftkit.linked import LinkedList

split("  hello  world ", " ")        # ['hello', 'world']
str_trim("xxhixx", "x")              # 'hi'
atoi("   -42abc")                    # -42
str_lcpy("hello", 3)                 # ('he', 5)

sprintf("%s is %d (%x)", "answer", 42, 42)   # 'answer is 42 (2a)'
sprintf("%d", 2**31)                         # '-2147483648'

items = LinkedList([1, 2, 3])
doubled = items.map(lambda v: v * 2)
list(doubled)                        # [2, 4, 6]
```

Reading lines from a file descriptor:

```python
import os
from ftkit.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line, end="")
os.close(fd)
```

## Command line

Print a file line by line (the path defaults to `test.txt`, the read size
to 1 byte):

```
ftkit-lines notes.txt --buffer-size 64
```

## What it does not do

`sprintf` and `printf` understand no flags, field widths, precisions or
length modifiers; only the single-character conversions listed above.

## Running the tests

```
pip install .[test]
pytest
```