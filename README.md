# ftlib

A compact collection of helpers that reproduce the edge-case behaviour of
the classic string and memory routines: character classes, number
conversion, byte-buffer operations, string utilities, a minimal `printf`, a
buffered line reader and a singly linked list.

Everything works on plain Python values (`str`, `bytes`, `bytearray`, text
and binary streams). The package has no dependencies outside the standard
library. The `test` extra lists `pytest` and `hypothesis` for running the
test suite.

## Modules

| Module              | Contents |
|---------------------|----------|
| `ftlib.chars`       | `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `isspace`, `toupper`, `tolower` |
| `ftlib.convert`     | `atoi`, `itoa` |
| `ftlib.output`      | `putchar`, `putstr`, `putendl`, `putnbr` |
| `ftlib.memory`      | `memset`, `bzero`, `calloc`, `memcpy`, `memccpy`, `memmove`, `memchr`, `memcmp`, `cstrlen`, `strlcpy`, `strlcat` |
| `ftlib.strings`     | `strchr`, `strrchr`, `strnstr`, `strncmp`, `strndup`, `substr`, `strjoin`, `strtrim`, `split`, `word_count`, `strmapi`, `striteri` |
| `ftlib.printf`      | `sprintf`, `printf`, `format_hex`, `format_pointer`, `format_unsigned` |
| `ftlib.linereader`  | `LineReader` |
| `ftlib.linkedlist`  | `Node`, `LinkedList` |

## Behaviour worth knowing

- `ftlib.chars` functions accept a one-character string or an integer code.
  `isspace` also counts the NUL character. `toupper` and `tolower` return the
  same kind of value they were given.
- `atoi` does not skip leading whitespace and stops at the first non-digit.
  A magnitude beyond the signed 64-bit range gives `-1` for a positive number
  and `0` for a negative one; other results wrap into the signed 32-bit range.
- `ftlib.memory` writes into `bytearray` buffers and raises `ValueError` when
  a length or offset would run past the end of a buffer. `memchr` and
  `memccpy` return an index or `None`. `memmove` copies between two regions
  of one buffer, given by offsets.
- The search functions in `ftlib.strings` treat a NUL character as the end of
  the string and return an index or `None`. `split` drops empty pieces.
  `striteri` changes a mutable sequence of characters in place, replacing a
  character wherever the callback returns one.
- `sprintf` and `printf` understand `%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`,
  `%X` and `%%`. Numbers wrap to 32 bits (64 bits for `%p`); `%s` with `None`
  prints `(null)`; `%` followed by any other character prints that character;
  a lone `%` at the end is dropped. `printf` returns the number of characters
  written and writes to standard output unless `file` is given.
- `ftlib.output` functions write to the stream given, or to standard output.
  `putstr` writes nothing for `None` or an empty string.

## Examples

```python
from ftlib.convert import atoi, itoa
from ftlib.strings import split, strtrim
from ftlib.printf import sprintf

atoi("-42abc")                 # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
sprintf("%s=%x (%d%%)", "v", 255, 50)   # "v=ff (50%)"
```

Reading lines:

```python
import io
from ftlib.linereader import LineReader

reader = LineReader(io.StringIO("first\nsecond"), buffer_size=4)
for line in reader:
    print(repr(line))   # 'first\n', then 'second'
```

`next_line()` returns `None` once the stream is exhausted, and iteration
stops at the same point. Binary streams give `bytes` lines. A `buffer_size`
that is not positive raises `ValueError`; the default is 10.

A linked list:

```python
from ftlib.linkedlist import LinkedList

items = LinkedList([1, 2])
items.add_front(0)
items.add_back(3)
list(items)          # [0, 1, 2, 3]
len(items)           # 4
items.last().content # 3
items.clear(print)   # calls print on each item, then empties the list
```

Output helpers:

```python
import sys
from ftlib.output import putnbr, putendl

putnbr(-123, sys.stdout)
putendl("", sys.stdout)   # writes just the newline
```

## What it does not do

`ftlib` is a library only: it has no command-line program. `printf` supports
no flags, field widths or precision, only the conversions listed above.