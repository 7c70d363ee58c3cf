# pipex

`pipex` is a small Python library. It finds commands along `PATH`. It also
provides helpers for text, numbers, byte buffers, linked lists, formatted
output and line-by-line reading.

## Installation

```sh
pip install .
```

## Command lookup: `pipex.resolve`

```python
import os
from pipex.resolve import path_from_env, command_head, find_executable

path = path_from_env(os.environ)       # value of PATH, or None
command_head("grep -i error")          # "grep"
find_executable("grep -i error", path) # e.g. "/usr/bin/grep", or None
```

- `path_from_env(env)` accepts either a mapping or a sequence of `NAME=value`
  strings. It returns `None` when `PATH` is not set.
- `command_head(cmd)` returns everything before the first space.
- `find_executable(cmd, path)` splits `path` on `:` and skips empty entries.
  It returns the first `dir/name` that exists, or `None` if there is none.

## Utilities

- `pipex.chars`:
  - ASCII tests `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`
  - case mapping with `to_upper` and `to_lower`
  - `absolute` and `absolute_long`
- `pipex.numbers`:
  - `atoi` and `atol`, which skip leading spaces, accept one sign, read the
    digits and wrap to 32 or 64 bits
  - `itoa` and `uint_to_str`
  - `ulong_to_hex`, which gives lower-case hex without a prefix
  - out-of-range values raise `OverflowError`
- `pipex.strings`:
  - C-style search, which returns an index or `None`: `strchr`, `strrchr`,
    `strnstr`
  - `strncmp`
  - `strlcpy` and `strlcat`, which return the resulting text and the length
    the full copy would have had
  - `begins_with`, `ends_with`, `strrev`, `strlen`
- `pipex.memory`:
  - operations on `bytearray` buffers: `memset`, `bzero`, `calloc`, `memcpy`,
    `memmove`, `memchr`, `memcmp`
  - a span that runs past the end of the buffer raises `IndexError`
- `pipex.transform`: `strdup`, `substr`, `strjoin`, `join_table`, `strtrim`,
  `strmapi`, `striteri`
- `pipex.split`:
  - `split_words`, which splits on one character and drops empty words
  - `split_str`, which splits on a string and drops empty pieces
  - `count_words` and `count_words_str`
  - `display_table`, which prints one item per line
- `pipex.lists`:
  - `LinkedList`, a singly linked list made of `Node` objects
  - methods `push_front`, `push_back`, `last`, `pop_front`, `for_each`, `map`
    and `clear`, with `len()` and iteration
- `pipex.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`. Each writes to
  a text stream, which is stdout by default.
- `pipex.printf`:
  - `format_string` and `printf`, supporting `%c %s %p %d %i %u %x %X %%`
  - `%s` with `None`, and `%p` with 0 or `None`, print `(null)`
  - `%U` is recognised but raises `ValueError`
  - missing arguments raise `TypeError`
- `pipex.lines`:
  - `LineReader(stream, buffer_size=42)` reads any object with `read(size)`,
    text or bytes. It yields lines with their newline.
  - `get_next_line(stream)` keeps per-stream state between calls. It returns
    `None` at the end of the stream.

```python
import io
from pipex.lines import LineReader
from pipex.printf import format_string

list(LineReader(io.StringIO("a\nb\nc")))   # ["a\n", "b\n", "c"]
format_string("%d is %x in hex", 255, 255)  # "255 is ff in hex"
```

## What it does not do

This package installs no command-line program. It does not run commands: it
does not start processes, connect them with a pipe, or redirect files. It only
locates executables and provides the helpers listed above.

## Running the tests

```sh
pip install ".[test]"
pytest
```