# ftkit

A small toolkit of character, string, byte-buffer, list and line-reading helpers.
They follow the behaviour of the classic C string and memory routines, but take and
return ordinary Python objects: positions come back as indices, "not found" as
`None`, and errors are raised as exceptions.

## Installation

```
pip install ftkit
```

To run the test suite as well:

```
pip install "ftkit[test]"
pytest
```

## Modules

- `ftkit.chars`: ASCII character tests and case mapping. Each function takes a
  one-character string or an integer code: `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `is_space` return `bool`; `to_upper` and `to_lower`
  return a value of the same kind as their argument.
- `ftkit.memory`: operations on mutable byte buffers such as `bytearray`:
  `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr` (index or `None`),
  `memcmp`, and the zero-terminated copies `strlcpy` and `strlcat`, which return
  the length of the string they tried to build. Lengths past the end of a buffer
  raise `ValueError`.
- `ftkit.strings`: `parse_long` (raises `NumericError`, a `ValueError`, on stray
  characters or values outside a signed 64-bit range), `itoa`, `split` (drops
  empty pieces), `strchr`, `strrchr`, `strjoin`, `strmapi`, `striteri`,
  `strncmp`, `strnstr`, `strtrim`, `substr`.
- `ftkit.output`: writing to file descriptors with `os.write`: `put_char_fd`,
  `put_str_fd`, `put_endl_fd`, `put_nbr_fd`. Each returns the number of bytes
  written; a negative descriptor writes nothing and returns 0.
- `ftkit.linked`: `LinkedList`, a singly linked list with `push_front`, `append`,
  `last`, `remove_first`, `clear`, `for_each` and `map`, plus `len()` and
  iteration. Removing methods take an optional `release` callable that is run on
  each removed item.
- `ftkit.lines`: `LineReader`, which reads a file descriptor in chunks of a fixed
  size (42 bytes by default) and returns one line of bytes at a time, newline
  included, or `None` at the end of input. It is also iterable.
- `ftkit.chain`: data types for the tokens of a shell command line: the
  `TokenType` enum, the `Token` and `Arg` dataclasses, `make_arg`, and `Chain`,
  an ordered sequence of tokens that can be used as a queue or a stack
  (`append`, `push_front`, `pop_front`, `last`, `move_first_to`).

## Examples

```python
from ftkit.strings import split, parse_long, NumericError
from ftkit.linked import LinkedList

split("  ls -la  /tmp ", " ")      # ['ls', '-la', '/tmp']
parse_long("  -42")                 # -42

try:
    parse_long("12abc")
except NumericError:
    ...

items = LinkedList(["a", "b"])
items.push_front("z")
list(items)                         # ['z', 'a', 'b']
```

Reading lines from a file descriptor:

```python
import os
from ftkit.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line.decode(), end="")
os.close(fd)
```

## What it does not do

`ftkit.chain` only holds tokens. The package has no lexer, parser, expander or
executor, and provides no interactive shell or command to run.