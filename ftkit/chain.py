"""Tokens of a command line and the ordered chain that holds them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

WHITESPACE = "\t\n\v\f\r "
SYMBOLS = "<>|()\"'"
SYNTAX_ERROR = "Minishell: syntax error near unexpected token"


class TokenType(IntEnum):
    """Kinds of token and tree node."""

    L_PAREN = 1001
    R_PAREN = 1002
    OR = 1003
    PIPE = 1004
    AND = 1005
    REDIR_APPEND = 1006
    REDIR_OUT = 1007
    HEREDOC = 1008
    REDIR_IN = 1009
    WORD = 1010
    DOLLAR = 1011
    QUOTES = 1013
    REMOVE = 1015
    SUB = 1026
    CMD = 1027


@dataclass
class Arg:
    """One argument attached to a command token."""

    content: str
    type: Optional[TokenType] = None


@dataclass
class Token:
    """A token of a command line, with the details later stages attach to it."""

    content: str
    type: Optional[TokenType] = None
    argv: list[Arg] = field(default_factory=list)
    adj_f: Optional["Token"] = None
    file: Optional[str] = None
    delim: Optional[str] = None
    delim_in_quotes: bool = False
    lvl: int = -1
    empty: bool = False
    removable: bool = False
    error: bool = False
    ambiguous: bool = False
    fd: Optional[int] = None


def make_arg(token: Token) -> Arg:
    """Return a new untyped argument carrying the token's text."""
    return Arg(content=token.content)


class Chain:
    """An ordered sequence of tokens usable both as a queue and as a stack."""

    def __init__(self, nodes: Iterable[Token] = ()) -> None:
        self._nodes: deque[Token] = deque(nodes)

    def append(self, node: Token) -> None:
        """Add ``node`` at the end."""
        self._nodes.append(node)

    def push_front(self, node: Token) -> None:
        """Add ``node`` at the front."""
        self._nodes.appendleft(node)

    def pop_front(self) -> Token:
        """Remove and return the first token; raise IndexError when empty."""
        if not self._nodes:
            raise IndexError("pop_front() on an empty chain")
        return self._nodes.popleft()

    def last(self) -> Token:
        """Return the last token; raise IndexError when empty."""
        if not self._nodes:
            raise IndexError("last() on an empty chain")
        return self._nodes[-1]

    def move_first_to(self, other: "Chain", as_stack: bool = False) -> Optional[Token]:
        """Move the first token to ``other`` and return it.

        With ``as_stack`` the token goes to the front of ``other``,
        otherwise to its end. An empty chain moves nothing and gives None.
        """
        if not self._nodes:
            return None
        node = self._nodes.popleft()
        if as_stack:
            other.push_front(node)
        else:
            other.append(node)
        return node

    def __iter__(self) -> Iterator[Token]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Chain({[node.content for node in self._nodes]!r})"