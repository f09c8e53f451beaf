"""Errors raised by the lexer and parser.

All errors derive from the builtin `SyntaxError` so callers can catch a
single exception type for any front-end failure. Each parse error keeps
the structured details (token kinds, cursor position) as attributes next
to the human-readable message.
"""

from __future__ import annotations
from typing import Optional, Tuple
from tokens import TokenKind

END_OF_INPUT = "end of input"


def _kind_name(kind: Optional[TokenKind]) -> str:
    return END_OF_INPUT if kind is None else str(kind)


class LexerError(SyntaxError):
    """No lexical rule matched at `offset`."""

    def __init__(self, offset: int, char: str):
        super().__init__(f"Lexical error at offset {offset}: no rule matches {char!r}")
        self.offset = offset
        self.char = char


class ParseError(SyntaxError):
    """Base class for grammar violations. Parsing stops at the first one."""

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class UnexpectedEndOfInput(ParseError):
    def __init__(self, position: int):
        super().__init__(f"Unexpected end of input at position {position}", position)


class ExpectedToken(ParseError):
    """A required token kind was missing.

    `expected` lists every kind that would have been accepted; `found` is the
    kind actually present, or None when the token sequence was exhausted.
    """

    def __init__(
        self,
        expected: Tuple[TokenKind, ...],
        found: Optional[TokenKind],
        position: int,
    ):
        wanted = " or ".join(str(k) for k in expected)
        super().__init__(
            f"Expected token kind {wanted}, found {_kind_name(found)} "
            f"at position {position}",
            position,
        )
        self.expected = expected
        self.found = found

    @property
    def expected_kind(self) -> TokenKind:
        return self.expected[0]


class UnknownConstruct(ParseError):
    """No grammar rule applies to `token_kind` where a term is required."""

    def __init__(self, position: int, token_kind: TokenKind, lexeme: str = ""):
        super().__init__(
            f"Unknown token at position {position}: {token_kind} {lexeme!r}",
            position,
        )
        self.token_kind = token_kind
        self.lexeme = lexeme
