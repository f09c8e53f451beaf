"""Token definitions for the lexer.

This module defines the `TokenKind` enum for all token kinds recognized by
the lexer and a small immutable `Token` dataclass holding the kind and the
exact source text (lexeme) it was matched from. Whitespace and newlines are
ordinary tokens here; the parser decides which tokens are significant.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass


class TokenKind(Enum):
    # Layout
    NEWLINE = auto()
    SPACE = auto()

    # Literals
    NUMBER = auto()
    STRING = auto()

    # Assignment (`=` or `:`)
    ASSIGN = auto()

    # Keywords
    KEYWORD_IF = auto()
    KEYWORD_ELSE = auto()
    KEYWORD_WHILE = auto()
    KEYWORD_PRINT = auto()
    KEYWORD_FUNCTION = auto()
    KEYWORD_RETURN = auto()
    KEYWORD_FOR = auto()

    # Parentheses and braces
    PAREN_OPEN = auto()
    PAREN_CLOSE = auto()
    BRACE_OPEN = auto()
    BRACE_CLOSE = auto()

    # Punctuation
    COMMA = auto()
    SEMICOLON = auto()
    DOT = auto()

    # Operators
    OP = auto()
    LOGICAL_OP = auto()

    IDENTIFIER = auto()

    # Catch-all for any character no other rule accepts
    UNRECOGNIZED = auto()

    def __str__(self) -> str:
        return self.name


# Tokens the parser skips before looking for the next significant token.
LAYOUT_KINDS = frozenset({TokenKind.SPACE, TokenKind.NEWLINE})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r})"

    def __str__(self) -> str:
        return f'<"{self.lexeme}", "{self.kind}">'

    @property
    def is_layout(self) -> bool:
        return self.kind in LAYOUT_KINDS
