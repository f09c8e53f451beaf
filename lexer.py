"""
Lexer for the small scripting language.

Overview:
- This module turns a source string into a list of `Token` objects defined
    in `tokens.py`. Every character of the input ends up in exactly one
    token, so joining the lexemes gives back the original text.
- Scanning walks an ordered table of (kind, pattern) rules, `TOKEN_RULES`.
    At each offset the first rule whose pattern matches wins; this is
    first-match, not longest-match, so the table order decides precedence.
- Spaces and newlines are emitted as `SPACE` / `NEWLINE` tokens instead of
    being skipped. The parser ignores them where it needs to.
- Characters no rule accepts become single-character `UNRECOGNIZED` tokens.
    The lexer never fails on bad input; the parser rejects those tokens.

Examples:
    Input:  "x = 5"
    Tokens: [IDENTIFIER('x'), SPACE(' '), ASSIGN('='), SPACE(' '), NUMBER('5')]

Ordering notes:
- Two-character logical operators (`==`, `!=`, `<=`, `>=`, `&&`, `||`) come
    before `ASSIGN` so `==` is not lexed as `=` `=`.
- Keywords come before `IDENTIFIER` and end with a word boundary, so `iffy`
    is an identifier while `if` is a keyword.
"""

from __future__ import annotations
import re
from typing import List, Optional, Pattern, Tuple
from tokens import Token, TokenKind
from errors import LexerError


TOKEN_RULES: List[Tuple[TokenKind, Pattern[str]]] = [
    (TokenKind.NEWLINE, re.compile(r"\r?\n")),
    (TokenKind.SPACE, re.compile(r"[ \t]+")),
    (TokenKind.NUMBER, re.compile(r"\d+(\.\d+)?")),
    (TokenKind.LOGICAL_OP, re.compile(r"==|!=|<=|>=|&&|\|\||<|>")),
    (TokenKind.ASSIGN, re.compile(r"[=:]")),
    (TokenKind.STRING, re.compile(r"(['\"]).*?\1")),
    # Keywords
    (TokenKind.KEYWORD_FUNCTION, re.compile(r"function\b")),
    (TokenKind.KEYWORD_IF, re.compile(r"if\b")),
    (TokenKind.KEYWORD_ELSE, re.compile(r"else\b")),
    (TokenKind.KEYWORD_RETURN, re.compile(r"return\b")),
    (TokenKind.KEYWORD_WHILE, re.compile(r"while\b")),
    (TokenKind.KEYWORD_FOR, re.compile(r"for\b")),
    (TokenKind.KEYWORD_PRINT, re.compile(r"print\b|console\.log\b")),
    # Symbols
    (TokenKind.PAREN_OPEN, re.compile(r"\(")),
    (TokenKind.PAREN_CLOSE, re.compile(r"\)")),
    (TokenKind.BRACE_OPEN, re.compile(r"\{")),
    (TokenKind.BRACE_CLOSE, re.compile(r"\}")),
    (TokenKind.COMMA, re.compile(r",")),
    (TokenKind.SEMICOLON, re.compile(r";")),
    (TokenKind.OP, re.compile(r"[+\-*/%]")),
    (TokenKind.IDENTIFIER, re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")),
    (TokenKind.DOT, re.compile(r"\.")),
    # Must stay last: guarantees progress on any input.
    (TokenKind.UNRECOGNIZED, re.compile(r".", re.DOTALL)),
]


class Lexer:
    def __init__(self, text: str, rules: Optional[List[Tuple[TokenKind, Pattern[str]]]] = None):
        self.text = text
        self.pos = 0
        self.rules = TOKEN_RULES if rules is None else rules

    def error(self) -> LexerError:
        return LexerError(self.pos, self.text[self.pos])

    def next_token(self) -> Token:
        """Match one token at the current offset and advance past it."""
        for kind, pattern in self.rules:
            match = pattern.match(self.text, self.pos)
            # Empty matches would never advance the offset.
            if match and match.end() > self.pos:
                self.pos = match.end()
                return Token(kind, match.group(0))

        raise self.error()

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens = []
        while self.pos < len(self.text):
            tokens.append(self.next_token())
        return tokens


def tokenize(source: str) -> List[Token]:
    """Tokenize `source` with a fresh lexer."""
    return Lexer(source).tokenize()
