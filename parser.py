"""
Parser for the small scripting language.

Overview and approach:
- This is a hand-written recursive-descent parser with one token of
    lookahead. It owns a single cursor (`self.pos`) into the token list; a
    new `Parser` is built for each parse, so no state survives between calls.
- Layout tokens (`SPACE`, `NEWLINE`) are kept by the lexer. The parser skips
    them in `skip_layout()` before every point where it needs the next
    significant token.
- Parsing is fail-fast: the first grammar violation raises a `ParseError`
    (see `errors.py`) and no partial tree is returned.

Key points:
- `parse_term()` dispatches on the kind of the next significant token:
    literals, `print`, parenthesized expressions, `if`, `while`, and
    identifiers (variable, assignment or call).
- `parse_expression()` folds a chain of `OP` / `LOGICAL_OP` operators into
    left-associative `BinaryExpressionNode`s. There is a single precedence
    level, so `1+2*3` groups as `(1+2)*3`.
- `print(...)` takes a full expression, while `print x` takes one term only.
    In `print x y` the `y` is a separate top-level term; in `print x+1` the
    stray `+` is rejected as an `UnknownConstruct`.
- Assignment values and call arguments are single terms.
- A leading `-` is not a unary operator: `-1` is `OP` then `NUMBER`, and the
    `OP` in term position is an `UnknownConstruct`.
- `function`, `return` and `for` are lexed as keywords but have no grammar
    rule; meeting one where a term is expected is an `UnknownConstruct`.

Examples:
    - `x = 5`                     -> Assignment(x, "=", NumberLiteral(5))
    - `if (a) { } else if (b) { }` -> If(alternate=If(...))
    - `while (x) { }`             -> While(condition=Variable(x), body=())
"""

from __future__ import annotations
from typing import Callable, List, Optional, Sequence, Tuple
from tokens import Token, TokenKind
from ast_nodes import *
from errors import ExpectedToken, UnexpectedEndOfInput, UnknownConstruct

TraceHook = Callable[[int, Token], None]


class Parser:
    def __init__(self, tokens: Sequence[Token], trace: Optional[TraceHook] = None):
        self.tokens = tokens
        self.pos = 0
        # Called with (cursor, token) at every term dispatch; off by default.
        self.trace = trace

    def skip_layout(self) -> None:
        """Advance past SPACE / NEWLINE tokens."""
        while self.pos < len(self.tokens) and self.tokens[self.pos].is_layout:
            self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Optional[Token]:
        """Return the next significant token without consuming it, or None at end."""
        self.skip_layout()
        if self.at_end():
            return None
        return self.tokens[self.pos]

    def check(self, kind: TokenKind) -> bool:
        """True if the next significant token is of the given kind."""
        token = self.peek()
        return token is not None and token.kind == kind

    def advance(self) -> Token:
        """Consume and return the next significant token."""
        token = self.peek()
        if token is None:
            raise UnexpectedEndOfInput(self.pos)
        self.pos += 1
        return token

    def expect(self, *kinds: TokenKind) -> Token:
        """Expect and consume a token of one of the given kinds."""
        token = self.peek()
        if token is None:
            raise ExpectedToken(kinds, None, self.pos)
        if token.kind not in kinds:
            raise ExpectedToken(kinds, token.kind, self.pos)
        self.pos += 1
        return token

    def parse_term(self) -> ASTNode:
        """Parse one primary term or statement construct."""
        token = self.peek()
        if token is None:
            raise UnexpectedEndOfInput(self.pos)

        if self.trace is not None:
            self.trace(self.pos, token)

        match token.kind:
            case TokenKind.STRING:
                self.advance()
                # Strip the matching quotes; there are no escape sequences.
                return StringLiteralNode(value=token.lexeme[1:-1])

            case TokenKind.NUMBER:
                self.advance()
                return NumberLiteralNode(value=token.lexeme)

            case TokenKind.KEYWORD_PRINT:
                return self.parse_print()

            case TokenKind.PAREN_OPEN:
                self.advance()  # Consume '('
                inner = self.parse_expression()
                self.expect(TokenKind.PAREN_CLOSE)
                return ParenthesizedNode(inner=inner)

            case TokenKind.KEYWORD_IF:
                return self.parse_if()

            case TokenKind.KEYWORD_WHILE:
                return self.parse_while()

            case TokenKind.IDENTIFIER:
                return self.parse_identifier()

            case _:
                raise UnknownConstruct(self.pos, token.kind, token.lexeme)

    def parse_expression(self) -> ASTNode:
        """Parse a left-associative chain of binary operators over terms."""
        left = self.parse_term()

        while self.check(TokenKind.OP) or self.check(TokenKind.LOGICAL_OP):
            operator = self.advance().lexeme
            right = self.parse_term()
            left = BinaryExpressionNode(operator=operator, left=left, right=right)

        return left

    def parse_print(self) -> PrintNode:
        """Parse `print(expr)` or `print term`."""
        self.expect(TokenKind.KEYWORD_PRINT)

        if self.check(TokenKind.PAREN_OPEN):
            self.advance()
            argument = self.parse_expression()
            self.expect(TokenKind.PAREN_CLOSE)
        else:
            argument = self.parse_term()

        return PrintNode(argument=argument)

    def parse_block(self) -> Tuple[ASTNode, ...]:
        """Parse `{ term* }` and return the terms in source order."""
        self.expect(TokenKind.BRACE_OPEN)
        terms: List[ASTNode] = []

        while not self.check(TokenKind.BRACE_CLOSE):
            if self.peek() is None:
                raise ExpectedToken((TokenKind.BRACE_CLOSE,), None, self.pos)
            terms.append(self.parse_term())

        self.expect(TokenKind.BRACE_CLOSE)
        return tuple(terms)

    def parse_condition(self) -> ASTNode:
        """Parse `( expr )` after `if` / `while`."""
        self.expect(TokenKind.PAREN_OPEN)
        condition = self.parse_expression()
        self.expect(TokenKind.PAREN_CLOSE)
        return condition

    def parse_if(self) -> IfNode:
        """Parse if statement: if (expr) { ... } [else if ... | else { ... }]"""
        self.expect(TokenKind.KEYWORD_IF)
        condition = self.parse_condition()
        consequent = self.parse_block()

        alternate = None
        if self.check(TokenKind.KEYWORD_ELSE):
            self.advance()
            if self.check(TokenKind.KEYWORD_IF):
                # else-if chains hold the nested If itself, not a sequence
                alternate = self.parse_if()
            elif self.check(TokenKind.BRACE_OPEN):
                alternate = self.parse_block()
            else:
                self.expect(TokenKind.BRACE_OPEN, TokenKind.KEYWORD_IF)

        return IfNode(condition=condition, consequent=consequent, alternate=alternate)

    def parse_while(self) -> WhileNode:
        """Parse while statement: while (expr) { ... }"""
        self.expect(TokenKind.KEYWORD_WHILE)
        condition = self.parse_condition()
        body = self.parse_block()
        return WhileNode(condition=condition, body=body)

    def parse_identifier(self) -> ASTNode:
        """Parse a variable reference, an assignment or a call."""
        name = self.expect(TokenKind.IDENTIFIER).lexeme

        if self.check(TokenKind.ASSIGN):
            operator = self.advance().lexeme
            value = self.parse_term()
            return AssignmentNode(name=name, operator=operator, value=value)

        if self.check(TokenKind.PAREN_OPEN):
            self.advance()
            args: List[ASTNode] = []
            while not self.check(TokenKind.PAREN_CLOSE):
                if self.peek() is None:
                    raise ExpectedToken((TokenKind.PAREN_CLOSE,), None, self.pos)
                args.append(self.parse_term())
                if self.check(TokenKind.COMMA):
                    self.advance()
            self.expect(TokenKind.PAREN_CLOSE)
            return CallNode(name=name, arguments=tuple(args))

        return VariableNode(name=name)

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of terms)."""
        body: List[ASTNode] = []

        while self.peek() is not None:
            body.append(self.parse_term())

        return ProgramNode(body=tuple(body))

    def parse(self) -> ProgramNode:
        return self.parse_program()


def parse(tokens: Sequence[Token], trace: Optional[TraceHook] = None) -> ProgramNode:
    """Parse `tokens` with a fresh parser and return the Program node."""
    return Parser(tokens, trace=trace).parse()
