"""AST node definitions for the small scripting language.

This module defines one frozen dataclass per AST variant. The `NodeType`
enum identifies node kinds; its values are the human-readable names shown
by the display adapter and the JSON dump.

Conventions:
- All AST node dataclasses inherit from `ASTNode`. The node kind lives in
    the class-level `type` attribute, so it is not a dataclass field and is
    never mixed up with operator text or other payload.
- Nodes are immutable once built. Child sequences are tuples, so a finished
    tree can be compared, hashed and shared with callers safely.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union


class NodeType(Enum):
    NUMBER_LITERAL = "NumberLiteral"
    STRING_LITERAL = "StringLiteral"
    VARIABLE = "Variable"
    ASSIGNMENT = "Assignment"
    BINARY_EXPRESSION = "BinaryExpression"
    PARENTHESIZED = "Parenthesized"
    CALL = "Call"
    PRINT = "Print"
    IF = "If"
    WHILE = "While"
    PROGRAM = "Program"

    def __str__(self) -> str:
        return self.value


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: ClassVar[NodeType]


# Expression Nodes
@dataclass(frozen=True)
class NumberLiteralNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.NUMBER_LITERAL
    value: str


@dataclass(frozen=True)
class StringLiteralNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.STRING_LITERAL
    value: str


@dataclass(frozen=True)
class VariableNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.VARIABLE
    name: str


@dataclass(frozen=True)
class AssignmentNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.ASSIGNMENT
    name: str
    # "=" or ":", whichever appeared in the source
    operator: str
    value: ASTNode


@dataclass(frozen=True)
class BinaryExpressionNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.BINARY_EXPRESSION
    operator: str
    left: ASTNode
    right: ASTNode


@dataclass(frozen=True)
class ParenthesizedNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.PARENTHESIZED
    inner: ASTNode


@dataclass(frozen=True)
class CallNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.CALL
    name: str
    arguments: Tuple[ASTNode, ...] = ()


# Statement Nodes
@dataclass(frozen=True)
class PrintNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.PRINT
    argument: ASTNode


@dataclass(frozen=True)
class IfNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.IF
    condition: ASTNode
    consequent: Tuple[ASTNode, ...] = ()
    # A tuple for `else { ... }`, a single IfNode for `else if`, None otherwise
    alternate: Optional[Union[Tuple[ASTNode, ...], IfNode]] = None


@dataclass(frozen=True)
class WhileNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.WHILE
    condition: ASTNode
    body: Tuple[ASTNode, ...] = ()


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.PROGRAM
    body: Tuple[ASTNode, ...] = ()
