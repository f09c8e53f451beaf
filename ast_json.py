"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node, and `ast_to_json_text`
which dumps it with indentation for display. Each dict carries the node
tag under `node_type` followed by the node's fields.
"""

import json
from typing import Any, Dict, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    # literals
    if t == NodeType.NUMBER_LITERAL and isinstance(node, NumberLiteralNode):
        return {"node_type": str(t), "value": node.value}
    if t == NodeType.STRING_LITERAL and isinstance(node, StringLiteralNode):
        return {"node_type": str(t), "value": node.value}
    if t == NodeType.VARIABLE and isinstance(node, VariableNode):
        return {"node_type": str(t), "name": node.name}
    # expressions
    if t == NodeType.ASSIGNMENT and isinstance(node, AssignmentNode):
        return {
            "node_type": str(t),
            "name": node.name,
            "operator": node.operator,
            "value": ast_to_json(node.value),
        }
    if t == NodeType.BINARY_EXPRESSION and isinstance(node, BinaryExpressionNode):
        return {
            "node_type": str(t),
            "operator": node.operator,
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
        }
    if t == NodeType.PARENTHESIZED and isinstance(node, ParenthesizedNode):
        return {"node_type": str(t), "inner": ast_to_json(node.inner)}
    if t == NodeType.CALL and isinstance(node, CallNode):
        return {
            "node_type": str(t),
            "name": node.name,
            "arguments": [ast_to_json(a) for a in node.arguments],
        }
    # statements and higher-level nodes
    if t == NodeType.PRINT and isinstance(node, PrintNode):
        return {"node_type": str(t), "argument": ast_to_json(node.argument)}
    if t == NodeType.IF and isinstance(node, IfNode):
        if isinstance(node.alternate, tuple):
            alternate = [ast_to_json(s) for s in node.alternate]
        else:
            alternate = ast_to_json(node.alternate)
        return {
            "node_type": str(t),
            "condition": ast_to_json(node.condition),
            "consequent": [ast_to_json(s) for s in node.consequent],
            "alternate": alternate,
        }
    if t == NodeType.WHILE and isinstance(node, WhileNode):
        return {
            "node_type": str(t),
            "condition": ast_to_json(node.condition),
            "body": [ast_to_json(s) for s in node.body],
        }
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": str(t),
            "body": [ast_to_json(s) for s in node.body],
        }

    raise TypeError(f"Cannot convert {type(node).__name__} to JSON")


def ast_to_json_text(node: ASTNode, indent: int = 2) -> str:
    """Return the JSON dump of `node` as text."""
    return json.dumps(ast_to_json(node), indent=indent)
