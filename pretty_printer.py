"""Pretty-printer for tokens and the AST.

Provides `PrettyPrinter.print_tokens(tokens)`, the token dump shown next to
the tree (one `<"lexeme", "KIND">` line per token), and
`PrettyPrinter.print_ast(node, indent, prefix)` which renders an AST into a
readable multi-line string. The AST printer is intended for debugging, tests
and development rather than for producing source code.

Examples:
    PrettyPrinter.print_tokens(tokenize("x = 1"))
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from typing import Sequence
from tokens import Token
from ast_nodes import *
from ast_tree import DisplayNode, ast_to_display_tree


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: Sequence[Token]) -> str:
        """Return the token dump, one line per token, nothing omitted."""
        return "\n".join(str(token) for token in tokens)

    @staticmethod
    def print_display_tree(tree: DisplayNode, indent: int = 0) -> str:
        """Render a display tree as an indented outline."""
        lines = [" " * indent + tree.name]
        for child in tree.children:
            lines.append(PrettyPrinter.print_display_tree(child, indent + 2))
        return "\n".join(lines)

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case NumberLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}NumberLiteral({v})")

            case StringLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}StringLiteral({v!r})")

            case VariableNode(name=n):
                lines.append(f"{indent_str}{prefix}Variable({n})")

            case AssignmentNode(name=n, operator=op, value=value):
                lines.append(f"{indent_str}{prefix}Assignment({n} {op})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case BinaryExpressionNode(operator=op, left=left, right=right):
                lines.append(f"{indent_str}{prefix}BinaryExpression({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case ParenthesizedNode(inner=inner):
                lines.append(f"{indent_str}{prefix}Parenthesized")
                lines.append(PrettyPrinter.print_ast(inner, indent + 2))

            case CallNode(name=n, arguments=args):
                lines.append(f"{indent_str}{prefix}Call({n})")
                for i, arg in enumerate(args):
                    lines.append(PrettyPrinter.print_ast(arg, indent + 4, f"arg[{i}]: "))

            case PrintNode(argument=arg):
                lines.append(f"{indent_str}{prefix}Print")
                lines.append(PrettyPrinter.print_ast(arg, indent + 2))

            case WhileNode(condition=cond, body=body):
                lines.append(f"{indent_str}{prefix}While")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                lines.append(f"{indent_str}    body:")
                for stmt in body:
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 6))

            case IfNode(condition=cond, consequent=then_b, alternate=else_b):
                lines.append(f"{indent_str}{prefix}If")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                lines.append(f"{indent_str}    consequent:")
                for stmt in then_b:
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 6))
                if isinstance(else_b, IfNode):
                    lines.append(PrettyPrinter.print_ast(else_b, indent + 4, "alternate: "))
                elif else_b is not None:
                    lines.append(f"{indent_str}    alternate:")
                    for stmt in else_b:
                        lines.append(PrettyPrinter.print_ast(stmt, indent + 6))

            case ProgramNode(body=body):
                lines.append(f"{indent_str}{prefix}Program")
                for stmt in body:
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 2))

            case _:
                # Anything else goes through the generic display tree
                tree = ast_to_display_tree(node)
                lines.append(PrettyPrinter.print_display_tree(tree, indent))

        return "\n".join(lines)
