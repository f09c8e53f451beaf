"""Convert AST nodes into generic display trees.

`ast_to_display_tree(node)` returns a `DisplayNode` tree where every node
has only a name and an ordered list of children. Renderers (the Graphviz
view in `ast_viz.py`, the text view in `pretty_printer.py`) work on this
shape and never look at AST classes directly.

Conversion rules, applied to every dataclass field of an AST node in
declaration order:
- the node's tag (`NodeType` value) becomes the display name;
- a tuple field contributes one child per element;
- a node field contributes a wrapper child named after the field whose only
    child is the converted node;
- any other value contributes a leaf named `field: value`. This includes an
    absent `alternate`, shown as the leaf `alternate: None` rather than an
    `alternate` wrapper around a null child.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, List
from ast_nodes import ASTNode


@dataclass
class DisplayNode:
    name: str
    children: List[DisplayNode] = field(default_factory=list)

    def walk(self):
        """Yield this node and all descendants, depth-first, parents first."""
        yield self
        for child in self.children:
            yield from child.walk()


def _convert_value(value: Any) -> DisplayNode:
    if isinstance(value, ASTNode):
        return ast_to_display_tree(value)
    return DisplayNode(name=str(value))


def ast_to_display_tree(node: ASTNode) -> DisplayNode:
    display = DisplayNode(name=str(node.type))

    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, tuple):
            display.children.extend(_convert_value(v) for v in value)
        elif isinstance(value, ASTNode):
            display.children.append(
                DisplayNode(name=f.name, children=[ast_to_display_tree(value)])
            )
        else:
            display.children.append(DisplayNode(name=f"{f.name}: {value}"))

    return display
