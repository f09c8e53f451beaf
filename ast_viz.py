"""Graphviz visualization helpers for ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Tree layout: the AST is first converted to a display tree (see
`ast_tree.py`) and each display node becomes a Graphviz node, drawn
top-down with an edge from every parent to each of its children. Syntax
nodes (those named after a `NodeType`) are drawn as filled ellipses; field
wrappers and `field: value` leaves are drawn as plain boxes.
"""

from typing import Optional
from graphviz import Digraph, escape
from ast_nodes import ASTNode, NodeType
from ast_tree import DisplayNode, ast_to_display_tree

_NODE_NAMES = {str(t) for t in NodeType}


def _node_attrs(tree: DisplayNode) -> dict:
    if tree.name in _NODE_NAMES:
        return {"shape": "ellipse", "style": "filled", "fillcolor": "#cfe2ff"}
    return {"shape": "box", "fontsize": "10"}


def render_ast_dot(node: ASTNode, title: Optional[str] = None) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    if title:
        dot.attr(label=escape(title), labelloc="t")

    tree = ast_to_display_tree(node)

    # Node ids are assigned in pre-order so parents always precede children.
    ids = {}
    for i, display in enumerate(tree.walk()):
        ids[id(display)] = f"n{i}"
        # Backslashes in string literals are literal text, not DOT escapes.
        dot.node(f"n{i}", label=escape(display.name), **_node_attrs(display))

    for display in tree.walk():
        for child in display.children:
            dot.edge(ids[id(display)], ids[id(child)])

    return dot


def write_and_render(
    node: ASTNode,
    out_path: str,
    fmt: str = "svg",
    title: Optional[str] = None,
) -> None:
    """Write and render the AST to the given path (without extension). Returns when rendered.

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node, title=title)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
