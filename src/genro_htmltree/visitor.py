# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document-order traversal of a node tree.

walk() visits nodes in the order they appear in the HTML output:

- elements are visited twice, on their opening and closing tag
  (void elements only on the opening one)
- text and doctype nodes are visited once
- fragments are not visited themselves; their children are

The traversal keeps an explicit stack, so deep trees do not hit the
interpreter recursion limit.
"""

from __future__ import annotations

from typing import Any

from .node import Doctype, Element, Fragment, Node, Text, iter_nodes

_OPEN = 0
_CLOSE = 1


class NodeVisitor:
    """Base class for tree visitors. Override the hooks you need."""

    def visit_doctype(self, node: Doctype) -> None:
        pass

    def visit_open(self, element: Element) -> None:
        pass

    def visit_close(self, element: Element) -> None:
        pass

    def visit_text(self, node: Text) -> None:
        pass

    def finish(self) -> Any:
        return None


def walk(root: Any, visitor: NodeVisitor) -> Any:
    """Visit root (a node, or anything to_node() accepts) in document order.

    Returns:
        Whatever visitor.finish() returns.
    """
    if isinstance(root, Node):
        roots = [root]
    else:
        roots = list(iter_nodes(root))

    stack: list[tuple[int, Node]] = [(_OPEN, node) for node in reversed(roots)]

    while stack:
        action, node = stack.pop()

        if action == _CLOSE:
            visitor.visit_close(node)
        elif isinstance(node, Element):
            visitor.visit_open(node)
            if node.is_void:
                continue
            # revisit after the children for the closing tag
            stack.append((_CLOSE, node))
            stack.extend((_OPEN, child) for child in reversed(node.children))
        elif isinstance(node, Fragment):
            stack.extend((_OPEN, child) for child in reversed(node.children))
        elif isinstance(node, Text):
            visitor.visit_text(node)
        elif isinstance(node, Doctype):
            visitor.visit_doctype(node)

    return visitor.finish()
