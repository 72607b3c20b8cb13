# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTree node classes.

The tree is made of four node kinds:

- Doctype: the ``<!doctype html>`` declaration
- Text: character data, escaped at render time
- Element: a tag with attributes, children and attached CSS/JS fragments
- Fragment: a run of sibling nodes without a wrapping tag

Every node is owned by at most one parent. Anything that to_node() accepts
(strings, numbers, sequences, objects with a ``__node__()`` method) can be
passed wherever a node is expected.

Example:
    >>> card = Element('div', {'class': 'card'}, ['hello'])
    >>> card.stylesheet('.card{padding:1rem}')
    Element('div', attributes=1, children=1)
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Callable, Iterator

from .attributes import AttributeSet, apply_keywords, validate_attribute_name
from .exceptions import (
    AttributesLockedError,
    InvalidTagError,
    NodeOwnershipError,
    VoidElementError,
)

if TYPE_CHECKING:
    from .builders.base import BuilderBase


VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

_TAG_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


class Node:
    """Base class of the four tree node kinds."""

    __slots__ = ("parent",)

    def __init__(self) -> None:
        self.parent: Node | None = None

    def __node__(self) -> Node:
        return self

    def __str__(self) -> str:
        from .render import render
        return render(self)

    @property
    def _(self) -> Node:
        """Return the parent node for navigation/chaining.

        Example:
            >>> body.div().span('x')._._  # back to body
        """
        if self.parent is None:
            raise ValueError("Node has no parent")
        return self.parent


class Doctype(Node):
    """The HTML5 document type declaration."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Doctype()"


class Text(Node):
    """Character data. The content is stored raw and escaped on output."""

    __slots__ = ("content",)

    def __init__(self, content: str = "") -> None:
        super().__init__()
        self.content = str(content)

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


def iter_nodes(value: Any) -> Iterator[Node]:
    """Yield the nodes a value converts to, flattening nested sequences.

    Raises:
        TypeError: If the value (or a member of it) is not convertible.
    """
    if isinstance(value, Node):
        yield value
        return
    if value is None or isinstance(value, bool):
        return
    if isinstance(value, str):
        yield Text(value)
        return
    if isinstance(value, (int, float)):
        yield Text(str(value))
        return

    produce = getattr(type(value), "__node__", None)
    if produce is not None:
        yield from iter_nodes(produce(value))
        return

    if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray, Mapping)):
        for item in value:
            yield from iter_nodes(item)
        return

    raise TypeError(f"Cannot convert {type(value).__name__} to a node")


def to_node(value: Any) -> Node:
    """Convert a value into a single Node.

    - Node: returned as is
    - str, int, float: a Text node
    - None, True, False: an empty Fragment
    - object with ``__node__()``: the converted result of that call
    - any other iterable: a Fragment of its converted members

    Raises:
        TypeError: For values with no node conversion (dict, bytes, ...).
    """
    if isinstance(value, Node):
        return value
    if isinstance(value, str) or (isinstance(value, (int, float)) and not isinstance(value, bool)):
        return Text(str(value))
    produce = getattr(type(value), "__node__", None)
    if produce is not None:
        return to_node(produce(value))
    return Fragment(value)


def _adopt(owner: Node, nodes: list[Node]) -> list[Node]:
    """Check ownership of converted nodes, then attach them all to owner.

    Either every node is adopted by owner or none is.
    """
    ancestors: set[int] = set()
    current: Node | None = owner
    while current is not None:
        ancestors.add(id(current))
        current = current.parent

    seen: set[int] = set()
    for node in nodes:
        if node.parent is not None:
            raise NodeOwnershipError(f"{node!r} already belongs to {node.parent!r}")
        if id(node) in ancestors:
            raise NodeOwnershipError(f"Cannot append {node!r} inside its own subtree")
        if id(node) in seen:
            raise NodeOwnershipError(f"{node!r} appended twice")
        seen.add(id(node))

    for node in nodes:
        node.parent = owner
    return nodes


class Fragment(Node):
    """Sibling nodes rendered in sequence with no wrapping markup."""

    __slots__ = ("children",)

    def __init__(self, *children: Any) -> None:
        super().__init__()
        self.children: list[Node] = []
        self.append(*children)

    def __repr__(self) -> str:
        return f"Fragment({len(self.children)})"

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def append(self, *children: Any) -> Fragment:
        self.children.extend(_adopt(self, list(iter_nodes(children))))
        return self


class Element(Node):
    """An HTML element.

    Each element has:
    - tag: the element name ('div', 'img', 't-stack', ...)
    - attributes: an AttributeSet, rendered in insertion order
    - children: owned child nodes, rendered in append order
    - stylesheets / scripts: raw CSS/JS fragments collected at render time
    - variables: CSS custom properties written into the style attribute

    Elements created by a builder keep a reference to it, so unknown
    attribute names resolve to builder methods that create children in
    place (``body.div(class_='card')`` appends a div to body).
    """

    __slots__ = (
        "tag", "attributes", "children", "variables",
        "_stylesheets", "_scripts", "_builder",
    )

    def __init__(
        self,
        tag: str,
        attributes: AttributeSet | Mapping[str, Any] | Iterable[Any] | None = None,
        children: Any = None,
        builder: BuilderBase | None = None,
    ) -> None:
        """Initialize an Element.

        Args:
            tag: Element name.
            attributes: AttributeSet, mapping or iterable of (name, value)
                pairs. Names are used verbatim.
            children: Anything accepted by to_node().
            builder: Builder used for fluent child creation.

        Raises:
            InvalidTagError: If the tag name is malformed.
        """
        super().__init__()
        if not isinstance(tag, str) or not _TAG_PATTERN.match(tag):
            raise InvalidTagError(f"Invalid tag name: {tag!r}")
        self.tag = tag
        self.attributes = _coerce_attributes(attributes)
        self.children: list[Node] = []
        self.variables: dict[str, str] = {}
        self._stylesheets: list[str] = []
        self._scripts: list[str] = []
        self._builder = builder
        if children is not None:
            self.append(children)

    def __repr__(self) -> str:
        return (
            f"Element({self.tag!r}, attributes={len(self.attributes)}, "
            f"children={len(self.children)})"
        )

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        """Delegate unknown names to the builder, targeting this element.

        Real Element members win (append, script, var, ...). For clashing
        tag names use child('script', ...).
        """
        if name.startswith("_"):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        builder = self._builder
        if builder is not None:
            handler = getattr(builder, name)
            if callable(handler):
                return lambda *children, **attr: handler(*children, _target=self, **attr)

        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    @property
    def is_void(self) -> bool:
        """True for elements that take no children and no closing tag."""
        return self.tag.lower() in VOID_ELEMENTS

    @property
    def stylesheets(self) -> tuple[str, ...]:
        return tuple(self._stylesheets)

    @property
    def scripts(self) -> tuple[str, ...]:
        return tuple(self._scripts)

    @property
    def builder(self) -> BuilderBase | None:
        return self._builder

    def set_attributes(
        self,
        attributes: AttributeSet | Mapping[str, Any] | Iterable[Any] | None = None,
        **kwargs: Any,
    ) -> Element:
        """Replace the attribute set.

        Keyword names are translated (``class_`` -> ``class``) and None
        keyword values are skipped, see apply_keywords().

        Raises:
            AttributesLockedError: If children are already attached.
        """
        self._check_unlocked()
        self.attributes = apply_keywords(_coerce_attributes(attributes), kwargs)
        return self

    def set_attribute(self, name: str, value: Any = None) -> Element:
        """Add or replace a single attribute (name used verbatim)."""
        self._check_unlocked()
        self.attributes.set(name, value)
        return self

    def _check_unlocked(self) -> None:
        if self.children:
            raise AttributesLockedError(
                f"Attributes of <{self.tag}> cannot change after children were attached"
            )

    def append(self, *children: Any) -> Element:
        """Append children in order. Sequences flatten into direct children.

        Raises:
            VoidElementError: If this is a void element and any child is given.
            NodeOwnershipError: If a child already has a parent.
            TypeError: If a value has no node conversion.
        """
        nodes = list(iter_nodes(children))
        if nodes and self.is_void:
            raise VoidElementError(f"<{self.tag}> is a void element and cannot have children")
        self.children.extend(_adopt(self, nodes))
        return self

    def child(self, tag: str, *children: Any, **attr: Any) -> Element:
        """Create a child element through the builder (or a default one)."""
        builder = self._builder
        if builder is None:
            from .builders.html import HtmlBuilder
            builder = HtmlBuilder()
        return builder.child(self, tag, *children, **attr)

    def stylesheet(self, css: str | None) -> Element:
        """Attach a raw CSS fragment. Empty text is ignored."""
        if not css:
            return self
        if not isinstance(css, str):
            raise TypeError(f"Stylesheet must be str, not {type(css).__name__}")
        if css not in self._stylesheets:
            self._stylesheets.append(css)
        return self

    def script(self, js: str | None) -> Element:
        """Attach a raw JavaScript fragment. Empty text is ignored."""
        if not js:
            return self
        if not isinstance(js, str):
            raise TypeError(f"Script must be str, not {type(js).__name__}")
        if js not in self._scripts:
            self._scripts.append(js)
        return self

    def var(self, name: str, value: Any) -> Element:
        """Set a CSS custom property (``--name: value;``) on this element.

        Empty or None values are ignored.
        """
        validate_attribute_name(name)
        if value is None or value == "":
            return self
        self.variables[name] = str(value)
        return self


def _coerce_attributes(value: Any) -> AttributeSet:
    if value is None:
        return AttributeSet()
    if isinstance(value, AttributeSet):
        return value.copy()
    if isinstance(value, Mapping):
        return AttributeSet(value.items())
    return AttributeSet(value)
