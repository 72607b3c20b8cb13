# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Renderer - serializes a node tree to an HTML string.

Rendering takes two passes over the tree: an AssetCollector gathers the
stylesheet and script fragments, then an HtmlWriter streams the markup in
document order into a single buffer (or a caller supplied text stream).

Text is entity-escaped, except inside ``<script>`` and ``<style>``: browsers
do not decode entities there, so the content is written as is with any
closing ``</script`` or ``</style`` sequence neutralized.

Placement of the aggregated blocks:

- ``<style>``, style_placement='auto' (default): first child of the first
  ``<head>``. Without a head element, right before the opening tag of the
  first element carrying a stylesheet.
- ``<style>``, style_placement='inline': one block per distinct fragment,
  right before the first element carrying it.
- ``<script>``: last child of the first ``<body>``. Without a body element,
  right after the first element carrying a script is closed.

Example:
    >>> from genro_htmltree import HtmlBuilder, render
    >>> h = HtmlBuilder()
    >>> render(h.p('a < b'))
    '<p>a &lt; b</p>'
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import IO, Any, Callable

from .encoding import escape_attr, escape_html, escape_raw_text
from .node import Doctype, Element, Node, Text, iter_nodes
from .stylesheet import AssetCollector, collect_assets
from .visitor import NodeVisitor, walk

logger = logging.getLogger(__name__)

STYLE_PLACEMENTS = ("auto", "inline")

# Text children are written unescaped, closing tags neutralized.
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

# Whitespace is content; indent mode leaves these subtrees untouched.
PREFORMATTED_ELEMENTS = frozenset({"pre", "textarea"})


@dataclass(frozen=True)
class RenderConfig:
    """Rendering options.

    Attributes:
        indent: Pretty print with one tag per line and two-space indentation.
            The content of pre and textarea elements is written as is.
        style_placement: 'auto' (single hoisted block) or 'inline'
            (one block per distinct fragment at its first use).
        doctype: Literal emitted for Doctype nodes.
    """

    indent: bool = False
    style_placement: str = "auto"
    doctype: str = "<!doctype html>"

    def __post_init__(self) -> None:
        if self.style_placement not in STYLE_PLACEMENTS:
            raise ValueError(
                f"style_placement must be one of {STYLE_PLACEMENTS}, "
                f"not {self.style_placement!r}"
            )


def render_attributes(element: Element) -> str:
    """Serialize attributes in insertion order, CSS variables into style."""
    pairs = element.attributes.items()

    if element.variables:
        declarations = "".join(f"--{name}: {value};" for name, value in element.variables.items())
        names = [name for name, _ in pairs]
        if "style" in names:
            position = names.index("style")
            current = (pairs[position][1] or "").strip()
            if current and not current.endswith(";"):
                current += ";"
            pairs[position] = ("style", current + declarations)
        else:
            pairs.append(("style", declarations))

    return "".join(
        f" {name}" if value is None else f' {name}="{escape_attr(value)}"'
        for name, value in pairs
    )


class HtmlWriter(NodeVisitor):
    """Visitor that writes HTML for each visited node.

    Output goes to stream.write() when a stream is given; otherwise it is
    accumulated in a list and finish() returns the joined string.
    """

    def __init__(
        self,
        assets: AssetCollector,
        config: RenderConfig | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        self._assets = assets
        self._config = config or RenderConfig()
        self._stream = stream
        self._parts: list[str] = []
        self._write: Callable[[str], Any] = stream.write if stream is not None else self._parts.append
        self._level = 0
        self._styles_pending = bool(assets.styles)
        self._scripts_pending = bool(assets.scripts)
        self._inline_done: set[str] = set()
        self._head_seen = False
        self._body_seen = False
        self._open: list[str] = []
        self._preformatted = 0

    @property
    def _indenting(self) -> bool:
        return self._config.indent and not self._preformatted

    def _line(self, markup: str) -> None:
        if self._indenting:
            self._write(f"{'  ' * self._level}{markup}\n")
        else:
            self._write(markup)

    def _emit_styles(self) -> None:
        self._styles_pending = False
        self._line(self._assets.styles.block())

    def _emit_scripts(self) -> None:
        self._scripts_pending = False
        self._line(self._assets.scripts.block())

    def _before_open(self, element: Element) -> None:
        if not element.stylesheets:
            return
        if self._config.style_placement == "inline":
            for css in element.stylesheets:
                if css not in self._inline_done:
                    self._inline_done.add(css)
                    self._line(f"<style>{escape_raw_text(css)}</style>")
        elif self._styles_pending and not self._assets.has_head:
            self._emit_styles()

    def _after_close(self, element: Element) -> None:
        if self._scripts_pending and element.scripts and not self._assets.has_body:
            self._emit_scripts()

    def visit_doctype(self, node: Doctype) -> None:
        self._line(self._config.doctype)

    def visit_open(self, element: Element) -> None:
        self._before_open(element)
        markup = f"<{element.tag}{render_attributes(element)}>"
        tag = element.tag.lower()

        if element.is_void:
            self._line(markup)
            self._after_close(element)
            return

        if tag in PREFORMATTED_ELEMENTS:
            # no newline after the open tag, it would become content
            self._write(f"{'  ' * self._level}{markup}" if self._indenting else markup)
            self._preformatted += 1
        else:
            self._line(markup)

        self._open.append(tag)
        self._level += 1
        if tag == "head" and not self._head_seen:
            self._head_seen = True
            if self._styles_pending and self._config.style_placement == "auto":
                self._emit_styles()

    def visit_close(self, element: Element) -> None:
        tag = self._open.pop()
        if tag == "body" and not self._body_seen:
            self._body_seen = True
            if self._scripts_pending:
                self._emit_scripts()

        self._level -= 1
        if tag in PREFORMATTED_ELEMENTS:
            self._preformatted -= 1
            self._write(f"</{element.tag}>\n" if self._indenting else f"</{element.tag}>")
        else:
            self._line(f"</{element.tag}>")
        self._after_close(element)

    def visit_text(self, node: Text) -> None:
        if not node.content:
            return
        if self._open and self._open[-1] in RAW_TEXT_ELEMENTS:
            self._line(escape_raw_text(node.content))
            return
        text = escape_html(node.content)
        if self._indenting:
            text = text.rstrip().replace("\n", "\n" + "  " * self._level)
        self._line(text)

    def finish(self) -> str | None:
        if self._stream is not None:
            flush = getattr(self._stream, "flush", None)
            if flush is not None:
                flush()
            return None
        return "".join(self._parts)


def _resolve_config(config: RenderConfig | None, options: dict[str, Any]) -> RenderConfig:
    config = config or RenderConfig()
    if options:
        config = dataclasses.replace(config, **options)
    return config


def _as_roots(root: Any) -> Node | list[Node]:
    # Iterables are materialized once; both passes must see the same nodes.
    if isinstance(root, Node):
        return root
    return list(iter_nodes(root))


def render(root: Any, config: RenderConfig | None = None, **options: Any) -> str:
    """Render a node (or anything to_node() accepts) to an HTML string.

    Args:
        root: A Node, or a sequence of top-level nodes.
        config: Rendering options; keyword options override its fields.
        **options: RenderConfig fields (indent, style_placement, doctype).

    Returns:
        The serialized document.
    """
    config = _resolve_config(config, options)
    roots = _as_roots(root)
    assets = collect_assets(roots)
    html = walk(roots, HtmlWriter(assets, config))
    logger.debug(
        "Rendered %d chars (%d stylesheet(s), %d script(s))",
        len(html), len(assets.styles), len(assets.scripts),
    )
    return html


def write_html(
    root: Any,
    stream: IO[str],
    config: RenderConfig | None = None,
    **options: Any,
) -> None:
    """Stream the rendering of root into a text stream."""
    config = _resolve_config(config, options)
    roots = _as_roots(root)
    assets = collect_assets(roots)
    walk(roots, HtmlWriter(assets, config, stream=stream))
