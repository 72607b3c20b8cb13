# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder - HTML5 element builder.

This module provides the builder used to describe HTML documents as
nested calls. Positional arguments are children, keyword arguments are
attributes, and underscore-prefixed keywords attach assets.

Example:
    Creating an HTML document::

        from genro_htmltree.builders import HtmlPage

        page = HtmlPage(title='Welcome')
        main = page.body.div(id='main', class_='container')
        main.h1('Welcome')
        main.p('Hello, World!')
        ul = main.ul()
        ul.li('Item 1')
        ul.li('Item 2')
        html = page.to_html()

    Or as a single expression::

        h = HtmlBuilder()
        card = h.div(h.h2('Title'), h.p('Body'), class_='card',
                     _stylesheet='.card{padding:1rem}')

References:
    - WHATWG HTML Standard: https://html.spec.whatwg.org/
"""

from __future__ import annotations

from typing import Any, Callable

from .. import layout
from ..node import VOID_ELEMENTS, Doctype, Element, Fragment, Text
from ..render import render
from .base import BuilderBase
from .decorators import component

HTML_TAGS = frozenset({
    # main root
    "html",
    # document metadata
    "base", "head", "link", "meta", "style", "title",
    # sectioning root
    "body",
    # content sectioning
    "address", "article", "aside", "footer", "header", "h1", "h2", "h3",
    "h4", "h5", "h6", "hgroup", "main", "nav", "section", "search",
    # text content
    "blockquote", "dd", "div", "dl", "dt", "figcaption", "figure", "hr",
    "li", "menu", "ol", "p", "pre", "ul",
    # inline text semantics
    "a", "abbr", "b", "bdi", "bdo", "br", "cite", "code", "data", "dfn",
    "em", "i", "kbd", "mark", "q", "rp", "rt", "ruby", "s", "samp",
    "small", "span", "strong", "sub", "sup", "time", "u", "var", "wbr",
    # image and multimedia
    "area", "audio", "img", "map", "track", "video",
    # embedded content
    "embed", "iframe", "object", "param", "picture", "source",
    # svg and mathml
    "svg", "math",
    # scripting
    "canvas", "noscript", "script",
    # demarcating edits
    "del", "ins",
    # table content
    "caption", "col", "colgroup", "table", "tbody", "td", "tfoot", "th",
    "thead", "tr",
    # forms
    "button", "datalist", "fieldset", "form", "input", "label", "legend",
    "meter", "optgroup", "option", "output", "progress", "select",
    "textarea",
    # interactive elements
    "details", "dialog", "summary",
    # web components
    "slot", "template",
})


class HtmlBuilder(BuilderBase):
    """Builder for HTML5 elements.

    Provides dynamic methods for every standard HTML tag via __getattr__,
    plus the layout components (stack, cluster, ...).

    Called on the builder, a tag method returns a detached element; called
    on an element created by this builder, it appends the new element to
    that element and returns it.

    Usage:
        >>> h = HtmlBuilder()
        >>> h.ul(h.li('one'), h.li('two'), class_='menu')
        >>> h.input(type='checkbox', checked=True)

    Attributes:
        VOID_ELEMENTS: Set of void (self-closing) element names.
        ALL_TAGS: Set of all known HTML5 element names.
    """

    VOID_ELEMENTS = VOID_ELEMENTS
    ALL_TAGS = HTML_TAGS

    def __getattr__(self, name: str) -> Callable[..., Any]:
        """Dynamic method for any HTML tag.

        Args:
            name: Tag name (e.g., 'div', 'span', 'meta')

        Returns:
            Callable that creates an element with that tag.

        Raises:
            AttributeError: If name is neither a component nor an HTML tag.
        """
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

        if name in HTML_TAGS:
            return self._make_tag_method(name)

        try:
            return super().__getattr__(name)
        except AttributeError:
            raise AttributeError(f"'{name}' is not a valid HTML tag") from None

    def _make_tag_method(self, name: str) -> Callable[..., Element]:
        """Create a method for a specific tag."""

        def tag_method(*children: Any, _target: Element | None = None, **attr: Any) -> Element:
            return self.child(_target, name, *children, **attr)

        tag_method.__name__ = name
        return tag_method

    def custom(self, tag: str, *children: Any, _target: Element | None = None, **attr: Any) -> Element:
        """Create an element with any valid tag name (custom elements, SVG children)."""
        return self.child(_target, tag, *children, **attr)

    def doctype(self, _target: Element | None = None) -> Doctype:
        """Create the ``<!doctype html>`` node."""
        node = Doctype()
        if _target is not None:
            _target.append(node)
        return node

    def text(self, content: Any, _target: Element | None = None) -> Text:
        """Create a text node (escaped when rendered)."""
        node = Text(str(content))
        if _target is not None:
            _target.append(node)
        return node

    def fragment(self, *children: Any, _target: Element | None = None) -> Fragment:
        """Group nodes as siblings with no wrapping tag."""
        node = Fragment(*children)
        if _target is not None:
            _target.append(node)
        return node

    # ==================== Layout components ====================

    @component
    def stack(self, gap: Any, *children: Any, **attr: Any) -> Element:
        """Vertical stack with uniform gap (see layout.stack)."""
        return layout.stack(gap, children, builder=self, **attr)

    @component
    def cluster(self, gap: Any, *children: Any, **attr: Any) -> Element:
        """Wrapping row with uniform gap on both axes (see layout.cluster)."""
        return layout.cluster(gap, children, builder=self, **attr)

    @component
    def padded(self, padding: Any, *children: Any, **attr: Any) -> Element:
        return layout.padded(padding, children, builder=self, **attr)

    @component
    def center(self, *children: Any, max_width: Any = None, **attr: Any) -> Element:
        return layout.center(children, max_width=max_width, builder=self, **attr)

    @component
    def cover(self, main: Any, header: Any = None, footer: Any = None, height: int = 100, **attr: Any) -> Element:
        return layout.cover(main, header=header, footer=footer, height=height, builder=self, **attr)

    @component
    def switcher(self, gap: Any, threshold: Any, *children: Any, **attr: Any) -> Element:
        return layout.switcher(gap, threshold, children, builder=self, **attr)

    @component
    def fluid_grid(self, min_width: Any, gap: Any, *children: Any, **attr: Any) -> Element:
        return layout.fluid_grid(min_width, gap, children, builder=self, **attr)

    @component
    def frame(self, ratio: Any, *children: Any, **attr: Any) -> Element:
        return layout.frame(ratio, children, builder=self, **attr)

    @component
    def css_reset(self) -> Element:
        return layout.css_reset(builder=self)


class HtmlPage:
    """HTML page with head and body elements ready to fill.

    Creates a complete HTML document structure with:
    - a doctype
    - html root element (with optional lang)
    - head element (with optional title and a utf-8 charset meta)
    - body element

    Usage:
        >>> page = HtmlPage(title='My Page')
        >>> page.head.meta(name='viewport', content='width=device-width')
        >>> page.body.div(id='main').p('Hello World')
        >>> html = page.to_html()
    """

    def __init__(
        self,
        title: str | None = None,
        lang: str | None = None,
        builder: HtmlBuilder | None = None,
    ) -> None:
        """Initialize the page with head and body."""
        self.builder = builder or HtmlBuilder()
        h = self.builder

        self.doctype = h.doctype()
        self.html = h.html(lang=lang)
        self.head = self.html.head()
        self.head.meta(charset="utf-8")
        if title is not None:
            self.head.title(title)
        self.body = self.html.body()

    def to_html(self, **options: Any) -> str:
        """Render the complete document.

        Args:
            **options: RenderConfig fields (indent, style_placement, ...).
        """
        return render([self.doctype, self.html], **options)

    def __str__(self) -> str:
        return self.to_html()

