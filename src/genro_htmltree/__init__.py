# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlTree - HTML documents as trees, with stylesheet hoisting.

A small, zero-dependency library that builds HTML documents as ownership
trees of nodes, collects the CSS fragments attached to elements (each
distinct fragment once) and renders the whole document to a string.

Example:
    >>> from genro_htmltree import HtmlBuilder, render
    >>> h = HtmlBuilder()
    >>> render([
    ...     h.doctype(),
    ...     h.html(h.head(), h.body(
    ...         h.div('hello', class_='card', _stylesheet='.card{padding:1rem}'),
    ...     )),
    ... ])
    '<!doctype html><html><head><style>.card{padding:1rem}</style></head><body><div class="card">hello</div></body></html>'
"""

__version__ = "0.1.0"

from .attributes import AttributeSet, attributes
from .builders import BuilderBase, HtmlBuilder, HtmlPage, component
from .exceptions import (
    AttributesLockedError,
    HtmlTreeError,
    InvalidAttributeError,
    InvalidTagError,
    NodeOwnershipError,
    VoidElementError,
)
from .node import VOID_ELEMENTS, Doctype, Element, Fragment, Node, Text, to_node
from .render import RenderConfig, render, write_html
from .stylesheet import AssetCollector, StylesheetRegistry, collect_assets

__all__ = [
    # Node model
    "Node",
    "Doctype",
    "Text",
    "Element",
    "Fragment",
    "to_node",
    "VOID_ELEMENTS",
    # Attributes
    "AttributeSet",
    "attributes",
    # Builders
    "BuilderBase",
    "HtmlBuilder",
    "HtmlPage",
    "component",
    # Rendering
    "RenderConfig",
    "render",
    "write_html",
    "AssetCollector",
    "StylesheetRegistry",
    "collect_assets",
    # Exceptions
    "HtmlTreeError",
    "InvalidTagError",
    "InvalidAttributeError",
    "VoidElementError",
    "AttributesLockedError",
    "NodeOwnershipError",
]
