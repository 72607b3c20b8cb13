# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Stylesheet registry - collection and deduplication of asset fragments.

Elements carry raw CSS (and JavaScript) fragments. Before a render, an
AssetCollector walks the tree once and feeds every fragment into a
registry keyed by its exact text: the first occurrence wins, later
identical fragments are skipped, and the output keeps first-seen
document order. Fragments are concatenated, never parsed or merged.

A collector is created for each render; nothing is shared between renders.

Example:
    >>> registry = StylesheetRegistry()
    >>> registry.register('.card{padding:1rem}')
    True
    >>> registry.register('.card{padding:1rem}')
    False
    >>> registry.block()
    '<style>.card{padding:1rem}</style>'
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .encoding import escape_raw_text
from .node import Element
from .visitor import NodeVisitor, walk

logger = logging.getLogger(__name__)


class FragmentRegistry:
    """Ordered set of text fragments, deduplicated by exact content."""

    tag = ""
    separator = "\n"

    def __init__(self) -> None:
        self._fragments: dict[str, int] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._fragments)})"

    def __len__(self) -> int:
        return len(self._fragments)

    def __bool__(self) -> bool:
        return bool(self._fragments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fragments)

    def __contains__(self, text: str) -> bool:
        return text in self._fragments

    def register(self, text: str | None) -> bool:
        """Add a fragment. Returns True only on its first occurrence.

        Empty text is ignored and returns False.
        """
        if not text:
            return False
        if text in self._fragments:
            logger.debug("Skipping duplicate %s fragment (%d chars)", self.tag, len(text))
            return False
        self._fragments[text] = len(self._fragments)
        return True

    def index(self, text: str) -> int:
        """First-seen position of a fragment.

        Raises:
            KeyError: If the fragment was never registered.
        """
        return self._fragments[text]

    def text(self) -> str:
        """All fragments joined in first-seen order."""
        return self.separator.join(self._fragments)

    def block(self) -> str:
        """The aggregated fragments wrapped in one tag, or '' when empty.

        A ``</style`` or ``</script`` inside a fragment is neutralized so it
        cannot close the block early.
        """
        if not self._fragments:
            return ""
        return f"<{self.tag}>{escape_raw_text(self.text())}</{self.tag}>"


class StylesheetRegistry(FragmentRegistry):
    """CSS fragments, emitted as a single ``<style>`` block."""

    tag = "style"


class ScriptRegistry(FragmentRegistry):
    """JavaScript fragments, emitted as a single ``<script>`` block."""

    tag = "script"


class AssetCollector(NodeVisitor):
    """Visitor that gathers stylesheet and script fragments from a tree.

    Also records whether the tree holds a head and a body element, which
    decides where the aggregated blocks are placed.
    """

    def __init__(self) -> None:
        self.styles = StylesheetRegistry()
        self.scripts = ScriptRegistry()
        self.has_head = False
        self.has_body = False

    def visit_open(self, element: Element) -> None:
        tag = element.tag.lower()
        if tag == "head":
            self.has_head = True
        elif tag == "body":
            self.has_body = True
        for css in element.stylesheets:
            self.styles.register(css)
        for js in element.scripts:
            self.scripts.register(js)

    def finish(self) -> AssetCollector:
        logger.debug(
            "Collected %d stylesheet(s) and %d script(s)",
            len(self.styles), len(self.scripts),
        )
        return self


def collect_assets(root: Any) -> AssetCollector:
    """Walk root once and return the filled AssetCollector."""
    return walk(root, AssetCollector())
