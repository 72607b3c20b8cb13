# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Composable CSS layout primitives.

Each primitive returns a plain ``div`` Element with a ``t-<name>`` class,
the layout rules attached as a stylesheet and the per-instance values
(gap, width, ratio) set as CSS custom properties. The stylesheet text is
the same for every instance, so a page using ten stacks ships the stack
rules once.

The stylesheets live in the ``css`` directory next to this module and
are read once per process.

Example:
    >>> from genro_htmltree import HtmlBuilder, render
    >>> from genro_htmltree.layout import stack
    >>> h = HtmlBuilder()
    >>> html = render(stack(1, [h.p('one'), h.p('two')]))

References:
    - Every Layout: https://every-layout.dev
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from .attributes import AttributeSet, apply_keywords
from .node import Element

if TYPE_CHECKING:
    from .builders.base import BuilderBase


_CSS_DIR = Path(__file__).parent / "css"

# Cache for loaded stylesheets, read-only after first load
_stylesheet_cache: dict[str, str] = {}


def load_stylesheet(name: str) -> str:
    """Load a bundled layout stylesheet by name ('stack', 'cluster', ...).

    Raises:
        FileNotFoundError: If no such stylesheet ships with the package.
    """
    if name in _stylesheet_cache:
        return _stylesheet_cache[name]

    css_file = _CSS_DIR / f"{name}.css"
    if not css_file.exists():
        raise FileNotFoundError(f"Layout stylesheet not found: {css_file}")

    css = css_file.read_text(encoding="utf-8")
    _stylesheet_cache[name] = css
    return css


class ModularSpacing:
    """Spacing on a modular scale based on a line height of 1.5.

    An int is a level on the scale (``0.325 * 1.5 ** level`` rem, 0 means
    no spacing); a string is used verbatim ('2px', 'var(--gap)').
    """

    __slots__ = ("value",)

    def __init__(self, value: int | str | ModularSpacing) -> None:
        if isinstance(value, ModularSpacing):
            value = value.value
        elif isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"Spacing must be int or str, not {type(value).__name__}")
        elif isinstance(value, int):
            if value < 0:
                raise ValueError(f"Spacing level must be >= 0, got {value}")
            value = "0" if value == 0 else f"{0.325 * 1.5 ** value:.4g}rem"
        self.value: str = value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ModularSpacing({self.value!r})"


class Measure:
    """A width in characters of the current font (int), or a CSS length (str)."""

    __slots__ = ("value",)

    def __init__(self, value: int | str | Measure) -> None:
        if isinstance(value, Measure):
            value = value.value
        elif isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"Measure must be int or str, not {type(value).__name__}")
        elif isinstance(value, int):
            value = f"{value}ch"
        self.value: str = value

    def __str__(self) -> str:
        return self.value


class Ratio:
    """An aspect ratio, from a (width, height) pair or a 'w/h' string."""

    __slots__ = ("width", "height")

    def __init__(self, value: tuple[int, int] | str | Ratio) -> None:
        if isinstance(value, Ratio):
            value = (value.width, value.height)
        elif isinstance(value, str):
            width, _, height = value.partition("/")
            value = (int(width), int(height))
        width, height = value
        if width <= 0 or height <= 0:
            raise ValueError(f"Ratio terms must be positive, got {width}/{height}")
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"{self.width}/{self.height}"


def _container(
    name: str,
    children: Any,
    builder: BuilderBase | None,
    attr: dict[str, Any],
    **variables: Any,
) -> Element:
    attrs = apply_keywords(AttributeSet([("class", f"t-{name}")]), attr, merge=True)
    element = Element("div", attrs, builder=builder)
    for var_name, value in variables.items():
        element.var(f"t-{name}-{var_name.replace('_', '-')}", value)
    element.stylesheet(load_stylesheet(name))
    element.append(children)
    return element


def stack(gap: int | str | ModularSpacing, children: Any, builder: BuilderBase | None = None, **attr: Any) -> Element:
    """A container whose children are evenly spaced out vertically.

    ::

          x no gap
        +---+
        |   |
        +---+
          ^ gap
        +---+
        |   |
        +---+
          x no gap
    """
    return _container("stack", children, builder, attr, space=ModularSpacing(gap))


def cluster(gap: int | str | ModularSpacing, children: Any, builder: BuilderBase | None = None, **attr: Any) -> Element:
    """A container whose children sit side by side and wrap, with one gap both ways.

    ::

        +---+         +---+         +---+
        |   | <-gap-> |   | <-gap-> |   |
        +---+         +---+         +---+
          ^ gap
        +---+
        |   | ...
        +---+
    """
    return _container("cluster", children, builder, attr, gap=ModularSpacing(gap))


def padded(padding: int | str | ModularSpacing, children: Any, builder: BuilderBase | None = None, **attr: Any) -> Element:
    """A simple padded box."""
    return _container("padded", children, builder, attr, padding=ModularSpacing(padding))


def center(children: Any, max_width: int | str | Measure | None = None, builder: BuilderBase | None = None, **attr: Any) -> Element:
    """A container whose children are horizontally centered.

    max_width caps the content width (defaults to 60ch in the stylesheet).
    """
    width = Measure(max_width) if max_width is not None else None
    return _container("center", children, builder, attr, max_width=width)


def cover(
    main: Any,
    header: Any = None,
    footer: Any = None,
    height: int = 100,
    builder: BuilderBase | None = None,
    **attr: Any,
) -> Element:
    """A container that vertically centers its main content in the viewport.

    Optional header and footer stick to the top and bottom edges. Each
    part is wrapped in its own div (t-cover-header, t-cover-main,
    t-cover-footer). height is a percentage of the viewport height.
    """
    parts = []
    if header is not None:
        parts.append(Element("div", {"class": "t-cover-header"}, header, builder=builder))
    parts.append(Element("div", {"class": "t-cover-main"}, main, builder=builder))
    if footer is not None:
        parts.append(Element("div", {"class": "t-cover-footer"}, footer, builder=builder))
    return _container("cover", parts, builder, attr, height=f"{height}vh")


def switcher(
    gap: int | str | ModularSpacing,
    threshold: int | str | Measure,
    children: Any,
    builder: BuilderBase | None = None,
    **attr: Any,
) -> Element:
    """A row of children that switches to a column below the threshold width."""
    return _container(
        "switcher", children, builder, attr,
        gap=ModularSpacing(gap), threshold=Measure(threshold),
    )


def fluid_grid(
    min_width: int | str | Measure,
    gap: int | str | ModularSpacing,
    children: Any,
    builder: BuilderBase | None = None,
    **attr: Any,
) -> Element:
    """A responsive grid whose cells keep at least min_width and share the rest."""
    return _container(
        "fluid-grid", children, builder, attr,
        min_width=Measure(min_width), gap=ModularSpacing(gap),
    )


def frame(ratio: tuple[int, int] | str | Ratio, children: Any, builder: BuilderBase | None = None, **attr: Any) -> Element:
    """A window with a fixed aspect ratio that crops its media child."""
    return _container("frame", children, builder, attr, ratio=Ratio(ratio))


def css_reset(builder: BuilderBase | None = None) -> Element:
    """A hidden span carrying a modified Meyer CSS reset for the whole page."""
    element = Element("span", [("hidden", None)], builder=builder)
    return element.stylesheet(load_stylesheet("reset"))
