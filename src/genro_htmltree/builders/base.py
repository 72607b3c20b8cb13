# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BuilderBase - Abstract base class for HtmlTree builders."""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterable, Mapping
from typing import Any

from ..node import Element


class BuilderBase(ABC):
    """Abstract base class for HtmlTree builders.

    A builder provides domain-specific methods for creating elements.
    Use the @component decorator to define reusable components:

        class CardBuilder(HtmlBuilder):
            @component
            def card(self, title, *body, **attr):
                return self.article(self.h2(title), *body, class_='card', **attr)

    The class automatically builds a _components dict mapping component
    names to methods via __init_subclass__.

    Usage:
        >>> h = CardBuilder()
        >>> h.card('Hello', h.p('World'))      # detached element
        >>> page.body.card('Hello')            # appended to body
    """

    # Class-level dict mapping component name -> method name
    _components: dict[str, str] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _components dict from @component decorated methods."""
        super().__init_subclass__(**kwargs)

        # Start with parent's components if any
        cls._components = {}
        for base in cls.__mro__[1:]:
            if hasattr(base, '_components'):
                cls._components.update(base._components)
                break

        for name, method in cls.__dict__.items():
            if name.startswith('_') or not callable(method):
                continue
            component_name = getattr(method, '_component_name', None)
            if component_name is not None:
                cls._components[component_name] = name

    @classmethod
    def component_names(cls) -> list[str]:
        """Names of all registered components, sorted."""
        return sorted(cls._components)

    def __getattr__(self, name: str) -> Any:
        """Look up name in _components and return the bound method."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        components = getattr(type(self), '_components', {})
        if name in components and components[name] != name:
            return getattr(self, components[name])

        raise AttributeError(
            f"'{type(self).__name__}' has no element '{name}'"
        )

    def child(
        self,
        target: Element | None,
        tag: str,
        *children: Any,
        attributes: Mapping[str, Any] | Iterable[Any] | None = None,
        _stylesheet: str | Iterable[str] | None = None,
        _script: str | Iterable[str] | None = None,
        _vars: Mapping[str, Any] | None = None,
        **attr: Any,
    ) -> Element:
        """Create an element, optionally appended to target.

        Attributes are set before children are attached. The element is
        fully built before it touches target, so a failing call leaves
        target unchanged.

        Args:
            target: Element receiving the new child, or None for a
                detached element.
            tag: Element name.
            *children: Anything accepted by to_node().
            attributes: Attributes with verbatim names (use for names that
                are not Python identifiers, e.g. ``{'@click': 'go()'}``).
            _stylesheet: CSS fragment(s) attached to the element.
            _script: JavaScript fragment(s) attached to the element.
            _vars: CSS custom properties, ``{'gap': '1rem'}``.
            **attr: Attributes as kwargs (``class_`` -> ``class``,
                ``data_id`` -> ``data-id``).

        Returns:
            The new Element.

        Example:
            >>> builder.child(None, 'div', 'hello', class_='card')
            >>> builder.child(body, 'input', type='checkbox', checked=True)
        """
        element = Element(tag, builder=self)
        element.set_attributes(attributes, **attr)
        element.append(*children)

        for css in _as_fragments(_stylesheet):
            element.stylesheet(css)
        for js in _as_fragments(_script):
            element.script(js)
        for name, value in (_vars or {}).items():
            element.var(name, value)

        if target is not None:
            target.append(element)
        return element


def _as_fragments(value: str | Iterable[str] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)
