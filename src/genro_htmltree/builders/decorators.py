# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorators for builder component methods."""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from ..node import Element


def component(func: Callable | None = None, *, name: str | None = None) -> Callable:
    """Mark a builder method as a component.

    A component returns a ready-made node. When it is called through an
    element (``body.stack(2, items)``) the result is appended to that
    element; called on the builder directly it returns a detached node.
    BuilderBase registers every decorated method in _components.

    Args:
        name: Registered component name. Defaults to the method name.

    Example:
        >>> class ShopBuilder(HtmlBuilder):
        ...     @component
        ...     def price(self, amount, **attr):
        ...         return self.span(f'{amount:.2f} EUR', class_='price', **attr)
        ...
        >>> ShopBuilder().component_names()
        [..., 'price', ...]
    """
    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(self: Any, *args: Any, _target: Element | None = None, **kwargs: Any) -> Any:
            node = method(self, *args, **kwargs)
            if _target is not None:
                _target.append(node)
            return node

        wrapper._component_name = name or method.__name__
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
