# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AttributeSet - ordered HTML attributes with boolean attribute support.

Attribute names are validated when they are set; values are stored raw and
escaped only at render time. A value of None marks a boolean attribute,
rendered as the bare name (``<input disabled>``).

Example:
    >>> attrs = attributes(('id', 'main'), 'hidden', class_='card')
    >>> list(attrs)
    [('id', 'main'), ('hidden', None), ('class', 'card')]
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Iterator

from .encoding import encode_url
from .exceptions import InvalidAttributeError

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"""^[^\s"'>/=\x00-\x1f\x7f]+$""")

# Attributes whose value is a list of tokens. merge() joins them instead of
# replacing the existing value.
SPACE_SEPARATED = frozenset({
    "accesskey", "blocking", "class", "for", "headers", "itemprop",
    "itemref", "itemtype", "ping", "rel", "sandbox", "sizes",
})

COMMA_SEPARATED = frozenset({"accept", "imagesrcset"})

URL_ATTRIBUTES = frozenset({
    "action", "cite", "data", "formaction", "href", "poster", "src",
})

AttributePair = tuple[str, "str | None"]


def python_name_to_attribute(name: str) -> str:
    """Translate a Python keyword argument into an HTML attribute name.

    A single trailing underscore is dropped (``class_`` -> ``class``) and
    the remaining underscores become dashes (``data_count`` -> ``data-count``).
    """
    if name.endswith("_") and len(name) > 1:
        name = name[:-1]
    return name.replace("_", "-")


def validate_attribute_name(name: Any) -> str:
    """Return name unchanged or raise InvalidAttributeError."""
    if not isinstance(name, str) or not _NAME_PATTERN.match(name):
        raise InvalidAttributeError(f"Invalid attribute name: {name!r}")
    return name


class AttributeSet:
    """Ordered mapping of attribute name to optional string value.

    Names are unique: setting a name twice keeps its first position and
    the last value. Iteration yields (name, value) pairs in insertion
    order, which is also the render order.
    """

    __slots__ = ("_items",)

    def __init__(self, pairs: Iterable[AttributePair | str] | None = None) -> None:
        self._items: dict[str, str | None] = {}
        if pairs:
            for pair in pairs:
                if isinstance(pair, str):
                    self.set(pair)
                else:
                    self.set(*pair)

    @classmethod
    def from_pairs(cls, pairs: Iterable[AttributePair | str]) -> AttributeSet:
        """Build an AttributeSet from (name, value) pairs or bare names."""
        return cls(pairs)

    def __repr__(self) -> str:
        return f"AttributeSet({list(self._items.items())!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[AttributePair]:
        return iter(self._items.items())

    def __contains__(self, name: str) -> bool:
        return name in self._items

    def __getitem__(self, name: str) -> str | None:
        return self._items[name]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeSet):
            return NotImplemented
        return list(self._items.items()) == list(other._items.items())

    def names(self) -> list[str]:
        return list(self._items)

    def items(self) -> list[AttributePair]:
        return list(self._items.items())

    def get(self, name: str, default: Any = None) -> Any:
        return self._items.get(name, default)

    def copy(self) -> AttributeSet:
        clone = AttributeSet()
        clone._items = dict(self._items)
        return clone

    def set(self, name: str, value: Any = None) -> None:
        """Add or replace an attribute.

        Args:
            name: Attribute name. Must not contain whitespace, quotes,
                ``>``, ``/``, ``=`` or control characters.
            value: None or True for a boolean attribute, False to drop the
                attribute, anything else is converted with str().

        Raises:
            InvalidAttributeError: If the name is malformed.
        """
        validate_attribute_name(name)

        if value is False:
            self._items.pop(name, None)
            return
        if value is None or value is True:
            self._items[name] = None
            return

        text = str(value)
        if name in URL_ATTRIBUTES:
            encoded = encode_url(text)
            if encoded is None:
                logger.warning("Dropping %s attribute with unsafe URL %r", name, text)
                self._items.pop(name, None)
                return
            text = encoded
        self._items[name] = text

    def merge(self, name: str, value: Any) -> None:
        """Join value onto a token-list attribute, or set it otherwise.

        Space separated attributes (class, rel, ...) are joined with a
        space, comma separated ones (accept, imagesrcset) with a comma.
        Tokens already present are not repeated.
        """
        current = self._items.get(name)
        if current is None or value is None or isinstance(value, bool):
            self.set(name, value)
            return

        if name in SPACE_SEPARATED:
            separator = " "
        elif name in COMMA_SEPARATED:
            separator = ","
        else:
            self.set(name, value)
            return

        tokens = [t.strip() for t in current.split(separator) if t.strip()]
        for token in str(value).split(separator):
            token = token.strip()
            if token and token not in tokens:
                tokens.append(token)
        self._items[name] = separator.join(tokens)

    def remove(self, name: str) -> None:
        self._items.pop(name, None)


def apply_keywords(attrs: AttributeSet, keywords: dict[str, Any], merge: bool = False) -> AttributeSet:
    """Set keyword-style attributes on attrs.

    Names go through python_name_to_attribute(). True makes a boolean
    attribute; None and False leave the attribute out, so optional values
    can be passed straight through (``lang=lang``).
    """
    for key, value in keywords.items():
        if value is None:
            continue
        name = python_name_to_attribute(key)
        if merge:
            attrs.merge(name, value)
        else:
            attrs.set(name, value)
    return attrs


def attributes(*pairs: AttributePair | str, **kwargs: Any) -> AttributeSet:
    """Build an AttributeSet from positional pairs and keyword arguments.

    Positional items are (name, value) tuples or bare names for boolean
    attributes; they are used verbatim. Keyword names go through
    python_name_to_attribute(), so ``class_='x'`` and ``data_id=3`` work.

    Example:
        >>> list(attributes('disabled', ('id', 'save'), type='submit'))
        [('disabled', None), ('id', 'save'), ('type', 'submit')]
    """
    return apply_keywords(AttributeSet(pairs), kwargs)
