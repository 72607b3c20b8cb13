# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTree exceptions."""

from __future__ import annotations


class HtmlTreeError(Exception):
    """Base exception for HtmlTree construction errors."""

    pass


class InvalidTagError(HtmlTreeError):
    """Raised when an element is created with a malformed tag name."""

    pass


class InvalidAttributeError(HtmlTreeError):
    """Raised when an attribute name contains illegal characters."""

    pass


class VoidElementError(HtmlTreeError):
    """Raised when children are appended to a void element (br, img, ...)."""

    pass


class AttributesLockedError(HtmlTreeError):
    """Raised when attributes are replaced after children were attached."""

    pass


class NodeOwnershipError(HtmlTreeError):
    """Raised when a node would end up owned by two parents or by itself."""

    pass
