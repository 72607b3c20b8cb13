# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders for HtmlTree - base class and the HTML5 implementation."""

from .base import BuilderBase
from .decorators import component
from .html import HTML_TAGS, HtmlBuilder, HtmlPage

__all__ = [
    'BuilderBase',
    'component',
    'HTML_TAGS',
    'HtmlBuilder',
    'HtmlPage',
]
