# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Context-dependent output encoding for HTML text, attributes and URLs.

Attribute values are always emitted inside double quotes, so a single
escaping routine covers both text content and attribute values.

References:
    - OWASP output encoding:
      https://cheatsheetseries.owasp.org/cheatsheets/Cross_Site_Scripting_Prevention_Cheat_Sheet.html
"""

from __future__ import annotations

import html
import re
from urllib.parse import quote, urlsplit

# Characters left untouched when percent-encoding a URL attribute value.
# Reserved URL delimiters and already-encoded sequences survive as-is.
_URL_SAFE = "/:?#[]@!$&()*+,;=%~-._"

SAFE_URL_SCHEMES = frozenset({"http", "https", "mailto", "tel", "ftp"})

_RAW_TEXT_END = re.compile(r"</(?=script|style)", re.IGNORECASE)


def escape_html(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and both quote characters.

    Example:
        >>> escape_html('a < b & "c"')
        'a &lt; b &amp; &quot;c&quot;'
    """
    return html.escape(text, quote=True)


def escape_attr(value: str) -> str:
    """Escape an attribute value for a double-quoted context."""
    return html.escape(value, quote=True)


def escape_raw_text(text: str) -> str:
    """Neutralize closing tags in script or style content.

    Raw text elements are not entity-decoded by browsers, so the content
    is written as is except for ``</script`` and ``</style``, which become
    ``<\\/script`` and ``<\\/style`` and can no longer end the element.

    Example:
        >>> escape_raw_text("a > b")
        'a > b'
        >>> escape_raw_text("s = '</script>'")
        "s = '<\\\\/script>'"
    """
    return _RAW_TEXT_END.sub(r"<\\/", text)


def encode_url(value: str) -> str | None:
    """Percent-encode a URL attribute value.

    Returns None when the URL uses a scheme outside SAFE_URL_SCHEMES
    (``javascript:``, ``vbscript:``, ...). Relative URLs have no scheme
    and are always accepted.

    Example:
        >>> encode_url('/about me')
        '/about%20me'
        >>> encode_url('javascript:alert(1)') is None
        True
    """
    candidate = value.strip()
    try:
        scheme = urlsplit(candidate).scheme
    except ValueError:
        return None
    if scheme and scheme.lower() not in SAFE_URL_SCHEMES:
        return None
    return quote(candidate, safe=_URL_SAFE)
