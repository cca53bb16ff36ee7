"""URI component percent-encoding."""
from __future__ import annotations

from typing import Any
from urllib.parse import quote

# Marks left unescaped in addition to ASCII letters and digits.
UNRESERVED_MARKS: str = "-_.!~*'()"


def encode_component(value: Any) -> str:
    """Percent-encode a value for use inside a URI path segment or query.

    The value is coerced with ``str()`` and every character outside the
    unreserved set (ASCII letters, digits and ``-_.!~*'()``) is UTF-8 encoded
    and written as ``%XX``.

    Examples:
        >>> encode_component("hello world")
        'hello%20world'
        >>> encode_component("a/b?c=d&e")
        'a%2Fb%3Fc%3Dd%26e'
        >>> encode_component(42)
        '42'
    """
    return quote(str(value), safe=UNRESERVED_MARKS, errors="surrogatepass")
