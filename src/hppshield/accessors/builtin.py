"""
Built-in accessors: functions turning a request object into a raw encoded string.

Requests are duck-typed. ``url_search`` needs a ``url`` attribute,
``raw_body`` a ``body`` attribute holding the buffered body and
``wsgi_query`` an ``environ`` mapping.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from hppshield.accessors.factory import register_accessor


@register_accessor("url_search")
def url_search(request: Any) -> str:
    """
    Return the query component of ``request.url`` (after ``?``, before ``#``).

    Used as the default for both query and body. For bodies it is only a
    placeholder; hosts enabling body checks should supply their own accessor.
    """
    url = getattr(request, "url", None)
    if not url:
        return ""
    return urlsplit(str(url)).query


@register_accessor("raw_body")
def raw_body(request: Any) -> str:
    """Return ``request.body`` as text, decoding ``bytes`` as UTF-8."""

    body = getattr(request, "body", None)
    if body is None:
        return ""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    return str(body)


@register_accessor("wsgi_query")
def wsgi_query(request: Any) -> str:
    """Return ``QUERY_STRING`` from ``request.environ``."""

    environ = getattr(request, "environ", None) or {}
    return environ.get("QUERY_STRING", "")
