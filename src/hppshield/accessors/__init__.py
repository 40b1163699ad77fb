"""Accessors supplying raw encoded strings from host request objects."""

# Import for side effects so the decorator-based registry populates eagerly.
from hppshield.accessors import builtin as _builtin  # noqa: F401
from hppshield.accessors.builtin import raw_body, url_search, wsgi_query
from hppshield.accessors.factory import (
    Accessor,
    available_accessors,
    get_accessor,
    register_accessor,
)

__all__ = [
    "Accessor",
    "available_accessors",
    "get_accessor",
    "raw_body",
    "register_accessor",
    "url_search",
    "wsgi_query",
]
