"""Collapse repeated HTTP parameters to their last value (HPP protection)."""

from loguru import logger

# Silent unless the host opts in with logger.enable("hppshield").
logger.disable("hppshield")

from hppshield.accessors import (  # noqa: E402
    available_accessors,
    get_accessor,
    raw_body,
    register_accessor,
    url_search,
)
from hppshield.collapse import ParameterDecodeError, collapse, iter_pairs, repeated_keys  # noqa: E402
from hppshield.content_type import FORM_URLENCODED, is_form_urlencoded, media_type  # noqa: E402
from hppshield.middleware import (  # noqa: E402
    HppMiddleware,
    HppOptions,
    HppWSGIMiddleware,
    ParsedParameters,
    hpp,
)

__all__ = [
    "FORM_URLENCODED",
    "HppMiddleware",
    "HppOptions",
    "HppWSGIMiddleware",
    "ParameterDecodeError",
    "ParsedParameters",
    "available_accessors",
    "collapse",
    "get_accessor",
    "hpp",
    "is_form_urlencoded",
    "iter_pairs",
    "media_type",
    "raw_body",
    "register_accessor",
    "repeated_keys",
    "url_search",
]
