"""HPP interception step and host-framework adapters."""

from hppshield.middleware.interceptor import HppMiddleware, hpp
from hppshield.middleware.options import HppOptions
from hppshield.middleware.request import ParsedParameters, header_value
from hppshield.middleware.wsgi import HppWSGIMiddleware, WSGIRequest

__all__ = [
    "HppMiddleware",
    "HppOptions",
    "HppWSGIMiddleware",
    "ParsedParameters",
    "WSGIRequest",
    "header_value",
    "hpp",
]
