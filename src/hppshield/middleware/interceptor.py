"""
Request interception step collapsing polluted query and form-body parameters.

The step has the connect-style shape ``(request, response, call_next)``. It
reads raw strings through the configured accessors, collapses them with
last-value-wins semantics and attaches the results to the request as
``query`` and ``body``. Exceptions from accessors or strict decoding are not
caught; they propagate to the host before ``call_next`` runs.
"""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger

from hppshield.accessors import url_search
from hppshield.collapse import collapse
from hppshield.content_type import is_form_urlencoded
from hppshield.middleware.options import HppOptions
from hppshield.middleware.request import ParsedParameters, header_value


class HppMiddleware:
    """Synchronous HPP filter bound to one immutable :class:`HppOptions`."""

    def __init__(self, options: HppOptions | None = None) -> None:
        self.options = options or HppOptions()

        if self.options.check_body and self.options.access_body is url_search:
            logger.warning(
                "Body checking uses the URL search placeholder accessor; "
                "pass access_body to read the buffered request body"
            )

    def __call__(
        self,
        request: Any,
        response: Any,
        call_next: Callable[..., Any],
    ) -> None:
        if self.options.enabled:
            self.parse(request).attach(request)
        call_next()

    def parse(self, request: Any) -> ParsedParameters:
        """Collapse the request's query and body without mutating it."""

        options = self.options
        query: dict[str, str] | None = None
        body: dict[str, str] | None = None

        if options.check_query:
            raw_query = options.access_query(request)
            if raw_query:
                query = collapse(raw_query, errors=options.decode_errors)

        if options.check_body and self._accepts_body(request):
            raw_body = options.access_body(request)
            if raw_body:
                body = collapse(raw_body, errors=options.decode_errors)

        return ParsedParameters(query=query, body=body)

    def _accepts_body(self, request: Any) -> bool:
        """Gate body parsing on a POST with a form-urlencoded content type."""

        method = getattr(request, "method", None) or ""
        if method.lower() != "post":
            logger.debug("Skipping body check method={method}", method=method)
            return False

        content_type = header_value(request, "content-type")
        if not is_form_urlencoded(content_type):
            logger.debug(
                "Skipping body check content_type={content_type}",
                content_type=content_type,
            )
            return False
        return True


def hpp(options: HppOptions | None = None, **overrides: Any) -> HppMiddleware:
    """
    Create an HPP middleware step.

    Args:
        options: Base configuration. Defaults to ``HppOptions()``.
        **overrides: Individual option fields (``check_query``, ``check_body``,
            ``access_query``, ``access_body``, ``strict_decoding``) applied on
            top of ``options``. Accessors may be callables or registered names.

    Returns:
        A callable ``(request, response, call_next) -> None``.
    """
    if overrides:
        base = (
            {name: getattr(options, name) for name in HppOptions.model_fields}
            if options is not None
            else {}
        )
        options = HppOptions(**{**base, **overrides})
    return HppMiddleware(options)
