from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class ParsedParameters:
    """Collapsed parameters produced for a single request."""

    query: dict[str, str] | None = None
    body: dict[str, str] | None = None

    def attach(self, request: Any) -> None:
        """Set ``request.query`` / ``request.body`` for the members that were produced."""

        if self.query is not None:
            request.query = self.query
        if self.body is not None:
            request.body = self.body


def header_value(request: Any, name: str) -> str | None:
    """Look up a request header case-insensitively; ``None`` when absent."""

    headers: Mapping[str, str] | None = getattr(request, "headers", None)
    if not headers:
        return None

    value = headers.get(name)
    if value is not None:
        return value

    wanted = name.lower()
    for key, candidate in headers.items():
        if key.lower() == wanted:
            return candidate
    return None
