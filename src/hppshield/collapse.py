"""
Last-value-wins parsing of percent/form-encoded strings.

Repeated keys are the raw material of HTTP Parameter Pollution: frameworks
disagree on whether ``a=1&a=2`` means ``"1"``, ``"2"`` or ``["1", "2"]``.
Collapsing every key to the value of its rightmost occurrence gives
downstream code a single, deterministic string per key.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterator
from urllib.parse import unquote_plus

from loguru import logger

PAIR_SEPARATOR = "&"
KEY_VALUE_SEPARATOR = "="


class ParameterDecodeError(ValueError):
    """Raised when strict decoding meets an invalid UTF-8 escape sequence."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"Cannot decode parameter token '{token}': {reason}")
        self.token = token


def _strip_search_prefix(raw: str) -> str:
    return raw[1:] if raw.startswith("?") else raw


def _decode_component(text: str, errors: str) -> str:
    """Decode ``+`` to space, then ``%XX`` escapes as UTF-8."""

    if "%" not in text and "+" not in text:
        return text
    try:
        return unquote_plus(text, encoding="utf-8", errors=errors)
    except UnicodeDecodeError as exc:
        raise ParameterDecodeError(text, exc.reason) from exc


def iter_pairs(
    raw: str | None, *, errors: str = "replace"
) -> Iterator[tuple[str, str]]:
    """
    Yield decoded ``(key, value)`` pairs in textual order, duplicates included.

    Empty tokens (``&&``, leading or trailing ``&``) are skipped. A token
    without ``=`` yields an empty value; ``=value`` yields the empty key.

    Args:
        raw: Encoded string, optionally starting with ``?``.
        errors: Codec error handler used for UTF-8 decoding. ``"strict"``
            turns invalid escapes into :class:`ParameterDecodeError`.
    """
    if not raw:
        return

    for token in _strip_search_prefix(raw).split(PAIR_SEPARATOR):
        if not token:
            continue

        if KEY_VALUE_SEPARATOR in token:
            key, value = token.split(KEY_VALUE_SEPARATOR, 1)
        else:
            key, value = token, ""

        yield _decode_component(key, errors), _decode_component(value, errors)


def repeated_keys(raw: str | None, *, errors: str = "replace") -> set[str]:
    """Return the decoded keys that occur more than once in ``raw``."""

    counts = Counter(key for key, _ in iter_pairs(raw, errors=errors))
    return {key for key, count in counts.items() if count > 1}


def collapse(raw: str | None, *, errors: str = "replace") -> dict[str, str]:
    """
    Parse ``raw`` into a flat mapping where the last occurrence of a key wins.

    >>> collapse("username=admin&role=admin&username=guest")
    {'username': 'guest', 'role': 'admin'}
    """
    params: dict[str, str] = {}
    seen_twice: set[str] = set()

    for key, value in iter_pairs(raw, errors=errors):
        if key in params:
            seen_twice.add(key)
        params[key] = value

    if seen_twice:
        logger.debug(
            "Collapsed repeated parameters keys={keys}", keys=sorted(seen_twice)
        )
    return params
