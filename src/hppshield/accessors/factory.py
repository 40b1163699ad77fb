"""
Name-to-accessor lookup table.

Lets configuration refer to accessors by name, e.g.
``HPPSHIELD_ACCESS_BODY=raw_body`` or ``hpp(access_body="raw_body")``.
Names are matched case-insensitively.
"""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger

Accessor = Callable[[Any], str]

_accessor_registry: dict[str, Accessor] = {}


def register_accessor(name: str) -> Callable[[Accessor], Accessor]:
    """Decorator making an accessor function resolvable by ``name``."""

    key = name.lower()

    def decorator(func: Accessor) -> Accessor:
        if not callable(func):
            raise TypeError(f"Accessor '{key}' must be callable, got {type(func).__name__}")
        if key in _accessor_registry:
            raise ValueError(f"An accessor named '{key}' exists already")
        _accessor_registry[key] = func
        logger.debug("Accessor available name={name}", name=key)
        return func

    return decorator


def get_accessor(name: str) -> Accessor:
    """Resolve an accessor by name."""

    key = name.lower()
    if key not in _accessor_registry:
        known = ", ".join(sorted(_accessor_registry)) or "none"
        raise KeyError(f"No accessor named '{key}' (known: {known})")
    return _accessor_registry[key]


def available_accessors() -> dict[str, Accessor]:
    """Snapshot of the registered accessors by name."""

    return dict(_accessor_registry)
