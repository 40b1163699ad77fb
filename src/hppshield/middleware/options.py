from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hppshield.accessors import Accessor, get_accessor, url_search
from hppshield.settings import Settings, settings


class HppOptions(BaseModel):
    """Configuration for one middleware instance, fixed at start-up."""

    check_query: bool = True
    check_body: bool = False
    access_query: Accessor = Field(default=url_search)
    access_body: Accessor = Field(default=url_search)  # placeholder, see url_search
    strict_decoding: bool = False

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("access_query", "access_body", mode="before")
    @classmethod
    def _resolve_accessor(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return get_accessor(value)
            except KeyError as exc:
                raise ValueError(exc.args[0]) from exc
        return value

    @property
    def enabled(self) -> bool:
        return self.check_query or self.check_body

    @property
    def decode_errors(self) -> str:
        return "strict" if self.strict_decoding else "replace"

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> HppOptions:
        """Build options from environment-driven settings."""

        source = source or settings
        return cls(
            check_query=source.check_query,
            check_body=source.check_body,
            access_query=source.access_query,
            access_body=source.access_body,
            strict_decoding=source.strict_decoding,
        )
