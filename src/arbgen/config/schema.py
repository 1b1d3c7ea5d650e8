"""Pydantic model describing the generator configuration."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from typing_extensions import Self

from ..errors import ConfigurationError

DEFAULT_ARB_DIR = Path("lib/l10n")
DEFAULT_DART_OUT = Path("lib/generated/l10n.g.dart")
DEFAULT_TS_OUT = Path("web/generated/l10n.ts")
DEFAULT_LOCALE = "en"

_LOCALE_TAG = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*$")


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class GeneratorConfig(ImmutableModel):
    """Settings for a single compilation run.

    Built once at the entry point and handed to every pipeline stage; nothing
    downstream reads process-wide defaults.
    """

    arb_dir: Path = DEFAULT_ARB_DIR
    dart_out: Path = DEFAULT_DART_OUT
    ts_out: Path = DEFAULT_TS_OUT
    fallback_locale: str | None = None
    default_locale: str = DEFAULT_LOCALE

    @field_validator("fallback_locale", mode="before")
    @classmethod
    def _blank_fallback_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("fallback_locale", "default_locale")
    @classmethod
    def _validate_locale_tag(cls, value: str | None) -> str | None:
        if value is None:
            return value
        value = value.strip()
        if not _LOCALE_TAG.match(value):
            raise ConfigurationError(f"Invalid locale tag: {value!r}")
        return value

    @field_validator("dart_out", "ts_out")
    @classmethod
    def _validate_output_path(cls, value: Path) -> Path:
        if not value.name:
            raise ConfigurationError("Output paths must name a file")
        return value

    @model_validator(mode="after")
    def _validate_distinct_outputs(self) -> Self:
        if self.dart_out == self.ts_out:
            raise ConfigurationError("Dart and TypeScript outputs must be different files")
        return self


__all__ = [
    "DEFAULT_ARB_DIR",
    "DEFAULT_DART_OUT",
    "DEFAULT_LOCALE",
    "DEFAULT_TS_OUT",
    "GeneratorConfig",
    "ImmutableModel",
]
