"""In-memory localisation model shared by the builder, validator and emitters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

METADATA_PREFIX = "@"
DOCUMENT_METADATA_PREFIX = "@@"


@dataclass(frozen=True)
class DocumentMetadata:
    """A ``@@name`` field describing the bundle itself (e.g. ``@@locale``)."""

    name: str


@dataclass(frozen=True)
class KeyMetadata:
    """A ``@key`` field carrying metadata for the translation ``key``."""

    key: str


@dataclass(frozen=True)
class Translation:
    """A plain translatable ``key``."""

    key: str


BundleKey = Union[DocumentMetadata, KeyMetadata, Translation]


def classify_key(raw_key: str) -> BundleKey:
    """Classify a bundle field name by its metadata prefix."""

    if raw_key.startswith(DOCUMENT_METADATA_PREFIX):
        return DocumentMetadata(raw_key[len(DOCUMENT_METADATA_PREFIX):])
    if raw_key.startswith(METADATA_PREFIX):
        return KeyMetadata(raw_key[len(METADATA_PREFIX):])
    return Translation(raw_key)


@dataclass
class TranslationEntry:
    """All locale values for one key plus its placeholder names."""

    key: str
    values: dict[str, str] = field(default_factory=dict)
    placeholders: set[str] = field(default_factory=set)

    def value_for(self, locale: str) -> str:
        return self.values[locale]

    def sorted_placeholders(self) -> list[str]:
        return sorted(self.placeholders)


@dataclass
class LocalizationModel:
    """Supported locales and the translation entries keyed by their name."""

    locales: list[str]
    entries: dict[str, TranslationEntry] = field(default_factory=dict)

    def entry(self, key: str) -> TranslationEntry:
        """Return the entry for ``key``, creating it on first sight."""

        existing = self.entries.get(key)
        if existing is None:
            existing = self.entries[key] = TranslationEntry(key)
        return existing

    def sorted_entries(self) -> Iterator[TranslationEntry]:
        for key in sorted(self.entries):
            yield self.entries[key]


__all__ = [
    "BundleKey",
    "DOCUMENT_METADATA_PREFIX",
    "DocumentMetadata",
    "KeyMetadata",
    "LocalizationModel",
    "METADATA_PREFIX",
    "Translation",
    "TranslationEntry",
    "classify_key",
]
