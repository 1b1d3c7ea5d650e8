"""Fold per-locale bundles into a single :class:`LocalizationModel`."""

from __future__ import annotations

from typing import Any, Mapping

from .model import KeyMetadata, LocalizationModel, Translation, classify_key


def _record_values(model: LocalizationModel, locale: str, bundle: Mapping[str, Any]) -> None:
    for raw_key, value in bundle.items():
        kind = classify_key(raw_key)
        if not isinstance(kind, Translation):
            continue
        # Non-string values are data, not translations.
        if not isinstance(value, str):
            continue
        model.entry(kind.key).values[locale] = value


def _record_placeholders(model: LocalizationModel, bundle: Mapping[str, Any]) -> None:
    for raw_key, meta in bundle.items():
        kind = classify_key(raw_key)
        if not isinstance(kind, KeyMetadata):
            continue
        if not isinstance(meta, Mapping):
            continue
        declared = meta.get("placeholders")
        if not isinstance(declared, Mapping):
            continue
        entry = model.entries.get(kind.key)
        if entry is None:
            continue
        entry.placeholders.update(str(name) for name in declared)


def build_model(bundles: Mapping[str, Mapping[str, Any]]) -> LocalizationModel:
    """Merge ``locale -> bundle`` mappings into one model.

    Values are collected first so that ``@key`` metadata in any bundle can
    attach to an entry introduced by another bundle.
    """

    locales = sorted(bundles)
    model = LocalizationModel(locales=locales)

    for locale in locales:
        _record_values(model, locale, bundles[locale])

    for locale in locales:
        _record_placeholders(model, bundles[locale])

    return model


__all__ = ["build_model"]
