"""Completeness checks and placeholder inference over a built model."""

from __future__ import annotations

import logging

from ..errors import MissingTranslationError
from .model import LocalizationModel, TranslationEntry
from .placeholders import infer_placeholders

logger = logging.getLogger(__name__)


def _fill_missing_values(
    entry: TranslationEntry,
    locales: list[str],
    fallback_locale: str | None,
) -> None:
    for locale in locales:
        if locale in entry.values:
            continue
        if fallback_locale is not None and fallback_locale in entry.values:
            entry.values[locale] = entry.values[fallback_locale]
            logger.debug(
                "Filled %s for key %s from fallback %s", locale, entry.key, fallback_locale
            )
            continue
        raise MissingTranslationError(entry.key, locale)


def _resolve_placeholders(entry: TranslationEntry) -> None:
    inferred = infer_placeholders(entry.values.values())
    if not entry.placeholders:
        entry.placeholders.update(inferred)
        return

    # Explicit declarations are trusted as-is; a mismatch is only reported.
    if inferred != entry.placeholders:
        logger.warning(
            "Key %s declares placeholders {%s} but its values use {%s}",
            entry.key,
            ", ".join(sorted(entry.placeholders)),
            ", ".join(sorted(inferred)),
        )


def validate_model(
    model: LocalizationModel,
    fallback_locale: str | None = None,
) -> LocalizationModel:
    """Complete every entry in place and return the same model.

    Entries are visited in sorted key order and locales in model order, so the
    first :class:`MissingTranslationError` raised is always the same one for a
    given input.
    """

    if fallback_locale is not None and fallback_locale not in model.locales:
        logger.warning(
            "Fallback locale %s is not one of the bundle locales (%s)",
            fallback_locale,
            ", ".join(model.locales),
        )

    for entry in model.sorted_entries():
        _fill_missing_values(entry, model.locales, fallback_locale)
        _resolve_placeholders(entry)

    return model


__all__ = ["validate_model"]
