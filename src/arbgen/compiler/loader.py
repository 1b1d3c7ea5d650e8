"""Read ARB bundles from disk and resolve the locale each one belongs to."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict

from ..errors import BundleFormatError, LocaleInferenceError
from .model import DOCUMENT_METADATA_PREFIX

logger = logging.getLogger(__name__)

BUNDLE_SUFFIX = ".arb"
LOCALE_FIELD = f"{DOCUMENT_METADATA_PREFIX}locale"

_FILENAME_LOCALE_PATTERN = re.compile(r"_([a-z]{2}(?:-[A-Z]{2})?)\.[^.]+$")

Bundle = Dict[str, Any]


def infer_locale_from_filename(path: str | Path) -> str:
    """Derive a locale tag from a ``name_<lang>[-<REGION>].arb`` file name."""

    name = Path(path).name
    match = _FILENAME_LOCALE_PATTERN.search(name)
    if match is None:
        raise LocaleInferenceError(name)
    return match.group(1)


def resolve_locale(bundle: Bundle, path: str | Path) -> str:
    """Prefer the embedded ``@@locale`` field, then the file name."""

    declared = bundle.get(LOCALE_FIELD)
    if isinstance(declared, str) and declared.strip():
        return declared.strip()
    return infer_locale_from_filename(path)


def read_bundle(path: Path) -> Bundle:
    """Decode one bundle file into a mapping."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise BundleFormatError(f"Bundle {path.name} is not valid UTF-8 JSON: {error}") from error

    if not isinstance(payload, dict):
        raise BundleFormatError(f"Bundle {path.name} must define an object at the top level")
    return payload


def discover_bundle_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        raise BundleFormatError(f"Missing bundle directory: {directory}")
    return sorted(
        path for path in directory.iterdir() if path.is_file() and path.suffix == BUNDLE_SUFFIX
    )


def load_bundles(directory: str | Path) -> dict[str, Bundle]:
    """Load every bundle in ``directory`` keyed by its locale.

    Files are visited in sorted name order; when two files resolve to the same
    locale the later one replaces the earlier one wholesale.
    """

    bundles: dict[str, Bundle] = {}
    origins: dict[str, str] = {}

    for path in discover_bundle_files(Path(directory)):
        bundle = read_bundle(path)
        locale = resolve_locale(bundle, path)
        if locale in bundles:
            logger.warning(
                "Bundle %s overrides %s for locale %s", path.name, origins[locale], locale
            )
        logger.debug("Loaded %s as locale %s (%d fields)", path.name, locale, len(bundle))
        bundles[locale] = bundle
        origins[locale] = path.name

    return bundles


__all__ = [
    "BUNDLE_SUFFIX",
    "Bundle",
    "LOCALE_FIELD",
    "discover_bundle_files",
    "infer_locale_from_filename",
    "load_bundles",
    "read_bundle",
    "resolve_locale",
]
