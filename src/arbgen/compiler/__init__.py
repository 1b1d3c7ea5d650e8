"""Loading, model construction and validation stages of the compiler."""

from .builder import build_model
from .loader import infer_locale_from_filename, load_bundles
from .model import (
    DocumentMetadata,
    KeyMetadata,
    LocalizationModel,
    Translation,
    TranslationEntry,
    classify_key,
)
from .placeholders import infer_placeholders, interpolate
from .validator import validate_model

__all__ = [
    "DocumentMetadata",
    "KeyMetadata",
    "LocalizationModel",
    "Translation",
    "TranslationEntry",
    "build_model",
    "classify_key",
    "infer_locale_from_filename",
    "infer_placeholders",
    "interpolate",
    "load_bundles",
    "validate_model",
]
