"""Compile ARB translation bundles into type-safe Dart and TypeScript accessors."""

from .errors import (
    BundleFormatError,
    ConfigurationError,
    L10nError,
    LocaleInferenceError,
    MissingTranslationError,
    UnknownConfigurationError,
)
from .pipeline import compile_bundles, generate, render_outputs

__all__ = [
    "BundleFormatError",
    "ConfigurationError",
    "L10nError",
    "LocaleInferenceError",
    "MissingTranslationError",
    "UnknownConfigurationError",
    "compile_bundles",
    "generate",
    "render_outputs",
]
