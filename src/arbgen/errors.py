"""Exception hierarchy shared by every compilation stage."""

from __future__ import annotations


class L10nError(Exception):
    """Base class for fatal compilation failures."""


class LocaleInferenceError(L10nError):
    """Raised when a bundle's locale cannot be determined."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Cannot infer locale from: {source}")


class BundleFormatError(L10nError):
    """Raised when a bundle file cannot be decoded into a key-value mapping."""


class MissingTranslationError(L10nError):
    """Raised when a key lacks a value for a locale and no fallback applies."""

    def __init__(self, key: str, locale: str) -> None:
        self.key = key
        self.locale = locale
        super().__init__(f'Missing "{locale}" translation for key: {key}')


class ConfigurationError(L10nError, ValueError):
    """Raised when configuration values violate schema expectations."""


class UnknownConfigurationError(ConfigurationError):
    """Raised when an unrecognised configuration parameter is supplied."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"Unknown parameter: {parameter}")


__all__ = [
    "BundleFormatError",
    "ConfigurationError",
    "L10nError",
    "LocaleInferenceError",
    "MissingTranslationError",
    "UnknownConfigurationError",
]
