"""Per-language code emitters sharing one traversal of the model."""

from __future__ import annotations

from ..errors import ConfigurationError
from .base import Accessor, Emitter, Parameter
from .dart import DartEmitter
from .identifiers import sanitize_identifier
from .typescript import TypeScriptEmitter

EMITTERS: dict[str, type[Emitter]] = {
    DartEmitter.name: DartEmitter,
    TypeScriptEmitter.name: TypeScriptEmitter,
}


def get_emitter(name: str, default_locale: str | None = None) -> Emitter:
    """Instantiate the emitter registered under ``name``."""

    try:
        emitter_cls = EMITTERS[name]
    except KeyError as exc:
        raise ConfigurationError(f"Unknown emitter: {name}") from exc
    if default_locale is None:
        return emitter_cls()
    return emitter_cls(default_locale=default_locale)


__all__ = [
    "Accessor",
    "DartEmitter",
    "EMITTERS",
    "Emitter",
    "Parameter",
    "TypeScriptEmitter",
    "get_emitter",
    "sanitize_identifier",
]
