"""Shared model traversal for the per-language code emitters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Mapping

from ..compiler.model import LocalizationModel
from ..config.schema import DEFAULT_LOCALE
from .identifiers import sanitize_identifier, unique_identifier

GENERATED_HEADER = "// GENERATED - do not edit."


@dataclass(frozen=True)
class Parameter:
    """A placeholder name and the identifier it is bound to in generated code."""

    name: str
    identifier: str


@dataclass(frozen=True)
class Accessor:
    """Everything an emitter needs to write the member for one key."""

    key: str
    member: str
    parameters: tuple[Parameter, ...]
    values: Mapping[str, str]

    @property
    def has_parameters(self) -> bool:
        return bool(self.parameters)


class Emitter(ABC):
    """Render a validated :class:`LocalizationModel` as source text.

    Subclasses supply the syntax: string escaping, reserved words and the
    templates for the lookup table, helpers and accessor members. Keys are
    always visited in sorted order and placeholders are passed in sorted
    order, so identical models produce byte-identical output.
    """

    name: ClassVar[str]
    reserved_words: ClassVar[frozenset[str]] = frozenset()
    escapes: ClassVar[Mapping[str, str]] = {}

    def __init__(self, default_locale: str = DEFAULT_LOCALE) -> None:
        self.default_locale = default_locale

    def emit(self, model: LocalizationModel) -> str:
        lines = self.render(model, self.plan(model), self.resolve_default_locale(model))
        return "\n".join(lines) + "\n"

    @abstractmethod
    def render(
        self,
        model: LocalizationModel,
        accessors: list[Accessor],
        default_locale: str,
    ) -> list[str]:
        """Return the output as a list of lines without trailing newlines."""

    def escape(self, value: str) -> str:
        return value.translate(str.maketrans(dict(self.escapes)))

    def quote(self, value: str) -> str:
        return f"'{self.escape(value)}'"

    def member_identifier(self, key: str) -> str:
        return sanitize_identifier(key, self.reserved_words)

    def parameter_identifier(self, name: str) -> str:
        return sanitize_identifier(name, self.reserved_words)

    def resolve_default_locale(self, model: LocalizationModel) -> str:
        if self.default_locale in model.locales or not model.locales:
            return self.default_locale
        return model.locales[0]

    def plan(self, model: LocalizationModel) -> list[Accessor]:
        """Assign a unique member name and parameter list to every key."""

        accessors: list[Accessor] = []
        taken: set[str] = set()

        for entry in model.sorted_entries():
            member = unique_identifier(self.member_identifier(entry.key), taken)
            taken.add(member)

            bound: set[str] = set()
            parameters: list[Parameter] = []
            for name in entry.sorted_placeholders():
                identifier = unique_identifier(self.parameter_identifier(name), bound)
                bound.add(identifier)
                parameters.append(Parameter(name=name, identifier=identifier))

            # Missing locale values are a contract violation and raise KeyError.
            values = {locale: entry.value_for(locale) for locale in model.locales}
            accessors.append(
                Accessor(
                    key=entry.key,
                    member=member,
                    parameters=tuple(parameters),
                    values=values,
                )
            )

        return accessors


__all__ = ["Accessor", "Emitter", "GENERATED_HEADER", "Parameter"]
