"""TypeScript target: typed lookup table, helper functions and an ``L10n`` class."""

from __future__ import annotations

from typing import Sequence

from ..compiler.model import LocalizationModel
from ..compiler.placeholders import PLACEHOLDER_PATTERN
from .base import Accessor, Emitter, GENERATED_HEADER
from .identifiers import sanitize_identifier

TS_RESERVED_WORDS = frozenset(
    {
        "arguments",
        "await",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "eval",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "implements",
        "import",
        "in",
        "instanceof",
        "interface",
        "let",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "static",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "yield",
    }
)

TS_CLASS_MEMBERS = frozenset({"constructor", "locale"})

# Module-level functions an accessor body calls by name.
TS_HELPER_NAMES = frozenset({"t"})


class TypeScriptEmitter(Emitter):
    """Emit a self-contained TypeScript module."""

    name = "typescript"
    reserved_words = TS_RESERVED_WORDS | TS_CLASS_MEMBERS
    escapes = {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }

    def parameter_identifier(self, name: str) -> str:
        return sanitize_identifier(name, self.reserved_words | TS_HELPER_NAMES)

    def _union(self, name: str, values: Sequence[str]) -> list[str]:
        if not values:
            return [f"export type {name} = never;"]
        if len(values) == 1:
            return [f"export type {name} = {self.quote(values[0])};"]
        lines = [f"export type {name} ="]
        for value in values:
            lines.append(f"  | {self.quote(value)}")
        lines.append(";")
        return lines

    def render(
        self,
        model: LocalizationModel,
        accessors: list[Accessor],
        default_locale: str,
    ) -> list[str]:
        locales = ", ".join(self.quote(locale) for locale in model.locales)
        lines = [
            GENERATED_HEADER,
            "/* eslint-disable */",
            "",
            f"export const locales = [{locales}] as const;",
            "",
            "export type Locale = (typeof locales)[number];",
            "",
            f"export const defaultLocale = {self.quote(default_locale)};",
            "",
        ]
        lines.extend(self._union("MessageKey", [accessor.key for accessor in accessors]))
        lines.append("")

        lines.append("const strings: Record<string, Record<string, string>> = {")
        for accessor in accessors:
            lines.append(f"  {self.quote(accessor.key)}: {{")
            for locale in model.locales:
                lines.append(f"    {self.quote(locale)}: {self.quote(accessor.values[locale])},")
            lines.append("  },")
        lines.append("};")
        lines.append("")

        lines.extend(
            [
                f"const placeholderPattern = /{PLACEHOLDER_PATTERN.pattern}/g;",
                "",
                "export function resolveLocale(locale: string): string {",
                "  return (locales as readonly string[]).includes(locale) ? locale : defaultLocale;",
                "}",
                "",
                "export function interpolate(s: string, params: Record<string, unknown> = {}): string {",
                "  return s.replace(placeholderPattern, (_match: string, name: string) => {",
                "    const value = params[name];",
                "    return value === undefined || value === null ? '' : String(value);",
                "  });",
                "}",
                "",
                "export function t(locale: string, key: string, params: Record<string, unknown> = {}): string {",
                "  const entry = strings[key];",
                "  const s = (entry && entry[resolveLocale(locale)]) ?? key;",
                "  return interpolate(s, params);",
                "}",
                "",
                "export class L10n {",
                "  readonly locale: string;",
                "",
                "  constructor(locale: string = defaultLocale) {",
                "    this.locale = resolveLocale(locale);",
                "  }",
            ]
        )

        for accessor in accessors:
            lines.append("")
            lines.extend(self._render_accessor(accessor))

        lines.append("}")
        return lines

    def _render_accessor(self, accessor: Accessor) -> list[str]:
        key = self.quote(accessor.key)
        if not accessor.has_parameters:
            return [
                f"  get {accessor.member}(): string {{",
                f"    return t(this.locale, {key});",
                "  }",
            ]

        bindings = ", ".join(
            parameter.identifier
            if parameter.identifier == parameter.name
            else f"{self.quote(parameter.name)}: {parameter.identifier}"
            for parameter in accessor.parameters
        )
        types = "; ".join(f"{self.quote(parameter.name)}: unknown" for parameter in accessor.parameters)
        return [
            f"  {accessor.member}({{ {bindings} }}: {{ {types} }}): string {{",
            f"    return t(this.locale, {key}, {{ {bindings} }});",
            "  }",
        ]


__all__ = ["TS_HELPER_NAMES", "TS_RESERVED_WORDS", "TypeScriptEmitter"]
