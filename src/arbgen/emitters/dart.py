"""Dart target: a const lookup table and an ``L10n`` accessor class."""

from __future__ import annotations

from ..compiler.model import LocalizationModel
from ..compiler.placeholders import PLACEHOLDER_PATTERN
from .base import Accessor, Emitter, GENERATED_HEADER

DART_RESERVED_WORDS = frozenset(
    {
        "abstract",
        "as",
        "assert",
        "async",
        "await",
        "base",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "covariant",
        "default",
        "deferred",
        "do",
        "dynamic",
        "else",
        "enum",
        "export",
        "extends",
        "extension",
        "external",
        "factory",
        "false",
        "final",
        "finally",
        "for",
        "Function",
        "get",
        "hide",
        "if",
        "implements",
        "import",
        "in",
        "interface",
        "is",
        "late",
        "library",
        "mixin",
        "new",
        "null",
        "on",
        "operator",
        "part",
        "required",
        "rethrow",
        "return",
        "sealed",
        "set",
        "show",
        "static",
        "super",
        "switch",
        "sync",
        "this",
        "throw",
        "true",
        "try",
        "typedef",
        "var",
        "void",
        "when",
        "while",
        "with",
        "yield",
    }
)

# Members already defined on the generated class or inherited from Object, plus
# the library-level names the class body refers to.
DART_CLASS_MEMBERS = frozenset(
    {
        "L10n",
        "_strings",
        "defaultLocale",
        "hashCode",
        "interpolate",
        "locale",
        "noSuchMethod",
        "resolveLocale",
        "runtimeType",
        "supportedLocales",
        "t",
        "toString",
    }
)


class DartEmitter(Emitter):
    """Emit a self-contained Dart library."""

    name = "dart"
    reserved_words = DART_RESERVED_WORDS | DART_CLASS_MEMBERS
    escapes = {
        "\\": "\\\\",
        "'": "\\'",
        "$": "\\$",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }

    def parameter_identifier(self, name: str) -> str:
        identifier = super().parameter_identifier(name)
        # Named parameters may not be library-private.
        if identifier.startswith("_"):
            identifier = f"p{identifier}"
        return identifier

    def render(
        self,
        model: LocalizationModel,
        accessors: list[Accessor],
        default_locale: str,
    ) -> list[str]:
        locales = ", ".join(self.quote(locale) for locale in model.locales)
        lines = [
            GENERATED_HEADER,
            "// ignore_for_file: type=lint",
            "",
            f"const supportedLocales = <String>[{locales}];",
            "",
            f"const defaultLocale = {self.quote(default_locale)};",
            "",
        ]

        lines.append("const _strings = <String, Map<String, String>>{")
        for accessor in accessors:
            lines.append(f"  {self.quote(accessor.key)}: {{")
            for locale in model.locales:
                lines.append(f"    {self.quote(locale)}: {self.quote(accessor.values[locale])},")
            lines.append("  },")
        lines.append("};")
        lines.append("")

        lines.extend(
            [
                f"final _placeholderPattern = RegExp(r'{PLACEHOLDER_PATTERN.pattern}');",
                "",
                "String resolveLocale(String locale) =>",
                "    supportedLocales.contains(locale) ? locale : defaultLocale;",
                "",
                "String interpolate(String s, Map<String, Object?> params) =>",
                "    s.replaceAllMapped(_placeholderPattern, (m) => '${params[m[1]] ?? ''}');",
                "",
                "class L10n {",
                "  final String locale;",
                "",
                "  L10n([String locale = defaultLocale]) : locale = resolveLocale(locale);",
                "",
                "  String t(String key, [Map<String, Object?> params = const {}]) {",
                "    final s = _strings[key]?[locale] ?? key;",
                "    return interpolate(s, params);",
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
            return [f"  String get {accessor.member} => t({key});"]

        signature = ", ".join(
            f"required Object? {parameter.identifier}" for parameter in accessor.parameters
        )
        params = ", ".join(
            f"{self.quote(parameter.name)}: {parameter.identifier}"
            for parameter in accessor.parameters
        )
        return [
            f"  String {accessor.member}({{{signature}}}) =>",
            f"      t({key}, {{{params}}});",
        ]


__all__ = ["DART_RESERVED_WORDS", "DartEmitter"]
