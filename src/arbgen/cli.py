"""Command-line entry point for generating localisation sources."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import GeneratorConfig, load_config
from .config.schema import DEFAULT_ARB_DIR, DEFAULT_DART_OUT, DEFAULT_LOCALE, DEFAULT_TS_OUT
from .errors import L10nError, UnknownConfigurationError
from .pipeline import compile_bundles, render_outputs, stale_outputs, write_outputs
from .version import get_project_version


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arbgen",
        description=(
            "Generate localisation files from .arb bundles, one for Dart and one for "
            "TypeScript."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "-a",
        "--arbs",
        dest="arb_dir",
        type=Path,
        help=f"Source directory for .arb files (default: {DEFAULT_ARB_DIR})",
    )
    parser.add_argument(
        "-d",
        "--dart-out",
        dest="dart_out",
        type=Path,
        help=f"Output Dart file (default: {DEFAULT_DART_OUT})",
    )
    parser.add_argument(
        "-t",
        "--ts-out",
        dest="ts_out",
        type=Path,
        help=f"Output TypeScript file (default: {DEFAULT_TS_OUT})",
    )
    parser.add_argument(
        "-f",
        "--fallback-language",
        dest="fallback_locale",
        help=(
            "Locale whose value fills keys missing from other locales (e.g. 'en'); "
            "without it every bundle must define every key"
        ),
    )
    parser.add_argument(
        "--default-locale",
        dest="default_locale",
        help=f"Locale the generated code falls back to at runtime (default: {DEFAULT_LOCALE})",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="YAML file providing any of the options above",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with an error if the generated files are out of date instead of writing them",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress details")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_project_version()}")
    return parser


def _resolve_config(
    parser: argparse.ArgumentParser,
    argv: Sequence[str] | None,
) -> tuple[GeneratorConfig, argparse.Namespace]:
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        parser.print_help()
        raise UnknownConfigurationError(unknown[0])

    overrides = {
        "arb_dir": args.arb_dir,
        "dart_out": args.dart_out,
        "ts_out": args.ts_out,
        "fallback_locale": args.fallback_locale,
        "default_locale": args.default_locale,
    }
    return load_config(args.config, overrides), args


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running the generator from the command line."""

    parser = _build_argument_parser()

    try:
        config, args = _resolve_config(parser, argv)
    except L10nError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        model = compile_bundles(config)
        outputs = render_outputs(model, config)
    except L10nError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1

    if args.check:
        stale = stale_outputs(outputs)
        if stale:
            for output in stale:
                print(f"[stale] {output.path}")
            return 1
        print(f"[ok] {len(outputs)} file(s) up to date")
        return 0

    write_outputs(outputs)
    for output in outputs:
        print(f"[written] {output.path}")
    print(f"[ok] {len(model.entries)} key(s), locales: {', '.join(model.locales)}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
