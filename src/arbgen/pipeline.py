"""End-to-end compilation: load, build, validate, render, write."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .compiler import LocalizationModel, build_model, load_bundles, validate_model
from .config.schema import GeneratorConfig
from .emitters import DartEmitter, TypeScriptEmitter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedOutput:
    """Rendered source text and the file it belongs in."""

    path: Path
    content: str

    def is_current(self) -> bool:
        if not self.path.is_file():
            return False
        return self.path.read_bytes() == self.content.encode("utf-8")


def compile_bundles(config: GeneratorConfig) -> LocalizationModel:
    """Return the validated model for the bundles in ``config.arb_dir``."""

    bundles = load_bundles(config.arb_dir)
    model = build_model(bundles)
    logger.info(
        "Built model with %d keys across locales: %s",
        len(model.entries),
        ", ".join(model.locales) or "(none)",
    )
    return validate_model(model, fallback_locale=config.fallback_locale)


def render_outputs(model: LocalizationModel, config: GeneratorConfig) -> list[GeneratedOutput]:
    """Render both targets in memory."""

    return [
        GeneratedOutput(
            path=config.dart_out,
            content=DartEmitter(default_locale=config.default_locale).emit(model),
        ),
        GeneratedOutput(
            path=config.ts_out,
            content=TypeScriptEmitter(default_locale=config.default_locale).emit(model),
        ),
    ]


def stale_outputs(outputs: list[GeneratedOutput]) -> list[GeneratedOutput]:
    """Return the outputs whose file on disk differs from the rendered text."""

    return [output for output in outputs if not output.is_current()]


def write_outputs(outputs: list[GeneratedOutput]) -> None:
    for output in outputs:
        output.path.parent.mkdir(parents=True, exist_ok=True)
        output.path.write_text(output.content, encoding="utf-8", newline="\n")
        logger.info("Wrote %s", output.path)


def generate(config: GeneratorConfig) -> list[GeneratedOutput]:
    """Compile the bundles and write both outputs.

    Nothing is written unless every stage, including both renders, succeeds.
    """

    model = compile_bundles(config)
    outputs = render_outputs(model, config)
    write_outputs(outputs)
    return outputs


__all__ = [
    "GeneratedOutput",
    "compile_bundles",
    "generate",
    "render_outputs",
    "stale_outputs",
    "write_outputs",
]
