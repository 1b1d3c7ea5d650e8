"""Configuration schema and loaders for the generator."""

from .schema import GeneratorConfig
from .settings import build_config, load_config

__all__ = ["GeneratorConfig", "build_config", "load_config"]
