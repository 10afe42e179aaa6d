"""Configuration loading and schema definitions."""

from prompt_theme.config.loader import load_config, load_raw_config
from prompt_theme.config.schema import (
    PromptConfig,
    deserialize_bool,
    parse_config,
)

__all__ = [
    "PromptConfig",
    "deserialize_bool",
    "load_config",
    "load_raw_config",
    "parse_config",
]
