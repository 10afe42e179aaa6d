"""Configuration loader with support for drop-in directories and env overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from prompt_theme.config.schema import PromptConfig, parse_config
from prompt_theme.errors import ConfigFileError

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "prompt-theme" / "config.yaml"
DEFAULT_DROPIN_DIR = Path.home() / ".config" / "prompt-theme" / "conf.d"
ENV_PREFIX = "PROMPT_THEME_"


def normalize_mapping(data: Any, source: Path) -> dict[str, str]:
    """Turn a parsed YAML document into raw key/value strings.

    Documents are loaded with ``yaml.BaseLoader``, so every scalar is the
    text the user wrote. Empty values (``key:``) are dropped so the field
    keeps its default.
    """
    if data is None or data == "":
        return {}
    if not isinstance(data, dict):
        raise ConfigFileError(source, "top-level document must be a mapping")

    result: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigFileError(source, "nested values are not supported", field=str(key))
        if value == "":
            continue
        result[str(key)] = value
    return result


def load_yaml_file(path: Path) -> dict[str, str]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        LOGGER.debug("Config file %s not found, skipping", path)
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(path, f"cannot read: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigFileError(path, f"invalid YAML: {e}") from e
    LOGGER.debug("Loaded config file %s", path)
    return normalize_mapping(data, path)


def load_dropin_directory(dropin_dir: Path) -> dict[str, str]:
    """Load and merge all YAML files from drop-in directory.

    Files are applied in name order, ``*.yaml`` before ``*.yml``; later
    files override earlier ones.
    """
    if not dropin_dir.exists():
        LOGGER.debug("Drop-in directory %s not found, skipping", dropin_dir)
        return {}

    result: dict[str, str] = {}
    yaml_files = sorted(dropin_dir.glob("*.yaml")) + sorted(dropin_dir.glob("*.yml"))

    for yaml_file in yaml_files:
        result.update(load_yaml_file(yaml_file))

    return result


def load_env(
    environ: Mapping[str, str] | None = None,
    prefix: str = ENV_PREFIX,
) -> dict[str, str]:
    """Collect ``PROMPT_THEME_<FIELD>`` overrides from the environment.

    Args:
        environ: Environment mapping (default: os.environ)
        prefix: Variable name prefix

    Returns:
        Mapping of lowercased field names to raw values
    """
    if environ is None:
        environ = os.environ

    result: dict[str, str] = {}
    for name, value in environ.items():
        if not name.startswith(prefix) or len(name) == len(prefix):
            continue
        key = name[len(prefix):].lower()
        LOGGER.debug("Environment override %s=%r", key, value)
        result[key] = value
    return result


def load_raw_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
    use_env: bool = True,
) -> dict[str, str]:
    """Merge raw key/value strings from every configuration source.

    Precedence, lowest first: main config file, drop-in directory,
    environment variables.
    """
    # Resolve paths
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    elif isinstance(config_path, str):
        config_path = Path(config_path)

    if dropin_dir is None:
        dropin_dir = DEFAULT_DROPIN_DIR
    elif isinstance(dropin_dir, str):
        dropin_dir = Path(dropin_dir)

    raw = load_yaml_file(config_path)
    raw.update(load_dropin_directory(dropin_dir))
    if use_env:
        raw.update(load_env(environ))
    return raw


def load_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
    use_env: bool = True,
) -> PromptConfig:
    """Load configuration from file, drop-in directory and environment.

    Args:
        config_path: Path to main config file (default: ~/.config/prompt-theme/config.yaml)
        dropin_dir: Path to drop-in directory (default: ~/.config/prompt-theme/conf.d/)
        environ: Environment mapping (default: os.environ)
        use_env: Apply PROMPT_THEME_* environment overrides

    Returns:
        Parsed configuration object

    Raises:
        ConfigError: A source could not be read or a value is invalid
    """
    raw = load_raw_config(config_path, dropin_dir, environ=environ, use_env=use_env)
    return parse_config(raw)


def load_config_from_string(yaml_string: str) -> PromptConfig:
    """Load configuration from a YAML string (useful for testing)."""
    source = Path("<string>")
    try:
        data = yaml.load(yaml_string, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigFileError(source, f"invalid YAML: {e}") from e
    return parse_config(normalize_mapping(data, source))
