"""Configuration loading for Bloggify Utils.

Settings come from three layers, later ones winning:

1. built-in defaults (the library's contract constants),
2. ``config/settings.yaml``,
3. environment variables, optionally loaded from a ``.env`` file.

Only the CLI consumes these settings; the library functions always use their
documented defaults unless a caller passes explicit arguments.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from bloggify.modules.blog_content.excerpt_generator import (
    DEFAULT_EXCERPT_LENGTH,
    DEFAULT_SUFFIX,
)
from bloggify.modules.blog_content.reading_time import DEFAULT_WORDS_PER_MINUTE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/settings.yaml"
DEFAULT_ENV_PATH = ".env"

DEFAULT_SETTINGS: dict[str, Any] = {
    "app": {"name": "Bloggify Utils"},
    "reading_time": {"words_per_minute": DEFAULT_WORDS_PER_MINUTE},
    "excerpt": {"length": DEFAULT_EXCERPT_LENGTH, "suffix": DEFAULT_SUFFIX, "word_count": 30},
    "slug": {"max_length": None},
}

# env var -> (section, key, is_int)
_ENV_OVERRIDES: dict[str, tuple[str, str, bool]] = {
    "BLOGGIFY_WORDS_PER_MINUTE": ("reading_time", "words_per_minute", True),
    "BLOGGIFY_EXCERPT_LENGTH": ("excerpt", "length", True),
    "BLOGGIFY_EXCERPT_SUFFIX": ("excerpt", "suffix", False),
    "BLOGGIFY_SLUG_MAX_LENGTH": ("slug", "max_length", True),
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *override* into a copy of *base*."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if value is None and isinstance(merged.get(key), dict):
            logger.warning("Config section %r is empty, keeping defaults.", key)
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_yaml(config_path: str, explicit: bool = True) -> dict[str, Any]:
    """Load the YAML configuration file.

    A missing file logs a warning when *explicit*, otherwise at debug level.
    """
    config_file = Path(config_path)
    if not config_file.exists():
        log = logger.warning if explicit else logger.debug
        log("Config file not found: %s, using defaults.", config_path)
        return {}
    with open(config_file, "r", encoding="utf-8") as fh:
        config = yaml.safe_load(fh) or {}
    if not isinstance(config, dict):
        logger.warning("Config file %s is not a mapping, ignoring it.", config_path)
        return {}
    logger.info("Configuration loaded from %s", config_path)
    return config


def _apply_env_overrides(settings: dict[str, Any]) -> None:
    """Overwrite settings from BLOGGIFY_* environment variables in place."""
    for env_name, (section, key, is_int) in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or raw.strip() == "":
            continue
        if not is_int:
            settings.setdefault(section, {})[key] = raw
            continue
        try:
            settings.setdefault(section, {})[key] = int(raw)
        except ValueError:
            logger.warning("Ignoring non-integer %s=%r", env_name, raw)


def load_settings(
    config_path: Optional[str] = None,
    env_path: Optional[str] = DEFAULT_ENV_PATH,
) -> dict[str, Any]:
    """Load settings from defaults, YAML file and environment.

    Args:
        config_path: Path to the YAML settings file.  Defaults to
            ``config/settings.yaml``, which may be absent.
        env_path: Path to a ``.env`` file, or None to skip it.

    Returns:
        Nested settings dict with ``app``, ``reading_time``, ``excerpt`` and
        ``slug`` sections.
    """
    if env_path:
        env_file = Path(env_path)
        if env_file.exists():
            load_dotenv(env_file)
            logger.info("Loaded environment from %s", env_path)

    explicit = config_path is not None
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    settings = _merge(DEFAULT_SETTINGS, _load_yaml(config_path, explicit))
    _apply_env_overrides(settings)
    return settings
