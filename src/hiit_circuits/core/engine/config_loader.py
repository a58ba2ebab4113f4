"""
YAML → classifier config loader.

Two sources are read, later ones overriding earlier ones key by key:

  1. classifiers.yaml bundled with the package
  2. ~/.hiit-circuits/classifiers.yaml (optional user override)

Recognised keys:

  cardio_keywords, core_keywords,
  warmup_stretch_keywords, warmup_active_keywords
      lists of lowercase name fragments
  composite_muscle_groups
      mapping of composite name → list of member groups; user entries are
      added to (or replace) the built-in composites

Values of the wrong shape are dropped with a warning so the Python
defaults in config.py apply.  An unreadable user file is ignored with a
warning; the bundled file is expected to parse.
"""

from __future__ import annotations

import importlib.resources
import os
import warnings
from pathlib import Path
from typing import Any

import yaml

KEYWORD_KEYS: tuple[str, ...] = (
    "cardio_keywords",
    "core_keywords",
    "warmup_stretch_keywords",
    "warmup_active_keywords",
)
COMPOSITES_KEY = "composite_muscle_groups"


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def get_user_config_dir() -> Path:
    """Return ~/.hiit-circuits (not created)."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    return home / ".hiit-circuits"


def read_yaml_mapping(path: Path, required: bool = False) -> dict[str, Any]:
    """
    Read a YAML file whose top level is a mapping.

    Args:
        path: File to read
        required: Raise instead of warning when the file is unusable

    Returns:
        The mapping, or {} when the file is unusable and not required

    Raises:
        RuntimeError: If required and the file is missing, unparsable or
            not a mapping
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        if required:
            raise RuntimeError(f"Cannot read {path}: {exc}") from exc
        warnings.warn(f"hiit-circuits: ignoring {path} ({exc})", stacklevel=2)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        if required:
            raise RuntimeError(f"{path} must contain a mapping at the top level")
        warnings.warn(f"hiit-circuits: ignoring {path} (top level is not a mapping)", stacklevel=2)
        return {}
    return data


def _clean_keywords(value: Any, key: str, source: Path) -> tuple[str, ...] | None:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        warnings.warn(f"hiit-circuits: {source}: '{key}' must be a list of strings", stacklevel=3)
        return None
    return tuple(v.strip().lower() for v in value if v.strip())


def _clean_composites(value: Any, source: Path) -> dict[str, tuple[str, ...]]:
    if not isinstance(value, dict):
        warnings.warn(f"hiit-circuits: {source}: '{COMPOSITES_KEY}' must be a mapping", stacklevel=3)
        return {}
    result: dict[str, tuple[str, ...]] = {}
    for name, members in value.items():
        if isinstance(members, list) and members and all(isinstance(m, str) for m in members):
            result[str(name)] = tuple(members)
        else:
            warnings.warn(
                f"hiit-circuits: {source}: composite '{name}' needs a non-empty list of groups",
                stacklevel=3,
            )
    return result


def normalize_classifier_config(raw: dict[str, Any], source: Path) -> dict[str, Any]:
    """Keep only well-formed recognised keys of one config source."""
    cfg: dict[str, Any] = {}
    for key in KEYWORD_KEYS:
        if key in raw:
            keywords = _clean_keywords(raw[key], key, source)
            if keywords is not None:
                cfg[key] = keywords
    if COMPOSITES_KEY in raw:
        cfg[COMPOSITES_KEY] = _clean_composites(raw[COMPOSITES_KEY], source)
    return cfg


def get_bundled_yaml_path() -> Path:
    """Return the path of the bundled classifiers.yaml."""
    return Path(str(importlib.resources.files("hiit_circuits").joinpath("classifiers.yaml")))


def get_user_yaml_path() -> Path | None:
    """Return ~/.hiit-circuits/classifiers.yaml if it exists, else None."""
    p = get_user_config_dir() / "classifiers.yaml"
    return p if p.exists() else None


def load_classifier_config() -> dict[str, Any]:
    """
    Load and merge classifier configuration.

    Returns:
        Dict with any of the keyword keys (tuples of strings) and
        composite_muscle_groups (name → tuple of groups).  Missing keys
        mean "use the config.py default".

    Raises:
        RuntimeError: If the bundled classifiers.yaml is unusable
    """
    bundled = get_bundled_yaml_path()
    config = normalize_classifier_config(read_yaml_mapping(bundled, required=True), bundled)

    user = get_user_yaml_path()
    if user is not None:
        user_cfg = normalize_classifier_config(read_yaml_mapping(user), user)
        config = _deep_merge(config, user_cfg)

    return config
