"""
YAML → catalog loader.

Loads the exercise, warm-up and stretch catalogs from the bundled
``src/hiit_circuits/catalogs/`` directory.  Each file holds one top-level
list (``exercises:``, ``warmups:`` or ``stretches:``) of flat entries.

User overrides: place a file with the same name in
``~/.hiit-circuits/catalogs/``.  User entries are merged by id: an entry
whose id matches a bundled one replaces it key by key, any other entry is
added to the catalog.

Usage (internal, called by registry.py):
    from .loader import load_exercise_catalog
    exercises = load_exercise_catalog()
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Callable, TypeVar

import yaml

from ..engine.config_loader import _deep_merge, get_user_config_dir
from ..models import Exercise, WarmupExercise

T = TypeVar("T")

_REQUIRED_EXERCISE_FIELDS: frozenset[str] = frozenset(
    {
        "id",
        "name",
        "instructions",
        "primary_muscle",
        "muscle_groups",
        "difficulty",
        "equipment",
    }
)

_REQUIRED_ITEM_FIELDS: frozenset[str] = frozenset(
    {"id", "name", "instructions", "target_body_parts", "duration"}
)


def exercise_from_dict(d: dict) -> Exercise:
    """Convert a raw dict (from YAML) to an Exercise.

    Raises ValueError if any required field is absent or out of range.
    """
    missing = _REQUIRED_EXERCISE_FIELDS - set(d)
    if missing:
        raise ValueError(f"Exercise missing fields: {sorted(missing)}")
    return Exercise(
        id=int(d["id"]),
        name=str(d["name"]),
        instructions=str(d["instructions"]),
        primary_muscle=str(d["primary_muscle"]),
        muscle_groups=tuple(str(m) for m in d["muscle_groups"]),
        difficulty=int(d["difficulty"]),
        equipment=tuple(str(e) for e in d["equipment"]),
    )


def item_from_dict(d: dict) -> WarmupExercise:
    """Convert a raw warm-up / stretch dict to a WarmupExercise."""
    missing = _REQUIRED_ITEM_FIELDS - set(d)
    if missing:
        raise ValueError(f"Warm-up item missing fields: {sorted(missing)}")
    return WarmupExercise(
        id=str(d["id"]),
        name=str(d["name"]),
        instructions=str(d["instructions"]),
        target_body_parts=tuple(str(p) for p in d["target_body_parts"]),
        duration=int(d["duration"]),
        equipment=tuple(str(e) for e in d.get("equipment", ["bodyweight"])),
    )


def _get_bundled_catalogs_dir() -> Path:
    # loader.py lives at src/hiit_circuits/core/catalog/loader.py
    # three levels up → src/hiit_circuits/
    return Path(__file__).parent.parent.parent / "catalogs"


def _get_user_catalogs_dir() -> Path | None:
    """Return ~/.hiit-circuits/catalogs/ if it exists, else None."""
    p = get_user_config_dir() / "catalogs"
    return p if p.is_dir() else None


def _read_entries(path: Path, key: str) -> list[dict]:
    """Read the list stored under key; raise ValueError on any problem."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ValueError(f"cannot read {path}: {exc}") from exc
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise ValueError(f"{path} has no '{key}' list")
    return [e for e in data[key] if isinstance(e, dict)]


def _merge_by_id(bundled: list[dict], user: list[dict]) -> list[dict]:
    merged = {str(e.get("id")): e for e in bundled}
    for entry in user:
        eid = str(entry.get("id"))
        merged[eid] = _deep_merge(merged[eid], entry) if eid in merged else entry
    return list(merged.values())


def load_catalog(filename: str, key: str, build: Callable[[dict], T]) -> list[T]:
    """Return the catalog stored in filename, with user overrides merged.

    Raises:
        RuntimeError: If the bundled file is missing, unreadable or yields
            no valid entries
    """
    bundled_path = _get_bundled_catalogs_dir() / filename
    try:
        raw = _read_entries(bundled_path, key)
    except ValueError as exc:
        raise RuntimeError(f"hiit-circuits: bundled catalog unusable ({exc})") from exc

    user_dir = _get_user_catalogs_dir()
    if user_dir is not None and (user_dir / filename).exists():
        try:
            raw = _merge_by_id(raw, _read_entries(user_dir / filename, key))
        except ValueError as exc:
            warnings.warn(f"hiit-circuits: ignoring user catalog ({exc})", stacklevel=2)

    result: list[T] = []
    for entry in raw:
        try:
            result.append(build(entry))
        except (ValueError, TypeError) as exc:
            warnings.warn(
                f"hiit-circuits: skipping {key} entry {entry.get('id')!r} ({exc})",
                stacklevel=2,
            )
    if not result:
        raise RuntimeError(f"hiit-circuits: no valid entries in {filename}")
    return result


def load_exercise_catalog() -> list[Exercise]:
    return load_catalog("exercises.yaml", "exercises", exercise_from_dict)


def load_warmup_catalog() -> list[WarmupExercise]:
    return load_catalog("warmups.yaml", "warmups", item_from_dict)


def load_stretch_catalog() -> list[WarmupExercise]:
    return load_catalog("stretches.yaml", "stretches", item_from_dict)
