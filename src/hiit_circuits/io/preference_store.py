"""
JSON-based preference storage.

Handles reading and writing the user's owned equipment, avoided exercises
and warm-up / cool-down durations, and resolves them into the explicit
arguments the generation functions take.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.config import BODYWEIGHT, DEFAULT_COOLDOWN_ITEM_SECONDS, DEFAULT_WARMUP_ITEM_SECONDS
from ..core.equipment import normalize_selection
from ..core.models import DurationPreferences, GenerationInputs
from .serializers import ValidationError, validate_item_duration


class PreferenceStore:
    """
    Manages user preferences stored in a single JSON file.

    Layout:
        {
          "ownedEquipment": ["bodyweight", "dumbbells"],
          "avoidedExercises": [12, 40],
          "durations": {"warmupDuration": 20, "cooldownDuration": 30,
                        "lastUpdated": "2024-01-01T10:00:00"}
        }

    Every key is optional; missing keys fall back to defaults.
    """

    def __init__(self, path: str | Path):
        """
        Initialize the preference store.

        Args:
            path: Path to the JSON preferences file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        """Check if the preferences file exists."""
        return self.path.exists()

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Error parsing {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError(f"{self.path} must contain a JSON object")
        return data

    def _save(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)

    # ------------------------------------------------------------------
    # Equipment
    # ------------------------------------------------------------------

    def load_owned_equipment(self) -> list[str]:
        """
        Return the owned equipment ids; bodyweight is always included.

        Raises:
            ValidationError: If the stored list holds unknown ids
        """
        owned = self._load().get("ownedEquipment", [BODYWEIGHT])
        try:
            return normalize_selection(owned)
        except ValueError as e:
            raise ValidationError(str(e)) from e

    def save_owned_equipment(self, equipment: list[str]) -> list[str]:
        """
        Store owned equipment after normalizing it.

        Returns:
            The normalized list that was stored

        Raises:
            ValidationError: If any id is unknown
        """
        try:
            normalized = normalize_selection(equipment)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        data = self._load()
        data["ownedEquipment"] = normalized
        self._save(data)
        return normalized

    # ------------------------------------------------------------------
    # Avoidance list
    # ------------------------------------------------------------------

    def load_avoided(self) -> set[int]:
        """Return the ids of exercises the user never wants."""
        raw = self._load().get("avoidedExercises", [])
        try:
            return {int(x) for x in raw}
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid avoidedExercises entry: {e}") from e

    def _save_avoided(self, ids: set[int]) -> None:
        data = self._load()
        data["avoidedExercises"] = sorted(ids)
        self._save(data)

    def add_avoided(self, exercise_id: int) -> bool:
        """
        Add an exercise id to the avoidance list.

        Returns:
            False if the id was already avoided
        """
        ids = self.load_avoided()
        if exercise_id in ids:
            return False
        ids.add(exercise_id)
        self._save_avoided(ids)
        return True

    def remove_avoided(self, exercise_id: int) -> bool:
        """
        Remove an exercise id from the avoidance list.

        Returns:
            False if the id was not in the list
        """
        ids = self.load_avoided()
        if exercise_id not in ids:
            return False
        ids.discard(exercise_id)
        self._save_avoided(ids)
        return True

    def clear_avoided(self) -> None:
        self._save_avoided(set())

    # ------------------------------------------------------------------
    # Durations
    # ------------------------------------------------------------------

    def load_durations(self) -> DurationPreferences:
        """
        Load per-item warm-up / cool-down durations.

        Raises:
            ValidationError: If the stored durations are malformed or out of range
        """
        raw = self._load().get("durations", {})
        if not isinstance(raw, dict):
            raise ValidationError(f"'durations' in {self.path} must be a JSON object")
        return DurationPreferences(
            warmup_duration=validate_item_duration(
                raw.get("warmupDuration", DEFAULT_WARMUP_ITEM_SECONDS), "warmupDuration"
            ),
            cooldown_duration=validate_item_duration(
                raw.get("cooldownDuration", DEFAULT_COOLDOWN_ITEM_SECONDS), "cooldownDuration"
            ),
            last_updated=raw.get("lastUpdated", ""),
        )

    def save_durations(
        self,
        warmup_duration: int | None = None,
        cooldown_duration: int | None = None,
    ) -> DurationPreferences:
        """
        Update one or both durations.

        Raises:
            ValidationError: If a duration is outside 10-300 seconds
        """
        current = self.load_durations()
        prefs = DurationPreferences(
            warmup_duration=validate_item_duration(
                current.warmup_duration if warmup_duration is None else warmup_duration,
                "warmupDuration",
            ),
            cooldown_duration=validate_item_duration(
                current.cooldown_duration if cooldown_duration is None else cooldown_duration,
                "cooldownDuration",
            ),
            last_updated=datetime.now().isoformat(timespec="seconds"),
        )
        data = self._load()
        data["durations"] = {
            "warmupDuration": prefs.warmup_duration,
            "cooldownDuration": prefs.cooldown_duration,
            "lastUpdated": prefs.last_updated,
        }
        self._save(data)
        return prefs

    # ------------------------------------------------------------------
    # Call boundary
    # ------------------------------------------------------------------

    def resolve_inputs(self) -> GenerationInputs:
        """Read every preference once and return them as generation inputs."""
        durations = self.load_durations()
        return GenerationInputs(
            avoided_ids=self.load_avoided(),
            owned_equipment=self.load_owned_equipment(),
            warmup_duration=durations.warmup_duration,
            cooldown_duration=durations.cooldown_duration,
        )


def get_default_preferences_path() -> Path:
    """Return ~/.hiit-circuits/preferences.json."""
    return Path.home() / ".hiit-circuits" / "preferences.json"


def get_default_store() -> PreferenceStore:
    """
    Get a PreferenceStore with the default path.

    Returns:
        PreferenceStore instance
    """
    return PreferenceStore(get_default_preferences_path())
