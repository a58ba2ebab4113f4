"""
Tests for the preference store, serializers and saved workout files.
"""

import json
import random

import pytest

from hiit_circuits.core.generator import generate_workout
from hiit_circuits.core.models import WorkoutSettings
from hiit_circuits.core.regeneration import FALLBACK_LEVELS, refresh_exercise
from hiit_circuits.io.preference_store import PreferenceStore
from hiit_circuits.io.serializers import (
    _FALLBACK_REASONS,
    ValidationError,
    dict_to_workout,
    settings_from_dict,
    workout_to_dict,
)
from hiit_circuits.io.workout_file import load_workout, save_workout


@pytest.fixture
def store(tmp_path):
    return PreferenceStore(tmp_path / "prefs" / "preferences.json")


def _settings(**kwargs) -> WorkoutSettings:
    defaults = dict(duration=20, difficulty="medium", selected_equipment=["bodyweight"])
    defaults.update(kwargs)
    return WorkoutSettings(**defaults)


# =============================================================================
# Preference store
# =============================================================================


class TestPreferenceStore:
    def test_defaults_without_file(self, store):
        assert not store.exists()
        assert store.load_owned_equipment() == ["bodyweight"]
        assert store.load_avoided() == set()
        durations = store.load_durations()
        assert (durations.warmup_duration, durations.cooldown_duration) == (20, 20)

    def test_avoid_add_remove(self, store):
        assert store.add_avoided(40) is True
        assert store.add_avoided(12) is True
        assert store.add_avoided(40) is False
        assert store.load_avoided() == {12, 40}

        data = json.loads(store.path.read_text())
        assert data["avoidedExercises"] == [12, 40]

        assert store.remove_avoided(40) is True
        assert store.remove_avoided(40) is False
        assert store.load_avoided() == {12}

        store.clear_avoided()
        assert store.load_avoided() == set()

    def test_owned_equipment_normalized(self, store):
        assert store.save_owned_equipment(["dumbbells", "dumbbells"]) == ["bodyweight", "dumbbells"]
        assert store.load_owned_equipment() == ["bodyweight", "dumbbells"]

    def test_unknown_equipment_rejected(self, store):
        with pytest.raises(ValidationError):
            store.save_owned_equipment(["jetpack"])

    def test_duration_range(self, store):
        store.save_durations(warmup_duration=10, cooldown_duration=300)
        prefs = store.load_durations()
        assert (prefs.warmup_duration, prefs.cooldown_duration) == (10, 300)
        assert prefs.last_updated

        with pytest.raises(ValidationError):
            store.save_durations(warmup_duration=9)
        with pytest.raises(ValidationError):
            store.save_durations(cooldown_duration=301)

    def test_partial_duration_update_keeps_other(self, store):
        store.save_durations(warmup_duration=30, cooldown_duration=40)
        store.save_durations(cooldown_duration=60)
        prefs = store.load_durations()
        assert (prefs.warmup_duration, prefs.cooldown_duration) == (30, 60)

    def test_preferences_share_one_file(self, store):
        store.add_avoided(1)
        store.save_owned_equipment(["kettlebell"])
        store.save_durations(warmup_duration=25)
        assert store.load_avoided() == {1}

    def test_resolve_inputs(self, store):
        store.add_avoided(5)
        store.save_owned_equipment(["jump_rope"])
        store.save_durations(warmup_duration=15, cooldown_duration=35)

        inputs = store.resolve_inputs()
        assert inputs.avoided_ids == {5}
        assert inputs.owned_equipment == ["bodyweight", "jump_rope"]
        assert (inputs.warmup_duration, inputs.cooldown_duration) == (15, 35)

    def test_corrupt_file_raises(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        with pytest.raises(ValidationError):
            store.load_avoided()

    def test_durations_must_be_object(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"durations": 5}))
        with pytest.raises(ValidationError):
            store.load_durations()
        with pytest.raises(ValidationError):
            store.resolve_inputs()


# =============================================================================
# Serializers
# =============================================================================


class TestSerializers:
    def test_camel_case_keys(self):
        workout = generate_workout(_settings(circuit_type="super_sets"), rng=random.Random(1))
        data = workout_to_dict(workout)

        assert {"exercises", "totalDuration", "difficulty", "equipmentUsed", "circuit", "warmup", "cooldown"} <= set(data)
        assert data["circuit"]["stationRestTime"] == 30
        assert "primaryMuscle" in data["circuit"]["stations"][0]["exercises"][0]
        assert "restDuration" in data["exercises"][0]
        assert "targetBodyParts" in data["warmup"]["exercises"][0]

    def test_workout_survives_json(self):
        settings = _settings()
        workout = generate_workout(settings, rng=random.Random(2))
        first = workout.circuit.stations[0].exercises[0].id
        workout, _ = refresh_exercise(workout, first, settings, rng=random.Random(0))

        restored = dict_to_workout(json.loads(json.dumps(workout_to_dict(workout))))
        assert restored == workout

    def test_fallback_reason_kept(self):
        settings = _settings()
        workout = generate_workout(settings, rng=random.Random(2), include_warmup=False)
        data = workout_to_dict(workout)
        data["circuit"]["stations"][0]["exercises"][0]["fallbackReason"] = "difficulty_mismatch"
        restored = dict_to_workout(data)
        assert restored.circuit.stations[0].exercises[0].fallback_reason == "difficulty_mismatch"

    def test_invalid_fallback_reason(self):
        data = workout_to_dict(generate_workout(_settings(), rng=random.Random(2)))
        data["exercises"][0]["exercise"]["fallbackReason"] = "tired"
        with pytest.raises(ValidationError):
            dict_to_workout(data)

    def test_settings_from_dict(self):
        settings = settings_from_dict(
            {
                "duration": 30,
                "difficulty": "hard",
                "selectedEquipment": ["bodyweight", "kettlebell"],
                "circuitType": "super_sets",
                "targetMuscleGroups": ["chest", "back"],
                "exerciseCount": 6,
            }
        )
        assert settings.duration == 30
        assert settings.circuit_type == "super_sets"
        assert settings.target_muscle_groups == ["chest", "back"]
        assert settings.exercise_count == 6

    def test_settings_validation(self):
        with pytest.raises(ValidationError):
            settings_from_dict({"duration": 20, "difficulty": "brutal", "selectedEquipment": []})
        with pytest.raises(ValidationError):
            settings_from_dict({"duration": 0, "difficulty": "easy", "selectedEquipment": []})
        with pytest.raises(ValidationError):
            settings_from_dict({"difficulty": "easy"})

    def test_settings_need_whole_numbers(self):
        base = {"difficulty": "easy", "selectedEquipment": ["bodyweight"]}
        for bad in (0.5, 20.5, True, "abc", None):
            with pytest.raises(ValidationError):
                settings_from_dict({**base, "duration": bad})
        with pytest.raises(ValidationError):
            settings_from_dict({**base, "duration": 20, "exerciseCount": 2.5})

        assert settings_from_dict({**base, "duration": "30"}).duration == 30
        assert settings_from_dict({**base, "duration": 30.0}).duration == 30

    def test_fallback_reasons_match_ladder(self):
        assert set(_FALLBACK_REASONS) == {f.reason for f in FALLBACK_LEVELS if f.reason}


class TestWorkoutFile:
    def test_save_and_load(self, tmp_path):
        settings = _settings(circuit_type="super_sets", target_muscle_groups=["chest", "back"])
        workout = generate_workout(settings, rng=random.Random(5))
        path = tmp_path / "w" / "workout.json"

        save_workout(path, workout, settings)
        loaded, loaded_settings = load_workout(path)

        assert loaded == workout
        assert loaded_settings == settings

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_workout(tmp_path / "nope.json")

    def test_not_a_workout(self, tmp_path):
        path = tmp_path / "x.json"
        path.write_text(json.dumps({"hello": 1}))
        with pytest.raises(ValidationError):
            load_workout(path)
