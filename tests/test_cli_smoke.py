"""
Minimal smoke tests for hiit-circuits CLI.

Tests basic functionality:
- App runs without errors
- Workouts generate, print and save
- A saved workout can be refreshed
- Preferences are stored and applied
"""

import json
import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hiit_circuits.cli.main import app


runner = CliRunner()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class TestCLISmoke:
    """Basic smoke tests for CLI commands."""

    def test_app_help(self):
        """Test that app runs and shows help."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "generate" in result.output

    def test_generate_prints_workout(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        result = runner.invoke(app, ["generate", "--seed", "1", "--prefs", str(prefs)])
        assert result.exit_code == 0, result.output
        assert "Warm-up" in result.output
        assert "Cool-down" in result.output

    def test_generate_json(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        result = runner.invoke(app, [
            "generate",
            "--type", "super_sets",
            "--count", "6",
            "--seed", "3",
            "--json",
            "--prefs", str(prefs),
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["circuit"]["type"] == "super_sets"
        assert len(data["circuit"]["stations"]) == 3

    def test_generate_without_routines(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        result = runner.invoke(app, [
            "generate", "--no-warmup", "--no-cooldown", "--json", "--prefs", str(prefs),
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert "warmup" not in data and "cooldown" not in data

    def test_generate_rejects_bad_difficulty(self, temp_dir):
        result = runner.invoke(app, [
            "generate", "--difficulty", "insane", "--prefs", str(temp_dir / "p.json"),
        ])
        assert result.exit_code == 1

    def test_generate_rejects_unknown_equipment(self, temp_dir):
        result = runner.invoke(app, [
            "generate", "--equipment", "jetpack", "--prefs", str(temp_dir / "p.json"),
        ])
        assert result.exit_code == 1

    def test_generate_uses_stored_durations(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        result = runner.invoke(app, ["durations", "set", "--warmup", "30", "--prefs", str(prefs)])
        assert result.exit_code == 0, result.output

        result = runner.invoke(app, ["generate", "--json", "--seed", "2", "--prefs", str(prefs)])
        data = json.loads(result.output)
        assert all(item["duration"] == 30 for item in data["warmup"]["exercises"])

    def test_generate_skips_avoided(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        for exercise_id in ("1", "4", "60", "70"):
            result = runner.invoke(app, ["avoid", "add", exercise_id, "--prefs", str(prefs)])
            assert result.exit_code == 0, result.output

        result = runner.invoke(app, ["generate", "--json", "--seed", "4", "--prefs", str(prefs)])
        data = json.loads(result.output)
        ids = {we["exercise"]["id"] for we in data["exercises"]}
        assert ids.isdisjoint({1, 4, 60, 70})

    def test_save_and_refresh(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        saved = temp_dir / "workout.json"
        result = runner.invoke(app, [
            "generate", "--seed", "5", "--save", str(saved), "--prefs", str(prefs),
        ])
        assert result.exit_code == 0, result.output
        assert saved.exists()

        data = json.loads(saved.read_text())
        old_id = data["workout"]["circuit"]["stations"][0]["exercises"][0]["id"]

        result = runner.invoke(app, [
            "refresh", str(saved), str(old_id), "--seed", "1", "--prefs", str(prefs),
        ])
        assert result.exit_code == 0, result.output

        updated = json.loads(saved.read_text())
        station_ids = [ex["id"] for ex in updated["workout"]["circuit"]["stations"][0]["exercises"]]
        timeline_ids = [we["exercise"]["id"] for we in updated["workout"]["exercises"]]
        assert old_id not in station_ids
        assert old_id not in timeline_ids

    def test_generate_legacy(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        result = runner.invoke(app, [
            "generate", "--legacy", "--duration", "10", "--seed", "2", "--json", "--prefs", str(prefs),
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert "circuit" not in data
        assert len(data["exercises"]) == 10
        assert data["totalDuration"] == 10 * 60

    def test_generate_legacy_table(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        result = runner.invoke(app, ["generate", "--legacy", "--seed", "2", "--prefs", str(prefs)])
        assert result.exit_code == 0, result.output
        assert "Intervals" in result.output

    def test_refresh_unknown_id(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        saved = temp_dir / "workout.json"
        runner.invoke(app, ["generate", "--save", str(saved), "--prefs", str(prefs)])

        result = runner.invoke(app, ["refresh", str(saved), "99999", "--prefs", str(prefs)])
        assert result.exit_code == 1

    def test_refresh_missing_file(self, temp_dir):
        result = runner.invoke(app, [
            "refresh", str(temp_dir / "none.json"), "1", "--prefs", str(temp_dir / "p.json"),
        ])
        assert result.exit_code == 1


class TestPreferenceCommands:
    def test_avoid_list_and_clear(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        runner.invoke(app, ["avoid", "add", "1", "--prefs", str(prefs)])

        result = runner.invoke(app, ["avoid", "list", "--prefs", str(prefs)])
        assert result.exit_code == 0

        result = runner.invoke(app, ["avoid", "clear", "--force", "--prefs", str(prefs)])
        assert result.exit_code == 0
        assert json.loads(prefs.read_text())["avoidedExercises"] == []

    def test_avoid_unknown_exercise(self, temp_dir):
        result = runner.invoke(app, ["avoid", "add", "99999", "--prefs", str(temp_dir / "p.json")])
        assert result.exit_code == 1

    def test_equipment_set_and_show(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        result = runner.invoke(app, ["equipment", "set", "dumbbells", "kettlebell", "--prefs", str(prefs)])
        assert result.exit_code == 0, result.output
        assert json.loads(prefs.read_text())["ownedEquipment"] == ["bodyweight", "dumbbells", "kettlebell"]

        result = runner.invoke(app, ["equipment", "show", "--prefs", str(prefs)])
        assert result.exit_code == 0

    def test_equipment_set_unknown(self, temp_dir):
        result = runner.invoke(app, ["equipment", "set", "jetpack", "--prefs", str(temp_dir / "p.json")])
        assert result.exit_code == 1

    def test_durations_validation(self, temp_dir):
        prefs = temp_dir / "prefs.json"
        assert runner.invoke(app, ["durations", "set", "--warmup", "5", "--prefs", str(prefs)]).exit_code == 1
        assert runner.invoke(app, ["durations", "set", "--prefs", str(prefs)]).exit_code == 1

        result = runner.invoke(app, ["durations", "set", "--cooldown", "45", "--prefs", str(prefs)])
        assert result.exit_code == 0
        result = runner.invoke(app, ["durations", "show", "--prefs", str(prefs)])
        assert result.exit_code == 0
        assert "45s" in result.output

    def test_exercises_filtered(self, temp_dir):
        result = runner.invoke(app, [
            "exercises", "--muscle", "chest", "--equipment", "dumbbells", "--prefs", str(temp_dir / "p.json"),
        ])
        assert result.exit_code == 0

    def test_exercises_unknown_equipment(self, temp_dir):
        result = runner.invoke(app, ["exercises", "--equipment", "jetpack", "--prefs", str(temp_dir / "p.json")])
        assert result.exit_code == 1
