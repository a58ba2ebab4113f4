"""Workout commands: generate, refresh, exercises."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.catalog.registry import EXERCISE_CATALOG
from ...core.classifiers import DEFAULT_CLASSIFIER
from ...core.config import CIRCUIT_TYPES, DIFFICULTIES
from ...core.equipment import expand_equipment, is_equipment_compatible, normalize_selection
from ...core.generator import generate_workout
from ...core.models import WorkoutSettings
from ...core.regeneration import refresh_exercise
from ...core.rng import make_rng
from ...io.serializers import ValidationError, workout_to_dict
from ...io.workout_file import load_workout, save_workout
from .. import views
from ..app import PrefsOption, app, get_store


def _split_csv(value: str | None) -> list[str] | None:
    """Parse 'a,b , c' → ['a', 'b', 'c']; None or blank → None."""
    if value is None:
        return None
    items = [v.strip() for v in value.split(",") if v.strip()]
    return items or None


@app.command()
def generate(
    duration: Annotated[
        int,
        typer.Option("--duration", "-d", help="Workout length in minutes"),
    ] = 20,
    difficulty: Annotated[
        str,
        typer.Option("--difficulty", "-l", help="easy, medium or hard"),
    ] = "medium",
    circuit_type: Annotated[
        str,
        typer.Option("--type", "-t", help="classic_cycle or super_sets"),
    ] = "classic_cycle",
    count: Annotated[
        Optional[int],
        typer.Option("--count", "-n", help="Number of exercises (default 8)"),
    ] = None,
    equipment: Annotated[
        Optional[str],
        typer.Option("--equipment", "-q", help="Comma-separated equipment ids (default: owned equipment)"),
    ] = None,
    target: Annotated[
        Optional[str],
        typer.Option("--target", help="Comma-separated muscle groups to train"),
    ] = None,
    exclude: Annotated[
        Optional[str],
        typer.Option("--exclude", help="Comma-separated muscle groups to skip"),
    ] = None,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Random seed for a reproducible workout"),
    ] = None,
    legacy: Annotated[
        bool,
        typer.Option("--legacy", help="Plain interval workout instead of a circuit (ignores --type and --count)"),
    ] = False,
    no_warmup: Annotated[
        bool,
        typer.Option("--no-warmup", help="Skip the warm-up"),
    ] = False,
    no_cooldown: Annotated[
        bool,
        typer.Option("--no-cooldown", help="Skip the cool-down"),
    ] = False,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
    save: Annotated[
        Optional[Path],
        typer.Option("--save", "-s", help="Save the workout to a JSON file for 'refresh'"),
    ] = None,
    prefs_path: PrefsOption = None,
) -> None:
    """
    Generate a circuit workout with warm-up and cool-down.

    Avoided exercises and warm-up / cool-down durations come from your
    preferences; see the 'avoid' and 'durations' commands.
    """
    store = get_store(prefs_path)

    if difficulty not in DIFFICULTIES:
        views.print_error(f"Difficulty must be one of: {', '.join(DIFFICULTIES)}")
        raise typer.Exit(1)
    if circuit_type not in CIRCUIT_TYPES:
        views.print_error(f"Circuit type must be one of: {', '.join(CIRCUIT_TYPES)}")
        raise typer.Exit(1)

    try:
        inputs = store.resolve_inputs()
        selected = (
            normalize_selection(_split_csv(equipment) or [])
            if equipment is not None
            else inputs.owned_equipment
        )
        settings = WorkoutSettings(
            duration=duration,
            difficulty=difficulty,  # type: ignore[arg-type]
            selected_equipment=selected,
            target_muscle_groups=_split_csv(target),
            excluded_muscle_groups=_split_csv(exclude),
            circuit_type=circuit_type,  # type: ignore[arg-type]
            exercise_count=count,
        )
    except (ValueError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    workout = generate_workout(
        settings,
        avoided_ids=inputs.avoided_ids,
        rng=make_rng(seed),
        warmup_duration=inputs.warmup_duration,
        cooldown_duration=inputs.cooldown_duration,
        include_warmup=not no_warmup,
        include_cooldown=not no_cooldown,
        legacy=legacy,
    )

    if not workout.exercises:
        views.print_warning("No exercises match your equipment and muscle-group filters.")

    if save is not None:
        save_workout(save, workout, settings)

    if json_out:
        print(json.dumps(workout_to_dict(workout), indent=2))
        return

    views.print_workout(workout)
    if save is not None:
        views.print_success(f"Saved workout to {save}")


@app.command()
def refresh(
    workout_path: Annotated[
        Path,
        typer.Argument(help="Workout file written by 'generate --save'"),
    ],
    exercise_id: Annotated[
        int,
        typer.Argument(help="ID of the exercise to replace"),
    ],
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Random seed for a reproducible pick"),
    ] = None,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
    prefs_path: PrefsOption = None,
) -> None:
    """
    Replace one exercise in a saved workout.

    Every occurrence of the exercise is swapped, across all rounds and
    stations.  When nothing suitable is left the workout is kept as is.
    """
    store = get_store(prefs_path)

    try:
        workout, settings = load_workout(workout_path)
        avoided = store.load_avoided()
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    try:
        updated, replacement = refresh_exercise(
            workout,
            exercise_id,
            settings,
            avoided_ids=avoided,
            rng=make_rng(seed),
        )
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if replacement is None:
        views.print_warning(f"No alternative found for exercise {exercise_id}; workout unchanged.")
        raise typer.Exit(0)

    save_workout(workout_path, updated, settings)

    if json_out:
        print(json.dumps(workout_to_dict(updated), indent=2))
        return

    views.print_workout(updated)
    msg = f"Replaced exercise {exercise_id} with {replacement.name} (id {replacement.id})"
    note = views.fallback_label(replacement)
    if note:
        views.print_warning(f"{msg}: {note}")
    else:
        views.print_success(msg)


@app.command()
def exercises(
    muscle: Annotated[
        Optional[str],
        typer.Option("--muscle", "-m", help="Only exercises matching this muscle group"),
    ] = None,
    equipment: Annotated[
        Optional[str],
        typer.Option("--equipment", "-q", help="Comma-separated equipment ids to filter by"),
    ] = None,
    prefs_path: PrefsOption = None,
) -> None:
    """
    List the exercise catalog.
    """
    rows = list(EXERCISE_CATALOG)

    if muscle is not None:
        rows = [ex for ex in rows if DEFAULT_CLASSIFIER.matches(ex, muscle)]

    if equipment is not None:
        try:
            available = expand_equipment(normalize_selection(_split_csv(equipment) or []))
        except ValueError as e:
            views.print_error(str(e))
            raise typer.Exit(1)
        rows = [ex for ex in rows if is_equipment_compatible(ex, available)]

    if not rows:
        views.print_info("No exercises match.")
        return

    try:
        avoided = get_store(prefs_path).load_avoided()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.console.print(views.format_exercise_table(rows, avoided))
