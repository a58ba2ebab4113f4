"""Preference commands: avoid, equipment, durations."""

from typing import Annotated, Optional

import typer

from ...core.catalog.registry import get_exercise
from ...io.serializers import ValidationError
from .. import views
from ..app import PrefsOption, app, get_store

avoid_app = typer.Typer(help="Manage exercises that are never selected.")
equipment_app = typer.Typer(help="Manage owned equipment.")
durations_app = typer.Typer(help="Manage per-item warm-up and cool-down durations.")

app.add_typer(avoid_app, name="avoid")
app.add_typer(equipment_app, name="equipment")
app.add_typer(durations_app, name="durations")


# =============================================================================
# avoid
# =============================================================================


@avoid_app.command("add")
def avoid_add(
    exercise_id: Annotated[int, typer.Argument(help="Exercise ID to avoid")],
    prefs_path: PrefsOption = None,
) -> None:
    """Never select this exercise."""
    try:
        ex = get_exercise(exercise_id)
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    store = get_store(prefs_path)
    try:
        added = store.add_avoided(exercise_id)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if added:
        views.print_success(f"Avoiding {ex.name} (id {ex.id})")
    else:
        views.print_info(f"{ex.name} is already avoided")


@avoid_app.command("remove")
def avoid_remove(
    exercise_id: Annotated[int, typer.Argument(help="Exercise ID to allow again")],
    prefs_path: PrefsOption = None,
) -> None:
    """Allow a previously avoided exercise."""
    store = get_store(prefs_path)
    try:
        removed = store.remove_avoided(exercise_id)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if removed:
        views.print_success(f"Exercise {exercise_id} is no longer avoided")
    else:
        views.print_warning(f"Exercise {exercise_id} was not in the avoid list")


@avoid_app.command("list")
def avoid_list(prefs_path: PrefsOption = None) -> None:
    """Show avoided exercises."""
    try:
        avoided = get_store(prefs_path).load_avoided()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if not avoided:
        views.print_info("No exercises avoided.")
        return

    rows = []
    for exercise_id in sorted(avoided):
        try:
            rows.append(get_exercise(exercise_id))
        except ValueError:
            views.print_warning(f"Avoided id {exercise_id} is not in the catalog")
    if rows:
        views.console.print(views.format_exercise_table(rows, avoided))


@avoid_app.command("clear")
def avoid_clear(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Clear without prompting"),
    ] = False,
    prefs_path: PrefsOption = None,
) -> None:
    """Empty the avoid list."""
    if not force and not typer.confirm("Clear the avoid list?"):
        views.print_info("Cancelled.")
        raise typer.Exit(0)
    get_store(prefs_path).clear_avoided()
    views.print_success("Avoid list cleared")


# =============================================================================
# equipment
# =============================================================================


@equipment_app.command("set")
def equipment_set(
    items: Annotated[
        list[str],
        typer.Argument(help="Equipment ids you own (bodyweight is always included)"),
    ],
    prefs_path: PrefsOption = None,
) -> None:
    """Replace the owned equipment list."""
    try:
        owned = get_store(prefs_path).save_owned_equipment(items)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
    views.print_success(f"Owned equipment: {', '.join(owned)}")


@equipment_app.command("show")
def equipment_show(prefs_path: PrefsOption = None) -> None:
    """Show the equipment catalog and what you own."""
    try:
        owned = get_store(prefs_path).load_owned_equipment()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
    views.console.print(views.format_equipment_table(owned))


# =============================================================================
# durations
# =============================================================================


@durations_app.command("set")
def durations_set(
    warmup: Annotated[
        Optional[int],
        typer.Option("--warmup", "-w", help="Seconds per warm-up item"),
    ] = None,
    cooldown: Annotated[
        Optional[int],
        typer.Option("--cooldown", "-c", help="Seconds per cool-down stretch"),
    ] = None,
    prefs_path: PrefsOption = None,
) -> None:
    """Set per-item durations (10-300 seconds each)."""
    if warmup is None and cooldown is None:
        views.print_error("Give --warmup and/or --cooldown")
        raise typer.Exit(1)
    try:
        prefs = get_store(prefs_path).save_durations(warmup, cooldown)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
    views.print_success(
        f"Warm-up {prefs.warmup_duration}s per item, cool-down {prefs.cooldown_duration}s per stretch"
    )


@durations_app.command("show")
def durations_show(prefs_path: PrefsOption = None) -> None:
    """Show per-item durations."""
    try:
        prefs = get_store(prefs_path).load_durations()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
    views.console.print(f"Warm-up:   {prefs.warmup_duration}s per item")
    views.console.print(f"Cool-down: {prefs.cooldown_duration}s per stretch")
    if prefs.last_updated:
        views.console.print(f"[dim]Last updated {prefs.last_updated}[/dim]")
