"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of generated workouts.
"""

from rich.console import Console
from rich.table import Table

from ..core.equipment import EQUIPMENT_CATALOG
from ..core.models import CircuitWorkout, Exercise, GeneratedRoutine, GeneratedWorkout

console = Console()

_FALLBACK_LABELS = {
    "equipment_unavailable": "wider difficulty range",
    "difficulty_mismatch": "any difficulty",
    "no_suitable_alternatives": "excluded groups ignored",
    "target_muscle_unavailable": "target groups ignored",
}


def _fmt_seconds(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    if minutes and secs:
        return f"{minutes}m {secs}s"
    if minutes:
        return f"{minutes}m"
    return f"{secs}s"


def fallback_label(exercise: Exercise) -> str:
    """Human-readable note for a relaxed-constraint replacement, or ''."""
    if exercise.fallback_reason is None:
        return ""
    return _FALLBACK_LABELS.get(exercise.fallback_reason, exercise.fallback_reason)


def format_circuit_table(circuit: CircuitWorkout) -> Table:
    """
    Create a Rich table listing every station and its exercises.

    Args:
        circuit: Circuit to display

    Returns:
        Rich Table object
    """
    title = "Classic Circuit" if circuit.type == "classic_cycle" else "Super Sets"
    table = Table(title=f"{title}: {circuit.rounds} round(s)")

    table.add_column("Station", style="magenta")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Exercise", style="bold")
    table.add_column("Muscle", style="cyan")
    table.add_column("Diff", justify="right")
    table.add_column("Note", style="yellow")

    for station in circuit.stations:
        for i, ex in enumerate(station.exercises):
            table.add_row(
                station.name if i == 0 else "",
                str(ex.id),
                ex.name,
                ex.primary_muscle,
                str(ex.difficulty),
                fallback_label(ex),
            )

    return table


def format_timeline_table(workout: GeneratedWorkout) -> Table:
    """Create a Rich table of a circuit-less workout, one row per interval."""
    table = Table(title="Intervals")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Exercise", style="bold")
    table.add_column("Muscle", style="cyan")
    table.add_column("Work", justify="right")
    table.add_column("Rest", justify="right")
    table.add_column("Note", style="yellow")

    for i, we in enumerate(workout.exercises, 1):
        table.add_row(
            str(i),
            str(we.exercise.id),
            we.exercise.name,
            we.exercise.primary_muscle,
            _fmt_seconds(we.duration),
            _fmt_seconds(we.rest_duration),
            fallback_label(we.exercise),
        )

    return table


def format_routine_table(title: str, routine: GeneratedRoutine) -> Table:
    """Create a Rich table for a warm-up or cool-down."""
    table = Table(title=f"{title} ({_fmt_seconds(routine.total_duration)})")
    table.add_column("Item", style="bold")
    table.add_column("Body parts", style="cyan")
    table.add_column("Time", justify="right")

    for item in routine.exercises:
        table.add_row(item.name, ", ".join(item.target_body_parts), _fmt_seconds(item.duration))

    return table


def print_workout(workout: GeneratedWorkout) -> None:
    """
    Print a generated workout: warm-up, circuit, timing and cool-down.

    Args:
        workout: Workout to display
    """
    if workout.warmup is not None:
        console.print(format_routine_table("Warm-up", workout.warmup))
        console.print()

    circuit = workout.circuit
    if circuit is not None:
        console.print(format_circuit_table(circuit))
        timing = f"Work {circuit.work_time}s / rest {circuit.rest_time}s"
        if circuit.station_rest_time:
            timing += f", {circuit.station_rest_time}s between stations"
        console.print(f"[dim]{timing}[/dim]")
    elif workout.exercises:
        console.print(format_timeline_table(workout))

    console.print(
        f"[bold]{len(workout.exercises)} intervals, "
        f"{_fmt_seconds(workout.total_duration)}[/bold] "
        f"({workout.difficulty}, {', '.join(workout.equipment_used)})"
    )

    if workout.cooldown is not None:
        console.print()
        console.print(format_routine_table("Cool-down", workout.cooldown))


def format_exercise_table(exercises: list[Exercise], avoided: set[int] | None = None) -> Table:
    """Create a Rich table of catalog exercises; avoided ones are marked."""
    avoided = avoided or set()
    table = Table(title="Exercises")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Primary", style="cyan")
    table.add_column("Groups")
    table.add_column("Diff", justify="right")
    table.add_column("Equipment", style="green")
    table.add_column("Avoid", justify="center", style="red")

    for ex in exercises:
        table.add_row(
            str(ex.id),
            ex.name,
            ex.primary_muscle,
            ", ".join(ex.muscle_groups),
            str(ex.difficulty),
            ", ".join(ex.equipment),
            "x" if ex.id in avoided else "",
        )

    return table


def format_equipment_table(owned: list[str]) -> Table:
    table = Table(title="Equipment")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Category", style="cyan")
    table.add_column("Owned", justify="center", style="green")

    for equipment_id, info in EQUIPMENT_CATALOG.items():
        table.add_row(
            equipment_id,
            info["label"],
            info["category"],
            "yes" if equipment_id in owned else "",
        )

    return table


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")
