"""Shared Typer app object, shared option types, and store utility."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from ..io.preference_store import PreferenceStore, get_default_preferences_path

# Shared --prefs option type used by every command that reads preferences
PrefsOption = Annotated[
    Optional[Path],
    typer.Option("--prefs", "-p", help="Path to preferences JSON file"),
]

app = typer.Typer(
    name="hiit-circuits",
    help="HIIT circuit workout generator with warm-up and cool-down.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log generation decisions"),
    ] = False,
) -> None:
    """
    Generate HIIT circuit workouts from your equipment and preferences.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def get_store(prefs_path: Path | None) -> PreferenceStore:
    """Get preference store from path or default location."""
    if prefs_path is None:
        prefs_path = get_default_preferences_path()
    return PreferenceStore(prefs_path)
