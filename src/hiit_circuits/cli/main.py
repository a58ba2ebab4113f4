"""
CLI entry point using Typer.

Provides commands for workout generation and preference management:
- generate: Generate a circuit workout with warm-up and cool-down
- refresh: Replace one exercise in a saved workout
- exercises: List the exercise catalog
- avoid add|remove|list|clear: Manage avoided exercises
- equipment set|show: Manage owned equipment
- durations set|show: Manage warm-up / cool-down item durations
"""

from .app import app
from .commands import generate, preferences  # noqa: F401  (registers commands)

__all__ = ["app"]


if __name__ == "__main__":
    app()
