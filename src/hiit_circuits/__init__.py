"""hiit-circuits: HIIT circuit generation with warm-ups and cool-downs."""

__version__ = "0.1.0"
