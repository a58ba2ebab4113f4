"""
Configuration constants for the circuit generation engine.

All adjustable parameters are centralized here for easy tuning.
Name-keyword lists can be overridden per user through
~/.hiit-circuits/classifiers.yaml (see engine/config_loader.py).
"""

from typing import Final

# =============================================================================
# TIMING PER DIFFICULTY
# =============================================================================

DIFFICULTIES: Final[tuple[str, ...]] = ("easy", "medium", "hard")
CIRCUIT_TYPES: Final[tuple[str, ...]] = ("classic_cycle", "super_sets")

# (work seconds, rest seconds) for every exercise slot
WORK_REST_SECONDS: Final[dict[str, tuple[int, int]]] = {
    "easy": (30, 30),
    "medium": (45, 15),
    "hard": (50, 10),
}

STATION_REST_SECONDS: Final[int] = 30  # Extra rest between super-set stations
DEFAULT_EXERCISE_COUNT: Final[int] = 8

# Legacy interval workouts repeat at most half as many distinct exercises as
# intervals, never fewer than this
LEGACY_MIN_UNIQUE_EXERCISES: Final[int] = 3

# =============================================================================
# DIFFICULTY BANDS (exercise difficulty is 1-5)
# =============================================================================

DIFFICULTY_BANDS: Final[dict[str, tuple[int, ...]]] = {
    "easy": (1, 2, 3),
    "medium": (2, 3, 4),
    "hard": (3, 4, 5),
}

# Used by the first regeneration fallback level
EXPANDED_DIFFICULTY_BANDS: Final[dict[str, tuple[int, ...]]] = {
    "easy": (1, 2, 3, 4),
    "medium": (1, 2, 3, 4, 5),
    "hard": (2, 3, 4, 5),
}

# =============================================================================
# SELECTION
# =============================================================================

# Round-robin over muscle groups stops after this many full cycles
MUSCLE_CYCLE_FACTOR: Final[int] = 3

# Owning the key implies compatibility with every listed equipment id
EQUIPMENT_SUBSTITUTIONS: Final[dict[str, tuple[str, ...]]] = {
    "bench_step": ("weight_bench",),
}

BODYWEIGHT: Final[str] = "bodyweight"

# =============================================================================
# MUSCLE GROUPS
# =============================================================================

# Composite group name -> member groups. An exercise matches the composite
# when it matches any member.
COMPOSITE_MUSCLE_GROUPS: Final[dict[str, tuple[str, ...]]] = {
    "legs_glutes": ("legs", "quadriceps", "hamstrings", "glutes"),
    "arms": ("biceps", "triceps", "arms"),
    "biceps_triceps": ("biceps", "triceps", "arms"),
    "chest_back": ("chest", "back"),
    "shoulders_core": ("shoulders", "core"),
    "cardio_core": ("cardio", "core"),
}

# Same-group super sets try to take one exercise from each half
SUPERSET_SPLITS: Final[dict[str, tuple[tuple[str, ...], tuple[str, ...]]]] = {
    "legs_glutes": (("quadriceps", "hamstrings", "legs"), ("glutes",)),
    "arms": (("biceps",), ("triceps",)),
    "biceps_triceps": (("biceps",), ("triceps",)),
    "chest_back": (("chest",), ("back",)),
    "shoulders_core": (("shoulders",), ("core",)),
    "cardio_core": (("cardio",), ("core",)),
}

# Ordered antagonist / synergist pairing rules for super sets
COMPLEMENTARY_PAIRS: Final[tuple[tuple[str, str], ...]] = (
    ("chest", "back"),
    ("quadriceps", "hamstrings"),
    ("biceps", "triceps"),
    ("shoulders", "core"),
    ("cardio", "cardio"),
    ("cardio", "core"),
    ("cardio", "quadriceps"),
    ("cardio", "chest"),
    ("core", "core"),
    ("core", "legs"),
    ("core", "glutes"),
    ("core", "shoulders"),
    ("legs_glutes", "legs_glutes"),
    ("arms", "arms"),
    ("chest_back", "chest_back"),
    ("shoulders_core", "shoulders_core"),
    ("cardio_core", "cardio_core"),
)

# =============================================================================
# NAME KEYWORDS (defaults; classifiers.yaml may override)
# =============================================================================

# Only applied to full-body exercises of difficulty >= CARDIO_MIN_DIFFICULTY
CARDIO_KEYWORDS: Final[tuple[str, ...]] = (
    "burpee", "jump", "sprint", "explosive", "plyometric", "hop", "skip",
)
CARDIO_MIN_DIFFICULTY: Final[int] = 3

CORE_KEYWORDS: Final[tuple[str, ...]] = (
    "plank", "crunch", "sit-up", "abs", "russian twist", "hollow", "v-up", "bicycle",
)

WARMUP_STRETCH_KEYWORDS: Final[tuple[str, ...]] = (
    "stretch", "circle", "roll", "swing", "cat-cow", "cobra", "downward", "bridge",
)

WARMUP_ACTIVE_KEYWORDS: Final[tuple[str, ...]] = (
    "jack", "knee", "kick", "squat", "lunge", "crawl", "walk",
)

# =============================================================================
# WARM-UP
# =============================================================================

WARMUP_MIN_SECONDS: Final[int] = 60
WARMUP_MAX_SECONDS: Final[int] = 180
WARMUP_STRETCH_SHARE: Final[float] = 0.40  # Stretch pass stops at 40% of max
WARMUP_MIN_STRETCH_SHARE: Final[float] = 0.30  # Stretch items always taken below 30% of min

WARMUP_ALWAYS_TARGET: Final[tuple[str, ...]] = ("full_body", "cardio")
WARMUP_FULL_BODY_BONUS: Final[int] = 2
WARMUP_CARDIO_BONUS: Final[int] = 1

WARMUP_BODY_PARTS: Final[dict[str, tuple[str, ...]]] = {
    "chest": ("chest", "shoulders", "full_body"),
    "back": ("back", "shoulders", "spine", "full_body"),
    "shoulders": ("shoulders", "chest", "back", "full_body"),
    "arms": ("shoulders", "chest", "full_body"),
    "biceps": ("shoulders", "arms", "full_body"),
    "triceps": ("shoulders", "arms", "full_body"),
    "legs": ("legs", "quadriceps", "hamstrings", "glutes", "hips", "hip_flexors", "full_body"),
    "quadriceps": ("quadriceps", "legs", "hip_flexors", "full_body"),
    "hamstrings": ("hamstrings", "legs", "hips", "full_body"),
    "core": ("core", "back", "spine", "full_body"),
    "glutes": ("glutes", "legs", "hips", "full_body"),
    "cardio": ("cardio", "full_body", "legs"),
    "full_body": ("full_body", "cardio", "spine"),
}

# =============================================================================
# COOL-DOWN
# =============================================================================

COOLDOWN_MIN_SECONDS: Final[int] = 180
COOLDOWN_MAX_SECONDS: Final[int] = 480
COOLDOWN_MAX_ITEMS: Final[int] = 8

COOLDOWN_ALWAYS_TARGET: Final[tuple[str, ...]] = ("full_body", "spine", "back")
COOLDOWN_BASE_SCORE: Final[int] = 1
COOLDOWN_ESSENTIAL_SCORE: Final[int] = 3  # Per matched essential body part
COOLDOWN_TARGET_SCORE: Final[int] = 2  # Per matched specific body part
COOLDOWN_LONG_STRETCH_SECONDS: Final[int] = 45  # Stretches this long get +1

COOLDOWN_BODY_PARTS: Final[dict[str, tuple[str, ...]]] = {
    "chest": ("chest", "shoulders"),
    "back": ("back", "spine", "shoulders"),
    "shoulders": ("shoulders", "back"),
    "arms": ("triceps", "shoulders", "arms"),
    "legs": ("hamstrings", "quadriceps", "calves", "legs"),
    "glutes": ("glutes", "hips", "piriformis"),
    "core": ("spine", "abdominals", "back", "hips"),
    "cardio": ("full_body", "hamstrings", "calves"),
    "full_body": ("full_body", "spine", "back", "shoulders", "hips"),
    "quadriceps": ("quadriceps", "hip_flexors", "legs"),
    "hamstrings": ("hamstrings", "legs", "glutes"),
    "calves": ("calves", "legs"),
    "triceps": ("triceps", "shoulders", "arms"),
    "biceps": ("shoulders", "arms", "back"),
    "hip_flexors": ("hip_flexors", "hips", "quadriceps"),
    "lower_back": ("spine", "back", "hips", "glutes"),
    "upper_back": ("back", "shoulders", "spine"),
    "traps": ("shoulders", "back", "spine"),
}

# =============================================================================
# DURATION PREFERENCES
# =============================================================================

DEFAULT_WARMUP_ITEM_SECONDS: Final[int] = 20
DEFAULT_COOLDOWN_ITEM_SECONDS: Final[int] = 20
ITEM_DURATION_MIN_SECONDS: Final[int] = 10
ITEM_DURATION_MAX_SECONDS: Final[int] = 300
