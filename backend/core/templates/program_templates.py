"""
Templates referenced by the week-structured preset programs.

Each program generator names these templates in its day layout; the
catalog must contain every one of them before those programs are
instantiated.
"""

from domain.models import TemplateCategory, TemplateDefinition

# =============================================================================
# Starting Strength
# =============================================================================

STARTING_STRENGTH_A = TemplateDefinition.from_rows(
    "Starting Strength A",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Back Squat", 3, 5, 5),
        ("Barbell Bench Press", 3, 5, 5),
        ("Barbell Deadlift", 1, 5, 5),
    ),
)

STARTING_STRENGTH_B = TemplateDefinition.from_rows(
    "Starting Strength B",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Back Squat", 3, 5, 5),
        ("Barbell Overhead Press", 3, 5, 5),
        ("Barbell Bent Over Row", 3, 5, 5),
    ),
)

# =============================================================================
# StrongLifts 5x5
# =============================================================================

STRONGLIFTS_A = TemplateDefinition.from_rows(
    "StrongLifts 5x5 A",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Back Squat", 5, 5, 5),
        ("Barbell Bench Press", 5, 5, 5),
        ("Barbell Bent Over Row", 5, 5, 5),
    ),
)

STRONGLIFTS_B = TemplateDefinition.from_rows(
    "StrongLifts 5x5 B",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Back Squat", 5, 5, 5),
        ("Barbell Overhead Press", 5, 5, 5),
        ("Barbell Deadlift", 1, 5, 5),
    ),
)

# =============================================================================
# PPL 6-Day Split
# =============================================================================

PPL_PUSH = TemplateDefinition.from_rows(
    "PPL Push",
    TemplateCategory.HYPERTROPHY,
    (
        ("Barbell Bench Press", 4, 5, 8),
        ("Barbell Overhead Press", 3, 8, 12),
        ("Dumbbell Incline Bench Press", 3, 8, 12),
        ("Dumbbell Lateral Raise", 3, 12, 15),
        ("Cable Tricep Pushdown", 3, 12, 15),
    ),
)

PPL_PULL = TemplateDefinition.from_rows(
    "PPL Pull",
    TemplateCategory.HYPERTROPHY,
    (
        ("Barbell Deadlift", 3, 5, 8),
        ("Pull-Up", 3, 8, 12),
        ("Barbell Bent Over Row", 3, 8, 12),
        ("Cable Face Pull", 3, 15, 20),
        ("Barbell Bicep Curl", 3, 10, 12),
    ),
)

PPL_LEGS = TemplateDefinition.from_rows(
    "PPL Legs",
    TemplateCategory.HYPERTROPHY,
    (
        ("Barbell Back Squat", 4, 5, 8),
        ("Barbell Romanian Deadlift", 3, 8, 12),
        ("Leg Press", 3, 10, 15),
        ("Leg Curl (Lying)", 3, 12, 15),
        ("Standing Calf Raise (Machine)", 4, 15, 20),
    ),
)

# =============================================================================
# 5/3/1 Boring But Big
# =============================================================================
# First row is the main lift at the week's 5/3/1 percentages, second row
# the 5x10 BBB volume work.

FIVE_THREE_ONE_SQUAT = TemplateDefinition.from_rows(
    "531 Squat",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Back Squat", 3, 3, 5),
        ("Barbell Back Squat", 5, 10, 10),
        ("Leg Curl (Lying)", 5, 10, 10),
        ("Plank", 3, 30, 60),
    ),
)

FIVE_THREE_ONE_BENCH = TemplateDefinition.from_rows(
    "531 Bench",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Bench Press", 3, 3, 5),
        ("Barbell Bench Press", 5, 10, 10),
        ("Dumbbell Row", 5, 10, 10),
        ("Cable Tricep Pushdown", 3, 12, 15),
    ),
)

FIVE_THREE_ONE_DEADLIFT = TemplateDefinition.from_rows(
    "531 Deadlift",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Deadlift", 3, 3, 5),
        ("Barbell Romanian Deadlift", 5, 10, 10),
        ("Pull-Up", 5, 10, 10),
        ("Hanging Leg Raise", 3, 10, 15),
    ),
)

FIVE_THREE_ONE_PRESS = TemplateDefinition.from_rows(
    "531 Press",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Overhead Press", 3, 3, 5),
        ("Barbell Overhead Press", 5, 10, 10),
        ("Chin-Up", 5, 10, 10),
        ("Dumbbell Lateral Raise", 3, 15, 20),
    ),
)

STARTING_STRENGTH = (STARTING_STRENGTH_A, STARTING_STRENGTH_B)
STRONGLIFTS = (STRONGLIFTS_A, STRONGLIFTS_B)
PPL_SIX_DAY = (PPL_PUSH, PPL_PULL, PPL_LEGS)
FIVE_THREE_ONE = (
    FIVE_THREE_ONE_SQUAT,
    FIVE_THREE_ONE_BENCH,
    FIVE_THREE_ONE_DEADLIFT,
    FIVE_THREE_ONE_PRESS,
)
