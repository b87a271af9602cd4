"""Bodybuilding split templates (push/pull/legs and upper/lower)."""

from domain.models import TemplateCategory, TemplateDefinition

PPL_PUSH = TemplateDefinition.from_rows(
    "PPL - Push",
    TemplateCategory.HYPERTROPHY,
    (
        ("Barbell Bench Press", 4, 8, 12),
        ("Dumbbell Incline Bench Press", 3, 10, 12),
        ("Dumbbell Shoulder Press", 3, 10, 12),
        ("Dumbbell Lateral Raise", 3, 12, 15),
        ("Cable Tricep Pushdown", 3, 12, 15),
        ("Dumbbell Overhead Tricep Extension", 3, 10, 12),
    ),
)

PPL_PULL = TemplateDefinition.from_rows(
    "PPL - Pull",
    TemplateCategory.HYPERTROPHY,
    (
        ("Barbell Deadlift", 3, 6, 8),
        ("Pull-Up", 3, 8, 12),
        ("Barbell Bent Over Row", 3, 8, 12),
        ("Cable Row (Seated)", 3, 10, 12),
        ("Cable Face Pull", 3, 15, 20),
        ("Dumbbell Bicep Curl", 3, 12, 15),
        ("Dumbbell Hammer Curl", 3, 10, 12),
    ),
)

PPL_LEGS = TemplateDefinition.from_rows(
    "PPL - Legs",
    TemplateCategory.HYPERTROPHY,
    (
        ("Barbell Back Squat", 4, 8, 12),
        ("Leg Press", 3, 10, 15),
        ("Leg Curl (Lying)", 3, 10, 12),
        ("Leg Extension", 3, 12, 15),
        ("Calf Raise", 4, 15, 20),
    ),
)

UPPER = TemplateDefinition.from_rows(
    "Upper/Lower - Upper",
    TemplateCategory.HYPERTROPHY,
    (
        ("Barbell Bench Press", 4, 8, 12),
        ("Barbell Bent Over Row", 4, 8, 12),
        ("Dumbbell Shoulder Press", 3, 10, 12),
        ("Pull-Up", 3, 8, 12),
        ("Dumbbell Bicep Curl", 3, 12, 15),
        ("Cable Tricep Pushdown", 3, 12, 15),
    ),
)

LOWER = TemplateDefinition.from_rows(
    "Upper/Lower - Lower",
    TemplateCategory.HYPERTROPHY,
    (
        ("Barbell Back Squat", 4, 8, 12),
        ("Barbell Romanian Deadlift", 3, 10, 12),
        ("Leg Press", 3, 12, 15),
        ("Leg Curl (Lying)", 3, 10, 12),
        ("Barbell Bulgarian Split Squat", 3, 10, 12),
        ("Calf Raise", 3, 15, 20),
    ),
)

PPL = (PPL_PUSH, PPL_PULL, PPL_LEGS)
UPPER_LOWER = (UPPER, LOWER)
