"""Powerlifting split templates: one day per competition lift."""

from domain.models import TemplateCategory, TemplateDefinition

SQUAT_DAY = TemplateDefinition.from_rows(
    "Powerlifting - Squat Day",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Back Squat", 4, 3, 5),
        ("Barbell Front Squat", 3, 5, 8),
        ("Leg Press", 3, 8, 12),
        ("Barbell Bulgarian Split Squat", 3, 6, 8),
        ("Leg Curl (Lying)", 3, 10, 12),
    ),
)

BENCH_DAY = TemplateDefinition.from_rows(
    "Powerlifting - Bench Day",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Bench Press", 4, 3, 5),
        ("Barbell Incline Bench Press", 3, 5, 8),
        ("Barbell Close-Grip Bench Press", 3, 6, 8),
        ("Dip", 3, 8, 12),
        ("Cable Tricep Pushdown", 3, 10, 15),
    ),
)

DEADLIFT_DAY = TemplateDefinition.from_rows(
    "Powerlifting - Deadlift Day",
    TemplateCategory.STRENGTH,
    (
        ("Barbell Deadlift", 4, 3, 5),
        ("Barbell Romanian Deadlift", 3, 5, 8),
        ("Barbell Bent Over Row", 3, 6, 8),
        ("Pull-Up", 3, 6, 10),
        ("Cable Face Pull", 3, 12, 15),
    ),
)

POWERLIFTING_SPLIT = (SQUAT_DAY, BENCH_DAY, DEADLIFT_DAY)
