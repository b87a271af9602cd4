"""Alternating A/B full-body sessions for new lifters."""

from domain.models import TemplateCategory, TemplateDefinition

FULL_BODY_A = TemplateDefinition.from_rows(
    "Beginner - Full Body A",
    TemplateCategory.BEGINNER,
    (
        ("Barbell Back Squat", 3, 8, 10),
        ("Barbell Bench Press", 3, 8, 10),
        ("Barbell Bent Over Row", 3, 8, 10),
        ("Plank", 3, 30, 45),
    ),
)

FULL_BODY_B = TemplateDefinition.from_rows(
    "Beginner - Full Body B",
    TemplateCategory.BEGINNER,
    (
        ("Barbell Deadlift", 3, 8, 10),
        ("Dumbbell Shoulder Press", 3, 8, 10),
        ("Pull-Up", 3, 5, 10),
        ("Hanging Leg Raise", 3, 8, 12),
    ),
)

BEGINNER = (FULL_BODY_A, FULL_BODY_B)
