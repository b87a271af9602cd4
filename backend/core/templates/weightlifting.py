from domain.models import TemplateCategory, TemplateDefinition

OLYMPIC_LIFTING = TemplateDefinition.from_rows(
    "Olympic Lifting",
    TemplateCategory.WEIGHTLIFTING,
    (
        ("Snatch", 5, 2, 3),
        ("Clean & Jerk", 5, 2, 3),
        ("Barbell Front Squat", 4, 3, 5),
        ("Overhead Squat", 3, 3, 5),
        ("Barbell Push Press", 3, 5, 8),
    ),
)

OLYMPIC = (OLYMPIC_LIFTING,)
