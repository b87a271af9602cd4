from domain.models import TemplateCategory, TemplateDefinition

FULL_BODY = TemplateDefinition.from_rows(
    "Calisthenics - Full Body",
    TemplateCategory.CALISTHENICS,
    (
        ("Push-Up", 4, 12, 15),
        ("Pull-Up", 4, 8, 12),
        ("Dip", 3, 10, 15),
        ("Pistol Squat", 3, 8, 10),
        ("Hanging Leg Raise", 3, 10, 15),
        # Plank reps are seconds held
        ("Plank", 3, 30, 60),
    ),
)

CALISTHENICS = (FULL_BODY,)
