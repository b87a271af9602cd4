"""
Closed enumerations shared by program and template definitions.

Every enum here is treated as an exhaustive tagged value: display mappings
are keyed by every member, and tests assert that no member is missing.
"""

from enum import Enum
from typing import Dict


class ProgramCategory(str, Enum):
    """Discipline a preset program belongs to."""

    POWERLIFTING = "powerlifting"
    BODYBUILDING = "bodybuilding"
    STRENGTH_TRAINING = "strength_training"
    CALISTHENICS = "calisthenics"
    CROSSFIT = "crossfit"
    GENERAL_FITNESS = "general_fitness"
    SPORT_SPECIFIC = "sport_specific"

    @property
    def display_name(self) -> str:
        return PROGRAM_CATEGORY_NAMES[self]


class DifficultyLevel(str, Enum):
    """Experience level a program is aimed at."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def display_name(self) -> str:
        return DIFFICULTY_NAMES[self]


class WeekProgressionPattern(str, Enum):
    """Rule governing how intensity changes from week to week."""

    LINEAR = "linear"
    WAVE = "wave"
    THREE_ONE_DELOAD = "three_one_deload"
    FOUR_ONE_DELOAD = "four_one_deload"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        return PROGRESSION_PATTERN_NAMES[self][0]

    @property
    def description(self) -> str:
        return PROGRESSION_PATTERN_NAMES[self][1]


class TrainingPhase(str, Enum):
    """Phase tag attached to a program week."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    PEAKING = "peaking"
    DELOAD = "deload"
    TESTING = "testing"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class TemplateCategory(str, Enum):
    """Discipline a workout template is grouped under."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    CALISTHENICS = "calisthenics"
    WEIGHTLIFTING = "weightlifting"
    BEGINNER = "beginner"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ProgramShape(str, Enum):
    """
    Day-addressing scheme of a program definition.

    - WEEK_STRUCTURED: weeks of days addressed by day of week
    - DAY_SEQUENCE: a flat run of days addressed by absolute day number
    """

    WEEK_STRUCTURED = "week_structured"
    DAY_SEQUENCE = "day_sequence"


PROGRAM_CATEGORY_NAMES: Dict[ProgramCategory, str] = {
    ProgramCategory.POWERLIFTING: "Powerlifting",
    ProgramCategory.BODYBUILDING: "Bodybuilding",
    ProgramCategory.STRENGTH_TRAINING: "Strength Training",
    ProgramCategory.CALISTHENICS: "Calisthenics",
    ProgramCategory.CROSSFIT: "CrossFit",
    ProgramCategory.GENERAL_FITNESS: "General Fitness",
    ProgramCategory.SPORT_SPECIFIC: "Sport Specific",
}

DIFFICULTY_NAMES: Dict[DifficultyLevel, str] = {
    DifficultyLevel.BEGINNER: "Beginner",
    DifficultyLevel.INTERMEDIATE: "Intermediate",
    DifficultyLevel.ADVANCED: "Advanced",
}

PROGRESSION_PATTERN_NAMES: Dict[WeekProgressionPattern, tuple] = {
    WeekProgressionPattern.LINEAR: (
        "Linear Progression",
        "Consistent weekly increase in intensity",
    ),
    WeekProgressionPattern.WAVE: (
        "Wave Progression",
        "Alternating high and low intensity weeks",
    ),
    WeekProgressionPattern.THREE_ONE_DELOAD: (
        "3 Weeks Up, 1 Deload",
        "3 progressive weeks followed by 1 deload week",
    ),
    WeekProgressionPattern.FOUR_ONE_DELOAD: (
        "4 Weeks Up, 1 Deload",
        "4 progressive weeks followed by 1 deload week",
    ),
    WeekProgressionPattern.CUSTOM: (
        "Custom",
        "User-defined progression pattern",
    ),
}
