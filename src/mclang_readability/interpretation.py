from __future__ import annotations

import math
from typing import List, Tuple

from .models import Interpretation, ReadabilityScores

# (minimum Flesch Reading Ease, difficulty label, audience description)
FLESCH_BANDS: List[Tuple[float, str, str]] = [
    (90.0, "Very Easy", "easily understood by 11-year-olds and below"),
    (80.0, "Easy", "easily understood by 12–13 year olds"),
    (70.0, "Fairly Easy", "easily understood by 13–15 year olds"),
    (60.0, "Standard", "easily understood by 15–17 year olds"),
    (50.0, "Fairly Difficult", "understood by high school graduates"),
    (30.0, "Difficult", "understood by college-level readers"),
]
FLESCH_FLOOR = ("Very Difficult", "understood by university graduates")

# (maximum average grade, educational stage, educational context)
GRADE_BANDS: List[Tuple[float, str, str]] = [
    (
        3.0,
        "Early Elementary",
        "Perfect for early elementary students learning to read independently.",
    ),
    (
        6.0,
        "Upper Elementary / Early Middle",
        "Ideal for elementary to middle school students.",
    ),
    (
        9.0,
        "Middle / Early High",
        "Appropriate for middle to high school students.",
    ),
    (
        12.0,
        "High School",
        "Suitable for high school students and above.",
    ),
]
COLLEGE_STAGE = "College / Adult"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, as report readers expect."""
    return int(math.floor(value + 0.5))


def _flesch_band(flesch_reading_ease: float) -> Tuple[str, str]:
    for threshold, label, audience in FLESCH_BANDS:
        if flesch_reading_ease >= threshold:
            return label, audience
    return FLESCH_FLOOR


def difficulty_from_flesch(flesch_reading_ease: float) -> str:
    """Map a Flesch Reading Ease score to a difficulty label."""
    return _flesch_band(flesch_reading_ease)[0]


def audience_description(flesch_reading_ease: float) -> str:
    return _flesch_band(flesch_reading_ease)[1]


def average_grade_level(scores: ReadabilityScores) -> float:
    """Mean of the six grade-level formulas."""
    grades = scores.grade_level_scores()
    return sum(grades) / len(grades)


def approximate_age(avg_grade_level: float) -> int:
    return round_half_up(avg_grade_level + 5)


def educational_stage(avg_grade_level: float) -> str:
    for ceiling, stage, _ in GRADE_BANDS:
        if avg_grade_level <= ceiling:
            return stage
    return COLLEGE_STAGE


def educational_context(avg_grade_level: float, difficulty: str) -> str:
    for ceiling, _, context in GRADE_BANDS:
        if avg_grade_level <= ceiling:
            return context
    return f"College-level content requiring advanced reading skills ({difficulty})."


def recommended_age_range(avg_grade_level: float) -> Tuple[int, int]:
    return (
        max(6, round_half_up(avg_grade_level + 4)),
        round_half_up(avg_grade_level + 7),
    )


def recommended_grade_range(avg_grade_level: float) -> Tuple[int, int]:
    return (
        max(1, round_half_up(avg_grade_level - 1)),
        round_half_up(avg_grade_level + 2),
    )


def interpret_scores(scores: ReadabilityScores) -> Interpretation:
    """Derive difficulty, grade and age guidance from readability scores."""
    avg_grade = average_grade_level(scores)
    difficulty = difficulty_from_flesch(scores.flesch_reading_ease)
    return Interpretation(
        difficulty=difficulty,
        average_grade_level=avg_grade,
        approximate_age=approximate_age(avg_grade),
        audience_description=audience_description(scores.flesch_reading_ease),
        educational_stage=educational_stage(avg_grade),
        educational_context=educational_context(avg_grade, difficulty),
        age_range=recommended_age_range(avg_grade),
        grade_range=recommended_grade_range(avg_grade),
    )
