from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class LanguageFile:
    """A `.lang` entry read from a world archive."""

    path: str
    content: str

    @property
    def size(self) -> int:
        """Character length of the file content."""
        return len(self.content)


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Counts and per-word/per-sentence averages for a block of text."""

    sentences: int
    words: int
    characters: int
    syllables: int
    complex_words: int
    avg_words_per_sentence: float
    avg_syllables_per_word: float
    avg_chars_per_word: float


@dataclass(frozen=True, slots=True)
class ReadabilityScores:
    """Results of the seven readability formulas plus the statistics they used."""

    flesch_reading_ease: float
    flesch_kincaid_grade: float
    gunning_fog: float
    smog_index: float
    coleman_liau: float
    automated_readability: float
    linsear_write: float
    stats: TextStatistics

    def grade_level_scores(self) -> Tuple[float, ...]:
        """Scores that estimate a school grade, in display order."""
        return (
            self.flesch_kincaid_grade,
            self.gunning_fog,
            self.smog_index,
            self.coleman_liau,
            self.automated_readability,
            self.linsear_write,
        )


@dataclass(frozen=True, slots=True)
class Interpretation:
    """Human-facing reading-level guidance derived from scores."""

    difficulty: str
    average_grade_level: float
    approximate_age: int
    audience_description: str
    educational_stage: str
    educational_context: str
    age_range: Tuple[int, int]
    grade_range: Tuple[int, int]
