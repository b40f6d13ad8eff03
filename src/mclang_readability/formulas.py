"""
Classic readability formulas expressed over pre-computed text statistics.

Every function is pure and assumes ``words > 0`` and ``sentences > 0``;
the scorer guards against empty text before calling any of them.
"""

from __future__ import annotations

import math

SMOG_MIN_SENTENCES = 3


def flesch_reading_ease(avg_words_per_sentence: float, avg_syllables_per_word: float) -> float:
    """Flesch Reading Ease, clamped to [0, 100]."""
    score = 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word
    return max(0.0, min(100.0, score))


def flesch_kincaid_grade(avg_words_per_sentence: float, avg_syllables_per_word: float) -> float:
    """Flesch-Kincaid grade level, never below zero."""
    score = 0.39 * avg_words_per_sentence + 11.8 * avg_syllables_per_word - 15.59
    return max(0.0, score)


def gunning_fog(avg_words_per_sentence: float, complex_words: int, words: int) -> float:
    complex_word_percentage = (complex_words / words) * 100
    return 0.4 * (avg_words_per_sentence + complex_word_percentage)


def smog_index(complex_words: int, sentences: int, fog: float) -> float:
    """
    SMOG grade.

    Texts with fewer than three sentences fall back to the Gunning Fog value.
    """
    if sentences >= SMOG_MIN_SENTENCES:
        return 1.043 * math.sqrt(complex_words * (30 / sentences)) + 3.1291
    return fog


def coleman_liau(characters: int, words: int, sentences: int) -> float:
    letters_per_100 = (characters / words) * 100
    sentences_per_100 = (sentences / words) * 100
    return 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8


def automated_readability(avg_chars_per_word: float, avg_words_per_sentence: float) -> float:
    return 4.71 * avg_chars_per_word + 0.5 * avg_words_per_sentence - 21.43


def linsear_write(easy_words: int, hard_words: int, sentences: int) -> float:
    """Linsear Write approximation over the whole text."""
    raw = (easy_words + hard_words * 3) / sentences
    if raw > 20:
        return raw / 2
    return (raw - 2) / 2
