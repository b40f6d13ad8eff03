from __future__ import annotations

import logging
import re
from typing import List

from . import formulas
from .models import ReadabilityScores, TextStatistics
from .syllables import count_syllables

LOGGER = logging.getLogger(__name__)

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
WHITESPACE_RE = re.compile(r"\s+")
COMPLEX_WORD_SYLLABLES = 3


def split_sentences(text: str) -> List[str]:
    """Split text on runs of terminal punctuation, dropping blank segments."""
    return [segment for segment in SENTENCE_SPLIT_RE.split(text) if segment.strip()]


def split_words(text: str) -> List[str]:
    return [word for word in WHITESPACE_RE.split(text) if word]


def compute_text_statistics(text: str) -> TextStatistics | None:
    """Count sentences, words, characters and syllables; None if nothing to count."""
    sentence_count = len(split_sentences(text))
    words = split_words(text)
    word_count = len(words)
    if sentence_count == 0 or word_count == 0:
        return None

    character_count = len(WHITESPACE_RE.sub("", text))
    syllable_counts = [count_syllables(word) for word in words]
    total_syllables = sum(syllable_counts)
    complex_words = sum(1 for count in syllable_counts if count >= COMPLEX_WORD_SYLLABLES)

    return TextStatistics(
        sentences=sentence_count,
        words=word_count,
        characters=character_count,
        syllables=total_syllables,
        complex_words=complex_words,
        avg_words_per_sentence=word_count / sentence_count,
        avg_syllables_per_word=total_syllables / word_count,
        avg_chars_per_word=character_count / word_count,
    )


def calculate_readability_scores(text: str) -> ReadabilityScores | None:
    """
    Score text with all seven readability formulas.

    Returns None when the text has no sentences or no words; callers should
    treat that as a terminal "cannot analyze" outcome.
    """
    stats = compute_text_statistics(text)
    if stats is None:
        LOGGER.warning("Text has no sentences or words; skipping readability scoring")
        return None

    # Words above the easy-word ceiling are exactly the complex words.
    hard_words = stats.complex_words
    easy_words = stats.words - hard_words

    fog = formulas.gunning_fog(
        stats.avg_words_per_sentence, stats.complex_words, stats.words
    )
    scores = ReadabilityScores(
        flesch_reading_ease=formulas.flesch_reading_ease(
            stats.avg_words_per_sentence, stats.avg_syllables_per_word
        ),
        flesch_kincaid_grade=formulas.flesch_kincaid_grade(
            stats.avg_words_per_sentence, stats.avg_syllables_per_word
        ),
        gunning_fog=fog,
        smog_index=formulas.smog_index(stats.complex_words, stats.sentences, fog),
        coleman_liau=formulas.coleman_liau(
            stats.characters, stats.words, stats.sentences
        ),
        automated_readability=formulas.automated_readability(
            stats.avg_chars_per_word, stats.avg_words_per_sentence
        ),
        linsear_write=formulas.linsear_write(easy_words, hard_words, stats.sentences),
        stats=stats,
    )
    LOGGER.debug(
        "Scored %d words across %d sentences (FRE %.1f)",
        stats.words,
        stats.sentences,
        scores.flesch_reading_ease,
    )
    return scores
