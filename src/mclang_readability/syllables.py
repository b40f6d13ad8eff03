from __future__ import annotations

import re

VOWELS = frozenset("aeiouy")
NON_LETTER_RE = re.compile(r"[^a-z]")


def count_syllables(word: str) -> int:
    """
    Estimate the syllable count of a word by counting vowel runs.

    A trailing silent ``e`` is dropped when the word has more than one run.
    Any word with letters counts as at least one syllable; a word with no
    ``a-z`` letters counts as zero.
    """
    cleaned = NON_LETTER_RE.sub("", word.lower())
    if not cleaned:
        return 0

    syllables = 0
    previous_was_vowel = False
    for char in cleaned:
        is_vowel = char in VOWELS
        if is_vowel and not previous_was_vowel:
            syllables += 1
        previous_was_vowel = is_vowel

    if cleaned.endswith("e") and syllables > 1:
        syllables -= 1

    return max(1, syllables)
