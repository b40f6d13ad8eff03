from __future__ import annotations

import logging
import re
from typing import Iterator, List, Tuple

LOGGER = logging.getLogger(__name__)

# Applied in order; later patterns assume earlier ones have already run.
CLEANUP_STEPS: List[Tuple[re.Pattern[str], str]] = [
    (re.compile(r"§[0-9a-fk-or]", re.IGNORECASE), ""),  # colour/format codes
    (re.compile(r"\\n"), " "),  # escaped newlines
    (re.compile(r"###\{[^}]*\}"), ""),  # ###{LOCKED} placeholders
    (re.compile(r"#{2,}"), ""),
    (re.compile(r":{2,}"), ""),
    (re.compile(r"~{2,}"), ""),
    (re.compile(r"_{2,}"), ""),
    (re.compile(r":\{[^}]*\}:"), ""),  # :{key}: tokens
    (re.compile(r"\{[^}]*\}"), ""),
    (re.compile(r"\[[^\]]*\]"), ""),
    (re.compile(r"\([^)]*\)"), ""),
    (re.compile(r"[#$%^&*+=<>|\\]"), ""),
    (re.compile(r"\s+"), " "),
]

LETTER_RE = re.compile(r"[a-zA-Z]")
NUMERIC_RE = re.compile(r"[0-9]+\.?[0-9]*")
SYMBOLS_ONLY_RE = re.compile(r"[^a-zA-Z0-9\s]+")

MIN_FRAGMENT_LENGTH = 3
MIN_FRAGMENT_TOKENS = 2


def clean_value(value: str) -> str:
    """Strip markup, placeholders and formatting codes from a `.lang` value."""
    cleaned = value.strip()
    for pattern, replacement in CLEANUP_STEPS:
        cleaned = pattern.sub(replacement, cleaned)
    return cleaned.strip()


def is_readable_fragment(text: str) -> bool:
    """Return True if a cleaned value looks like natural-language prose."""
    if len(text) <= MIN_FRAGMENT_LENGTH:
        return False
    if not LETTER_RE.search(text):
        return False
    if NUMERIC_RE.fullmatch(text):
        return False
    if SYMBOLS_ONLY_RE.fullmatch(text):
        return False
    return len(text.split(" ")) >= MIN_FRAGMENT_TOKENS


def split_entry(line: str) -> Tuple[str, str] | None:
    """
    Split a `.lang` line into ``(key, value)``.

    Returns None for blank lines, comments and lines without a separator.
    Only the first ``=`` separates key from value.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    key, sep, value = stripped.partition("=")
    if not sep:
        return None
    return key, value


def iter_readable_fragments(raw_content: str) -> Iterator[str]:
    """Yield cleaned, readable values from `.lang` content in line order."""
    for line in raw_content.split("\n"):
        entry = split_entry(line)
        if entry is None:
            continue
        _, value = entry
        if not value:
            continue
        cleaned = clean_value(value)
        if is_readable_fragment(cleaned):
            yield cleaned


def extract_readable_text(raw_content: str) -> str:
    """Return the readable prose of a `.lang` file as one space-joined string."""
    fragments = list(iter_readable_fragments(raw_content))
    LOGGER.debug("Extracted %d readable fragments", len(fragments))
    return " ".join(fragments)
