from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .archive import read_language_files, select_largest_language_file
from .config import ReadabilityConfig
from .extraction import extract_readable_text
from .interpretation import interpret_scores
from .models import Interpretation, LanguageFile, ReadabilityScores
from .scoring import calculate_readability_scores

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Everything a report or export needs from one archive analysis."""

    language_file: LanguageFile
    file_count: int
    extracted_text: str
    scores: ReadabilityScores | None

    @property
    def is_scored(self) -> bool:
        return self.scores is not None

    @property
    def interpretation(self) -> Interpretation | None:
        if self.scores is None:
            return None
        return interpret_scores(self.scores)


def analyze_language_file(language_file: LanguageFile, file_count: int = 1) -> AnalysisResult:
    """Extract and score a single language file."""
    extracted_text = extract_readable_text(language_file.content)
    LOGGER.info(
        "Extracted %d characters of readable text from %s",
        len(extracted_text),
        language_file.path,
    )
    scores = calculate_readability_scores(extracted_text)
    return AnalysisResult(
        language_file=language_file,
        file_count=file_count,
        extracted_text=extracted_text,
        scores=scores,
    )


def analyze_language_files(files: Sequence[LanguageFile]) -> AnalysisResult:
    """
    Analyze the largest of the supplied language files.

    Raises NoLanguageFilesError when ``files`` is empty.
    """
    largest = select_largest_language_file(files)
    return analyze_language_file(largest, file_count=len(files))


def analyze_archive(
    archive_path: Path, config: ReadabilityConfig | None = None
) -> AnalysisResult:
    """Read a world archive and analyze its largest language file."""
    cfg = config or ReadabilityConfig()
    files = read_language_files(
        archive_path, suffixes=cfg.language_suffixes, encoding=cfg.encoding
    )
    return analyze_language_files(files)
