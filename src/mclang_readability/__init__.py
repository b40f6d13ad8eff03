"""
mclang_readability package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .archive import (
    ArchiveReadError,
    NoLanguageFilesError,
    language_files_from_pairs,
    read_language_files,
    select_largest_language_file,
)
from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .extraction import extract_readable_text
from .interpretation import interpret_scores
from .pipeline import AnalysisResult, analyze_archive, analyze_language_files
from .scoring import calculate_readability_scores
from .syllables import count_syllables

__all__ = [
    "AnalysisResult",
    "ArchiveReadError",
    "NoLanguageFilesError",
    "ReadabilityConfig",
    "analyze_archive",
    "analyze_language_files",
    "calculate_readability_scores",
    "config_from_dict",
    "config_from_yaml",
    "count_syllables",
    "extract_readable_text",
    "interpret_scores",
    "language_files_from_pairs",
    "load_config",
    "read_language_files",
    "select_largest_language_file",
]

__version__ = "0.1.0"
