from __future__ import annotations

import datetime as _dt
from dataclasses import asdict
from typing import Any, Dict, List, Tuple, TypedDict

from .models import ReadabilityScores
from .pipeline import AnalysisResult

TRUNCATION_MARKER = "\n\n... (truncated)"
RULE = "=" * 50

# Label, attribute name; order matches the on-screen score table.
SCORE_LABELS: List[Tuple[str, str]] = [
    ("Flesch Reading Ease", "flesch_reading_ease"),
    ("Flesch-Kincaid Grade", "flesch_kincaid_grade"),
    ("Gunning Fog Index", "gunning_fog"),
    ("SMOG Index", "smog_index"),
    ("Coleman-Liau Index", "coleman_liau"),
    ("Automated Readability", "automated_readability"),
    ("Linsear Write", "linsear_write"),
]

CHART_LABELS = [
    "Flesch-Kincaid Grade",
    "Gunning Fog Index",
    "SMOG Index",
    "Coleman-Liau",
    "Automated Readability",
    "Linsear Write",
]


class UnscoreableTextError(ValueError):
    """Raised when a report is requested for text that produced no scores."""

    def __init__(self, message: str = "Could not analyze the text content") -> None:
        super().__init__(message)


class InterpretationPayload(TypedDict):
    difficulty: str
    average_grade_level: float
    approximate_age: int
    audience_description: str
    educational_stage: str
    educational_context: str
    age_range: List[int]
    grade_range: List[int]


class SummaryPayload(TypedDict):
    file_path: str
    file_size: int
    file_count: int
    extracted_text_length: int
    file_preview: str
    extracted_text_preview: str
    scores: Dict[str, Any] | None
    interpretation: InterpretationPayload | None


def preview(text: str, limit: int = 1000) -> str:
    """Return at most ``limit`` characters, flagging when text was cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def grade_level_chart_series(scores: ReadabilityScores) -> List[Tuple[str, float]]:
    """Label/value pairs for a grade-level bar chart."""
    return list(zip(CHART_LABELS, scores.grade_level_scores()))


def build_summary(result: AnalysisResult, preview_chars: int = 1000) -> SummaryPayload:
    """Create a JSON-serializable summary of an analysis."""
    interpretation = result.interpretation
    interpretation_payload: InterpretationPayload | None = None
    if interpretation is not None:
        interpretation_payload = {
            "difficulty": interpretation.difficulty,
            "average_grade_level": interpretation.average_grade_level,
            "approximate_age": interpretation.approximate_age,
            "audience_description": interpretation.audience_description,
            "educational_stage": interpretation.educational_stage,
            "educational_context": interpretation.educational_context,
            "age_range": list(interpretation.age_range),
            "grade_range": list(interpretation.grade_range),
        }
    return {
        "file_path": result.language_file.path,
        "file_size": result.language_file.size,
        "file_count": result.file_count,
        "extracted_text_length": len(result.extracted_text),
        "file_preview": preview(result.language_file.content, preview_chars),
        "extracted_text_preview": preview(result.extracted_text, preview_chars),
        "scores": asdict(result.scores) if result.scores is not None else None,
        "interpretation": interpretation_payload,
    }


def build_analysis_report(
    result: AnalysisResult, generated_at: _dt.datetime | None = None
) -> str:
    """Render the downloadable plain-text language analysis report."""
    scores = result.scores
    interpretation = result.interpretation
    if scores is None or interpretation is None:
        raise UnscoreableTextError()

    when = generated_at or _dt.datetime.now()
    stats = scores.stats
    min_age, max_age = interpretation.age_range

    score_lines = []
    for label, attr in SCORE_LABELS:
        line = f"{label + ':':<27}{getattr(scores, attr):.1f}"
        if attr == "flesch_reading_ease":
            line += f" ({interpretation.difficulty})"
        score_lines.append(line)

    lines = [
        "MINECRAFT EDUCATION LANGUAGE ANALYSIS REPORT",
        f"Generated: {when:%Y-%m-%d %H:%M:%S}",
        "",
        *_section("SOURCE INFORMATION"),
        f"File Path: {result.language_file.path}",
        f"Analysis Date: {when:%Y-%m-%d}",
        "",
        *_section("READABILITY SCORES"),
        *score_lines,
        "",
        *_section("SUMMARY ANALYSIS"),
        f"Average Grade Level:       {interpretation.average_grade_level:.1f}",
        f"Recommended Age:           {interpretation.approximate_age} years old",
        f"Difficulty Level:          {interpretation.difficulty}",
        f"Educational Stage:         {interpretation.educational_stage}",
        f"Age Range:                 {min_age}–{max_age}",
        "",
        *_section("TEXT STATISTICS"),
        f"Total Sentences:           {stats.sentences}",
        f"Total Words:               {stats.words}",
        f"Total Characters:          {stats.characters}",
        f"Total Syllables:           {stats.syllables}",
        f"Complex Words (3+ syllables): {stats.complex_words}",
        f"Average Words per Sentence: {stats.avg_words_per_sentence:.1f}",
        f"Average Syllables per Word: {stats.avg_syllables_per_word:.2f}",
        f"Average Characters per Word: {stats.avg_chars_per_word:.1f}",
        "",
        *_section("EDUCATIONAL RECOMMENDATIONS"),
        interpretation.educational_context,
        "",
        *_section("EXTRACTED TEXT CONTENT"),
        result.extracted_text,
        "",
        *_section("END OF REPORT"),
    ]
    return "\n".join(lines).rstrip("\n")


def _section(title: str) -> List[str]:
    return [RULE, title, RULE]
