from __future__ import annotations

from pathlib import Path

import pytest

from mclang_readability.archive import NoLanguageFilesError
from mclang_readability.config import ReadabilityConfig
from mclang_readability.models import LanguageFile
from mclang_readability.pipeline import analyze_archive, analyze_language_files
from tests.utils import SAMPLE_LANG, SAMPLE_LANG_SHORT, write_minimal_mcworld


def test_analyze_language_files_uses_largest_file():
    files = [
        LanguageFile(path="short.lang", content=SAMPLE_LANG_SHORT),
        LanguageFile(path="full.lang", content=SAMPLE_LANG),
    ]
    result = analyze_language_files(files)
    assert result.language_file.path == "full.lang"
    assert result.file_count == 2
    assert result.extracted_text.startswith("Ocean Explorers Explore the reef")
    assert result.is_scored
    assert result.scores is not None
    assert result.scores.stats.sentences == 7


def test_analyze_language_files_requires_input():
    """The scorer is never reached without language files."""
    with pytest.raises(NoLanguageFilesError):
        analyze_language_files([])


def test_unscoreable_text_yields_no_scores():
    files = [LanguageFile(path="labels.lang", content="a=Stone\nb=Dirt\nc=42")]
    result = analyze_language_files(files)
    assert result.extracted_text == ""
    assert result.scores is None
    assert result.interpretation is None
    assert not result.is_scored


def test_interpretation_is_derived_from_scores():
    result = analyze_language_files([LanguageFile(path="x.lang", content=SAMPLE_LANG)])
    interpretation = result.interpretation
    assert interpretation is not None
    assert interpretation.age_range[0] >= 6
    assert interpretation.grade_range[0] >= 1


def test_analyze_archive_reads_zip(tmp_path: Path):
    archive = tmp_path / "ocean.mcworld"
    write_minimal_mcworld(
        archive,
        {
            "resource_packs/rp/texts/en_US.lang": SAMPLE_LANG,
            "behavior_packs/bp/texts/en_US.lang": SAMPLE_LANG_SHORT,
        },
    )
    result = analyze_archive(archive)
    assert result.language_file.path == "resource_packs/rp/texts/en_US.lang"
    assert result.file_count == 2


def test_analyze_archive_without_lang_files(tmp_path: Path):
    archive = tmp_path / "empty.mcworld"
    write_minimal_mcworld(archive, {"manifest.json": "{}"})
    with pytest.raises(NoLanguageFilesError):
        analyze_archive(archive, ReadabilityConfig())
