"""
Tiny helper script to sanity check extraction and scoring on inline `.lang` content.
"""

from __future__ import annotations

from mclang_readability import analyze_language_files, language_files_from_pairs
from mclang_readability.report import grade_level_chart_series


def main() -> None:
    files = language_files_from_pairs(
        [
            (
                "texts/en_US.lang",
                "npc.greeting=§2Welcome to the village!§r Talk to the librarian.\n"
                "npc.task=Collect five books from the shelves. Return them before sunset.\n"
                "tile.bookshelf.name=Bookshelf\n",
            ),
        ]
    )
    result = analyze_language_files(files)
    print(f"Extracted text: {result.extracted_text}")
    if result.scores is None or result.interpretation is None:
        print("Could not analyze the text content")
        return

    print(f"Flesch Reading Ease: {result.scores.flesch_reading_ease:.1f}")
    for label, value in grade_level_chart_series(result.scores):
        print(f"{label}: {value:.1f}")
    interpretation = result.interpretation
    print(f"Difficulty: {interpretation.difficulty}")
    print(f"Ages: {interpretation.age_range[0]}-{interpretation.age_range[1]}")


if __name__ == "__main__":
    main()
