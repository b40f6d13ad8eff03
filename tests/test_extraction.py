from mclang_readability.extraction import (
    clean_value,
    extract_readable_text,
    is_readable_fragment,
    iter_readable_fragments,
    split_entry,
)
from tests.utils import SAMPLE_LANG


def test_extract_returns_empty_without_entries():
    assert extract_readable_text("") == ""
    assert extract_readable_text("# only a comment\n\n   \n") == ""
    assert extract_readable_text("no separator here\nnor here") == ""


def test_extract_drops_single_word_values():
    """Single-word labels such as 'Stone' are filtered out; multi-word values survive."""
    content = "tile.stone.name=Stone\n#comment\nbad_line\nitem.name=A B C"
    assert extract_readable_text(content) == "A B C"


def test_extract_sample_file_in_line_order():
    text = extract_readable_text(SAMPLE_LANG)
    assert text == (
        "Ocean Explorers "
        "Explore the reef and learn about sea life. "
        "Talk to the marine biologist. "
        "Welcome to the research station! Please look around. "
        "Find three different types of coral. Then report back to me. "
        "This door opens later ."
    )


def test_extract_handles_windows_line_endings():
    content = "a.b=Hello there\r\nc.d=General Kenobi\r\n"
    assert extract_readable_text(content) == "Hello there General Kenobi"


def test_split_entry_uses_first_separator():
    assert split_entry("key=value=more") == ("key", "value=more")
    assert split_entry("  # key=value") is None
    assert split_entry("nokey") is None
    assert split_entry("key=") == ("key", "")


def test_clean_value_strips_colour_codes_and_brackets():
    assert clean_value("§4Hello World§r (meta)") == "Hello World"
    assert clean_value("§4Hello§r (meta) {ignored} [x]") == "Hello"
    assert clean_value("§LBold§O text") == "Bold text"


def test_clean_value_removes_placeholders_and_runs():
    assert clean_value("Line one\\nLine two") == "Line one Line two"
    assert clean_value("###{LOCKED}Door") == "Door"
    assert clean_value("Press :{_input_key.jump}: to jump") == "Press to jump"
    assert clean_value("Wait:: for__ it~~ ##now") == "Wait for it now"
    assert clean_value("Score + 5 = 10% <max> | a\\b") == "Score 5 10 max ab"


def test_is_readable_fragment_rules():
    assert is_readable_fragment("Hello World")
    assert is_readable_fragment("Hi a")
    assert not is_readable_fragment("A B")
    assert not is_readable_fragment("abc")
    assert not is_readable_fragment("12.5 34")
    assert not is_readable_fragment("Stone")
    assert not is_readable_fragment("... ---")


def test_iter_readable_fragments_yields_cleaned_values():
    content = "a=§2Go north§r\nb=x\nc=Go south [now]"
    assert list(iter_readable_fragments(content)) == ["Go north", "Go south"]
