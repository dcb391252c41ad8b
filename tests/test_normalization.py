"""Tests for text normalization."""
import pytest
from location_engine.core.normalization import normalize_text


def test_normalize_text():
    """Test text normalization."""
    assert normalize_text("Mong Kok") == "mong kok"
    assert normalize_text("  Mong   Kok  ") == "mong kok"
    assert normalize_text("Mai Po / Nam Sang Wai") == "mai po nam sang wai"
    assert normalize_text("Mid-Levels") == "mid levels"
    assert normalize_text("") == ""
    assert normalize_text("   ") == ""
    assert normalize_text("!!!") == ""


def test_normalize_case_and_punctuation_insensitive():
    """Test that case and punctuation do not affect the result."""
    assert normalize_text("Tsim Sha Tsui!") == normalize_text("tsim sha tsui")


def test_normalize_decomposed_accents():
    """Test that combining accents split the word where they sit."""
    assert normalize_text("Mélanie") == "me lanie"
    assert normalize_text("SÉOUL") == "se oul"
    assert normalize_text("Café") == "cafe"
    assert normalize_text("mông kok") != normalize_text("mong kok")


def test_normalize_apostrophe_variants_become_spaces():
    """Test that curly and straight apostrophes both separate words."""
    assert normalize_text("Robin’s Nest") == normalize_text("Robin's Nest")
    assert normalize_text("Jardine's Lookout") == "jardine s lookout"
    assert normalize_text("Robinʼs Nest") == "robin s nest"


@pytest.mark.parametrize("text", [
    "Chek Lap Kok (Hong Kong International Airport)",
    "  Robin’s   Nest ",
    "Ｆｕｌｌｗｉｄｔｈ",
    "ﬁsh market",
    "tab\tand\nnewline",
    "Ünïcödé — dash",
    "",
])
def test_normalize_idempotent(text):
    """Test that normalizing twice equals normalizing once."""
    once = normalize_text(text)
    assert normalize_text(once) == once
