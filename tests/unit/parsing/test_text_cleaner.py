"""
Unit-тесты для Stage 1: OCR Cleanup.

ЦКП: Очистка строк от OCR-артефактов.
"""

import pytest

from src.parsing.s1_ocr_cleanup import TextCleaner, clean_ocr_text


@pytest.fixture
def cleaner():
    return TextCleaner()


class TestTextCleanerRules:
    """Отдельные правила очистки."""

    def test_empty_and_blank(self, cleaner):
        assert cleaner.clean("") == ""
        assert cleaner.clean("   ") == ""
        assert cleaner.clean(None) == ""

    def test_strips_leading_closing_brackets(self, cleaner):
        assert cleaner.clean(")]Concrete") == "Concrete"

    def test_strips_trailing_opening_brackets(self, cleaner):
        assert cleaner.clean("Gravel ([") == "Gravel"

    def test_space_before_punctuation(self, cleaner):
        assert cleaner.clean("Max . daily") == "Max. daily"
        assert cleaner.clean("Workers : 75") == "Workers: 75"

    def test_collapses_whitespace(self, cleaner):
        assert cleaner.clean("22t   of\tConcrete") == "22t of Concrete"

    def test_slash_and_dash_normalization(self, cleaner):
        assert cleaner.clean("tons / year") == "tons/year"
        assert cleaner.clean("Open - space") == "Open-space"

    def test_removes_degree_sign(self, cleaner):
        assert cleaner.clean("20°") == "20"

    def test_leading_bracket_with_space(self, cleaner):
        assert cleaner.clean(") 20") == "20"

    def test_module_function(self):
        assert clean_ocr_text("  Steel  ") == "Steel"


class TestTextCleanerIdempotence:
    """clean(clean(s)) == clean(s)."""

    @pytest.mark.parametrize("text", [
        " ) ]x",
        "a .b",
        "Resources needed to build :",
        ") ) 20",
        "tons / year ,",
        "x ( [",
        " . . ",
        "} ] ) Concrete [ (",
        "Max . power : 5 MW °",
        " Boards  ; ",
        ") " * 30 + "Concrete",
        "] } " * 25 + "Steel" + " ( [" * 25,
        "a" + " ." * 40,
    ])
    def test_idempotent(self, cleaner, text):
        once = cleaner.clean(text)
        assert cleaner.clean(once) == once

    def test_long_leading_bracket_run(self, cleaner):
        assert cleaner.clean(") " * 30 + "Concrete") == "Concrete"

    def test_long_trailing_bracket_run(self, cleaner):
        assert cleaner.clean("Gravel" + " ( [ {" * 20) == "Gravel"
