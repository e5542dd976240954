"""
Unit-тесты для Stage 4: Industry Sections.

ЦКП: Секции карточки здания из строк и цвета текста.
"""

import pytest

from conftest import element
from src.parsing.s2_color import ColorAnalysis
from src.parsing.s3_layout import LayoutStage
from src.parsing.s4_industry import HeaderClassifier, SectionAssembler


def colors_for(red=(), black=()) -> ColorAnalysis:
    """ColorAnalysis без изображения: явные красные и чёрные элементы."""
    by_element = {e: True for e in red}
    by_element.update({e: False for e in black})
    return ColorAnalysis(by_element=by_element, by_text={e.text: v for e, v in by_element.items()})


def words_line(text: str, y: int, x: int = 0, gap: int = 10):
    """Слова одной фразы с зазором gap (склеиваются WordCombiner при gap < 20)."""
    result = []
    for word in text.split():
        result.append(element(word, x, y))
        x += 10 * len(word) + gap
    return result


@pytest.fixture
def classifier(keyword_config):
    return HeaderClassifier(keyword_config)


@pytest.fixture
def assembler(classifier):
    return SectionAssembler(header_classifier=classifier)


def assemble(assembler, words, colors):
    layout = LayoutStage().process(words)
    return assembler.process(layout, colors)


class TestHeaderClassifier:
    """Лексические признаки строк."""

    def test_keyword_substring_case_insensitive(self, classifier):
        assert classifier.matches_keyword("WORKERS") is True
        assert classifier.matches_keyword("Concrete") is False

    def test_likely_header_with_colon(self, classifier):
        assert classifier.is_likely_header("Anything:") is True

    def test_strong_header_phrase(self, classifier):
        assert classifier.is_strong_header("Resources needed to build") is True
        assert classifier.is_strong_header("Power consumption") is True

    def test_strong_header_colon_and_keyword(self, classifier):
        assert classifier.is_strong_header("Quality:") is True
        assert classifier.is_strong_header("Quality") is False

    @pytest.mark.parametrize("text", ["1644 Workdays", "22t of Concrete", "6.0t of Alcohol", "75", "12.5", "Gravel"])
    def test_data_items(self, classifier, text):
        assert classifier.is_data_item(text) is True

    def test_data_term_with_keyword_is_not_data(self, classifier):
        # "water" - и материал, и слово заголовка
        assert classifier.is_data_item("Water consumption") is False


class TestSectionAssembly:
    """Свёртка строк в секции."""

    def test_colon_split_inline_item(self, assembler):
        words = words_line("Brick factory", 0) + words_line("Resources needed to build:", 40)
        words += words_line("2712 Workdays", 40, x=400)

        data = assemble(assembler, words, colors_for())

        assert data.name == "Brick factory"
        assert len(data.sections) == 1
        assert data.sections[0].section_name == "Resources needed to build"
        assert data.sections[0].items == ["2712 Workdays"]

    def test_red_header_then_value(self, assembler):
        header = words_line("Maximum number of workers:", 0)
        value = [element("75", 0, 40)]

        data = assemble(assembler, header + value, colors_for(red=header, black=value))

        assert [s.section_name for s in data.sections] == ["Maximum number of workers"]
        assert data.sections[0].items == ["75"]
        assert data.name == ""

    def test_lines_before_first_header_dropped(self, assembler):
        words = words_line("Brick factory", 0) + words_line("Some flavour text", 30)
        words += words_line("Building lifespan:", 60) + [element("50 years", 0, 90)]

        data = assemble(assembler, words, colors_for())

        assert len(data.sections) == 1
        assert data.sections[0].items == ["50 years"]

    def test_name_from_red_and_keyword_words(self, assembler):
        red_word = element("Import", 0, 0)
        black_keyword = element("Warehouse", 300, 0)

        data = assemble(
            assembler,
            [red_word, black_keyword, element("120 tons", 0, 40)],
            colors_for(red=[red_word], black=[black_keyword]),
        )

        assert data.sections[0].section_name == "Import Warehouse"
        assert data.sections[0].items == ["120 tons"]

    def test_data_line_is_not_header(self, assembler):
        words = words_line("Storage:", 0) + [element("22t of Warehouse", 0, 40)]

        data = assemble(assembler, words, colors_for())

        assert [s.section_name for s in data.sections] == ["Storage"]
        assert data.sections[0].items == ["22t of Warehouse"]

    def test_two_column_content(self, assembler):
        words = words_line("Resources needed to build:", 0)
        words += words_line("22t of Concrete", 40) + words_line("10t of Steel", 40, x=400)

        data = assemble(assembler, words, colors_for())

        assert data.sections[0].items == ["22t of Concrete", "10t of Steel"]

    def test_multiple_sections_in_order(self, assembler):
        words = words_line("Resources needed to build:", 0) + [element("1644 Workdays", 0, 40)]
        words += words_line("Maximum number of workers:", 80) + [element("75", 0, 120)]
        words += words_line("Power consumption:", 160) + [element("2 MW", 0, 200)]

        data = assemble(assembler, words, colors_for())

        assert [s.section_name for s in data.sections] == [
            "Resources needed to build",
            "Maximum number of workers",
            "Power consumption",
        ]
        assert [s.items for s in data.sections] == [["1644 Workdays"], ["75"], ["2 MW"]]

    def test_building_name_not_repeated_in_content(self, assembler):
        title = element("Sawmill", 0, 0)
        words = [title] + words_line("Warehouse:", 40) + [element("Sawmill", 0, 80), element("Boards", 300, 80)]

        data = assemble(assembler, words, colors_for(black=[title]))

        assert data.name == "Sawmill"
        assert data.sections[0].items == ["Boards"]

    def test_empty_section_name_is_not_header(self, assembler):
        red_colon = element(":", 0, 0)

        data = assemble(assembler, [red_colon, element("75", 0, 40)], colors_for(red=[red_colon]))

        assert data.sections == []

    def test_no_lines(self, assembler):
        data = assemble(assembler, [], colors_for())

        assert data.name == ""
        assert data.sections == []

    def test_section_without_content_is_kept(self, assembler):
        words = words_line("Warehouse:", 0) + words_line("Maximum number of workers:", 40)
        words += [element("75", 0, 80)]

        data = assemble(assembler, words, colors_for())

        assert [s.section_name for s in data.sections] == ["Warehouse", "Maximum number of workers"]
        assert data.sections[0].items == []
        assert data.sections[1].items == ["75"]
