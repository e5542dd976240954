"""
Stage 4: Industry Sections

ЦКП: Карточка здания (IndustryData) из строк скриншота.

Input: LayoutResult (из Stage 3) + ColorAnalysis (из Stage 2)
Output: IndustryData(name, sections[])

Строка - заголовок новой секции, если:
    (красный текст + слово заголовка ИЛИ устойчивая фраза заголовка)
    И НЕ все элементы строки - данные.
Иначе строка - содержимое текущей секции (колонки -> отдельные items).
Строки до первого заголовка отбрасываются.

Реализация: свёртка (functools.reduce) по строкам с неизменяемым
состоянием (закрытые секции, открытая секция).
"""

from dataclasses import dataclass
from functools import reduce
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from contracts.d1_extraction_dto import TextElement
from contracts.d2_parsing_dto import IndustryData, IndustrySection
from ..s1_ocr_cleanup.text_cleaner import TextCleaner
from ..s2_color.color_classifier import ColorAnalysis
from ..s3_layout.column_splitter import ColumnSplitter
from ..s3_layout.stage import LayoutResult, Line
from .header_classifier import HeaderClassifier


@dataclass(frozen=True)
class _OpenSection:
    name: str
    items: Tuple[str, ...] = ()

    def extend(self, items: Sequence[str]) -> "_OpenSection":
        return _OpenSection(self.name, self.items + tuple(items))

    def close(self) -> IndustrySection:
        return IndustrySection(section_name=self.name, items=list(self.items))


@dataclass(frozen=True)
class _AssemblyState:
    sections: Tuple[IndustrySection, ...] = ()
    current: Optional[_OpenSection] = None

    def flushed(self) -> Tuple[IndustrySection, ...]:
        if self.current is None:
            return self.sections
        return self.sections + (self.current.close(),)


class SectionAssembler:
    """
    Stage 4: Industry Sections.

    ЦКП: Секции карточки здания в порядке появления.
    """

    def __init__(
        self,
        header_classifier: HeaderClassifier,
        column_splitter: Optional[ColumnSplitter] = None,
        text_cleaner: Optional[TextCleaner] = None,
    ):
        self.classifier = header_classifier
        self.column_splitter = column_splitter or ColumnSplitter()
        self.cleaner = text_cleaner or TextCleaner()

    def process(self, layout: LayoutResult, colors: ColorAnalysis) -> IndustryData:
        """
        Собирает карточку здания.

        Args:
            layout: Строки (Stage 3)
            colors: Выделенный текст (Stage 2)
        """
        building = self.find_building_name(layout, colors)
        building_text = building.text if building else None

        def step(state: _AssemblyState, line: Line) -> _AssemblyState:
            return self._step(state, line, colors, building_text)

        final_state = reduce(step, layout.lines, _AssemblyState())
        sections = list(final_state.flushed())

        name = self.cleaner.clean(building_text) if building_text else ""

        logger.info(
            f"[Stage 4: Industry] Здание '{name}': {len(sections)} секций, "
            f"{sum(len(s.items) for s in sections)} строк данных"
        )

        return IndustryData(name=name, sections=sections)

    def find_building_name(self, layout: LayoutResult, colors: ColorAnalysis) -> Optional[TextElement]:
        """
        Первая не выделенная фраза сверху (по Y, затем по X).

        Ищется только над первым заголовком секции: строки данных
        под заголовками названием здания не бывают.
        """
        candidates: List[TextElement] = []
        for line in layout.lines:
            if line.combined and self.parse_header(line.combined, colors) is not None:
                break
            candidates.extend(line.combined)

        ordered = sorted(candidates, key=lambda e: (e.bounding_box.y, e.bounding_box.x))
        return next((e for e in ordered if not colors.is_highlighted(e)), None)

    def _step(
        self,
        state: _AssemblyState,
        line: Line,
        colors: ColorAnalysis,
        building_text: Optional[str],
    ) -> _AssemblyState:
        if not line.combined:
            return state

        header = self.parse_header(line.combined, colors)
        if header is not None:
            name, inline_item = header
            logger.debug(f"[Stage 4: Industry] Строка {line.line_number}: секция '{name}'")
            return _AssemblyState(
                sections=state.flushed(),
                current=_OpenSection(name, (inline_item,) if inline_item else ()),
            )

        if state.current is None:
            return state

        content = [e for e in line.combined if e.text != building_text]
        if not content:
            return state

        items = [
            cleaned
            for cleaned in (self.cleaner.clean(item) for item in self.column_splitter.split(content))
            if cleaned
        ]
        return _AssemblyState(sections=state.sections, current=state.current.extend(items))

    def parse_header(
        self,
        combined: Sequence[TextElement],
        colors: ColorAnalysis,
    ) -> Optional[Tuple[str, Optional[str]]]:
        """
        Возвращает (название секции, первый item после ':') или None,
        если строка не заголовок.
        """
        red = [e for e in combined if colors.is_highlighted(e)]

        has_red_with_keyword = bool(red) and any(self.classifier.is_likely_header(e.text) for e in combined)
        has_strong_pattern = any(self.classifier.is_strong_header(e.text) for e in combined)
        is_data_item = all(self.classifier.is_data_item(e.text) for e in combined)

        if not (has_red_with_keyword or has_strong_pattern) or is_data_item:
            return None

        full_text = " ".join(e.text for e in combined)
        inline_item = None

        if ":" in full_text:
            raw_name, rest = full_text.split(":", 1)
            if rest.strip():
                inline_item = self.cleaner.clean(rest) or None
        else:
            red_ids = {id(e) for e in red}
            header_words = [
                e for e in combined
                if self.classifier.is_likely_header(e.text) and id(e) not in red_ids
            ]
            raw_name = " ".join(e.text for e in red + header_words)

        name = self.cleaner.clean(raw_name)
        if not name:
            return None

        return name, inline_item
