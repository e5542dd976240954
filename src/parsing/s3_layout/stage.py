"""
Stage 3: Layout Processing

ЦКП: Преобразование TextElement[] в упорядоченные строки.

Input: RawOCRResult.words[] (из D1)
Output: LayoutResult (строки с исходными и склеенными элементами)

Алгоритм:
1. Сортировка элементов по (Y, X)
2. Элемент остаётся в текущей строке, пока |Y - Y предыдущего элемента| < порога
   (строка может "дрейфовать" по вертикали)
3. Сортировка элементов строки по X
4. Склейка близких слов в фразы (WordCombiner)
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from loguru import logger

from config.settings import LINE_Y_THRESHOLD
from contracts.d1_extraction_dto import TextElement
from .word_combiner import WordCombiner


@dataclass
class Line:
    """
    Строка текста на скриншоте.

    Результат группировки элементов по Y-координате.
    """
    words: List[TextElement]                                    # Исходные элементы, слева направо
    combined: List[TextElement] = field(default_factory=list)   # После склейки близких слов
    y_position: int = 0                                         # Y первого элемента строки
    line_number: int = 0                                        # Номер строки (сверху вниз)

    @property
    def text(self) -> str:
        """Текст строки (исходные слова через пробел)."""
        return " ".join(word.text for word in self.words)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "y_position": self.y_position,
            "line_number": self.line_number,
            "words_count": len(self.words),
            "combined": [element.text for element in self.combined],
        }


@dataclass
class LayoutResult:
    """
    Результат Stage 3: Layout Processing.

    ЦКП: Упорядоченные строки текста.
    """
    lines: List[Line] = field(default_factory=list)
    total_words: int = 0

    @property
    def texts(self) -> List[str]:
        return [line.text for line in self.lines]

    def to_dict(self) -> dict:
        return {
            "lines": [line.to_dict() for line in self.lines],
            "total_words": self.total_words,
            "total_lines": len(self.lines),
        }


class LineGrouper:
    """Группировка элементов в строки по вертикальной близости."""

    def __init__(self, y_threshold: int = LINE_Y_THRESHOLD):
        """
        Args:
            y_threshold: Элементы с разницей Y < threshold считаются одной строкой (px)
        """
        self.y_threshold = y_threshold

    def group(self, elements: Sequence[TextElement]) -> List[List[TextElement]]:
        if not elements:
            return []

        sorted_elements = sorted(elements, key=lambda e: (e.bounding_box.y, e.bounding_box.x))

        lines: List[List[TextElement]] = []
        current_line = [sorted_elements[0]]

        for previous, element in zip(sorted_elements, sorted_elements[1:]):
            # Сравнение с предыдущим элементом, а не с началом строки
            if abs(element.bounding_box.y - previous.bounding_box.y) < self.y_threshold:
                current_line.append(element)
            else:
                lines.append(sorted(current_line, key=lambda e: e.bounding_box.x))
                current_line = [element]

        lines.append(sorted(current_line, key=lambda e: e.bounding_box.x))

        return lines


class LayoutStage:
    """
    Stage 3: Layout Processing.

    ЦКП: Строки с исходными и склеенными элементами.
    """

    def __init__(self, line_grouper: LineGrouper = None, word_combiner: WordCombiner = None):
        self.line_grouper = line_grouper or LineGrouper()
        self.word_combiner = word_combiner or WordCombiner()

    def process(self, elements: Sequence[TextElement]) -> LayoutResult:
        """
        Группирует элементы в строки.

        Args:
            elements: TextElement[] из RawOCRResult

        Returns:
            LayoutResult: Строки сверху вниз
        """
        logger.debug(f"[Stage 3: Layout] Обработка {len(elements)} элементов")

        if not elements:
            logger.warning("[Stage 3: Layout] Нет элементов для обработки")
            return LayoutResult()

        lines = [
            Line(
                words=words,
                combined=self.word_combiner.combine(words),
                y_position=min(w.bounding_box.y for w in words),
                line_number=i,
            )
            for i, words in enumerate(self.line_grouper.group(elements))
        ]

        logger.info(f"[Stage 3: Layout] Результат: {len(lines)} строк из {len(elements)} элементов")

        return LayoutResult(lines=lines, total_words=len(elements))
