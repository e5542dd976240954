"""
Разделение строки данных на две колонки.

Карточка здания часто содержит два значения в строке:
"22t of Concrete        10t of Steel" -> ["22t of Concrete", "10t of Steel"]

Ограничение: не более 2 колонок, даже если крупных зазоров несколько.
"""

from typing import List, Sequence

from config.settings import COLUMN_GAP_THRESHOLD
from contracts.d1_extraction_dto import TextElement


class ColumnSplitter:
    """Делит строку по первому максимальному зазору, если он > порога."""

    def __init__(self, gap_threshold: int = COLUMN_GAP_THRESHOLD):
        self.gap_threshold = gap_threshold

    def split(self, elements: Sequence[TextElement]) -> List[str]:
        if len(elements) <= 1:
            return [element.text for element in elements]

        ordered = sorted(elements, key=lambda e: e.bounding_box.x)
        gaps = [
            current.bounding_box.x - previous.bounding_box.right
            for previous, current in zip(ordered, ordered[1:])
        ]

        # max() возвращает первый из равных
        split_at = max(range(len(gaps)), key=gaps.__getitem__)
        if gaps[split_at] > self.gap_threshold:
            left, right = ordered[:split_at + 1], ordered[split_at + 1:]
            return [self._join(left), self._join(right)]

        return [self._join(ordered)]

    @staticmethod
    def _join(elements: Sequence[TextElement]) -> str:
        return " ".join(element.text for element in elements)
