"""
Склейка близких слов строки в фразы.

"Maximum" "number" "of" "workers:" -> "Maximum number of workers:"
"""

from functools import reduce
from typing import List, Sequence

from config.settings import WORD_GAP_THRESHOLD
from contracts.d1_extraction_dto import TextElement


class WordCombiner:
    """
    Объединяет соседние элементы строки, если зазор между ними < порога.

    Склеенный элемент: текст через пробел, bbox - объединение,
    confidence - среднее. Исходные элементы сохраняются в parts.
    """

    def __init__(self, gap_threshold: int = WORD_GAP_THRESHOLD):
        self.gap_threshold = gap_threshold

    def combine(self, line: Sequence[TextElement]) -> List[TextElement]:
        """
        Args:
            line: Элементы одной строки, отсортированные по X

        Returns:
            Новые элементы (одиночные группы возвращаются как есть)
        """
        if not line:
            return []

        groups: List[List[TextElement]] = [[line[0]]]
        for element in line[1:]:
            previous = groups[-1][-1]
            gap = element.bounding_box.x - previous.bounding_box.right
            if gap < self.gap_threshold:
                groups[-1].append(element)
            else:
                groups.append([element])

        return [self._merge(group) for group in groups]

    @staticmethod
    def _merge(group: List[TextElement]) -> TextElement:
        if len(group) == 1:
            return group[0]

        sources = tuple(source for element in group for source in element.sources)
        return TextElement(
            text=" ".join(element.text for element in group),
            bounding_box=reduce(lambda a, b: a.union(b), (e.bounding_box for e in group)),
            confidence=sum(e.confidence for e in group) / len(group),
            parts=sources,
        )
