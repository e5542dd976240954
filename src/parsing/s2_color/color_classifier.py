"""
Stage 2: Color Analysis

ЦКП: Определение "красного" (выделенного) текста по пикселям под bbox.

Input: байты изображения + TextElement[] (из D1)
Output: ColorAnalysis (элемент -> выделен / не выделен)

Алгоритм:
1. bbox обрезается по границам изображения; пустая область -> не выделен
2. Берётся каждый COLOR_SAMPLE_STRIDE-й пиксель по обеим осям
3. Среднее по каналам (целочисленное)
4. Красный: R > 120, G < 80, B < 80, R - G > 40 (все сравнения строгие)

Ошибка декодирования не прерывает обработку: все элементы не выделены.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

import numpy as np
from loguru import logger

from config.settings import (
    COLOR_MATCH_BY_TEXT,
    COLOR_SAMPLE_STRIDE,
    RED_MAX_B,
    RED_MAX_G,
    RED_MIN_R,
    RED_MIN_R_G_DIFF,
)
from contracts.d1_extraction_dto import BoundingBox, TextElement
from src.extraction.domain.exceptions import ImageDecodingError
from src.extraction.domain.interfaces import IImageDecoder
from src.extraction.infrastructure.image_decoder import ImageDecoder, PixelGrid


@dataclass(frozen=True)
class ColorAnalysis:
    """
    Результат Stage 2: Color Analysis.

    by_element: статус по самому элементу провайдера.
    by_text: статус по тексту (последний элемент с таким текстом побеждает),
    используется при match_by_text=True.
    """
    by_element: Dict[TextElement, bool] = field(default_factory=dict)
    by_text: Dict[str, bool] = field(default_factory=dict)
    match_by_text: bool = False
    decoded: bool = True

    def is_highlighted(self, element: TextElement) -> bool:
        """Склеенный элемент выделен, если выделена хотя бы одна его часть."""
        return any(self._lookup(source) for source in element.sources)

    def _lookup(self, element: TextElement) -> bool:
        if self.match_by_text:
            return self.by_text.get(element.text, False)
        return self.by_element.get(element, False)

    @property
    def highlighted_count(self) -> int:
        return sum(1 for value in self.by_element.values() if value)

    def to_dict(self) -> dict:
        return {
            "elements": len(self.by_element),
            "highlighted": self.highlighted_count,
            "match_by_text": self.match_by_text,
            "decoded": self.decoded,
        }


class ColorClassifier:
    """
    Stage 2: Color Analysis.

    ЦКП: Выделен ли текст игровым акцентным (красным) цветом.
    """

    def __init__(
        self,
        image_decoder: Optional[IImageDecoder] = None,
        stride: int = COLOR_SAMPLE_STRIDE,
        match_by_text: bool = COLOR_MATCH_BY_TEXT,
    ):
        self.image_decoder = image_decoder or ImageDecoder()
        self.stride = max(1, stride)
        self.match_by_text = match_by_text

    def analyze(self, image_content: bytes, elements: Iterable[TextElement]) -> ColorAnalysis:
        """
        Классифицирует цвет каждого элемента.

        Никогда не падает из-за изображения: при ошибке декодирования
        все элементы считаются не выделенными.
        """
        elements = list(elements)

        try:
            grid = self.image_decoder.decode(image_content)
        except ImageDecodingError as e:
            logger.warning(f"[Stage 2: Color] Не удалось декодировать изображение, весь текст чёрный: {e}")
            return ColorAnalysis(
                by_element={element: False for element in elements},
                by_text={element.text: False for element in elements},
                match_by_text=self.match_by_text,
                decoded=False,
            )

        by_element: Dict[TextElement, bool] = {}
        by_text: Dict[str, bool] = {}
        for element in elements:
            highlighted = self.classify(grid, element.bounding_box)
            by_element[element] = highlighted
            by_text[element.text] = highlighted

        result = ColorAnalysis(
            by_element=by_element,
            by_text=by_text,
            match_by_text=self.match_by_text,
        )

        logger.debug(
            f"[Stage 2: Color] Выделено {result.highlighted_count} из {len(elements)} элементов"
        )

        return result

    def classify(self, grid: PixelGrid, bbox: BoundingBox) -> bool:
        color = self.average_color(grid, bbox)
        if color is None:
            return False
        return self.is_red(color)

    def average_color(self, grid: PixelGrid, bbox: BoundingBox) -> Optional[Tuple[int, int, int]]:
        """
        Средний RGB цвет области bbox (None, если область пустая).

        Левый верхний угол прижимается к 0, ширина/высота обрезаются по краю изображения.
        """
        x = max(0, bbox.x)
        y = max(0, bbox.y)
        width = min(grid.width - x, bbox.width)
        height = min(grid.height - y, bbox.height)

        if width <= 0 or height <= 0:
            return None

        region = grid.pixels[y:y + height:self.stride, x:x + width:self.stride]
        samples = region.reshape(-1, 3).astype(np.int64)
        if len(samples) == 0:
            return None

        totals = samples.sum(axis=0)
        count = len(samples)
        return (
            int(totals[0] // count),
            int(totals[1] // count),
            int(totals[2] // count),
        )

    @staticmethod
    def is_red(color: Tuple[int, int, int]) -> bool:
        r, g, b = color
        return r > RED_MIN_R and g < RED_MAX_G and b < RED_MAX_B and (r - g) > RED_MIN_R_G_DIFF
