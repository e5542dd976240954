"""Общие fixtures: сборка TextElement и изображений для тестов."""

import cv2
import numpy as np
import pytest

from contracts.d1_extraction_dto import BoundingBox, OCRMetadata, RawOCRResult, TextElement
from src.parsing.keywords.keyword_config import KeywordConfigLoader

RED = (200, 30, 30)
BLACK = (20, 20, 20)
WHITE = (255, 255, 255)


def element(text: str, x: int, y: int, width: int = None, height: int = 20, confidence: float = 0.9) -> TextElement:
    """TextElement с шириной ~10px на символ, если не задана."""
    if width is None:
        width = 10 * len(text)
    return TextElement(text=text, bounding_box=BoundingBox(x, y, width, height), confidence=confidence)


def raw_result(words, source_file: str = "test", width: int = 0, height: int = 0) -> RawOCRResult:
    return RawOCRResult(
        full_text=" ".join(w.text for w in words),
        words=list(words),
        metadata=OCRMetadata(source_file=source_file, provider="test", image_width=width, image_height=height),
    )


def encode_png(width: int, height: int, regions=()) -> bytes:
    """
    PNG белого изображения с закрашенными областями.

    regions: [(BoundingBox, (R, G, B)), ...]
    """
    image = np.full((height, width, 3), WHITE, dtype=np.uint8)
    for bbox, (r, g, b) in regions:
        # OpenCV хранит BGR
        image[bbox.y:bbox.y + bbox.height, bbox.x:bbox.x + bbox.width] = (b, g, r)
    ok, buffer = cv2.imencode(".png", image)
    assert ok
    return buffer.tobytes()


@pytest.fixture(autouse=True)
def clear_keyword_cache():
    """Кеш словарей не должен протекать между тестами."""
    KeywordConfigLoader.clear_cache()
    yield
    KeywordConfigLoader.clear_cache()


@pytest.fixture
def keyword_config():
    return KeywordConfigLoader().load("base")
