"""
Контракты DTO между доменами проекта Game Data OCR.

Контракты:
- D1 -> D2: RawOCRResult (d1_extraction_dto.py, dataclasses)
- D2 -> API: OcrResult (d2_parsing_dto.py, Pydantic v2)
"""

# D1 -> D2 (Extraction -> Parsing)
from .d1_extraction_dto import RawOCRResult, TextElement, BoundingBox, OCRMetadata

# D2 -> API
from .d2_parsing_dto import (
    ImageType,
    IndustryData,
    IndustrySection,
    OcrResult,
    PriceData,
    PriceItem,
)

__all__ = [
    # D1 -> D2
    "RawOCRResult",
    "TextElement",
    "BoundingBox",
    "OCRMetadata",
    # D2 -> API
    "ImageType",
    "IndustryData",
    "IndustrySection",
    "OcrResult",
    "PriceData",
    "PriceItem",
]
