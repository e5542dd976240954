"""
Валидационные контракты для ответов OCR провайдеров.

Google Vision и Azure отдают слова в разной форме
(плоский список textAnnotations vs дерево blocks/lines/words).
Адаптеры приводят каждое слово к ProviderWord, контракт гарантирует:
  1. Непустой текст
  2. Полигон минимум из 4 вершин
  3. Confidence в [0, 1] (или отсутствует)

Слово, не прошедшее контракт, пропускается адаптером, а не валит весь ответ.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contracts.d1_extraction_dto import BoundingBox, TextElement


class ProviderVertex(BaseModel):
    """Одна вершина полигона."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(0, description="X координата пикселя")
    y: float = Field(0, description="Y координата пикселя")


class ProviderWord(BaseModel):
    """Слово из ответа провайдера (общая форма для всех провайдеров)."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Текст слова")
    vertices: List[ProviderVertex] = Field(
        ...,
        min_length=4,
        description="Вершины полигона (минимум 4)"
    )
    confidence: Optional[float] = Field(None, ge=0, le=1, description="Confidence [0-1]")

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        """Пробельный текст не несёт данных."""
        if not v.strip():
            raise ValueError("Пустой текст слова")
        return v.strip()

    def to_text_element(self, default_confidence: float) -> TextElement:
        """Полигон -> прямоугольник (min/max), пустой confidence -> дефолт провайдера."""
        return TextElement(
            text=self.text,
            bounding_box=BoundingBox.from_polygon([(v.x, v.y) for v in self.vertices]),
            confidence=self.confidence if self.confidence is not None else default_confidence,
        )
