"""
DTO контракт: D1 (Extraction) -> D2 (Parsing)

Результат OCR обработки скриншота игры.
Одинаковая форма для всех провайдеров (Google Vision, Azure):
адаптер провайдера приводит свой ответ к списку TextElement.

Решение: слова с координатами + full_text, как и раньше.
Вся геометрия (строки, колонки, секции) живёт в D2.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class BoundingBox:
    """
    Координаты элемента на изображении (пиксели).
    """
    x: int          # Левый верхний угол X
    y: int          # Левый верхний угол Y
    width: int      # Ширина
    height: int     # Высота

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Минимальный прямоугольник, содержащий оба bbox."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        return BoundingBox(
            x=x,
            y=y,
            width=max(self.right, other.right) - x,
            height=max(self.bottom, other.bottom) - y,
        )

    @classmethod
    def from_polygon(cls, points: List[Tuple[float, float]]) -> "BoundingBox":
        """Преобразует полигон (>= 4 вершины) в прямоугольник по min/max."""
        xs = [int(p[0]) for p in points]
        ys = [int(p[1]) for p in points]
        x_min, y_min = min(xs), min(ys)
        return cls(
            x=x_min,
            y=y_min,
            width=max(0, max(xs) - x_min),
            height=max(0, max(ys) - y_min),
        )


@dataclass(frozen=True)
class TextElement:
    """
    Отдельный фрагмент текста, распознанный OCR (обычно слово).

    Используется для:
    - Группировки в строки по Y-координате
    - Склейки близких слов в фразы по X-координате
    - Разделения двухколоночных строк
    - Сэмплирования цвета текста под bbox

    parts: исходные элементы, из которых склеен этот элемент
    (пусто для элементов, пришедших от провайдера). Не участвует в сравнении.
    """
    text: str
    bounding_box: BoundingBox
    confidence: float = 1.0
    parts: Tuple["TextElement", ...] = field(default=(), compare=False, repr=False)

    @property
    def sources(self) -> Tuple["TextElement", ...]:
        """Исходные элементы провайдера (сам элемент, если он не склеен)."""
        return self.parts or (self,)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "bounding_box": {
                "x": self.bounding_box.x,
                "y": self.bounding_box.y,
                "width": self.bounding_box.width,
                "height": self.bounding_box.height,
            },
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextElement":
        bbox = data["bounding_box"]
        return cls(
            text=data["text"],
            bounding_box=BoundingBox(
                x=int(bbox["x"]),
                y=int(bbox["y"]),
                width=int(bbox.get("width", 0)),
                height=int(bbox.get("height", 0)),
            ),
            confidence=float(data.get("confidence", 1.0)),
        )


@dataclass
class OCRMetadata:
    """
    Метаданные OCR обработки.
    """
    source_file: str                # Имя исходного файла
    provider: str                   # google / azure
    image_width: int = 0            # Ширина изображения (px), 0 если неизвестна
    image_height: int = 0           # Высота изображения (px)
    processed_at: str = ""          # Timestamp обработки (ISO 8601)


@dataclass
class RawOCRResult:
    """
    Результат OCR обработки изображения.

    1. full_text - полный текст (для логов и отладки)
    2. words[] - элементы с координатами, вход для всей геометрии D2
    """

    full_text: str = ""

    words: List[TextElement] = field(default_factory=list)

    metadata: Optional[OCRMetadata] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "full_text": self.full_text,
            "words": [word.to_dict() for word in self.words],
            "metadata": {
                "source_file": self.metadata.source_file,
                "provider": self.metadata.provider,
                "image_width": self.metadata.image_width,
                "image_height": self.metadata.image_height,
                "processed_at": self.metadata.processed_at,
            } if self.metadata else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawOCRResult":
        meta = data.get("metadata")
        return cls(
            full_text=data.get("full_text", ""),
            words=[TextElement.from_dict(w) for w in data.get("words", [])],
            metadata=OCRMetadata(
                source_file=meta.get("source_file", "unknown"),
                provider=meta.get("provider", "unknown"),
                image_width=meta.get("image_width", 0),
                image_height=meta.get("image_height", 0),
                processed_at=meta.get("processed_at", ""),
            ) if meta else None,
        )
