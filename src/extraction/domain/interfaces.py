"""
Интерфейсы (абстрактные классы) для домена Extraction.

Домен Extraction отвечает за:
1. OCR распознавание текста (Google Vision / Azure)
2. Декодирование пикселей изображения (для анализа цвета и типа)
"""

from abc import ABC, abstractmethod

from contracts.d1_extraction_dto import RawOCRResult


class IOCRProvider(ABC):
    """Интерфейс для провайдеров OCR (домен Extraction)."""

    @abstractmethod
    def recognize(self, image_content: bytes, source_file: str = "unknown") -> RawOCRResult:
        """
        Распознаёт текст на изображении.

        Args:
            image_content: Байты изображения
            source_file: Имя исходного файла (для метаданных)

        Returns:
            RawOCRResult с элементами текста и координатами
        """
        pass


class IImageDecoder(ABC):
    """Интерфейс для декодера пикселей (домен Extraction)."""

    @abstractmethod
    def decode(self, image_content: bytes):
        """
        Декодирует изображение в RGB сетку пикселей.

        Raises:
            ImageDecodingError: Если изображение не удалось декодировать
        """
        pass
