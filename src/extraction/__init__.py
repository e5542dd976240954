"""
Домен Extraction (D1): OCR обработка скриншотов.

Этот домен отвечает за:
1. Вызов OCR провайдера (Google Vision / Azure AI Vision)
2. Приведение ответа провайдера к RawOCRResult
3. Декодирование пикселей (для анализа цвета в D2)

Граница домена: contracts.RawOCRResult
"""

from .infrastructure.ocr import GoogleVisionOCR, AzureVisionOCR
from .infrastructure.image_decoder import ImageDecoder, PixelGrid

from .application.factory import ExtractionComponentFactory
from .application.extraction_pipeline import ExtractionPipeline

__all__ = [
    # OCR клиенты
    "GoogleVisionOCR",
    "AzureVisionOCR",

    # Изображения
    "ImageDecoder",
    "PixelGrid",

    # Application слой
    "ExtractionComponentFactory",
    "ExtractionPipeline",
]
