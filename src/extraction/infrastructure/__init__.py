"""
Инфраструктурный слой домена Extraction.

Содержит OCR клиенты, адаптеры, декодер изображений и файловый менеджер.
"""

from .adapters import OCRProviderAdapter, GoogleVisionOCRAdapter, AzureVisionOCRAdapter
from .image_decoder import ImageDecoder, PixelGrid
from .file_manager import ExtractionFileManager

__all__ = [
    # Адаптеры
    "OCRProviderAdapter",
    "GoogleVisionOCRAdapter",
    "AzureVisionOCRAdapter",

    # Изображения
    "ImageDecoder",
    "PixelGrid",

    # Менеджеры
    "ExtractionFileManager",
]
