"""
Адаптеры домена Extraction.

Адаптеры OCR клиентов, реализующие интерфейс IOCRProvider.
"""

from .base_ocr_adapter import OCRProviderAdapter
from .google_vision_adapter import GoogleVisionOCRAdapter
from .azure_vision_adapter import AzureVisionOCRAdapter

__all__ = [
    "OCRProviderAdapter",
    "GoogleVisionOCRAdapter",
    "AzureVisionOCRAdapter",
]
