"""
Адаптер для GoogleVisionOCR, реализующий интерфейс IOCRProvider (домен Extraction).
"""

from typing import Optional

from .base_ocr_adapter import OCRProviderAdapter
from ..ocr.google_vision_ocr import GoogleVisionOCR


class GoogleVisionOCRAdapter(OCRProviderAdapter):
    """Адаптер для GoogleVisionOCR (домен Extraction)."""

    def __init__(self, credentials_path: Optional[str] = None):
        """
        Args:
            credentials_path: Путь к credentials файлу Google Cloud
        """
        super().__init__(lambda: GoogleVisionOCR(credentials_path))
