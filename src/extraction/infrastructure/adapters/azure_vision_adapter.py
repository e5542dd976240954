"""
Адаптер для AzureVisionOCR, реализующий интерфейс IOCRProvider (домен Extraction).
"""

from typing import Optional

from .base_ocr_adapter import OCRProviderAdapter
from ..ocr.azure_vision_ocr import AzureVisionOCR


class AzureVisionOCRAdapter(OCRProviderAdapter):
    """Адаптер для AzureVisionOCR (домен Extraction)."""

    def __init__(self, endpoint: Optional[str] = None, api_key: Optional[str] = None):
        super().__init__(lambda: AzureVisionOCR(endpoint, api_key))
