"""OCR клиенты провайдеров (Google Vision, Azure AI Vision)."""

from .google_vision_ocr import GoogleVisionOCR
from .azure_vision_ocr import AzureVisionOCR

__all__ = [
    "GoogleVisionOCR",
    "AzureVisionOCR",
]
