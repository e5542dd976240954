"""Stage 1: OCR Cleanup - нормализация строк от OCR-артефактов."""

from .text_cleaner import TextCleaner, clean_ocr_text

__all__ = ["TextCleaner", "clean_ocr_text"]
