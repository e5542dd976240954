"""
Пайплайн для домена Extraction.

Байты скриншота -> OCR провайдер -> RawOCRResult.
Опционально сохраняет raw_ocr в JSON для повторного разбора.

ВАЖНО: Возвращает RawOCRResult из contracts/d1_extraction_dto.py
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from contracts.d1_extraction_dto import RawOCRResult
from ..domain.interfaces import IOCRProvider
from ..domain.exceptions import ExtractionError, OCRProviderError
from ..infrastructure.file_manager import ExtractionFileManager


class ExtractionPipeline:
    """
    Пайплайн домена Extraction.

    Один вызов провайдера на изображение, без повторов:
    политика повторов - забота вызывающего слоя.
    """

    def __init__(
        self,
        ocr_provider: IOCRProvider,
        file_manager: Optional[ExtractionFileManager] = None,
        raw_output_dir: Optional[Path] = None
    ):
        """
        Args:
            ocr_provider: Провайдер OCR (Google / Azure адаптер)
            file_manager: Менеджер файлов (нужен только для сохранения raw_ocr)
            raw_output_dir: Куда сохранять raw_ocr; None - не сохранять
        """
        self.ocr_provider = ocr_provider
        self.file_manager = file_manager
        self.raw_output_dir = raw_output_dir

        logger.info("[Extraction] Pipeline инициализирован")

    def process_bytes(self, image_content: bytes, source_file: str = "unknown") -> RawOCRResult:
        """
        Распознаёт текст на изображении.

        Raises:
            ExtractionError: Любая ошибка провайдера
        """
        try:
            result = self.ocr_provider.recognize(image_content, source_file)
        except ExtractionError:
            raise
        except Exception as e:
            raise OCRProviderError(
                message=f"Ошибка OCR: {source_file}",
                component="ExtractionPipeline",
                original_error=e
            )

        logger.info(
            f"[Extraction] Готово: {source_file} "
            f"({len(result.words)} элементов, {len(result.full_text)} символов)"
        )

        if self.file_manager and self.raw_output_dir:
            self.file_manager.save_raw_ocr(result, source_file, self.raw_output_dir)

        return result
