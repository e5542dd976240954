"""
Фабрика для создания компонентов домена Extraction.

Выбор провайдера OCR (Google / Azure) по настройке OCR_PROVIDER.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from config.settings import OCR_PROVIDER, OUTPUT_DIR
from ..domain.interfaces import IOCRProvider
from ..domain.exceptions import ExtractionConfigurationError
from ..infrastructure.adapters.google_vision_adapter import GoogleVisionOCRAdapter
from ..infrastructure.adapters.azure_vision_adapter import AzureVisionOCRAdapter
from ..infrastructure.file_manager import ExtractionFileManager
from ..infrastructure.image_decoder import ImageDecoder
from .extraction_pipeline import ExtractionPipeline


class ExtractionComponentFactory:
    """
    Фабрика для создания компонентов домена Extraction.
    """

    @staticmethod
    def create_ocr_provider(provider: Optional[str] = None) -> IOCRProvider:
        """
        Создает провайдер OCR.

        Args:
            provider: "google" или "azure"; по умолчанию из settings

        Raises:
            ExtractionConfigurationError: Неизвестный провайдер
        """
        provider = (provider or OCR_PROVIDER).lower()
        logger.debug(f"[Extraction] Создание OCR провайдера: {provider}")

        if provider == "google":
            return GoogleVisionOCRAdapter()
        if provider == "azure":
            return AzureVisionOCRAdapter()

        raise ExtractionConfigurationError(
            message=f"Неизвестный OCR провайдер: {provider}",
            component="ExtractionComponentFactory"
        )

    @staticmethod
    def create_image_decoder() -> ImageDecoder:
        return ImageDecoder()

    @staticmethod
    def create_extraction_pipeline(
        ocr_provider: Optional[IOCRProvider] = None,
        save_raw: bool = False,
        output_dir: Optional[Path] = None
    ) -> ExtractionPipeline:
        """
        Создает пайплайн extraction.

        Args:
            ocr_provider: Провайдер OCR (по умолчанию из settings)
            save_raw: Сохранять ли raw_ocr JSON
            output_dir: Директория raw_ocr (по умолчанию data/output/raw_ocr)
        """
        logger.debug("[Extraction] Создание пайплайна extraction")

        if ocr_provider is None:
            ocr_provider = ExtractionComponentFactory.create_ocr_provider()

        if not save_raw:
            return ExtractionPipeline(ocr_provider=ocr_provider)

        return ExtractionPipeline(
            ocr_provider=ocr_provider,
            file_manager=ExtractionFileManager(),
            raw_output_dir=output_dir or OUTPUT_DIR / "raw_ocr"
        )
