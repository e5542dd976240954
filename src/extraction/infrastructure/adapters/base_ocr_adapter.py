"""
Базовый адаптер OCR провайдера (домен Extraction).

Оборачивает клиент провайдера и переводит любые его исключения
в доменные OCRProviderError / OCRResponseError.
"""

from typing import Callable

from loguru import logger

from contracts.d1_extraction_dto import RawOCRResult
from ...domain.interfaces import IOCRProvider
from ...domain.exceptions import OCRProviderError, OCRResponseError


class OCRProviderAdapter(IOCRProvider):
    """
    Адаптер клиента OCR.

    Реализует интерфейс IOCRProvider, делегируя вызовы клиенту провайдера.
    """

    def __init__(self, client_factory: Callable[[], IOCRProvider]):
        """
        Args:
            client_factory: Функция создания клиента провайдера
        """
        name = type(self).__name__
        try:
            self._client = client_factory()
            logger.debug(f"[Extraction] {name} инициализирован")
        except Exception as e:
            raise OCRProviderError(
                message="Не удалось инициализировать OCR клиент",
                component=name,
                original_error=e
            )

    def recognize(self, image_content: bytes, source_file: str = "unknown") -> RawOCRResult:
        """
        Распознает текст на изображении.

        Raises:
            OCRResponseError: Если произошла ошибка при распознавании
        """
        try:
            logger.debug(f"[Extraction] Вызов {type(self._client).__name__}.recognize()")
            return self._client.recognize(image_content, source_file)

        except Exception as e:
            raise OCRResponseError(
                message="Ошибка при распознавании текста",
                component=type(self).__name__,
                original_error=e
            )
