"""
Исключения домена Extraction.

Семейства ошибок по месту возникновения:
- OCRProviderError: клиент провайдера не создан или вызов не удался
- ImageDecodingError: байты скриншота не читаются как изображение
- ExtractionConfigurationError: неизвестный провайдер, нет ключей
- OCRFileError: чтение и запись сохранённых raw_ocr / результатов

GameDataOCR превращает любое из них в OcrResult(success=False).
"""

from pathlib import Path
from typing import Optional, Union


class ExtractionError(Exception):
    """Базовое исключение домена Extraction."""

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        text = f"[{self.component}] {self.message}" if self.component else self.message
        if self.original_error is not None:
            text += f" ({type(self.original_error).__name__}: {self.original_error})"
        return text


class OCRProviderError(ExtractionError):
    """Провайдер OCR недоступен: нет клиента, сеть, HTTP статус."""


class OCRResponseError(OCRProviderError):
    """Провайдер ответил, но распознавание не удалось."""


class ImageDecodingError(ExtractionError):
    """Скриншот не декодируется (пустые байты или неизвестный формат)."""

    def __init__(self, message: str, byte_count: int = 0, original_error: Optional[Exception] = None):
        self.byte_count = byte_count
        super().__init__(message, component="ImageDecoder", original_error=original_error)


class ExtractionConfigurationError(ExtractionError):
    """Неизвестный OCR провайдер или неполные настройки."""


class OCRFileError(ExtractionError):
    """Ошибка файла raw_ocr или результата."""

    def __init__(
        self,
        message: str,
        path: Union[str, Path],
        original_error: Optional[Exception] = None
    ):
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}", component="ExtractionFileManager", original_error=original_error)


class OCRFileNotFoundError(OCRFileError):
    """Файл не существует."""


class OCRFileReadError(OCRFileError):
    """Файл не читается или содержит некорректный JSON."""


class OCRFileWriteError(OCRFileError):
    """Файл не удалось записать."""
