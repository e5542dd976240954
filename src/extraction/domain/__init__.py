"""
Domain слой домена Extraction.

Содержит интерфейсы (абстрактные классы) и исключения для Extraction домена.
"""

from .interfaces import (
    IOCRProvider,
    IImageDecoder,
)

from .exceptions import (
    ExtractionError,
    OCRProviderError,
    OCRResponseError,
    ImageDecodingError,
    ExtractionConfigurationError,
    OCRFileError,
    OCRFileNotFoundError,
    OCRFileReadError,
    OCRFileWriteError,
)

__all__ = [
    # Интерфейсы
    "IOCRProvider",
    "IImageDecoder",

    # Исключения
    "ExtractionError",
    "OCRProviderError",
    "OCRResponseError",
    "ImageDecodingError",
    "ExtractionConfigurationError",
    "OCRFileError",
    "OCRFileNotFoundError",
    "OCRFileReadError",
    "OCRFileWriteError",
]
