"""Исключения домена Parsing: профиль словарей и тип скриншота."""

from typing import Optional


class ParsingError(Exception):
    """Базовое исключение домена Parsing."""

    def __init__(self, message: str, component: Optional[str] = None, original_error: Optional[Exception] = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        text = f"[{self.component}] {self.message}" if self.component else self.message
        if self.original_error is not None:
            text += f" ({type(self.original_error).__name__}: {self.original_error})"
        return text


class ParsingConfigurationError(ParsingError):
    """Профиль словарей не найден, не читается или не проходит валидацию."""

    def __init__(self, message: str, profile: str, original_error: Optional[Exception] = None):
        self.profile = profile
        super().__init__(message, component="KeywordConfigLoader", original_error=original_error)


class UnknownImageTypeError(ParsingError):
    """Тип скриншота, для которого нет этапов разбора (например, AUTO)."""

    def __init__(self, image_type):
        self.image_type = image_type
        super().__init__(f"Неподдерживаемый тип изображения: {image_type}", component="ParsingPipeline")
