"""
Основной пайплайн Game Data OCR.

Объединяет домены:
1. D1 Extraction: OCR провайдер (Google Vision / Azure) -> RawOCRResult
2. D2 Parsing: строки, цвет, секции / цены -> OcrResult

Единственная операция для API слоя: process(image_bytes, mode) -> OcrResult.
Никогда не выбрасывает исключений: любая ошибка превращается в
OcrResult(success=False, error_message=...).
"""

from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from config.settings import AUTO_DETECT_ASPECT_RATIO, INPUT_DIR, SUPPORTED_IMAGE_FORMATS
from contracts.d1_extraction_dto import RawOCRResult
from contracts.d2_parsing_dto import ImageType, OcrResult
from src.extraction.application.extraction_pipeline import ExtractionPipeline
from src.extraction.application.factory import ExtractionComponentFactory
from src.extraction.domain.exceptions import ExtractionError, ImageDecodingError
from src.extraction.domain.interfaces import IImageDecoder, IOCRProvider
from src.parsing.pipeline import ParsingPipeline

NO_TEXT_MESSAGE = "No text found in image"
UNKNOWN_TYPE_MESSAGE = "Unknown image type"

ImageMode = Union[ImageType, str]


class GameDataOCR:
    """
    Полный пайплайн: скриншот -> карточка здания или таблица цен.

    Каждый запрос обрабатывается последовательно и независимо,
    общего изменяемого состояния между запросами нет.
    """

    def __init__(
        self,
        ocr_provider: Optional[IOCRProvider] = None,
        parsing_pipeline: Optional[ParsingPipeline] = None,
        image_decoder: Optional[IImageDecoder] = None,
        extraction_pipeline: Optional[ExtractionPipeline] = None,
    ):
        """
        Args:
            ocr_provider: Провайдер OCR (по умолчанию из settings.OCR_PROVIDER)
            parsing_pipeline: Пайплайн D2
            image_decoder: Декодер пикселей (для анализа цвета и AUTO)
            extraction_pipeline: Готовый пайплайн D1 (имеет приоритет над ocr_provider)
        """
        self.image_decoder = image_decoder or ExtractionComponentFactory.create_image_decoder()

        if extraction_pipeline is None:
            extraction_pipeline = ExtractionComponentFactory.create_extraction_pipeline(
                ocr_provider=ocr_provider
            )
        self.extraction_pipeline = extraction_pipeline

        self.parsing_pipeline = parsing_pipeline or ParsingPipeline()

    def process(
        self,
        image_content: bytes,
        mode: ImageMode = ImageType.INDUSTRY,
        source_file: str = "unknown",
    ) -> OcrResult:
        """
        Обрабатывает один скриншот.

        Args:
            image_content: Байты изображения (PNG / JPEG)
            mode: industry / prices / auto
            source_file: Имя файла (для логов и метаданных)

        Returns:
            OcrResult: успешный с одним вариантом данных или с error_message
        """
        try:
            image_type = self.resolve_image_type(mode)
            if image_type is None:
                logger.warning(f"[GameDataOCR] Неизвестный тип изображения: {mode!r}")
                return OcrResult.failure(UNKNOWN_TYPE_MESSAGE)

            if image_type == ImageType.AUTO:
                try:
                    image_type = self.detect_image_type(image_content)
                except ImageDecodingError as e:
                    logger.error(f"[GameDataOCR] Авто-определение типа не удалось: {e}")
                    return OcrResult.failure(f"Processing failed: {e.message}")

            try:
                raw_ocr = self.extraction_pipeline.process_bytes(image_content, source_file)
            except ExtractionError as e:
                logger.error(f"[GameDataOCR] Ошибка OCR провайдера: {e}")
                return OcrResult.failure(str(e))

            return self._parse(raw_ocr, image_content, image_type)

        except Exception as e:
            logger.exception(f"[GameDataOCR] Ошибка обработки {source_file}: {e}")
            return OcrResult.failure(str(e))

    def process_file(self, image_path: Path, mode: ImageMode = ImageType.INDUSTRY) -> OcrResult:
        """Обрабатывает скриншот с диска."""
        image_path = Path(image_path)
        logger.info(f"[GameDataOCR] Обработка: {image_path.name}")

        try:
            with open(image_path, "rb") as f:
                image_content = f.read()
        except OSError as e:
            logger.error(f"[GameDataOCR] Не удалось прочитать файл {image_path}: {e}")
            return OcrResult.failure(f"Cannot read image file: {image_path.name}")

        return self.process(image_content, mode, source_file=image_path.stem)

    def process_raw(
        self,
        raw_ocr: RawOCRResult,
        image_content: bytes = b"",
        mode: ImageMode = ImageType.INDUSTRY,
    ) -> OcrResult:
        """
        Разбирает ранее сохранённый RawOCRResult без вызова провайдера.

        Без байтов изображения весь текст считается не выделенным,
        а AUTO определяется по размеру из метаданных.
        """
        try:
            image_type = self.resolve_image_type(mode)
            if image_type is None:
                return OcrResult.failure(UNKNOWN_TYPE_MESSAGE)

            if image_type == ImageType.AUTO:
                image_type = self._detect_from_metadata(raw_ocr, image_content)

            return self._parse(raw_ocr, image_content, image_type)

        except Exception as e:
            logger.exception(f"[GameDataOCR] Ошибка разбора raw_ocr: {e}")
            return OcrResult.failure(str(e))

    def process_directory(
        self,
        input_dir: Optional[Path] = None,
        mode: ImageMode = ImageType.AUTO,
    ) -> List[OcrResult]:
        """
        Обрабатывает все скриншоты в директории (по умолчанию INPUT_DIR).

        Ошибка одного файла не влияет на остальные.
        """
        input_path = Path(input_dir or INPUT_DIR)

        images = sorted(
            p for p in input_path.iterdir()
            if p.is_file() and p.suffix.lower() in SUPPORTED_IMAGE_FORMATS
        ) if input_path.exists() else []

        if not images:
            logger.warning(
                f"[GameDataOCR] Изображения не найдены в {input_path} "
                f"(форматы: {SUPPORTED_IMAGE_FORMATS})"
            )
            return []

        logger.info(f"[GameDataOCR] Найдено изображений: {len(images)}")

        return [self.process_file(image_path, mode) for image_path in images]

    @staticmethod
    def resolve_image_type(mode: ImageMode) -> Optional[ImageType]:
        """ImageType или строка без учёта регистра; None для неизвестного значения."""
        if isinstance(mode, ImageType):
            return mode
        if isinstance(mode, str):
            try:
                return ImageType(mode.strip().lower())
            except ValueError:
                return None
        return None

    def detect_image_type(self, image_content: bytes) -> ImageType:
        """
        Таблица цен шире (альбомная), карточка здания выше (портретная).

        Raises:
            ImageDecodingError: Изображение не декодируется
        """
        grid = self.image_decoder.decode(image_content)
        return self._type_from_size(grid.width, grid.height)

    def _detect_from_metadata(self, raw_ocr: RawOCRResult, image_content: bytes) -> ImageType:
        if image_content:
            return self.detect_image_type(image_content)
        if raw_ocr.metadata and raw_ocr.metadata.image_width and raw_ocr.metadata.image_height:
            return self._type_from_size(raw_ocr.metadata.image_width, raw_ocr.metadata.image_height)
        logger.warning("[GameDataOCR] Размер изображения неизвестен, тип: industry")
        return ImageType.INDUSTRY

    @staticmethod
    def _type_from_size(width: int, height: int) -> ImageType:
        image_type = ImageType.PRICES if width > height * AUTO_DETECT_ASPECT_RATIO else ImageType.INDUSTRY
        logger.info(f"[GameDataOCR] Авто-определение: {width}x{height} -> {image_type.value}")
        return image_type

    def _parse(self, raw_ocr: RawOCRResult, image_content: bytes, image_type: ImageType) -> OcrResult:
        if not raw_ocr.words:
            logger.warning("[GameDataOCR] OCR не нашёл текста")
            return OcrResult.failure(NO_TEXT_MESSAGE)

        return self.parsing_pipeline.process(raw_ocr, image_content, image_type).result
