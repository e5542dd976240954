"""
Parsing Pipeline - Оркестратор этапов D2.

Координирует выполнение этапов в строгом порядке:
- industry: 2. Color -> 3. Layout -> 4. Industry Sections
- prices:   3. Layout -> 5. Prices
Stage 1 (OCR Cleanup) применяется внутри этапов 4 и 5 к итоговым строкам.

Возвращает OcrResult (контракт D2 -> API).
"""

import time
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from contracts.d1_extraction_dto import RawOCRResult
from contracts.d2_parsing_dto import ImageType, OcrResult

from .domain.exceptions import UnknownImageTypeError
from .keywords.keyword_config import KeywordConfig, load_keyword_config
from .s1_ocr_cleanup import TextCleaner
from .s2_color import ColorAnalysis, ColorClassifier
from .s3_layout import ColumnSplitter, LayoutResult, LayoutStage
from .s4_industry import HeaderClassifier, SectionAssembler
from .s5_prices import PriceLineParser, PriceStage


@dataclass
class PipelineResult:
    """
    Полный результат пайплайна со всеми промежуточными данными.

    Используется для отладки и анализа.
    """
    # Финальный результат (контракт D2 -> API)
    result: OcrResult

    # Промежуточные результаты этапов
    colors: Optional[ColorAnalysis] = None
    layout: Optional[LayoutResult] = None

    # Метрики
    processing_time_ms: float = 0.0

    def to_dict(self) -> dict:
        return {
            "result": self.result.to_wire(),
            "colors": self.colors.to_dict() if self.colors else None,
            "layout": self.layout.to_dict() if self.layout else None,
            "processing_time_ms": self.processing_time_ms,
        }


class ParsingPipeline:
    """
    Пайплайн парсинга D2.

    Без состояния между запросами: все промежуточные данные создаются
    заново в process().

    ЦКП: OcrResult с IndustryData или PriceData.
    """

    def __init__(
        self,
        keyword_config: Optional[KeywordConfig] = None,
        color_classifier: Optional[ColorClassifier] = None,
        layout_stage: Optional[LayoutStage] = None,
        section_assembler: Optional[SectionAssembler] = None,
        price_stage: Optional[PriceStage] = None,
    ):
        """
        Args:
            Все этапы опциональны - по умолчанию создаются стандартные.
            keyword_config: Словари классификаторов (по умолчанию KEYWORD_PROFILE)
        """
        self.keyword_config = keyword_config or load_keyword_config()
        cleaner = TextCleaner()

        self.color_classifier = color_classifier or ColorClassifier()
        self.layout_stage = layout_stage or LayoutStage()
        self.section_assembler = section_assembler or SectionAssembler(
            header_classifier=HeaderClassifier(self.keyword_config),
            column_splitter=ColumnSplitter(),
            text_cleaner=cleaner,
        )
        self.price_stage = price_stage or PriceStage(
            PriceLineParser(self.keyword_config, text_cleaner=cleaner)
        )

        logger.info("[ParsingPipeline] Инициализирован")

    def process(
        self,
        raw_ocr: RawOCRResult,
        image_content: bytes,
        image_type: ImageType,
    ) -> PipelineResult:
        """
        Разбирает результат OCR одного изображения.

        Args:
            raw_ocr: Результат D1 (Extraction)
            image_content: Байты изображения (для анализа цвета)
            image_type: INDUSTRY или PRICES (AUTO разрешается до вызова)

        Raises:
            UnknownImageTypeError: Тип изображения не INDUSTRY / PRICES
        """
        start_time = time.time()

        source_file = raw_ocr.metadata.source_file if raw_ocr.metadata else "unknown"
        logger.info(f"[ParsingPipeline] Старт обработки: {source_file} ({image_type})")

        colors = None

        if image_type == ImageType.INDUSTRY:
            colors = self.color_classifier.analyze(image_content, raw_ocr.words)
            layout = self.layout_stage.process(raw_ocr.words)
            industry_data = self.section_assembler.process(layout, colors)
            result = OcrResult(success=True, industry_data=industry_data)
        elif image_type == ImageType.PRICES:
            layout = self.layout_stage.process(raw_ocr.words)
            price_data = self.price_stage.process(layout)
            result = OcrResult(success=True, price_data=price_data)
        else:
            raise UnknownImageTypeError(image_type)

        processing_time_ms = (time.time() - start_time) * 1000
        logger.info(f"[ParsingPipeline] Завершено: {source_file} за {processing_time_ms:.1f} мс")

        return PipelineResult(
            result=result,
            colors=colors,
            layout=layout,
            processing_time_ms=processing_time_ms,
        )
