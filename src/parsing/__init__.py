"""
Домен Parsing (D2): Восстановление структуры из результатов OCR.

Этапы:
- Stage 1: OCR Cleanup (очистка строк от OCR-артефактов)
- Stage 2: Color Analysis (выделенный красным текст)
- Stage 3: Layout (строки, фразы, колонки)
- Stage 4: Industry Sections (карточка здания)
- Stage 5: Prices (таблица цен)

Вход: contracts.RawOCRResult (от D1) + байты изображения
Выход: contracts.OcrResult
"""

from src.parsing.pipeline import ParsingPipeline, PipelineResult
from src.parsing.keywords import KeywordConfig, KeywordConfigLoader, load_keyword_config

# Stage exports
from src.parsing.s1_ocr_cleanup import TextCleaner, clean_ocr_text
from src.parsing.s2_color import ColorAnalysis, ColorClassifier
from src.parsing.s3_layout import LayoutStage, LayoutResult, Line, LineGrouper, WordCombiner, ColumnSplitter
from src.parsing.s4_industry import HeaderClassifier, SectionAssembler
from src.parsing.s5_prices import PriceLineParser, PriceStage

__all__ = [
    # Pipeline
    "ParsingPipeline",
    "PipelineResult",
    # Словари
    "KeywordConfig",
    "KeywordConfigLoader",
    "load_keyword_config",
    # Stages
    "TextCleaner",
    "clean_ocr_text",
    "ColorAnalysis",
    "ColorClassifier",
    "LayoutStage",
    "LayoutResult",
    "Line",
    "LineGrouper",
    "WordCombiner",
    "ColumnSplitter",
    "HeaderClassifier",
    "SectionAssembler",
    "PriceLineParser",
    "PriceStage",
]
