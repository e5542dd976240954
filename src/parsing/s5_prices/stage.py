"""
Stage 5: Prices

ЦКП: Таблица цен (PriceData) из строк скриншота.

Input: LayoutResult (из Stage 3, исходные элементы строк)
Output: PriceData(items[])

Отбрасываются: строки заголовка, строки без чисел, строки,
которые не удалось разобрать целиком (частичных записей нет).
"""

from loguru import logger

from contracts.d2_parsing_dto import PriceData
from ..s3_layout.stage import LayoutResult
from .price_line_parser import PriceLineParser


class PriceStage:
    """
    Stage 5: Prices.

    ЦКП: PriceItem на каждую строку данных таблицы.
    """

    def __init__(self, line_parser: PriceLineParser):
        self.line_parser = line_parser

    def process(self, layout: LayoutResult) -> PriceData:
        items = []
        skipped = 0

        for line in layout.lines:
            if not line.words:
                continue
            if self.line_parser.is_header_line(line.words):
                logger.debug(f"[Stage 5: Prices] Строка {line.line_number} - заголовок: '{line.text}'")
                continue
            if not self.line_parser.has_numeric_data(line.words):
                continue

            item = self.line_parser.parse_line(line.words)
            if item is None:
                skipped += 1
                logger.debug(f"[Stage 5: Prices] Строка {line.line_number} не разобрана: '{line.text}'")
                continue
            items.append(item)

        logger.info(f"[Stage 5: Prices] Результат: {len(items)} ресурсов (пропущено строк: {skipped})")

        return PriceData(items=items)
