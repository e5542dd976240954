"""Stage 5: Prices - таблица цен ресурсов."""

from .price_line_parser import PriceLineParser, TokenRule
from .stage import PriceStage

__all__ = ["PriceLineParser", "PriceStage", "TokenRule"]
