"""
Разбор строки таблицы цен.

"Aluminum ingots  16.13  14.32  15.22  13.52"
    -> PriceItem(resource="Aluminum ingots", ussr_buy=16.13, ussr_sell=14.32,
                 nato_buy=15.22, nato_sell=13.52)

Классификация токенов - упорядоченный список правил, первое совпавшее побеждает:
1. numeric - число после удаления разделителей тысяч, пробелов и валют
2. placeholder - короткий токен с дефисом ("-", "--"), цены нет
3. name - всё остальное

После первого числового слота все следующие токены - числовые слоты.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Optional, Sequence

from contracts.d1_extraction_dto import TextElement
from contracts.d2_parsing_dto import PriceItem
from ..keywords.keyword_config import KeywordConfig
from ..s1_ocr_cleanup.text_cleaner import TextCleaner

_DECIMAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")

NUMERIC = "numeric"
PLACEHOLDER = "placeholder"
NAME = "name"

# Порядок полей в таблице цен игры
PRICE_FIELDS = ("ussr_buy", "ussr_sell", "nato_buy", "nato_sell")


@dataclass(frozen=True)
class TokenRule:
    """Правило классификации токена."""
    kind: str
    matches: Callable[[str], bool]


class PriceLineParser:
    """Строки таблицы цен -> PriceItem."""

    PLACEHOLDER_MAX_LENGTH = 10

    def __init__(self, keyword_config: KeywordConfig, text_cleaner: Optional[TextCleaner] = None):
        self.config = keyword_config
        self.cleaner = text_cleaner or TextCleaner()
        self.rules: List[TokenRule] = [
            TokenRule(NUMERIC, lambda text: self.parse_decimal(text) is not None),
            TokenRule(PLACEHOLDER, lambda text: "-" in text and len(text) < self.PLACEHOLDER_MAX_LENGTH),
            TokenRule(NAME, lambda text: True),
        ]

    def parse_decimal(self, text: str) -> Optional[Decimal]:
        """
        Число из токена цены ("1,250.50", "$15.22", "12 500").

        Экспоненты, NaN и Infinity числами не считаются.
        """
        cleaned = text.replace(",", "").replace(" ", "")
        for symbol in self.config.currency_symbols:
            cleaned = cleaned.replace(symbol, "")
        cleaned = cleaned.strip()

        if not _DECIMAL.match(cleaned):
            return None

        try:
            return Decimal(cleaned)
        except InvalidOperation:
            return None

    def classify_token(self, text: str) -> str:
        return next(rule.kind for rule in self.rules if rule.matches(text))

    def is_header_line(self, words: Sequence[TextElement]) -> bool:
        """Заголовок таблицы: "Current prices", "Resource Buy Sell NATO USSR"..."""
        lower = " ".join(w.text for w in words).lower()
        return any(keyword in lower for keyword in self.config.price_header_keywords)

    def has_numeric_data(self, words: Sequence[TextElement]) -> bool:
        return any(self.parse_decimal(w.text) is not None for w in words)

    def parse_line(self, words: Sequence[TextElement]) -> Optional[PriceItem]:
        """
        Returns:
            PriceItem или None (меньше 1 токена названия или меньше 4 слотов)
        """
        name_tokens: List[str] = []
        slots: List[str] = []

        for word in sorted(words, key=lambda w: w.bounding_box.x):
            if slots or self.classify_token(word.text) != NAME:
                slots.append(word.text)
            else:
                name_tokens.append(word.text)

        if not name_tokens or len(slots) < len(PRICE_FIELDS):
            return None

        resource = self.cleaner.clean(" ".join(name_tokens).strip().rstrip(":"))
        if not resource:
            return None

        prices = {
            field_name: self.parse_decimal(slot) or Decimal(0)
            for field_name, slot in zip(PRICE_FIELDS, slots)
        }

        return PriceItem(resource=resource, **prices)
