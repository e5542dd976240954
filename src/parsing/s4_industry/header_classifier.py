"""
Лексические признаки строк карточки здания.

Все словари приходят из KeywordConfig (YAML), классификатор не содержит
списков слов в коде.
"""

import re

from ..keywords.keyword_config import KeywordConfig

_PURE_NUMBER = re.compile(r"^\d+[.\d]*$")


class HeaderClassifier:
    """Признаки заголовка секции и строки данных (без учёта регистра, по подстроке)."""

    def __init__(self, keyword_config: KeywordConfig):
        self.config = keyword_config
        self._data_unit_pattern = keyword_config.data_unit_pattern()

    def matches_keyword(self, text: str) -> bool:
        lower = text.lower()
        return any(keyword in lower for keyword in self.config.header_keywords)

    def is_likely_header(self, text: str) -> bool:
        """Общее слово заголовка или текст, оканчивающийся на ':'."""
        return self.matches_keyword(text) or text.endswith(":")

    def is_strong_header(self, text: str) -> bool:
        """Устойчивая фраза заголовка или ':' + общее слово заголовка."""
        lower = text.lower()
        if any(phrase in lower for phrase in self.config.strong_header_phrases):
            return True
        return ":" in text and self.matches_keyword(text)

    def is_data_item(self, text: str) -> bool:
        """
        Строка данных: "22t of Concrete", "1644 Workdays", "75",
        или материал/единица без слов заголовка.
        """
        if self._data_unit_pattern.match(text):
            return True
        if _PURE_NUMBER.match(text):
            return True

        lower = text.lower()
        has_data_term = any(term in lower for term in self.config.data_terms)
        return has_data_term and not self.matches_keyword(text)
