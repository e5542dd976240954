"""
Stage 1: OCR Cleanup

ЦКП: Нормализация строк от OCR-артефактов.

Применяется к названиям секций, строкам данных и названиям ресурсов
(а не к каждому слову провайдера).

Правила (по порядку):
1. trim
2. Удаление серии ")]}" в начале и "([{" в конце, вместе с пробелами между ними (частые ошибки OCR)
3. Пробелы перед ".,:;" -> знак + один пробел
4. Схлопывание пробелов
5. " . " -> ". ", " / " -> "/", " - " -> "-"
6. Удаление символа градуса
7. Удаление ") " в начале (остаток от ") 20")

Правила применяются до неподвижной точки: clean(clean(s)) == clean(s).
Ни одно правило не удлиняет строку, а пробел может только сдвигаться
вправо за знак препинания, поэтому цикл конечен.
"""

import re


class TextCleaner:
    """
    Stage 1: OCR Cleanup.

    ЦКП: Детерминированная очистка строки.
    """

    LEADING_CLOSING = re.compile(r"^(?:[)\]}]\s*)+")
    TRAILING_OPENING = re.compile(r"(?:\s*[(\[{])+$")
    SPACE_BEFORE_PUNCT = re.compile(r"\s+([.,:;])\s*")
    WHITESPACE = re.compile(r"\s+")
    LEADING_BRACKET_SPACE = re.compile(r"^[)\]}]\s+")

    REPLACEMENTS = (
        (" . ", ". "),   # "Max . daily" -> "Max. daily"
        (" / ", "/"),    # "tons / year" -> "tons/year"
        (" - ", "-"),    # "Open - space" -> "Open-space"
        ("°", ""),
    )

    def clean(self, text: str) -> str:
        """
        Очищает строку.

        Args:
            text: Исходный текст (может быть None/пустым)

        Returns:
            str: Очищенный текст ("" для пустого ввода)
        """
        if not text or not text.strip():
            return ""

        current = text
        cleaned = self._clean_once(current)
        while cleaned != current:
            current, cleaned = cleaned, self._clean_once(cleaned)

        return current

    def _clean_once(self, text: str) -> str:
        text = text.strip()
        text = self.LEADING_CLOSING.sub("", text)
        text = self.TRAILING_OPENING.sub("", text)
        text = self.SPACE_BEFORE_PUNCT.sub(r"\1 ", text)
        text = self.WHITESPACE.sub(" ", text)

        for old, new in self.REPLACEMENTS:
            text = text.replace(old, new)
        text = text.strip()

        text = self.LEADING_BRACKET_SPACE.sub("", text)
        return text.strip()


_default_cleaner = TextCleaner()


def clean_ocr_text(text: str) -> str:
    """Очистка строки общим экземпляром TextCleaner (без состояния)."""
    return _default_cleaner.clean(text)
