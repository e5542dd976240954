"""
OCR: Azure AI Vision (Image Analysis 4.0, feature "read") интеграция.

- POST байтов изображения на {endpoint}/computervision/imageanalysis:analyze
- Ответ - дерево readResult.blocks[].lines[].words[]
- Слова приводятся к TextElement через ProviderWord

ВАЖНО: Возвращает RawOCRResult из contracts/d1_extraction_dto.py
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import requests
from loguru import logger
from pydantic import ValidationError

from config.settings import (
    AZURE_API_VERSION,
    AZURE_DEFAULT_CONFIDENCE,
    AZURE_REQUEST_TIMEOUT,
    AZURE_VISION_ENDPOINT,
    AZURE_VISION_KEY,
)
from contracts.d1_extraction_dto import OCRMetadata, RawOCRResult, TextElement
from src.domain.contracts import ProviderWord
from ...domain.interfaces import IOCRProvider


class AzureVisionOCR(IOCRProvider):
    """Обёртка над Azure Image Analysis REST API."""

    PROVIDER = "azure"
    ANALYZE_PATH = "/computervision/imageanalysis:analyze"

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = (endpoint or AZURE_VISION_ENDPOINT).rstrip("/")
        self.api_key = api_key or AZURE_VISION_KEY

        if not self.endpoint or not self.api_key:
            raise ValueError(
                "Azure Vision endpoint и API key должны быть заданы!\n"
                "Укажите AZURE_VISION_ENDPOINT и AZURE_VISION_KEY."
            )

        self.session = session or requests.Session()

        logger.info("[AzureVisionOCR] Клиент инициализирован")

    def recognize(self, image_content: bytes, source_file: str = "unknown") -> RawOCRResult:
        """
        Распознаёт текст на изображении.

        Raises:
            requests.HTTPError: Если API вернул ошибочный статус
        """
        logger.debug(f"[AzureVisionOCR] Распознавание: {source_file}")

        response = self.session.post(
            f"{self.endpoint}{self.ANALYZE_PATH}",
            params={"features": "read", "api-version": AZURE_API_VERSION},
            headers={
                "Ocp-Apim-Subscription-Key": self.api_key,
                "Content-Type": "application/octet-stream",
            },
            data=image_content,
            timeout=AZURE_REQUEST_TIMEOUT,
        )

        if not response.ok:
            logger.error(f"[AzureVisionOCR] Ошибка API {response.status_code}: {response.text}")
        response.raise_for_status()

        return self.parse_response(response.json(), source_file)

    def parse_response(self, payload: Dict[str, Any], source_file: str = "unknown") -> RawOCRResult:
        """Разбирает JSON ответа analyze (readResult -> blocks -> lines -> words)."""
        read_result = payload.get("readResult") or {}

        lines_text: List[str] = []
        words: List[TextElement] = []

        for block in read_result.get("blocks", []):
            for line in block.get("lines", []):
                lines_text.append(line.get("text", ""))

                for word in line.get("words", []):
                    try:
                        provider_word = ProviderWord(
                            text=word.get("text", ""),
                            vertices=word.get("boundingPolygon", []),
                            confidence=word.get("confidence"),
                        )
                    except ValidationError as e:
                        logger.debug(f"[AzureVisionOCR] Пропуск слова '{word.get('text')}': {e.error_count()} ошибок")
                        continue

                    words.append(provider_word.to_text_element(AZURE_DEFAULT_CONFIDENCE))

        logger.debug(f"[AzureVisionOCR] Извлечено слов: {len(words)}")

        image_meta = payload.get("metadata") or {}

        return RawOCRResult(
            full_text="\n".join(lines_text),
            words=words,
            metadata=OCRMetadata(
                source_file=source_file,
                provider=self.PROVIDER,
                image_width=image_meta.get("width", 0),
                image_height=image_meta.get("height", 0),
                processed_at=datetime.now().isoformat(),
            ),
        )
