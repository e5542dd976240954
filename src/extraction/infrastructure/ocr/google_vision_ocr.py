"""
OCR: Google Vision API интеграция.

- Отправка скриншота в Google Vision (TEXT_DETECTION)
- Первая аннотация - сводка всего текста, она пропускается
- Остальные аннотации - слова, приводятся к TextElement через ProviderWord

Поддерживает и ответ клиентской библиотеки (protobuf), и REST JSON
(например, сохранённый ответ), чтобы разбор можно было проверить без сети.

ВАЖНО: Возвращает RawOCRResult из contracts/d1_extraction_dto.py
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from google.cloud import vision
from loguru import logger
from pydantic import ValidationError

from config.settings import GOOGLE_APPLICATION_CREDENTIALS, GOOGLE_DEFAULT_CONFIDENCE
from contracts.d1_extraction_dto import OCRMetadata, RawOCRResult, TextElement
from src.domain.contracts import ProviderWord
from ...domain.interfaces import IOCRProvider


class GoogleVisionOCR(IOCRProvider):
    """
    Обёртка над Google Cloud Vision API.

    Реализует интерфейс IOCRProvider.
    """

    PROVIDER = "google"

    def __init__(self, credentials_path: Optional[str] = None, client: Any = None):
        """
        Инициализация OCR клиента.

        Args:
            credentials_path: Путь к JSON-файлу credentials.
                            Если не указан, берётся из settings.
            client: Готовый ImageAnnotatorClient (для тестов)
        """
        if client is not None:
            self.client = client
            return

        creds_path = credentials_path or GOOGLE_APPLICATION_CREDENTIALS

        if not creds_path:
            raise ValueError(
                "Google credentials не указаны!\n"
                "Укажите путь в config/settings.py или передайте в конструктор."
            )

        if not Path(creds_path).exists():
            raise FileNotFoundError(f"Credentials файл не найден: {creds_path}")

        # Устанавливаем credentials через переменную окружения
        os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = str(creds_path)

        self.client = vision.ImageAnnotatorClient()

        logger.info("[GoogleVisionOCR] Клиент инициализирован")

    def recognize(self, image_content: bytes, source_file: str = "unknown") -> RawOCRResult:
        """
        Распознаёт текст на изображении.

        Args:
            image_content: Байты изображения
            source_file: Имя исходного файла (для метаданных)

        Returns:
            RawOCRResult с элементами текста
        """
        logger.debug(f"[GoogleVisionOCR] Распознавание: {source_file}")

        image = vision.Image(content=image_content)
        response = self.client.text_detection(image=image)

        if response.error.message:
            raise RuntimeError(f"Google Vision API error: {response.error.message}")

        annotations = [
            {
                "description": annotation.description,
                "vertices": [{"x": v.x, "y": v.y} for v in annotation.bounding_poly.vertices],
                # В protobuf отсутствующий confidence приходит как 0.0
                "confidence": annotation.confidence or None,
            }
            for annotation in response.text_annotations
        ]

        return self._build_result(annotations, source_file)

    def parse_rest_response(self, payload: Dict[str, Any], source_file: str = "unknown") -> RawOCRResult:
        """
        Разбирает REST JSON ответа images:annotate.

        Принимает как полный ответ ({"responses": [...]}), так и один элемент responses.
        """
        if "responses" in payload:
            responses = payload.get("responses") or [{}]
            payload = responses[0]

        if payload.get("error", {}).get("message"):
            raise RuntimeError(f"Google Vision API error: {payload['error']['message']}")

        annotations = [
            {
                "description": annotation.get("description", ""),
                # REST опускает нулевые координаты
                "vertices": [
                    {"x": v.get("x", 0), "y": v.get("y", 0)}
                    for v in annotation.get("boundingPoly", {}).get("vertices", [])
                ],
                "confidence": annotation.get("confidence"),
            }
            for annotation in payload.get("textAnnotations", [])
        ]

        return self._build_result(annotations, source_file)

    def _build_result(self, annotations: List[Dict[str, Any]], source_file: str) -> RawOCRResult:
        """Первая аннотация - полный текст, остальные - слова."""
        full_text = annotations[0]["description"] if annotations else ""

        words: List[TextElement] = []
        for annotation in annotations[1:]:
            try:
                word = ProviderWord(
                    text=annotation["description"] or "",
                    vertices=annotation["vertices"],
                    confidence=annotation["confidence"],
                )
            except ValidationError as e:
                logger.debug(f"[GoogleVisionOCR] Пропуск аннотации '{annotation['description']}': {e.error_count()} ошибок")
                continue

            words.append(word.to_text_element(GOOGLE_DEFAULT_CONFIDENCE))

        logger.debug(f"[GoogleVisionOCR] Извлечено слов: {len(words)}")

        return RawOCRResult(
            full_text=full_text,
            words=words,
            metadata=OCRMetadata(
                source_file=source_file,
                provider=self.PROVIDER,
                processed_at=datetime.now().isoformat(),
            ),
        )
