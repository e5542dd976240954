"""
Менеджер файлов для домена Extraction.

Сохраняет и загружает raw_ocr (RawOCRResult в JSON),
чтобы разбор можно было повторить без повторного вызова провайдера.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from loguru import logger

from config.settings import SUPPORTED_IMAGE_FORMATS
from contracts.d1_extraction_dto import RawOCRResult
from ..domain.exceptions import OCRFileNotFoundError, OCRFileReadError, OCRFileWriteError


class ExtractionFileManager:
    """Менеджер файлов для домена Extraction."""

    def save_json(self, data: Dict[str, Any], file_path: Path) -> Path:
        """
        Сохраняет данные в JSON файл.

        Raises:
            OCRFileWriteError: Если не удалось сохранить файл
        """
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)

            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)

        except (OSError, TypeError) as e:
            raise OCRFileWriteError("Не удалось сохранить JSON", file_path, original_error=e)

        logger.debug(f"[Extraction] Файл сохранен: {file_path}")
        return file_path

    def load_json(self, file_path: Path) -> Dict[str, Any]:
        """
        Загружает данные из JSON файла.

        Raises:
            OCRFileNotFoundError: Если файл не существует
            OCRFileReadError: Если файл не читается или это не JSON
        """
        if not file_path.exists():
            raise OCRFileNotFoundError("Файл не найден", file_path)

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise OCRFileReadError("Не удалось прочитать JSON", file_path, original_error=e)

        logger.debug(f"[Extraction] Файл загружен: {file_path}")
        return data

    def save_raw_ocr(self, raw_ocr: RawOCRResult, filename: str, output_dir: Path) -> Path:
        """Сохраняет RawOCRResult как {output_dir}/{filename}.json."""
        return self.save_json(raw_ocr.to_dict(), output_dir / f"{filename}.json")

    def load_raw_ocr(self, file_path: Path) -> RawOCRResult:
        """
        Загружает RawOCRResult, ранее сохранённый save_raw_ocr.

        Raises:
            OCRFileReadError: JSON не похож на raw_ocr (нет слов или координат)
        """
        data = self.load_json(file_path)
        try:
            return RawOCRResult.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise OCRFileReadError("Некорректный формат raw_ocr", file_path, original_error=e)

    def get_image_files(self, directory_path: Path) -> List[Path]:
        """Список файлов изображений в директории (без рекурсии)."""
        if not directory_path.exists():
            return []

        return sorted(
            path for path in directory_path.iterdir()
            if path.is_file() and path.suffix.lower() in SUPPORTED_IMAGE_FORMATS
        )
