#!/usr/bin/env python3
"""
Точка входа для запуска OCR пайплайна.

Использование:
    # Обработать все изображения из data/input/ (тип определяется автоматически)
    python scripts/run_pipeline.py

    # Карточка здания
    python scripts/run_pipeline.py path/to/building.png --type industry

    # Таблица цен через Azure, с сохранением raw_ocr
    python scripts/run_pipeline.py path/to/prices.png --type prices --provider azure --save-raw

    # Повторный разбор сохранённого raw_ocr (без вызова OCR)
    python scripts/run_pipeline.py path/to/prices.png --raw data/output/raw_ocr/prices_raw.json
"""

import sys
import argparse
import json
from pathlib import Path

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import validate_config, INPUT_DIR, OUTPUT_DIR, OCR_PROVIDER
from src.extraction import ExtractionComponentFactory
from src.extraction.domain.exceptions import ExtractionError
from src.extraction.infrastructure.file_manager import ExtractionFileManager
from src.pipeline import GameDataOCR


def print_result(result, output_file: Path = None):
    """Печатает OcrResult в формате API и при необходимости сохраняет."""
    wire = result.to_wire()
    print(json.dumps(wire, ensure_ascii=False, indent=2))

    if output_file:
        ExtractionFileManager().save_json(wire, output_file)
        print(f"  -> Сохранено: {output_file}")


def main():
    """Главная функция запуска полного пайплайна."""

    parser = argparse.ArgumentParser(description="Game Data OCR Pipeline Runner")
    parser.add_argument("path", nargs="?", help="Путь к изображению (опционально)")
    parser.add_argument("--type", default="auto", choices=["industry", "prices", "auto"],
                        help="Тип скриншота")
    parser.add_argument("--provider", default=OCR_PROVIDER, choices=["google", "azure"],
                        help="OCR провайдер")
    parser.add_argument("--raw", help="Путь к сохранённому raw_ocr JSON (без вызова OCR)")
    parser.add_argument("--save-raw", action="store_true", help="Сохранять raw_ocr JSON")
    parser.add_argument("--save", action="store_true", help="Сохранять результат в data/output/")
    args = parser.parse_args()

    print("\n" + "="*60)
    print("  GAME DATA OCR - Полный пайплайн (Extraction + Parsing)")
    print("="*60)

    if args.raw:
        try:
            raw_ocr = ExtractionFileManager().load_raw_ocr(Path(args.raw))
        except ExtractionError as e:
            print(f"\n[ERROR] {e}")
            sys.exit(1)
        image_content = Path(args.path).read_bytes() if args.path else b""

        # Провайдер не нужен: разбор только сохранённого результата
        app = GameDataOCR(extraction_pipeline=ExtractionComponentFactory.create_extraction_pipeline(
            ocr_provider=_NoProvider()
        ))
        result = app.process_raw(raw_ocr, image_content, args.type)
        output_file = OUTPUT_DIR / f"{Path(args.raw).stem}_result.json" if args.save else None
        print_result(result, output_file)
        sys.exit(0 if result.success else 1)

    # Проверяем конфигурацию
    try:
        validate_config(args.provider)
        print("\n[OK] Конфигурация проверена")
    except ValueError as e:
        print(f"\n[ERROR] {e}")
        sys.exit(1)

    print(f"[OK] Провайдер: {args.provider}")
    print(f"[OK] Input директория: {INPUT_DIR}")
    print(f"[OK] Output директория: {OUTPUT_DIR}")

    extraction_pipeline = ExtractionComponentFactory.create_extraction_pipeline(
        ocr_provider=ExtractionComponentFactory.create_ocr_provider(args.provider),
        save_raw=args.save_raw,
    )
    app = GameDataOCR(extraction_pipeline=extraction_pipeline)

    if args.path:
        image_paths = [Path(args.path)]
    else:
        image_paths = ExtractionFileManager().get_image_files(INPUT_DIR)

    if not image_paths:
        print(f"\nИзображения не найдены в {INPUT_DIR}")
        sys.exit(1)

    failed = 0
    for image_path in image_paths:
        print(f"\n{'='*60}")
        print(f"Обработка: {image_path.name}")
        print(f"{'='*60}")

        result = app.process_file(image_path, args.type)
        output_file = OUTPUT_DIR / f"{image_path.stem}_result.json" if args.save else None
        print_result(result, output_file)

        if not result.success:
            failed += 1

    print("\n" + "="*60)
    if failed:
        print(f"  [ERROR] Ошибок: {failed} из {len(image_paths)}")
    else:
        print(f"  [SUCCESS] Обработано изображений: {len(image_paths)}")
    print("="*60)

    sys.exit(1 if failed else 0)


class _NoProvider:
    """Заглушка провайдера для режима --raw: OCR не вызывается."""

    def recognize(self, image_content, source_file="unknown"):
        raise RuntimeError("OCR провайдер не используется в режиме --raw")


if __name__ == "__main__":
    main()
