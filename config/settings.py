"""
Настройки проекта Game Data OCR.

ВАЖНО: Перед запуском укажите ключи выбранного OCR провайдера
(Google Cloud credentials или Azure endpoint + key)!
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
INPUT_DIR = DATA_DIR / "input"
OUTPUT_DIR = DATA_DIR / "output"

# =============================================================================
# OCR ПРОВАЙДЕР
# =============================================================================
# "google" или "azure"
OCR_PROVIDER = os.getenv("OCR_PROVIDER", "google").lower()

SUPPORTED_PROVIDERS = ["google", "azure"]

# =============================================================================
# GOOGLE CLOUD VISION API
# =============================================================================
# Путь к JSON-файлу с ключом сервисного аккаунта
GOOGLE_APPLICATION_CREDENTIALS = os.getenv(
    "GOOGLE_APPLICATION_CREDENTIALS",
    str(PROJECT_ROOT / "config" / "google_credentials.json")
)

# Google не всегда отдаёт confidence для TEXT_DETECTION
GOOGLE_DEFAULT_CONFIDENCE = 0.9

# =============================================================================
# AZURE AI VISION (Image Analysis 4.0)
# =============================================================================
AZURE_VISION_ENDPOINT = os.getenv("AZURE_VISION_ENDPOINT", "")
AZURE_VISION_KEY = os.getenv("AZURE_VISION_KEY", "")
AZURE_API_VERSION = os.getenv("AZURE_API_VERSION", "2023-10-01")
AZURE_REQUEST_TIMEOUT = 30  # секунды

AZURE_DEFAULT_CONFIDENCE = 1.0

# =============================================================================
# НАСТРОЙКИ ОБРАБОТКИ
# =============================================================================
# Поддерживаемые форматы изображений
SUPPORTED_IMAGE_FORMATS = [".jpg", ".jpeg", ".png"]

# Авто-определение типа: прайс-лист шире, чем высота * коэффициент
AUTO_DETECT_ASPECT_RATIO = 1.2

# =============================================================================
# ГЕОМЕТРИЯ (LAYOUT)
# =============================================================================
LINE_Y_THRESHOLD = 15       # Разница Y между соседними словами одной строки (px)
WORD_GAP_THRESHOLD = 20     # Зазор между словами одной фразы (px)
COLUMN_GAP_THRESHOLD = 50   # Минимальный зазор между колонками (px)

# =============================================================================
# АНАЛИЗ ЦВЕТА
# =============================================================================
COLOR_SAMPLE_STRIDE = 2     # Берём каждый 2-й пиксель по обеим осям
RED_MIN_R = 120
RED_MAX_G = 80
RED_MAX_B = 80
RED_MIN_R_G_DIFF = 40

# Сопоставление цвета по тексту слова, а не по самому элементу:
# одинаковые тексты в разных местах получают один статус
COLOR_MATCH_BY_TEXT = False

# =============================================================================
# СЛОВАРИ
# =============================================================================
# Имя YAML профиля в src/parsing/keywords/
KEYWORD_PROFILE = os.getenv("KEYWORD_PROFILE", "base")


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config(provider: str = OCR_PROVIDER):
    """Проверяет корректность конфигурации для выбранного провайдера."""
    errors = []

    if provider not in SUPPORTED_PROVIDERS:
        errors.append(
            f"Неизвестный OCR_PROVIDER: {provider}. "
            f"Допустимые значения: {', '.join(SUPPORTED_PROVIDERS)}"
        )
    elif provider == "google":
        if not GOOGLE_APPLICATION_CREDENTIALS:
            errors.append(
                "GOOGLE_APPLICATION_CREDENTIALS не указан!\n"
                "Укажите путь к JSON-ключу в config/settings.py или через переменную окружения."
            )
        elif not Path(GOOGLE_APPLICATION_CREDENTIALS).exists():
            errors.append(
                f"Файл credentials не найден: {GOOGLE_APPLICATION_CREDENTIALS}"
            )
    elif provider == "azure":
        if not AZURE_VISION_ENDPOINT or not AZURE_VISION_KEY:
            errors.append(
                "AZURE_VISION_ENDPOINT и AZURE_VISION_KEY должны быть заданы "
                "через переменные окружения."
            )

    if errors:
        raise ValueError("\n".join(errors))

    # Создаём директории если не существуют
    INPUT_DIR.mkdir(parents=True, exist_ok=True)
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    return True
