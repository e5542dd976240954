"""
Keyword Config: словари классификаторов строк.

ЦКП: Единая модель KeywordConfig для всех этапов D2.

Архитектурный принцип:
- Словари - это данные, а не ветки кода. Классификаторы получают KeywordConfig
  через конструктор, поэтому другую игру/язык можно подключить новым YAML.
- base.yaml - полный словарь по умолчанию.
- Профиль {name}.yaml может наследовать списки из base.yaml через "$extends: key".
"""

import re
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from config.settings import KEYWORD_PROFILE
from ..domain.exceptions import ParsingConfigurationError


class KeywordConfig(BaseModel):
    """Словари заголовков, данных и таблицы цен."""

    model_config = ConfigDict(frozen=True)

    header_keywords: List[str] = Field(..., min_length=1, description="Общие слова заголовков секций")
    strong_header_phrases: List[str] = Field(..., min_length=1, description="Устойчивые фразы заголовков")
    data_terms: List[str] = Field(default_factory=list, description="Материалы и единицы строк данных")
    data_units: List[str] = Field(default_factory=list, description="Единицы сразу после числа")
    price_header_keywords: List[str] = Field(default_factory=list, description="Слова заголовка таблицы цен")
    currency_symbols: List[str] = Field(default_factory=list, description="Символы валют")

    @field_validator(
        "header_keywords", "strong_header_phrases", "data_terms",
        "data_units", "price_header_keywords",
    )
    @classmethod
    def normalize_keywords(cls, v: List[str]) -> List[str]:
        """Сравнение без учёта регистра: храним в нижнем регистре, без пустых."""
        return [str(item).strip().lower() for item in v if str(item).strip()]

    def data_unit_pattern(self) -> re.Pattern:
        """Число + единица в начале текста ("22t of Concrete", "1644 Workdays")."""
        units = "|".join(re.escape(unit) for unit in self.data_units) or r"(?!)"
        return re.compile(rf"^\d+[.\d]*\s*({units})", re.IGNORECASE)


class KeywordConfigLoader:
    """
    Загрузчик KeywordConfig из YAML с кешем по имени профиля.

    Модели frozen, поэтому кеш безопасно делить между запросами.
    """

    _cache: ClassVar[Dict[str, KeywordConfig]] = {}

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else Path(__file__).parent

    def load(self, profile: str = "base") -> KeywordConfig:
        """
        Загружает профиль словарей.

        Raises:
            ParsingConfigurationError: Профиль не найден или не проходит валидацию
        """
        cache_key = f"{self.config_dir}:{profile}"
        if cache_key in self._cache:
            return self._cache[cache_key]

        base_data = self._read_yaml(self.config_dir / "base.yaml")

        if profile == "base":
            data = base_data
        else:
            data = self._read_yaml(self.config_dir / f"{profile}.yaml")
            data = {
                key: self._resolve_extends(value, base_data)
                for key, value in data.items()
            }
            # Не указанные в профиле словари берём из base.yaml целиком
            data = {**base_data, **data}

        try:
            config = KeywordConfig(**data)
        except ValidationError as e:
            raise ParsingConfigurationError(
                message=f"Некорректный профиль словарей: {profile}",
                profile=profile,
                original_error=e
            )

        self._cache[cache_key] = config

        logger.debug(
            f"[KeywordConfig] Загружен профиль '{profile}': "
            f"{len(config.header_keywords)} header_keywords, "
            f"{len(config.strong_header_phrases)} strong_header_phrases"
        )

        return config

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache.clear()

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ParsingConfigurationError(
                message=f"Файл словаря не найден: {path}",
                profile=path.stem
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ParsingConfigurationError(
                message=f"Ошибка YAML: {path}",
                profile=path.stem,
                original_error=e
            )

    @staticmethod
    def _resolve_extends(value: Any, base_data: Dict[str, Any]) -> Any:
        """
        Выборочное наследование списков.

        Поддерживает форматы:
        - Строка: "$extends: header_keywords"
        - Словарь: {"$extends": "header_keywords"} (YAML без кавычек)
        """
        if not isinstance(value, list):
            return value

        result = []
        for item in value:
            extended_key = None

            if isinstance(item, str) and item.startswith("$extends:"):
                extended_key = item.split(":", 1)[1].strip()
            elif isinstance(item, dict) and "$extends" in item:
                extended_key = item["$extends"]

            if extended_key:
                extended = base_data.get(extended_key, [])
                if not extended:
                    logger.warning(f"[KeywordConfig] Ключ '{extended_key}' для $extends не найден в base.yaml")
                result.extend(extended)
            else:
                result.append(item)

        return result


def load_keyword_config(profile: Optional[str] = None) -> KeywordConfig:
    """Профиль из settings.KEYWORD_PROFILE, если не указан явно."""
    return KeywordConfigLoader().load(profile or KEYWORD_PROFILE)
