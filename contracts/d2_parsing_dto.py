"""
DTO контракт: D2 (Parsing) -> API

Результат разбора скриншота: карточка здания (IndustryData)
или таблица цен (PriceData).

ВАЖНО: JSON-форма (camelCase) 1 в 1 соответствует тому, что ждёт фронтенд:
success, errorMessage, industryData{name, sections[{sectionName, items[]}]},
priceData{items[{resource, ussrBuy, ussrSell, natoBuy, natoSell}]}.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ImageType(str, Enum):
    """Тип скриншота."""

    INDUSTRY = "industry"
    PRICES = "prices"
    AUTO = "auto"


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class IndustrySection(_WireModel):
    """Именованная секция карточки здания (например, материалы для постройки)."""

    section_name: str = Field(..., description="Заголовок секции")
    items: List[str] = Field(default_factory=list, description="Строки данных секции")

    @field_validator("section_name")
    @classmethod
    def validate_section_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("sectionName не может быть пустым")
        return v


class IndustryData(_WireModel):
    """Карточка здания: название + секции."""

    name: str = Field("", description="Название здания (первый не красный текст)")
    sections: List[IndustrySection] = Field(default_factory=list)


class PriceItem(_WireModel):
    """Цены ресурса в двух фракциях."""

    resource: str = Field(..., description="Название ресурса")
    ussr_buy: Decimal = Decimal(0)
    ussr_sell: Decimal = Decimal(0)
    nato_buy: Decimal = Decimal(0)
    nato_sell: Decimal = Decimal(0)

    @field_validator("resource")
    @classmethod
    def validate_resource(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("resource не может быть пустым")
        return v

    @field_serializer("ussr_buy", "ussr_sell", "nato_buy", "nato_sell", when_used="json")
    def serialize_price(self, v: Decimal) -> float:
        # Фронтенд ждёт числа, а не строки
        return float(v)


class PriceData(_WireModel):
    """Таблица цен."""

    items: List[PriceItem] = Field(default_factory=list)


class OcrResult(_WireModel):
    """
    Итог обработки одного изображения.

    При success=True заполнен ровно один из вариантов: industry_data или price_data.
    """

    success: bool
    error_message: Optional[str] = None
    industry_data: Optional[IndustryData] = None
    price_data: Optional[PriceData] = None

    @model_validator(mode="after")
    def check_single_variant(self) -> "OcrResult":
        if self.success and (self.industry_data is None) == (self.price_data is None):
            raise ValueError("Успешный результат должен содержать ровно один вариант данных")
        return self

    @classmethod
    def failure(cls, message: str) -> "OcrResult":
        return cls(success=False, error_message=message)

    def to_wire(self) -> Dict[str, Any]:
        """JSON-совместимый dict в формате API (camelCase, без None)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
