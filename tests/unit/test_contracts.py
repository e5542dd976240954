"""
Unit-тесты для контрактов D1/D2.

ЦКП: JSON-форма OcrResult для API и инварианты DTO.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from contracts import (
    BoundingBox,
    IndustryData,
    IndustrySection,
    OcrResult,
    PriceData,
    PriceItem,
    RawOCRResult,
    TextElement,
)


class TestOcrResultWire:
    """camelCase JSON без пустых полей."""

    def test_industry_wire(self):
        result = OcrResult(
            success=True,
            industry_data=IndustryData(
                name="Brick factory",
                sections=[IndustrySection(section_name="Maximum number of workers", items=["75"])],
            ),
        )

        assert result.to_wire() == {
            "success": True,
            "industryData": {
                "name": "Brick factory",
                "sections": [{"sectionName": "Maximum number of workers", "items": ["75"]}],
            },
        }

    def test_price_wire_numbers(self):
        item = PriceItem(resource="Steel", ussr_buy=Decimal("15.22"))
        result = OcrResult(success=True, price_data=PriceData(items=[item]))

        wire = result.to_wire()

        assert wire["priceData"]["items"][0] == {
            "resource": "Steel",
            "ussrBuy": 15.22,
            "ussrSell": 0.0,
            "natoBuy": 0.0,
            "natoSell": 0.0,
        }

    def test_failure_wire(self):
        assert OcrResult.failure("Unknown image type").to_wire() == {
            "success": False,
            "errorMessage": "Unknown image type",
        }


class TestInvariants:
    """Инварианты моделей."""

    def test_success_requires_one_variant(self):
        with pytest.raises(ValidationError):
            OcrResult(success=True)

        with pytest.raises(ValidationError):
            OcrResult(success=True, industry_data=IndustryData(), price_data=PriceData())

    def test_blank_section_name(self):
        with pytest.raises(ValidationError):
            IndustrySection(section_name="  ")

    def test_blank_resource(self):
        with pytest.raises(ValidationError):
            PriceItem(resource="")

    def test_frozen(self):
        item = PriceItem(resource="Steel")

        with pytest.raises(ValidationError):
            item.resource = "Boards"

    def test_accepts_camel_case(self):
        item = PriceItem.model_validate({"resource": "Steel", "natoSell": "4.5"})

        assert item.nato_sell == Decimal("4.5")


class TestRawOCRResult:
    """D1 контракт."""

    def test_dict_roundtrip(self):
        raw = RawOCRResult(
            full_text="Steel",
            words=[TextElement("Steel", BoundingBox(1, 2, 30, 10), 0.8)],
        )

        restored = RawOCRResult.from_dict(raw.to_dict())

        assert restored.words == raw.words
        assert restored.metadata is None

    def test_box_union(self):
        box = BoundingBox(0, 5, 10, 10).union(BoundingBox(20, 0, 10, 10))

        assert box == BoundingBox(0, 0, 30, 15)
