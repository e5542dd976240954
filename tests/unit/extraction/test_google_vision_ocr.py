"""
Unit-тесты для GoogleVisionOCR.

ЦКП: Ответ Google Vision -> RawOCRResult (без сети).
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.extraction.infrastructure.ocr import GoogleVisionOCR


def rest_annotation(text, x, y, width=40, height=20, confidence=None):
    annotation = {
        "description": text,
        "boundingPoly": {"vertices": [
            {"x": x, "y": y},
            {"x": x + width, "y": y},
            {"x": x + width, "y": y + height},
            {"x": x, "y": y + height},
        ]},
    }
    if confidence is not None:
        annotation["confidence"] = confidence
    return annotation


def proto_annotation(text, x, y, width=40, height=20, confidence=0.0):
    vertices = [
        SimpleNamespace(x=x, y=y),
        SimpleNamespace(x=x + width, y=y),
        SimpleNamespace(x=x + width, y=y + height),
        SimpleNamespace(x=x, y=y + height),
    ]
    return SimpleNamespace(
        description=text,
        bounding_poly=SimpleNamespace(vertices=vertices),
        confidence=confidence,
    )


@pytest.fixture
def ocr():
    return GoogleVisionOCR(client=MagicMock())


class TestRestResponse:
    """Разбор REST JSON images:annotate."""

    def test_skips_full_text_annotation(self, ocr):
        payload = {"responses": [{"textAnnotations": [
            rest_annotation("Steel 15.22", 0, 0, 200, 20),
            rest_annotation("Steel", 0, 0),
            rest_annotation("15.22", 100, 0),
        ]}]}

        result = ocr.parse_rest_response(payload, "prices")

        assert result.full_text == "Steel 15.22"
        assert [w.text for w in result.words] == ["Steel", "15.22"]
        assert result.metadata.provider == "google"
        assert result.metadata.source_file == "prices"

    def test_default_confidence(self, ocr):
        payload = {"textAnnotations": [
            rest_annotation("all", 0, 0),
            rest_annotation("Steel", 0, 0),
            rest_annotation("Boards", 50, 0, confidence=0.75),
        ]}

        result = ocr.parse_rest_response(payload)

        assert result.words[0].confidence == 0.9
        assert result.words[1].confidence == 0.75

    def test_polygon_to_box(self, ocr):
        annotation = rest_annotation("Steel", 0, 0)
        # Наклонный полигон, REST опускает нулевую координату
        annotation["boundingPoly"]["vertices"] = [{"x": 12}, {"x": 52, "y": 3}, {"x": 50, "y": 25}, {"x": 10, "y": 22}]

        result = ocr.parse_rest_response({"textAnnotations": [rest_annotation("all", 0, 0), annotation]})

        box = result.words[0].bounding_box
        assert (box.x, box.y, box.width, box.height) == (10, 0, 42, 25)

    def test_skips_invalid_words(self, ocr):
        short_polygon = rest_annotation("Steel", 0, 0)
        short_polygon["boundingPoly"]["vertices"] = short_polygon["boundingPoly"]["vertices"][:3]

        payload = {"textAnnotations": [
            rest_annotation("all", 0, 0),
            short_polygon,
            rest_annotation("   ", 0, 0),
            rest_annotation("Boards", 50, 0),
        ]}

        result = ocr.parse_rest_response(payload)

        assert [w.text for w in result.words] == ["Boards"]

    def test_empty_response(self, ocr):
        result = ocr.parse_rest_response({"responses": [{}]})

        assert result.words == []
        assert result.full_text == ""

    def test_error_response(self, ocr):
        with pytest.raises(RuntimeError, match="quota"):
            ocr.parse_rest_response({"responses": [{"error": {"message": "quota exceeded"}}]})


class TestClientResponse:
    """Разбор ответа клиентской библиотеки."""

    def test_recognize(self):
        client = MagicMock()
        client.text_detection.return_value = SimpleNamespace(
            error=SimpleNamespace(message=""),
            text_annotations=[
                proto_annotation("Steel 1", 0, 0, 100),
                proto_annotation("Steel", 0, 0),
                proto_annotation("1", 60, 0, confidence=0.5),
            ],
        )

        result = GoogleVisionOCR(client=client).recognize(b"image-bytes", "shot")

        client.text_detection.assert_called_once()
        assert [w.text for w in result.words] == ["Steel", "1"]
        assert result.words[0].confidence == 0.9
        assert result.words[1].confidence == 0.5

    def test_api_error(self):
        client = MagicMock()
        client.text_detection.return_value = SimpleNamespace(
            error=SimpleNamespace(message="bad image"),
            text_annotations=[],
        )

        with pytest.raises(RuntimeError, match="bad image"):
            GoogleVisionOCR(client=client).recognize(b"image-bytes")

    def test_missing_credentials(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GoogleVisionOCR(credentials_path=str(tmp_path / "missing.json"))
