"""
Unit-тесты для AzureVisionOCR.

ЦКП: Ответ Azure Image Analysis (read) -> RawOCRResult (без сети).
"""

from unittest.mock import MagicMock

import pytest
import requests

from src.extraction.infrastructure.ocr import AzureVisionOCR


def azure_word(text, x, y, width=40, height=20, confidence=None):
    word = {
        "text": text,
        "boundingPolygon": [
            {"x": x, "y": y},
            {"x": x + width, "y": y},
            {"x": x + width, "y": y + height},
            {"x": x, "y": y + height},
        ],
    }
    if confidence is not None:
        word["confidence"] = confidence
    return word


AZURE_PAYLOAD = {
    "metadata": {"width": 1600, "height": 900},
    "readResult": {"blocks": [{"lines": [
        {"text": "Steel 15.22", "words": [azure_word("Steel", 0, 0, confidence=0.98), azure_word("15.22", 100, 0)]},
        {"text": "Boards 3.10", "words": [azure_word("Boards", 0, 40), azure_word("3.10", 100, 40, confidence=0.6)]},
    ]}]},
}


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def ocr(session):
    return AzureVisionOCR(endpoint="https://example.cognitiveservices.azure.com/", api_key="key", session=session)


class TestParseResponse:
    """Разбор дерева readResult."""

    def test_words_and_full_text(self, ocr):
        result = ocr.parse_response(AZURE_PAYLOAD, "prices")

        assert [w.text for w in result.words] == ["Steel", "15.22", "Boards", "3.10"]
        assert result.full_text == "Steel 15.22\nBoards 3.10"
        assert result.metadata.provider == "azure"
        assert (result.metadata.image_width, result.metadata.image_height) == (1600, 900)

    def test_default_confidence(self, ocr):
        result = ocr.parse_response(AZURE_PAYLOAD)

        assert [w.confidence for w in result.words] == [0.98, 1.0, 1.0, 0.6]

    def test_box_from_polygon(self, ocr):
        box = ocr.parse_response(AZURE_PAYLOAD).words[3].bounding_box

        assert (box.x, box.y, box.width, box.height) == (100, 40, 40, 20)

    def test_empty_read_result(self, ocr):
        result = ocr.parse_response({"readResult": None})

        assert result.words == []
        assert result.full_text == ""


class TestRecognize:
    """HTTP вызов через requests.Session."""

    def test_posts_image(self, ocr, session):
        response = MagicMock(ok=True)
        response.json.return_value = AZURE_PAYLOAD
        session.post.return_value = response

        result = ocr.recognize(b"image-bytes", "prices")

        args, kwargs = session.post.call_args
        assert args[0] == "https://example.cognitiveservices.azure.com/computervision/imageanalysis:analyze"
        assert kwargs["params"] == {"features": "read", "api-version": "2023-10-01"}
        assert kwargs["headers"]["Ocp-Apim-Subscription-Key"] == "key"
        assert kwargs["data"] == b"image-bytes"
        assert len(result.words) == 4

    def test_http_error(self, ocr, session):
        response = MagicMock(ok=False, status_code=401, text="Unauthorized")
        response.raise_for_status.side_effect = requests.HTTPError("401 Client Error")
        session.post.return_value = response

        with pytest.raises(requests.HTTPError):
            ocr.recognize(b"image-bytes")

    def test_missing_credentials(self):
        with pytest.raises(ValueError):
            AzureVisionOCR(endpoint="", api_key="")
