import cv2
import numpy as np
import pytest

from src.extraction.domain.exceptions import ImageDecodingError
from src.extraction.infrastructure.image_decoder import ImageDecoder


@pytest.fixture
def decoder():
    """Fixture для ImageDecoder."""
    return ImageDecoder()


@pytest.fixture
def png_bytes():
    """Fixture: PNG 120x80, каналы OpenCV (B=100, G=150, R=200)."""
    test_image = np.zeros((80, 120, 3), dtype=np.uint8)
    test_image[:, :, 0] = 100  # Blue
    test_image[:, :, 1] = 150  # Green
    test_image[:, :, 2] = 200  # Red

    ok, buffer = cv2.imencode(".png", test_image)
    assert ok
    return buffer.tobytes()


def test_decode_size(decoder, png_bytes):
    grid = decoder.decode(png_bytes)

    assert grid.width == 120
    assert grid.height == 80


def test_decode_rgb_order(decoder, png_bytes):
    grid = decoder.decode(png_bytes)

    assert tuple(grid.pixels[0, 0]) == (200, 150, 100)


def test_decode_grayscale_png(decoder):
    ok, buffer = cv2.imencode(".png", np.full((10, 10), 50, dtype=np.uint8))
    assert ok

    grid = decoder.decode(buffer.tobytes())

    assert grid.pixels.shape == (10, 10, 3)


def test_empty_bytes(decoder):
    with pytest.raises(ImageDecodingError):
        decoder.decode(b"")


def test_corrupted_bytes(decoder):
    with pytest.raises(ImageDecodingError):
        decoder.decode(b"This is not a valid image file")
