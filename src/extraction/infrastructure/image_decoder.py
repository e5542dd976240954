"""
Image Decoder: байты изображения -> RGB сетка пикселей.

Используется анализом цвета текста и авто-определением типа скриншота.
"""

from dataclasses import dataclass

import cv2
import numpy as np
from loguru import logger

from ..domain.interfaces import IImageDecoder
from ..domain.exceptions import ImageDecodingError


@dataclass(frozen=True)
class PixelGrid:
    """
    RGB изображение с произвольным доступом к пикселям.

    pixels: numpy массив (height, width, 3), uint8, порядок каналов RGB.
    """

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


class ImageDecoder(IImageDecoder):
    """Декодирует байты изображения через OpenCV."""

    def decode(self, image_content: bytes) -> PixelGrid:
        """
        Raises:
            ImageDecodingError: Пустые байты или формат, который OpenCV не читает
        """
        if not image_content:
            raise ImageDecodingError("Пустые байты изображения")

        nparr = np.frombuffer(image_content, np.uint8)
        image = cv2.imdecode(nparr, cv2.IMREAD_COLOR)

        if image is None:
            raise ImageDecodingError(
                f"Не удалось декодировать изображение ({len(image_content)} байт)",
                byte_count=len(image_content)
            )

        # OpenCV декодирует в BGR
        rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

        logger.debug(f"[ImageDecoder] Изображение декодировано: {rgb.shape[1]}x{rgb.shape[0]}")

        return PixelGrid(pixels=rgb)
