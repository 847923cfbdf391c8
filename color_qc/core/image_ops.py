"""
Image Operations

Capability interface used by every pipeline component. Components receive
an implementation through their constructor, so tests can substitute a
deterministic double for the OpenCV-backed default.
"""

import logging
from typing import Protocol, Tuple

import cv2
import numpy as np

from color_qc.schemas.inspection import Rect

logger = logging.getLogger(__name__)


class ImageOps(Protocol):
    """Image operations required by the measurement pipeline"""

    def crop(self, image: np.ndarray, rect: Rect) -> np.ndarray: ...

    def gaussian_blur(self, image: np.ndarray, ksize: int) -> np.ndarray: ...

    def rgb_to_lab(self, image: np.ndarray) -> np.ndarray: ...

    def rgb_to_gray(self, image: np.ndarray) -> np.ndarray: ...

    def scale_channels(self, image: np.ndarray, gains: Tuple[float, float, float]) -> np.ndarray: ...

    def channel_mean(self, image: np.ndarray) -> Tuple[float, ...]: ...

    def encode_jpeg(self, image: np.ndarray, quality: int) -> bytes: ...


class OpenCVImageOps:
    """
    OpenCV implementation of :class:`ImageOps`.

    All images are RGB ``uint8`` unless noted otherwise. Every method
    returns a new array; inputs are never modified.
    """

    def crop(self, image: np.ndarray, rect: Rect) -> np.ndarray:
        return image[rect.y : rect.y + rect.h, rect.x : rect.x + rect.w].copy()

    def gaussian_blur(self, image: np.ndarray, ksize: int) -> np.ndarray:
        # sigma=0: OpenCV derives sigma from the kernel size
        return cv2.GaussianBlur(image, (ksize, ksize), 0)

    def rgb_to_lab(self, image: np.ndarray) -> np.ndarray:
        """
        RGB uint8 -> standard CIE L*a*b* (float32).

        The float path of cv2.cvtColor yields L* in 0~100 and signed a*, b*
        directly, without the 8-bit (L*255/100, a+128, b+128) encoding.
        """
        rgb_float = image.astype(np.float32) / 255.0
        return cv2.cvtColor(rgb_float, cv2.COLOR_RGB2Lab)

    def rgb_to_gray(self, image: np.ndarray) -> np.ndarray:
        return cv2.cvtColor(image, cv2.COLOR_RGB2GRAY)

    def scale_channels(self, image: np.ndarray, gains: Tuple[float, float, float]) -> np.ndarray:
        r, g, b = cv2.split(image)
        # convertScaleAbs rounds and saturates to 0~255
        r = cv2.convertScaleAbs(r, alpha=gains[0])
        g = cv2.convertScaleAbs(g, alpha=gains[1])
        b = cv2.convertScaleAbs(b, alpha=gains[2])
        return cv2.merge([r, g, b])

    def channel_mean(self, image: np.ndarray) -> Tuple[float, ...]:
        if image.ndim == 2:
            return (float(np.mean(image)),)
        return tuple(float(v) for v in np.mean(image.reshape(-1, image.shape[2]), axis=0))

    def encode_jpeg(self, image: np.ndarray, quality: int) -> bytes:
        # imencode expects BGR channel order
        bgr = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
        ok, buf = cv2.imencode(".jpg", bgr, [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)])
        if not ok:
            raise RuntimeError("JPEG encoding failed")
        return buf.tobytes()
