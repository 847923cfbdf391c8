"""
Utilities: frame validation and normalization helpers.
"""

from __future__ import annotations

import cv2
import numpy as np


class ImageValidationError(ValueError):
    """Malformed frame (type, dtype or channel layout)"""


def validate_frame(image: np.ndarray, name: str = "frame") -> None:
    if not isinstance(image, np.ndarray):
        raise ImageValidationError(f"{name} must be numpy.ndarray")
    if image.dtype != np.uint8:
        raise ImageValidationError(f"{name} must have dtype uint8")
    if image.ndim != 3 or image.shape[2] != 3:
        raise ImageValidationError(f"{name} must be an RGB image (H, W, 3), got {image.shape}")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise ImageValidationError(f"{name} is empty")


def ensure_rgb(image: np.ndarray) -> np.ndarray:
    """
    Normalize a capture to 3-channel RGB.

    Gray (H, W) or (H, W, 1) and RGBA (H, W, 4) buffers are converted;
    3-channel input is returned as a copy.
    """
    if not isinstance(image, np.ndarray):
        raise ImageValidationError("image must be numpy.ndarray")
    if image.dtype != np.uint8:
        raise ImageValidationError("image must have dtype uint8")

    if image.ndim == 2 or (image.ndim == 3 and image.shape[2] == 1):
        return cv2.cvtColor(image.reshape(image.shape[:2]), cv2.COLOR_GRAY2RGB)
    if image.ndim == 3 and image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_RGBA2RGB)
    if image.ndim == 3 and image.shape[2] == 3:
        return image.copy()
    raise ImageValidationError(f"Unsupported channel layout: {image.shape}")


def resize_keep_aspect(
    image: np.ndarray,
    max_width: int,
    max_height: int,
    interpolation: int = cv2.INTER_AREA,
) -> np.ndarray:
    """
    Resize so that the image fits within max_width x max_height, keeping aspect ratio.
    """
    validate_frame(image, name="image")
    h, w = image.shape[:2]
    if w <= max_width and h <= max_height:
        return image.copy()
    scale = min(max_width / w, max_height / h)
    new_w, new_h = max(1, int(w * scale)), max(1, int(h * scale))
    return cv2.resize(image, (new_w, new_h), interpolation=interpolation)
