"""
Region Extractor Module

Validates operator rectangles against frame bounds and extracts the
corresponding sub-image.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from color_qc.core.errors import InvalidRegionError
from color_qc.core.image_ops import ImageOps, OpenCVImageOps
from color_qc.schemas.inspection import Rect
from color_qc.utils.image_utils import validate_frame

logger = logging.getLogger(__name__)


def validate_region(frame_shape: Tuple[int, ...], rect: Rect, role: str = "region") -> None:
    """
    Check that ``rect`` lies fully inside a frame of ``frame_shape``.

    Args:
        frame_shape: (H, W[, C])
        rect: rectangle in image-pixel coordinates
        role: region role used in the error message

    Raises:
        InvalidRegionError: non-positive size or (partially) outside the frame
    """
    if rect is None:
        raise InvalidRegionError(f"{role} region is None", rect=rect, role=role)

    height, width = frame_shape[:2]

    if rect.w <= 0 or rect.h <= 0:
        raise InvalidRegionError(
            f"{role} region {rect.to_dict()} must have positive width and height", rect=rect, role=role
        )

    if rect.x < 0 or rect.y < 0 or rect.x + rect.w > width or rect.y + rect.h > height:
        raise InvalidRegionError(
            f"{role} region {rect.to_dict()} is outside the {width}x{height} frame", rect=rect, role=role
        )


class RegionExtractor:
    """Extracts validated rectangular regions from a frame."""

    def __init__(self, ops: Optional[ImageOps] = None):
        self.ops = ops or OpenCVImageOps()

    def extract(self, frame: np.ndarray, rect: Rect, role: str = "region") -> np.ndarray:
        """
        Extract the sub-image at ``rect``.

        Returns:
            A new array of shape (rect.h, rect.w, 3); ``frame`` is not modified.

        Raises:
            ImageValidationError: malformed frame
            InvalidRegionError: invalid rectangle
        """
        validate_frame(frame)
        validate_region(frame.shape, rect, role)
        return self.ops.crop(frame, rect)
