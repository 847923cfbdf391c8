"""
Transparency Analyzer Module

Normalized luminance contrast of a sample laid over a black and a white
backing. Characterizes opacity rather than color; it is reported for
diagnostics and never feeds the pass/fail verdict.
"""

import logging
from typing import Optional

import numpy as np

from color_qc.core.image_ops import ImageOps, OpenCVImageOps
from color_qc.core.region_extractor import RegionExtractor
from color_qc.schemas.inspection import Rect

logger = logging.getLogger(__name__)

CONTRAST_EPS = 1e-5


class TransparencyAnalyzer:
    def __init__(self, ops: Optional[ImageOps] = None):
        self.ops = ops or OpenCVImageOps()
        self.extractor = RegionExtractor(self.ops)

    def mean_luminance(self, frame: np.ndarray, rect: Rect, role: str = "region") -> float:
        region = self.extractor.extract(frame, rect, role=role)
        gray = self.ops.rgb_to_gray(region)
        return float(self.ops.channel_mean(gray)[0])

    def contrast(self, frame: np.ndarray, black_rect: Rect, white_rect: Rect) -> float:
        """
        (white - black) / (white + black + eps)

        Close to 1 for an opaque-white-over-black contrast, close to 0 when
        both backings look the same (fully opaque sample).

        Raises:
            InvalidRegionError: invalid rectangle
        """
        mean_black = self.mean_luminance(frame, black_rect, role="black")
        mean_white = self.mean_luminance(frame, white_rect, role="white")

        ratio = (mean_white - mean_black) / (mean_white + mean_black + CONTRAST_EPS)
        logger.debug(f"Transparency: black={mean_black:.1f}, white={mean_white:.1f}, contrast={ratio:.4f}")
        return ratio
