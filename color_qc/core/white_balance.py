"""
White Balance Calibrator Module

Gray-world white balance anchored on a single reference region (the
calibration card). The per-channel gains that map the card to a fixed gray
target are applied to the whole frame, so every capture is brought to the
same illumination baseline before any Lab measurement.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from color_qc.config.inspection_config import InspectionConfig
from color_qc.core.image_ops import ImageOps, OpenCVImageOps
from color_qc.core.region_extractor import RegionExtractor
from color_qc.schemas.inspection import ROLE_REFERENCE, Rect

logger = logging.getLogger(__name__)


class WhiteBalanceCalibrator:
    """
    Gray-world calibrator

    Algorithm:
    1. Extract the reference (white/gray card) region
    2. Per-channel mean (R, G, B), clamped to ``min_channel_mean``
    3. gain_c = target_gray / mean_c
    4. Scale every pixel of the full frame by gain_c (saturated to 0~255)
    """

    def __init__(self, config: Optional[InspectionConfig] = None, ops: Optional[ImageOps] = None):
        self.config = config or InspectionConfig()
        self.ops = ops or OpenCVImageOps()
        self.extractor = RegionExtractor(self.ops)

    def compute_gains(self, frame: np.ndarray, reference_rect: Rect) -> Tuple[float, float, float]:
        """
        Per-channel gains mapping the reference region to ``target_gray``.

        Raises:
            InvalidRegionError: invalid reference rectangle
        """
        region = self.extractor.extract(frame, reference_rect, role=ROLE_REFERENCE)
        r_mean, g_mean, b_mean = self.ops.channel_mean(region)[:3]

        eps = self.config.min_channel_mean
        if min(r_mean, g_mean, b_mean) < eps:
            logger.warning(
                f"Reference channel mean below {eps:g} (means=({r_mean:.3f}, {g_mean:.3f}, {b_mean:.3f})); "
                "is the calibration card in the reference box?"
            )
        r_mean, g_mean, b_mean = max(r_mean, eps), max(g_mean, eps), max(b_mean, eps)

        target = self.config.target_gray
        gains = (target / r_mean, target / g_mean, target / b_mean)

        logger.debug(
            f"Gray World: means=({r_mean:.1f}, {g_mean:.1f}, {b_mean:.1f}), "
            f"gains=({gains[0]:.3f}, {gains[1]:.3f}, {gains[2]:.3f})"
        )
        return gains

    def calibrate(self, frame: np.ndarray, reference_rect: Rect) -> np.ndarray:
        """
        Return a white-balanced copy of ``frame``.

        Args:
            frame: RGB uint8 frame (H x W x 3)
            reference_rect: calibration card rectangle

        Returns:
            New calibrated RGB uint8 frame; the input frame is left untouched.

        Raises:
            InvalidRegionError: invalid reference rectangle

        Example:
            >>> calibrator = WhiteBalanceCalibrator()
            >>> calibrated = calibrator.calibrate(frame, Rect(50, 50, 100, 100))
        """
        gains = self.compute_gains(frame, reference_rect)
        return self.ops.scale_channels(frame, gains)
