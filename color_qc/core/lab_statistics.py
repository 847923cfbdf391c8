"""
Lab Statistic Module

Representative color of a region: Gaussian smoothing, RGB -> Lab and the
per-channel mean. Smoothing happens before the reduction so isolated
specular highlights or dust pixels are averaged into their neighborhood.
"""

import logging
from typing import Optional

import numpy as np

from color_qc.config.inspection_config import InspectionConfig
from color_qc.core.image_ops import ImageOps, OpenCVImageOps
from color_qc.core.region_extractor import RegionExtractor
from color_qc.schemas.inspection import LabVector, Rect

logger = logging.getLogger(__name__)


class LabStatistic:
    """Mean L*a*b* of a smoothed region"""

    def __init__(self, config: Optional[InspectionConfig] = None, ops: Optional[ImageOps] = None):
        self.config = config or InspectionConfig()
        self.ops = ops or OpenCVImageOps()
        self.extractor = RegionExtractor(self.ops)

    def measure(self, calibrated_frame: np.ndarray, rect: Rect, role: str = "region") -> LabVector:
        """
        Mean Lab color of ``rect``.

        Args:
            calibrated_frame: white-balanced RGB uint8 frame
            rect: region to measure
            role: region role (for errors and logs)

        Returns:
            LabVector (L*, a*, b*) in standard scale

        Raises:
            InvalidRegionError: invalid rectangle
        """
        region = self.extractor.extract(calibrated_frame, rect, role=role)
        smoothed = self.ops.gaussian_blur(region, self.config.blur_kernel)
        lab = self.ops.rgb_to_lab(smoothed)
        L, a, b = self.ops.channel_mean(lab)[:3]

        result = LabVector(float(L), float(a), float(b))
        logger.debug(f"{role} Lab: {result} ({rect.w}x{rect.h} px)")
        return result
