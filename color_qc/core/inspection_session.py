"""
Inspection Session Module

Owns the golden sample record and runs the two operator workflows:

- lock_standard: calibrate a frame, measure the standard region and keep it
  as the golden sample until unlocked
- analyze: calibrate a frame, measure the test region and compare it to the
  golden sample (or to a freshly measured standard when nothing is locked)

Calls on one session are serialized by a lock, since analyze reads the
record that lock_standard/unlock replace.
"""

import logging
import threading
from enum import Enum
from typing import Optional

import numpy as np

from color_qc.config.inspection_config import InspectionConfig
from color_qc.core.color_comparator import DeltaEComparator
from color_qc.core.image_ops import ImageOps, OpenCVImageOps
from color_qc.core.lab_statistics import LabStatistic
from color_qc.core.region_extractor import validate_region
from color_qc.core.transparency import TransparencyAnalyzer
from color_qc.core.white_balance import WhiteBalanceCalibrator
from color_qc.schemas.inspection import (
    ROLE_REFERENCE,
    ROLE_STANDARD,
    ROLE_TEST,
    GoldenSampleRecord,
    InspectionResult,
    Rect,
    RegionSet,
)
from color_qc.utils.image_utils import resize_keep_aspect, validate_frame

logger = logging.getLogger(__name__)


class SessionState(Enum):
    EMPTY = "empty"
    GOLDEN_LOCKED = "golden_locked"


class InspectionSession:
    """
    Single-owner inspection session.

    State machine: EMPTY --lock_standard--> GOLDEN_LOCKED --unlock--> EMPTY.
    Each lock_standard/analyze call is a one-shot transaction over one frame.
    """

    def __init__(self, config: Optional[InspectionConfig] = None, ops: Optional[ImageOps] = None):
        """
        Args:
            config: inspection settings (defaults when None)
            ops: image operations implementation (OpenCV when None)
        """
        self.config = (config or InspectionConfig()).validate()
        self.ops = ops or OpenCVImageOps()

        self.calibrator = WhiteBalanceCalibrator(self.config, self.ops)
        self.lab_statistic = LabStatistic(self.config, self.ops)
        self.comparator = DeltaEComparator(self.config.delta_e_threshold)
        self.transparency_analyzer = TransparencyAnalyzer(self.ops)

        self._golden: Optional[GoldenSampleRecord] = None
        self._lock = threading.RLock()

        logger.info(
            f"InspectionSession initialized: threshold={self.config.delta_e_threshold}, "
            f"target_gray={self.config.target_gray}, blur_kernel={self.config.blur_kernel}"
        )

    @property
    def state(self) -> SessionState:
        with self._lock:
            return SessionState.GOLDEN_LOCKED if self._golden is not None else SessionState.EMPTY

    @property
    def is_locked(self) -> bool:
        return self.state is SessionState.GOLDEN_LOCKED

    @property
    def golden(self) -> Optional[GoldenSampleRecord]:
        with self._lock:
            return self._golden

    def lock_standard(self, frame: np.ndarray, regions: RegionSet) -> GoldenSampleRecord:
        """
        Measure the standard region and store it as the golden sample.

        An existing golden sample is replaced.

        Args:
            frame: RGB uint8 frame
            regions: must contain ``reference`` and ``standard``

        Returns:
            The new GoldenSampleRecord

        Raises:
            MissingRegionError: reference or standard not drawn
            InvalidRegionError: reference or standard outside the frame
        """
        with self._lock:
            reference = regions.require(ROLE_REFERENCE)
            standard = regions.require(ROLE_STANDARD)
            self._check_regions(frame, {ROLE_REFERENCE: reference, ROLE_STANDARD: standard})

            calibrated = self.calibrator.calibrate(frame, reference)
            lab = self.lab_statistic.measure(calibrated, standard, role=ROLE_STANDARD)
            thumbnail = self._render_thumbnail(calibrated)

            self._golden = GoldenSampleRecord(lab=lab, thumbnail=thumbnail)
            logger.info(f"Golden sample locked: {lab} (thumbnail {len(thumbnail)} bytes)")
            return self._golden

    def unlock(self) -> None:
        """Discard the golden sample. Safe to call when nothing is locked."""
        with self._lock:
            if self._golden is not None:
                logger.info(f"Golden sample unlocked: {self._golden.lab}")
            self._golden = None

    def reset(self) -> None:
        """Return the session to its initial state."""
        with self._lock:
            self.unlock()
            logger.info("Inspection session reset")

    def analyze(self, frame: np.ndarray, regions: RegionSet) -> InspectionResult:
        """
        Compare the test region against the golden (or freshly measured) standard.

        Args:
            frame: RGB uint8 frame
            regions: ``reference`` and ``test`` always; ``standard`` only when
                no golden sample is locked

        Returns:
            InspectionResult

        Raises:
            MissingRegionError: a required region is not drawn
            InvalidRegionError: a required region is outside the frame
        """
        with self._lock:
            reference = regions.require(ROLE_REFERENCE)
            golden = self._golden
            standard = None if golden is not None else regions.require(ROLE_STANDARD)
            test = regions.require(ROLE_TEST)

            required = {ROLE_REFERENCE: reference, ROLE_TEST: test}
            if standard is not None:
                required[ROLE_STANDARD] = standard
            self._check_regions(frame, required)

            calibrated = self.calibrator.calibrate(frame, reference)

            if golden is not None:
                lab_standard = golden.lab
            else:
                lab_standard = self.lab_statistic.measure(calibrated, standard, role=ROLE_STANDARD)
            lab_test = self.lab_statistic.measure(calibrated, test, role=ROLE_TEST)

            delta_e = self.comparator.compare(lab_standard, lab_test)
            result = InspectionResult(
                delta_e=delta_e,
                contrast_diff=abs(lab_standard.L - lab_test.L),
                lab_standard=lab_standard,
                lab_test=lab_test,
                passed=self.comparator.passes(delta_e),
            )

            verdict = "PASS" if result.passed else "FAIL"
            logger.info(
                f"Inspection {verdict}: dE={delta_e:.3f} (threshold {self.comparator.threshold}), "
                f"standard=({lab_standard}), test=({lab_test}), golden={'locked' if golden else 'fresh'}"
            )
            if not result.passed:
                logger.info(f"Color shift: {self.comparator.describe(lab_standard, lab_test)}")
            return result

    def transparency(self, frame: np.ndarray, black_rect: Rect, white_rect: Rect) -> float:
        """Auxiliary black/white contrast of the raw frame (not part of the verdict)."""
        return self.transparency_analyzer.contrast(frame, black_rect, white_rect)

    def _check_regions(self, frame: np.ndarray, rects: dict) -> None:
        # Reject bad geometry before any numeric work
        validate_frame(frame)
        for role, rect in rects.items():
            validate_region(frame.shape, rect, role)

    def _render_thumbnail(self, calibrated: np.ndarray) -> bytes:
        side = self.config.thumbnail_max_side
        small = resize_keep_aspect(calibrated, max_width=side, max_height=side)
        return self.ops.encode_jpeg(small, self.config.thumbnail_quality)
