"""
Delta E Comparator Module

CIE76 color difference between two Lab vectors and the pass/fail verdict.
"""

import logging

from color_qc.schemas.inspection import LabVector
from color_qc.utils.color_delta import delta_e_cie1976, describe_color_shift

logger = logging.getLogger(__name__)


class DeltaEComparator:
    """
    Compares Lab vectors against a fixed tolerance.

    The verdict is strict: delta_e == threshold fails.
    """

    def __init__(self, threshold: float = 2.0):
        self.threshold = threshold

    def compare(self, lab_a: LabVector, lab_b: LabVector) -> float:
        return delta_e_cie1976(lab_a, lab_b)

    def passes(self, delta_e: float) -> bool:
        return delta_e < self.threshold

    def describe(self, lab_standard: LabVector, lab_test: LabVector) -> str:
        """Operator-facing description of how the test deviates from the standard."""
        return describe_color_shift(
            lab_test[0] - lab_standard[0],
            lab_test[1] - lab_standard[1],
            lab_test[2] - lab_standard[2],
        )
