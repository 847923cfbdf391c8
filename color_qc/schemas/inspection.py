"""
Shared Inspection Data Schemas

Fixed-shape value types exchanged between the measurement core and its
collaborators (capture layer, UI): rectangles, Lab vectors, the golden
sample record and the inspection result.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, NamedTuple, Optional

from color_qc.core.errors import MissingRegionError

ROLE_REFERENCE = "reference"
ROLE_STANDARD = "standard"
ROLE_TEST = "test"


@dataclass(frozen=True)
class Rect:
    """
    Rectangle in native image-pixel coordinates (origin top-left).

    Attributes:
        x: left edge (pixels)
        y: top edge (pixels)
        w: width (pixels)
        h: height (pixels)
    """

    x: int
    y: int
    w: int
    h: int

    @property
    def is_set(self) -> bool:
        # An undrawn box comes through with zero width
        return self.w > 0

    @property
    def area(self) -> int:
        return max(self.w, 0) * max(self.h, 0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rect":
        return cls(x=int(data["x"]), y=int(data["y"]), w=int(data["w"]), h=int(data["h"]))

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}


@dataclass
class RegionSet:
    """Named regions drawn by the operator"""

    reference: Optional[Rect] = None  # calibration card (white/gray)
    standard: Optional[Rect] = None  # golden sample
    test: Optional[Rect] = None  # sample under test

    def get(self, role: str) -> Optional[Rect]:
        if role not in (ROLE_REFERENCE, ROLE_STANDARD, ROLE_TEST):
            raise KeyError(f"Unknown region role: {role}")
        return getattr(self, role)

    def has(self, role: str) -> bool:
        rect = self.get(role)
        return rect is not None and rect.is_set

    def require(self, role: str) -> Rect:
        """
        Return the rectangle for ``role``.

        Raises:
            MissingRegionError: if the rectangle is unset or degenerate (w <= 0)
        """
        rect = self.get(role)
        if rect is None or not rect.is_set:
            raise MissingRegionError(role)
        return rect

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegionSet":
        """
        Build from a ``{role: {x, y, w, h}}`` map.

        The calibration card may be keyed ``ref`` or ``reference``.
        """
        reference = data.get(ROLE_REFERENCE, data.get("ref"))
        standard = data.get(ROLE_STANDARD)
        test = data.get(ROLE_TEST)
        return cls(
            reference=Rect.from_dict(reference) if reference else None,
            standard=Rect.from_dict(standard) if standard else None,
            test=Rect.from_dict(test) if test else None,
        )


class LabVector(NamedTuple):
    """Mean CIE L*a*b* color of a region (standard scale, L* in 0~100)"""

    L: float
    a: float
    b: float

    def __str__(self) -> str:
        return f"L*={self.L:.2f}, a*={self.a:.2f}, b*={self.b:.2f}"


@dataclass(frozen=True)
class GoldenSampleRecord:
    """
    Locked golden sample.

    Attributes:
        lab: Lab vector measured on the calibrated standard region
        thumbnail: JPEG snapshot of the calibrated frame for operator confirmation
        locked_at: time the standard was locked
    """

    lab: LabVector
    thumbnail: bytes
    locked_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class InspectionResult:
    """
    Result of one analyze call.

    Attributes:
        delta_e: CIE76 color difference between standard and test
        contrast_diff: |L*_standard - L*_test|
        lab_standard: Lab vector used as the standard
        lab_test: Lab vector of the test region
        passed: True iff delta_e < threshold
    """

    delta_e: float
    contrast_diff: float
    lab_standard: LabVector
    lab_test: LabVector
    passed: bool
