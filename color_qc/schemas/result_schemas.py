"""
Result Schemas

Pydantic models for exchanging regions and results with a UI layer.
"""

import base64
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from color_qc.schemas.inspection import GoldenSampleRecord, InspectionResult, Rect, RegionSet


class RectSchema(BaseModel):
    """Rectangle in native image pixels"""

    x: int = Field(..., ge=0, description="Left edge (pixels)")
    y: int = Field(..., ge=0, description="Top edge (pixels)")
    w: int = Field(..., description="Width (pixels, <= 0 means not drawn)")
    h: int = Field(..., description="Height (pixels)")

    class Config:
        json_schema_extra = {"example": {"x": 50, "y": 50, "w": 100, "h": 100}}

    def to_rect(self) -> Rect:
        return Rect(x=self.x, y=self.y, w=self.w, h=self.h)


class RegionSetSchema(BaseModel):
    """Operator regions; the calibration card is accepted as ``ref``"""

    reference: Optional[RectSchema] = Field(None, alias="ref", description="Calibration card (white)")
    standard: Optional[RectSchema] = Field(None, description="Golden sample")
    test: Optional[RectSchema] = Field(None, description="Test product")

    class Config:
        populate_by_name = True

    def to_region_set(self) -> RegionSet:
        return RegionSet(
            reference=self.reference.to_rect() if self.reference else None,
            standard=self.standard.to_rect() if self.standard else None,
            test=self.test.to_rect() if self.test else None,
        )


class InspectionResultSchema(BaseModel):
    """Inspection result as displayed by the dashboard"""

    delta_e: float = Field(..., description="CIE76 Delta E")
    contrast_diff: float = Field(..., description="|L*std - L*test|")
    lab_std: List[float] = Field(..., min_length=3, max_length=3)
    lab_test: List[float] = Field(..., min_length=3, max_length=3)
    passed: bool

    @classmethod
    def from_result(cls, result: InspectionResult) -> "InspectionResultSchema":
        return cls(
            delta_e=result.delta_e,
            contrast_diff=result.contrast_diff,
            lab_std=list(result.lab_standard),
            lab_test=list(result.lab_test),
            passed=result.passed,
        )


class GoldenSampleSchema(BaseModel):
    """Locked golden sample with its snapshot as a JPEG data URL"""

    lab: List[float] = Field(..., min_length=3, max_length=3)
    image: str
    locked_at: datetime

    @classmethod
    def from_record(cls, record: GoldenSampleRecord) -> "GoldenSampleSchema":
        encoded = base64.b64encode(record.thumbnail).decode("ascii")
        return cls(lab=list(record.lab), image=f"data:image/jpeg;base64,{encoded}", locked_at=record.locked_at)
