"""
Schemas Package

Dataclass value types for the measurement core and Pydantic models for
serializing them to collaborators.
"""

from .inspection import GoldenSampleRecord, InspectionResult, LabVector, Rect, RegionSet
from .result_schemas import GoldenSampleSchema, InspectionResultSchema, RectSchema, RegionSetSchema

__all__ = [
    # Value types
    "Rect",
    "RegionSet",
    "LabVector",
    "GoldenSampleRecord",
    "InspectionResult",
    # Pydantic schemas
    "RectSchema",
    "RegionSetSchema",
    "InspectionResultSchema",
    "GoldenSampleSchema",
]
