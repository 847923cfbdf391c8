"""
Schema conversion tests (dataclasses <-> Pydantic)
"""

import base64
from datetime import datetime

import pytest
from pydantic import ValidationError

from color_qc.core.errors import MissingRegionError
from color_qc.schemas import (
    GoldenSampleRecord,
    GoldenSampleSchema,
    InspectionResult,
    InspectionResultSchema,
    LabVector,
    Rect,
    RegionSet,
    RegionSetSchema,
)


def test_region_set_schema_accepts_ref_alias():
    payload = {
        "ref": {"x": 50, "y": 50, "w": 100, "h": 100},
        "standard": {"x": 200, "y": 200, "w": 150, "h": 150},
        "test": {"x": 400, "y": 200, "w": 150, "h": 150},
    }

    regions = RegionSetSchema.model_validate(payload).to_region_set()

    assert regions.reference == Rect(50, 50, 100, 100)
    assert regions.standard == Rect(200, 200, 150, 150)
    assert regions.test == Rect(400, 200, 150, 150)


def test_region_set_schema_rejects_negative_origin():
    with pytest.raises(ValidationError):
        RegionSetSchema.model_validate({"test": {"x": -1, "y": 0, "w": 10, "h": 10}})


def test_region_set_from_dict():
    regions = RegionSet.from_dict({"reference": {"x": 1, "y": 2, "w": 3, "h": 4}})

    assert regions.reference == Rect(1, 2, 3, 4)
    assert regions.has("reference")
    assert not regions.has("test")
    with pytest.raises(MissingRegionError):
        regions.require("standard")


def test_region_set_unknown_role():
    with pytest.raises(KeyError):
        RegionSet().get("golden")


def test_rect_is_set():
    assert Rect(0, 0, 5, 5).is_set
    assert not Rect(10, 10, 0, 5).is_set
    assert Rect(1, 2, 3, 4).to_dict() == {"x": 1, "y": 2, "w": 3, "h": 4}


def test_inspection_result_schema():
    result = InspectionResult(
        delta_e=1.5,
        contrast_diff=0.7,
        lab_standard=LabVector(60.0, 5.0, -10.0),
        lab_test=LabVector(60.7, 4.0, -9.5),
        passed=True,
    )

    schema = InspectionResultSchema.from_result(result)

    assert schema.model_dump() == {
        "delta_e": 1.5,
        "contrast_diff": 0.7,
        "lab_std": [60.0, 5.0, -10.0],
        "lab_test": [60.7, 4.0, -9.5],
        "passed": True,
    }


def test_golden_sample_schema_data_url():
    record = GoldenSampleRecord(lab=LabVector(60.0, 5.0, -10.0), thumbnail=b"\xff\xd8jpeg", locked_at=datetime(2026, 1, 1))

    schema = GoldenSampleSchema.from_record(record)

    assert schema.image.startswith("data:image/jpeg;base64,")
    assert base64.b64decode(schema.image.split(",", 1)[1]) == b"\xff\xd8jpeg"
    assert schema.lab == [60.0, 5.0, -10.0]
