"""
Unit tests for RegionExtractor module
"""

import numpy as np
import pytest

from color_qc.core.errors import InvalidRegionError
from color_qc.core.region_extractor import RegionExtractor, validate_region
from color_qc.schemas.inspection import Rect
from color_qc.utils.image_utils import ImageValidationError


def test_extract_returns_region_copy(sample_image):
    frame = sample_image.copy()
    frame[20:30, 10:40] = (255, 0, 0)
    extractor = RegionExtractor()

    region = extractor.extract(frame, Rect(10, 20, 30, 10))

    assert region.shape == (10, 30, 3)
    assert np.all(region == (255, 0, 0))

    # 추출 영역을 수정해도 원본은 그대로
    region[:] = 0
    assert np.all(frame[20:30, 10:40] == (255, 0, 0))


def test_extract_full_frame(sample_image):
    region = RegionExtractor().extract(sample_image, Rect(0, 0, 100, 100))
    assert region.shape == sample_image.shape


@pytest.mark.parametrize(
    "rect",
    [
        Rect(0, 0, 0, 10),  # zero width
        Rect(0, 0, 10, 0),  # zero height
        Rect(0, 0, -5, 10),  # negative width
        Rect(-1, 0, 10, 10),  # left of frame
        Rect(0, -1, 10, 10),  # above frame
        Rect(95, 0, 10, 10),  # partially right of frame
        Rect(0, 95, 10, 10),  # partially below frame
        Rect(200, 200, 10, 10),  # fully outside
    ],
)
def test_invalid_regions_rejected(sample_image, rect):
    with pytest.raises(InvalidRegionError) as exc_info:
        RegionExtractor().extract(sample_image, rect, role="test")

    assert exc_info.value.rect == rect
    assert exc_info.value.role == "test"
    assert "test" in str(exc_info.value)


def test_validate_region_accepts_edge_aligned():
    validate_region((100, 100, 3), Rect(90, 90, 10, 10))


def test_extract_rejects_malformed_frame():
    with pytest.raises(ImageValidationError):
        RegionExtractor().extract(np.zeros((10, 10), dtype=np.uint8), Rect(0, 0, 5, 5))

    with pytest.raises(ImageValidationError):
        RegionExtractor().extract(np.zeros((10, 10, 3), dtype=np.float32), Rect(0, 0, 5, 5))
