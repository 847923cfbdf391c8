import json
from pathlib import Path

import numpy as np
import pytest

from color_qc.core.image_ops import OpenCVImageOps
from color_qc.schemas.inspection import Rect, RegionSet


class FakeLabOps(OpenCVImageOps):
    """
    Deterministic ImageOps double.

    Lab is a linear relabeling of RGB (L=R, a=G-128, b=B-128) and blur is the
    identity, so tests can dictate exact Lab values through pixel values.
    """

    def __init__(self):
        self.lab_calls = 0

    def gaussian_blur(self, image, ksize):
        return image.copy()

    def rgb_to_lab(self, image):
        self.lab_calls += 1
        return image.astype(np.float32) - np.array([0.0, 128.0, 128.0], dtype=np.float32)


@pytest.fixture
def tmp_json(tmp_path: Path):
    def _make(data, name="sample.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _make


@pytest.fixture
def sample_image():
    # 100x100 RGB black background
    return np.zeros((100, 100, 3), dtype=np.uint8)


@pytest.fixture
def make_frame():
    """Factory: frame of ``size`` filled with ``background`` and uniform patches."""

    def _make(patches=(), size=(100, 100), background=(30, 30, 30)):
        h, w = size
        frame = np.empty((h, w, 3), dtype=np.uint8)
        frame[:, :] = background
        for rect, color in patches:
            frame[rect.y : rect.y + rect.h, rect.x : rect.x + rect.w] = color
        return frame

    return _make


@pytest.fixture
def regions():
    return RegionSet(
        reference=Rect(10, 10, 20, 20),
        standard=Rect(40, 10, 20, 20),
        test=Rect(70, 10, 20, 20),
    )


@pytest.fixture
def fake_ops():
    return FakeLabOps()
