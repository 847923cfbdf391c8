"""
Inspection Configuration

Tunable constants of the measurement pipeline. Defaults reproduce the
shop-floor settings: Delta E tolerance 2.0, gray target 128, 5x5 blur.
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

from color_qc.utils.file_io import read_json, write_json

logger = logging.getLogger(__name__)

# camelCase keys used by the UI settings payload
_KEY_ALIASES = {
    "deltaEThreshold": "delta_e_threshold",
    "targetGray": "target_gray",
    "blurKernel": "blur_kernel",
    "minChannelMean": "min_channel_mean",
    "thumbnailQuality": "thumbnail_quality",
    "thumbnailMaxSide": "thumbnail_max_side",
}
_INT_FIELDS = ("blur_kernel", "thumbnail_quality", "thumbnail_max_side")


class ConfigError(ValueError):
    """Invalid inspection configuration"""

    pass


@dataclass
class InspectionConfig:
    """
    Inspection settings

    Attributes:
        delta_e_threshold: pass iff Delta E < threshold
        target_gray: gray level the calibration card is mapped to (per channel)
        blur_kernel: Gaussian kernel size (odd), sigma derived from size
        min_channel_mean: clamp for reference channel means (avoids division by zero)
        thumbnail_quality: JPEG quality of the golden sample snapshot (1-100)
        thumbnail_max_side: longest side of the snapshot in pixels
    """

    delta_e_threshold: float = 2.0
    target_gray: float = 128.0
    blur_kernel: int = 5
    min_channel_mean: float = 1e-5
    thumbnail_quality: int = 50
    thumbnail_max_side: int = 320

    def validate(self) -> "InspectionConfig":
        if self.delta_e_threshold <= 0:
            raise ConfigError(f"delta_e_threshold must be > 0, got {self.delta_e_threshold}")
        if not 0 < self.target_gray <= 255:
            raise ConfigError(f"target_gray must be in (0, 255], got {self.target_gray}")
        if self.blur_kernel < 1 or self.blur_kernel % 2 == 0:
            raise ConfigError(f"blur_kernel must be a positive odd integer, got {self.blur_kernel}")
        if self.min_channel_mean <= 0:
            raise ConfigError(f"min_channel_mean must be > 0, got {self.min_channel_mean}")
        if not 1 <= self.thumbnail_quality <= 100:
            raise ConfigError(f"thumbnail_quality must be in [1, 100], got {self.thumbnail_quality}")
        if self.thumbnail_max_side < 1:
            raise ConfigError(f"thumbnail_max_side must be >= 1, got {self.thumbnail_max_side}")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InspectionConfig":
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        unknown = []
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                unknown.append(key)
                continue
            kwargs[name] = int(value) if name in _INT_FIELDS else float(value)

        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

        return cls(**kwargs).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Union[str, Path]) -> InspectionConfig:
    """
    Load settings from a JSON file.

    A missing file yields the defaults.
    """
    path = Path(path)
    data = read_json(path)
    if not data:
        logger.info(f"No inspection config at {path}, using defaults")
        return InspectionConfig()
    return InspectionConfig.from_dict(data)


def save_config(config: InspectionConfig, path: Union[str, Path]) -> None:
    write_json(config.validate().to_dict(), Path(path))
