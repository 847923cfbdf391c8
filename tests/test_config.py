import logging

import pytest

from color_qc.config import ConfigError, InspectionConfig, load_config, save_config


def test_defaults():
    config = InspectionConfig()
    assert config.delta_e_threshold == 2.0
    assert config.target_gray == 128.0
    assert config.blur_kernel == 5
    assert config.min_channel_mean == 1e-5
    assert config.thumbnail_quality == 50


def test_from_dict_accepts_camel_case():
    config = InspectionConfig.from_dict({"deltaEThreshold": 1.5, "targetGray": 120, "blurKernel": 7})

    assert config.delta_e_threshold == 1.5
    assert config.target_gray == 120.0
    assert config.blur_kernel == 7
    assert isinstance(config.blur_kernel, int)


def test_from_dict_warns_on_unknown_keys(caplog):
    with caplog.at_level(logging.WARNING):
        config = InspectionConfig.from_dict({"delta_e_threshold": 3.0, "gamma": 2.2})

    assert config.delta_e_threshold == 3.0
    assert "gamma" in caplog.text


@pytest.mark.parametrize(
    "kwargs",
    [
        {"delta_e_threshold": 0},
        {"target_gray": 0},
        {"target_gray": 300},
        {"blur_kernel": 4},
        {"blur_kernel": 0},
        {"min_channel_mean": 0},
        {"thumbnail_quality": 0},
        {"thumbnail_max_side": 0},
    ],
)
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(ConfigError):
        InspectionConfig(**kwargs).validate()


def test_load_missing_file_returns_defaults(tmp_path):
    assert load_config(tmp_path / "missing.json") == InspectionConfig()


def test_load_from_json(tmp_json):
    path = tmp_json({"deltaEThreshold": 2.5, "blurKernel": 3})

    config = load_config(path)

    assert config.delta_e_threshold == 2.5
    assert config.blur_kernel == 3


def test_save_then_load(tmp_path):
    path = tmp_path / "config" / "inspection.json"
    config = InspectionConfig(delta_e_threshold=1.2, thumbnail_quality=80)

    save_config(config, path)

    assert load_config(path) == config


def test_save_rejects_invalid(tmp_path):
    with pytest.raises(ConfigError):
        save_config(InspectionConfig(blur_kernel=2), tmp_path / "bad.json")
