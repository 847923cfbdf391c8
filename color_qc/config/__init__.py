from .inspection_config import ConfigError, InspectionConfig, load_config, save_config

__all__ = ["ConfigError", "InspectionConfig", "load_config", "save_config"]
