from primval.config.core import PrimvalConfig, get_config

__all__ = ["PrimvalConfig", "get_config"]
