from .loader import load_build_config, load_default_targets, load_targets
from .types import (
    BuildConfiguration,
    BuildTarget,
    ConfigError,
    Selector,
    SelectorKind,
    UnsupportedConfigFormatError,
)

__all__ = [
    "load_build_config",
    "load_default_targets",
    "load_targets",
    "BuildConfiguration",
    "BuildTarget",
    "Selector",
    "SelectorKind",
    "ConfigError",
    "UnsupportedConfigFormatError",
]
