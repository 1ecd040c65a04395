"""Settings parsing and YAML key definitions."""

from .settings_parser import Settings, SettingsYAMLParser, YAMLFileParser, BaseFileParser, load_settings
from . import yaml_keys as _yk

# Re-export everything defined in yaml_keys.__all__
globals().update({k: getattr(_yk, k) for k in _yk.__all__})

__all__ = [
    "Settings",
    "SettingsYAMLParser",
    "YAMLFileParser",
    "BaseFileParser",
    "load_settings",
    *_yk.__all__,
]
