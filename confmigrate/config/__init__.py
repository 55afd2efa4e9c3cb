"""Config schemas and locations for confmigrate."""

from confmigrate.config.loader import get_config_dir, get_data_dir
from confmigrate.config.schema import (
    ApplicationConfig,
    ParameterTableColumn,
    UserPreferences,
    VerbosityLevel,
    VersionedConfig,
)

__all__ = [
    "ApplicationConfig",
    "ParameterTableColumn",
    "UserPreferences",
    "VerbosityLevel",
    "VersionedConfig",
    "get_config_dir",
    "get_data_dir",
]
