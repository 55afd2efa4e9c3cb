"""Core result types and errors for confmigrate."""

from confmigrate.core.errors import (
    ConfigPersistenceError,
    DuplicateRegistrationError,
    DuplicateStepError,
    InvalidStepError,
    MigrationError,
    MigrationStepError,
    NoMigrationPathError,
)
from confmigrate.core.types import ConfigLoadResult, LoadFailure

__all__ = [
    "ConfigLoadResult",
    "ConfigPersistenceError",
    "DuplicateRegistrationError",
    "DuplicateStepError",
    "InvalidStepError",
    "LoadFailure",
    "MigrationError",
    "MigrationStepError",
    "NoMigrationPathError",
]
