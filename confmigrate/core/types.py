"""Shared DTOs describing the outcome of a configuration load."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

ConfigT = TypeVar("ConfigT")


class LoadFailure(str, Enum):
    """Why a load fell back to a freshly constructed default."""

    FILE_MISSING = "file_missing"
    NO_MIGRATION_PATH = "no_migration_path"
    MIGRATION_STEP_FAILURE = "migration_step_failure"
    DESERIALIZE_FAILURE = "deserialize_failure"
    IO_FAILURE = "io_failure"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class ConfigLoadResult(Generic[ConfigT]):
    """Outcome of MigrationService.load.

    ``was_created`` and ``was_migrated`` are never both true. ``failure`` is
    set whenever ``config`` came from the default factory.
    """

    config: ConfigT
    was_created: bool = False
    was_migrated: bool = False
    original_version: int = 0
    failure: LoadFailure | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.was_created and self.was_migrated:
            raise ValueError("A load result cannot be both created and migrated")

    @property
    def needs_save(self) -> bool:
        return self.was_created or self.was_migrated

    def to_dict(self) -> dict[str, object]:
        """Convert outcome metadata (not the config itself) to a JSON-friendly dict."""
        return {
            "was_created": self.was_created,
            "was_migrated": self.was_migrated,
            "original_version": self.original_version,
            "failure": self.failure.value if self.failure else None,
            "error": self.error,
        }
