"""Exception hierarchy for chain registration, execution and persistence."""

from __future__ import annotations


class MigrationError(Exception):
    """Base class for every error raised by the migration subsystem."""


class InvalidStepError(MigrationError, ValueError):
    """A step does not move strictly forward (from_version >= to_version)."""

    def __init__(self, from_version: int, to_version: int, reason: str | None = None):
        self.from_version = from_version
        self.to_version = to_version
        super().__init__(
            f"Migration from version {from_version} to {to_version} is invalid. "
            + (reason or "to_version must be greater than from_version.")
        )


class DuplicateStepError(MigrationError, ValueError):
    """A step leaving the same source version is already registered."""

    def __init__(self, from_version: int, to_version: int, existing_to: int | None = None):
        self.from_version = from_version
        self.to_version = to_version
        self.existing_to = existing_to
        if existing_to is None or existing_to == to_version:
            message = f"Migration from version {from_version} to {to_version} is already registered."
        else:
            message = (
                f"Migration from version {from_version} to {to_version} conflicts with the "
                f"registered v{from_version} -> v{existing_to}; a version has one outgoing step."
            )
        super().__init__(message)


class DuplicateRegistrationError(MigrationError, ValueError):
    """A config type already has a chain in the registry."""


class NoMigrationPathError(MigrationError):
    """The registered steps do not connect the source version to the target."""

    def __init__(self, source: int, target: int, *, stuck_at: int | None = None):
        self.source = source
        self.target = target
        self.stuck_at = stuck_at
        if stuck_at is None:
            message = f"No migration path available from version {source} to {target}"
        else:
            message = f"No migration available from version {stuck_at} (path v{source} -> v{target})"
        super().__init__(message)


class MigrationStepError(MigrationError):
    """A step's transform raised or produced output that is not valid JSON."""

    def __init__(self, from_version: int, to_version: int, cause: BaseException):
        self.from_version = from_version
        self.to_version = to_version
        self.cause = cause
        super().__init__(
            f"Migration from version {from_version} to {to_version} failed: {cause}"
        )


class ConfigPersistenceError(MigrationError):
    """Writing a configuration file back to disk failed."""
