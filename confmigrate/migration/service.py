"""Load a config file, migrating it to the current schema when it is older.

``MigrationService.load`` never raises for anything found on disk: missing,
corrupt, unmigratable or unreadable files all end in a default instance
tagged with the reason.

Outcomes by probed version:
    missing file        -> default (created)
    == current          -> deserialize directly
    < current           -> run the chain, then deserialize (migrated)
    > current           -> deserialize best-effort
any failure on the way  -> default (created)
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from confmigrate.config.schema import VersionedConfig
from confmigrate.core.errors import MigrationStepError, NoMigrationPathError
from confmigrate.core.types import ConfigLoadResult, LoadFailure
from confmigrate.interfaces.logger import AppLogger
from confmigrate.migration.probe import VERSION_FIELD, probe_version
from confmigrate.migration.registry import ChainRegistry, build_default_registry
from confmigrate.observability.app_logger import NullLogger

ConfigT = TypeVar("ConfigT", bound=VersionedConfig)


class MigrationService:
    """Orchestrates probe, chain execution and deserialization for a config type."""

    def __init__(
        self,
        registry: ChainRegistry | None = None,
        logger: AppLogger | None = None,
    ):
        self._logger = logger or NullLogger()
        self._registry = registry if registry is not None else build_default_registry(self._logger)

    @property
    def registry(self) -> ChainRegistry:
        return self._registry

    def probe_version(self, path: str | Path) -> int:
        """Version stored in ``path``, or 0 when missing or unreadable."""
        return probe_version(path, self._logger)

    def load(
        self,
        config_type: type[ConfigT],
        path: str | Path,
        default_factory: Callable[[], ConfigT],
    ) -> ConfigLoadResult[ConfigT]:
        """Load ``path`` as ``config_type``, migrating or falling back as needed.

        Args:
            config_type: Target schema type; resolved against the registry.
            path: Config file location.
            default_factory: Builds the value used when the file is missing
                or cannot be turned into a current ``config_type``.

        Returns:
            A ConfigLoadResult whose flags say how ``config`` was obtained.

        Nothing in the file can make this raise. Exceptions from
        ``default_factory`` itself propagate to the caller unchanged.
        """
        path = Path(path)
        name = config_type.__name__
        entry = self._registry.resolve(config_type)
        target = entry.current_version

        try:
            missing = not path.exists()
        except Exception as exc:
            return self._fallback(name, path, default_factory, 0, exc)

        if missing:
            self._logger.info("{} not found at {}; creating defaults", name, path)
            return ConfigLoadResult(
                config=default_factory(),
                was_created=True,
                original_version=target,
                failure=LoadFailure.FILE_MISSING,
            )

        original = 0
        try:
            original = self.probe_version(path)
            raw = path.read_text(encoding="utf-8-sig")

            if original == target:
                config = config_type.model_validate_json(raw)
                self._logger.debug("{} loaded at current version v{}", name, target)
                return ConfigLoadResult(config=config, original_version=target)

            if original > target:
                self._logger.warning(
                    "{} at {} is v{}, newer than supported v{}; loading best-effort",
                    name,
                    path,
                    original,
                    target,
                )
                config = config_type.model_validate_json(raw)
                return ConfigLoadResult(config=config, original_version=original)

            if not entry.chain.can_migrate(original, target):
                raise NoMigrationPathError(original, target)

            migrated = entry.chain.execute(raw, original, target)
            config = self._validate_migrated(config_type, migrated, target)
            self._logger.info("{} migrated from v{} to v{}", name, original, target)
            return ConfigLoadResult(config=config, was_migrated=True, original_version=original)
        except Exception as exc:
            return self._fallback(name, path, default_factory, original, exc)

    def _fallback(
        self,
        name: str,
        path: Path,
        default_factory: Callable[[], ConfigT],
        original: int,
        exc: Exception,
    ) -> ConfigLoadResult[ConfigT]:
        failure = _classify(exc)
        self._logger.error(
            "Could not load {} from {} ({}): {}. Prior settings could not be "
            "preserved; using defaults.",
            name,
            path,
            failure.value,
            exc,
            exc=exc,
        )
        return ConfigLoadResult(
            config=default_factory(),
            was_created=True,
            original_version=original,
            failure=failure,
            error=str(exc),
        )

    async def load_async(
        self,
        config_type: type[ConfigT],
        path: str | Path,
        default_factory: Callable[[], ConfigT],
    ) -> ConfigLoadResult[ConfigT]:
        """``load`` run in a worker thread."""
        return await asyncio.to_thread(self.load, config_type, path, default_factory)

    @staticmethod
    def _validate_migrated(config_type: type[ConfigT], migrated: str, target: int) -> ConfigT:
        data: Any = json.loads(migrated)
        if isinstance(data, dict):
            data[VERSION_FIELD] = target
        return config_type.model_validate(data)


def _classify(exc: BaseException) -> LoadFailure:
    if isinstance(exc, NoMigrationPathError):
        return LoadFailure.NO_MIGRATION_PATH
    if isinstance(exc, MigrationStepError):
        return LoadFailure.MIGRATION_STEP_FAILURE
    if isinstance(exc, (OSError, UnicodeDecodeError)):
        return LoadFailure.IO_FAILURE
    # JSONDecodeError and pydantic's ValidationError are both ValueErrors.
    if isinstance(exc, (ValueError, RecursionError)):
        return LoadFailure.DESERIALIZE_FAILURE
    return LoadFailure.UNEXPECTED
