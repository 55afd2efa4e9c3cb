"""Owns config file paths and writes created or migrated configs back to disk."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from confmigrate.config.loader import get_config_dir
from confmigrate.config.schema import ApplicationConfig, UserPreferences, VersionedConfig
from confmigrate.core.errors import ConfigPersistenceError
from confmigrate.core.types import ConfigLoadResult, LoadFailure
from confmigrate.interfaces.logger import AppLogger
from confmigrate.migration.service import MigrationService
from confmigrate.observability.app_logger import NullLogger

ConfigT = TypeVar("ConfigT", bound=VersionedConfig)

BACKUP_SUFFIX = ".bak"


class ConfigManager:
    """Load and save the application's config files through MigrationService."""

    APPLICATION_CONFIG_FILENAME = "ApplicationConfig.json"
    USER_PREFERENCES_FILENAME = "UserPreferences.json"

    def __init__(
        self,
        config_dir: str | Path | None = None,
        service: MigrationService | None = None,
        logger: AppLogger | None = None,
    ):
        self._logger = logger or NullLogger()
        self._service = service or MigrationService(logger=self._logger)
        self.config_dir = Path(config_dir) if config_dir is not None else get_config_dir()
        self.config_dir.mkdir(parents=True, exist_ok=True)

    @property
    def service(self) -> MigrationService:
        return self._service

    @property
    def application_config_path(self) -> Path:
        return self.config_dir / self.APPLICATION_CONFIG_FILENAME

    @property
    def user_preferences_path(self) -> Path:
        return self.config_dir / self.USER_PREFERENCES_FILENAME

    def load_application_config(self, *, persist: bool = True) -> ConfigLoadResult[ApplicationConfig]:
        return self.load(ApplicationConfig, self.application_config_path, ApplicationConfig, persist=persist)

    def load_user_preferences(self, *, persist: bool = True) -> ConfigLoadResult[UserPreferences]:
        return self.load(UserPreferences, self.user_preferences_path, UserPreferences, persist=persist)

    def load(
        self,
        config_type: type[ConfigT],
        path: Path,
        default_factory: Callable[[], ConfigT],
        *,
        persist: bool = True,
    ) -> ConfigLoadResult[ConfigT]:
        """Load via the migration service and write back anything new.

        When a migrated or fallback config replaces an existing file, the
        previous contents are kept next to it as ``<name>.bak``.
        """
        result = self._service.load(config_type, path, default_factory)
        if persist and result.needs_save:
            if path.exists() and result.failure is not LoadFailure.FILE_MISSING:
                self._backup(path)
            self._save(path, result.config)
        return result

    def save_application_config(self, config: ApplicationConfig) -> None:
        self._save(self.application_config_path, config)

    def save_user_preferences(self, preferences: UserPreferences) -> None:
        self._save(self.user_preferences_path, preferences)

    def reset_user_preferences(self) -> UserPreferences:
        """Replace the preferences file with defaults."""
        self.user_preferences_path.unlink(missing_ok=True)
        preferences = UserPreferences()
        self.save_user_preferences(preferences)
        return preferences

    def _backup(self, path: Path) -> Path:
        backup = path.with_name(path.name + BACKUP_SUFFIX)
        try:
            shutil.copy2(path, backup)
        except OSError as exc:
            raise ConfigPersistenceError(f"Error backing up {path} to {backup}: {exc}") from exc
        self._logger.info("Backed up {} to {}", path, backup)
        return backup

    def _save(self, path: Path, config: VersionedConfig) -> None:
        if config is None:
            raise TypeError("config must not be None")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(config.to_json() + "\n", encoding="utf-8")
        except OSError as exc:
            raise ConfigPersistenceError(f"Error saving configuration to {path}: {exc}") from exc
        self._logger.debug("Saved {} to {}", type(config).__name__, path)
