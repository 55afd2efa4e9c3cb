"""Static mapping from a config type to its migration chain and current version."""

from __future__ import annotations

from dataclasses import dataclass

from confmigrate.config.schema import ApplicationConfig, UserPreferences, VersionedConfig
from confmigrate.core.errors import DuplicateRegistrationError
from confmigrate.interfaces.config_migration import MigrationStep
from confmigrate.interfaces.logger import AppLogger
from confmigrate.migration.builtin import BUILTIN_STEPS
from confmigrate.migration.chain import MigrationChain
from confmigrate.observability.app_logger import NullLogger


@dataclass(frozen=True, slots=True)
class ChainEntry:
    """A config type's chain together with the version it migrates to."""

    config_type: type
    chain: MigrationChain
    current_version: int


class ChainRegistry:
    """Chains keyed by config type, populated once at startup."""

    def __init__(self, logger: AppLogger | None = None) -> None:
        self._entries: dict[type, ChainEntry] = {}
        self._logger = logger or NullLogger()

    def __contains__(self, config_type: type) -> bool:
        return config_type in self._entries

    def register(
        self,
        config_type: type,
        *steps: MigrationStep,
        current_version: int | None = None,
    ) -> MigrationChain:
        """Create the chain for ``config_type`` and register ``steps`` on it.

        ``current_version`` defaults to ``config_type.CURRENT_VERSION``.
        """
        if config_type in self._entries:
            raise DuplicateRegistrationError(
                f"A migration chain for {config_type.__name__} is already registered"
            )
        if current_version is None:
            current_version = getattr(config_type, "CURRENT_VERSION", None)
        if not isinstance(current_version, int) or current_version < 0:
            raise ValueError(
                f"{config_type.__name__} needs a non-negative current_version "
                "(pass one or define CURRENT_VERSION)"
            )

        chain = MigrationChain(logger=self._logger)
        for step in steps:
            chain.register_step(step)
        self._entries[config_type] = ChainEntry(config_type, chain, current_version)
        self._logger.debug(
            "Registered chain for {} at v{} with {} step(s)",
            config_type.__name__,
            current_version,
            len(chain),
        )
        return chain

    def resolve(self, config_type: type) -> ChainEntry:
        """Entry for ``config_type``; unregistered versioned types get an empty chain."""
        entry = self._entries.get(config_type)
        if entry is not None:
            return entry
        if isinstance(config_type, type) and issubclass(config_type, VersionedConfig):
            return ChainEntry(config_type, MigrationChain(logger=self._logger), config_type.CURRENT_VERSION)
        raise KeyError(f"No migration chain registered for {getattr(config_type, '__name__', config_type)}")

    def entries(self) -> tuple[ChainEntry, ...]:
        return tuple(self._entries.values())


def build_default_registry(logger: AppLogger | None = None) -> ChainRegistry:
    """Registry for the bundled config types with the built-in legacy step."""
    registry = ChainRegistry(logger=logger)
    registry.register(ApplicationConfig, *BUILTIN_STEPS)
    registry.register(UserPreferences, *BUILTIN_STEPS)
    return registry
