"""Versioned config migration: steps, chains, version probe and load service."""

from confmigrate.migration.builtin import BUILTIN_STEPS, no_version_to_v1
from confmigrate.migration.chain import MigrationChain
from confmigrate.migration.probe import LEGACY_VERSION, probe_version
from confmigrate.migration.registry import ChainEntry, ChainRegistry, build_default_registry
from confmigrate.migration.service import MigrationService
from confmigrate.migration.step import JsonMigrationStep, describe_step, migration_step

__all__ = [
    "BUILTIN_STEPS",
    "ChainEntry",
    "ChainRegistry",
    "JsonMigrationStep",
    "LEGACY_VERSION",
    "MigrationChain",
    "MigrationService",
    "build_default_registry",
    "describe_step",
    "migration_step",
    "no_version_to_v1",
    "probe_version",
]
