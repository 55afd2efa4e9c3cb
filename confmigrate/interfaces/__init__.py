"""Protocols implemented by migration steps and logger adapters."""

from confmigrate.interfaces.config_migration import MigrationStep
from confmigrate.interfaces.logger import AppLogger

__all__ = ["AppLogger", "MigrationStep"]
