"""Observability helpers: logger adapters and loguru setup."""

from confmigrate.observability.app_logger import LoguruLogger, NullLogger, configure_logging

__all__ = ["LoguruLogger", "NullLogger", "configure_logging"]
