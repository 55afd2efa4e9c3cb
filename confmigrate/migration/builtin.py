"""Migrations shipped with the package."""

from __future__ import annotations

from typing import Any

from confmigrate.migration.step import migration_step


@migration_step(0, 1)
def no_version_to_v1(document: Any) -> dict[str, Any]:
    """Stamp ``Version: 1`` onto a legacy file that predates versioning."""
    if not isinstance(document, dict):
        raise TypeError(
            f"Expected a JSON object for a legacy config, got {type(document).__name__}"
        )
    document["Version"] = 1
    return document


BUILTIN_STEPS = (no_version_to_v1,)
