"""Read the top-level ``Version`` of a JSON config without deserializing it."""

from __future__ import annotations

import json
from pathlib import Path

from confmigrate.interfaces.logger import AppLogger
from confmigrate.observability.app_logger import NullLogger

LEGACY_VERSION = 0
VERSION_FIELD = "Version"


def probe_version(path: str | Path, logger: AppLogger | None = None) -> int:
    """Return the file's integer ``Version``, or 0 when it cannot be determined.

    Missing, empty, unreadable or malformed files, a missing field and a
    non-integer (or negative) value all map to 0, which downstream code
    treats as the oldest schema.
    """
    log = logger or NullLogger()
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        log.debug("Version probe: {} does not exist", path)
        return LEGACY_VERSION
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Version probe: could not read {}: {}", path, exc)
        return LEGACY_VERSION

    if not text.strip():
        log.debug("Version probe: {} is empty", path)
        return LEGACY_VERSION

    # JSONDecodeError is a ValueError; oversized integers raise a plain ValueError
    # and deep nesting raises RecursionError.
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        log.warning("Version probe: {} is not valid JSON ({})", path, exc)
        return LEGACY_VERSION

    if not isinstance(data, dict):
        log.debug("Version probe: {} is not a JSON object", path)
        return LEGACY_VERSION

    value = data.get(VERSION_FIELD)
    # bool is an int subclass; JSON true/false is not a version.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        log.debug("Version probe: {} has no usable {} field ({!r})", path, VERSION_FIELD, value)
        return LEGACY_VERSION

    log.debug("Version probe: {} is at v{}", path, value)
    return value
