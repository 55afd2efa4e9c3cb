"""Contract for a single forward schema migration over raw JSON."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MigrationStep(Protocol):
    """One pure transformation from ``from_version`` to ``to_version``.

    ``migrate`` receives a freshly parsed JSON value that no other step sees,
    and returns either JSON text or a JSON-compatible value valid against the
    ``to_version`` schema. It must be deterministic and free of side effects.
    """

    @property
    def from_version(self) -> int: ...

    @property
    def to_version(self) -> int: ...

    def migrate(self, document: Any) -> str | Any: ...
