"""Concrete migration steps built from plain transform functions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Transform = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class JsonMigrationStep:
    """Bind a transform function to a ``(from_version, to_version)`` pair."""

    from_version: int
    to_version: int
    transform: Transform
    name: str = ""

    def migrate(self, document: Any) -> Any:
        return self.transform(document)

    @property
    def label(self) -> str:
        suffix = f" ({self.name})" if self.name else ""
        return f"v{self.from_version} -> v{self.to_version}{suffix}"


def migration_step(from_version: int, to_version: int) -> Callable[[Transform], JsonMigrationStep]:
    """Decorator turning ``fn(document) -> document`` into a JsonMigrationStep.

    Example::

        @migration_step(1, 2)
        def rename_editor(doc):
            doc["EditorCommand"] = doc.pop("Editor", "")
            return doc
    """

    def wrap(fn: Transform) -> JsonMigrationStep:
        return JsonMigrationStep(
            from_version=from_version,
            to_version=to_version,
            transform=fn,
            name=fn.__name__,
        )

    return wrap


def describe_step(step: Any) -> str:
    """Human-readable ``vX -> vY`` label for any MigrationStep."""
    label = getattr(step, "label", None)
    if isinstance(label, str):
        return label
    return f"v{step.from_version} -> v{step.to_version} ({type(step).__name__})"
