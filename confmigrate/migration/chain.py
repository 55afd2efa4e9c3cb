"""Per-config-type registry of migration steps and the walk over them.

A chain allows at most one outgoing step per source version, so reachability
is a greedy linear walk rather than a graph search.
"""

from __future__ import annotations

import json
from typing import Any

from confmigrate.core.errors import (
    DuplicateStepError,
    InvalidStepError,
    MigrationStepError,
    NoMigrationPathError,
)
from confmigrate.interfaces.config_migration import MigrationStep
from confmigrate.interfaces.logger import AppLogger
from confmigrate.observability.app_logger import NullLogger


class MigrationChain:
    """Ordered, forward-only set of MigrationSteps for one config type."""

    def __init__(self, logger: AppLogger | None = None):
        self._steps: list[MigrationStep] = []
        self._by_source: dict[int, MigrationStep] = {}
        self._logger = logger or NullLogger()

    def __len__(self) -> int:
        return len(self._steps)

    def register_step(self, step: MigrationStep) -> None:
        """Add ``step``, keeping steps sorted by ``from_version``.

        Raises:
            InvalidStepError: the step does not move strictly forward.
            DuplicateStepError: a step already leaves ``from_version``.
        """
        if step is None:
            raise TypeError("step must not be None")

        source, target = step.from_version, step.to_version
        if source < 0:
            raise InvalidStepError(source, target, "Versions must be non-negative.")
        if source >= target:
            raise InvalidStepError(source, target)

        existing = self._by_source.get(source)
        if existing is not None:
            raise DuplicateStepError(source, target, existing_to=existing.to_version)

        self._steps.append(step)
        self._steps.sort(key=lambda s: s.from_version)
        self._by_source[source] = step
        self._logger.debug("Registered migration: v{} -> v{}", source, target)

    def get_steps(self) -> tuple[MigrationStep, ...]:
        """Registered steps, ascending by ``from_version``."""
        return tuple(self._steps)

    def _walk(self, source: int, target: int) -> tuple[list[MigrationStep], int]:
        path: list[MigrationStep] = []
        current = source
        while current < target:
            step = self._by_source.get(current)
            if step is None:
                break
            path.append(step)
            current = step.to_version
        return path, current

    def can_migrate(self, source: int, target: int) -> bool:
        if source == target:
            return True
        if source > target:
            return False
        _, reached = self._walk(source, target)
        return reached == target

    def plan(self, source: int, target: int) -> tuple[MigrationStep, ...]:
        """Steps that ``execute`` would apply from ``source`` to ``target``."""
        if source == target:
            return ()
        if not self.can_migrate(source, target):
            raise NoMigrationPathError(source, target)
        path, _ = self._walk(source, target)
        return tuple(path)

    def execute(self, raw_json: str, source: int, target: int) -> str:
        """Run every step from ``source`` to ``target`` over ``raw_json``.

        Each step gets its own freshly parsed document and its output is
        re-parsed before the next hop. ``source == target`` returns
        ``raw_json`` untouched.

        Raises:
            NoMigrationPathError: no walk connects ``source`` to ``target``.
            MigrationStepError: a step raised or returned invalid JSON.
            json.JSONDecodeError: ``raw_json`` itself is not valid JSON.
        """
        if source == target:
            self._logger.debug(
                "No migration needed: source and target versions are the same (v{})", source
            )
            return raw_json

        if not self.can_migrate(source, target):
            raise NoMigrationPathError(source, target)

        self._logger.info("Starting migration chain: v{} -> v{}", source, target)

        document = json.loads(raw_json)
        current_json = raw_json
        current = source
        while current < target:
            step = self._by_source.get(current)
            if step is None:
                raise NoMigrationPathError(source, target, stuck_at=current)

            self._logger.debug("Applying migration: v{} -> v{}", step.from_version, step.to_version)
            try:
                current_json = _to_json_text(step.migrate(document))
                document = json.loads(current_json)
            except Exception as exc:
                self._logger.error(
                    "Migration failed: v{} -> v{}", step.from_version, step.to_version, exc=exc
                )
                raise MigrationStepError(step.from_version, step.to_version, exc) from exc
            current = step.to_version

        self._logger.info("Migration chain completed successfully: v{} -> v{}", source, target)
        return current_json


def _to_json_text(output: Any) -> str:
    """Normalize a step result to JSON text; str/bytes are taken as already encoded."""
    if isinstance(output, (bytes, bytearray)):
        return output.decode("utf-8")
    if isinstance(output, str):
        return output
    return json.dumps(output, ensure_ascii=False)
