"""Optional logging port used by the migration subsystem."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AppLogger(Protocol):
    """Leveled, brace-templated logger (``"v{} -> v{}"`` style)."""

    def debug(self, message: str, *args: Any) -> None: ...

    def info(self, message: str, *args: Any) -> None: ...

    def warning(self, message: str, *args: Any) -> None: ...

    def error(self, message: str, *args: Any, exc: BaseException | None = None) -> None: ...
