"""Pydantic schemas for versioned configuration files.

Files use PascalCase property names (``Version``, ``EditorCommand``); Python
code uses snake_case attributes. Either spelling is accepted when loading,
property names match regardless of case, and unknown properties are ignored so
newer files still deserialize.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal


class VersionedConfig(BaseModel):
    """Base for every config type that participates in migration.

    Subclasses set ``CURRENT_VERSION`` to the schema version this build writes.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )

    CURRENT_VERSION: ClassVar[int] = 1

    version: int = 0

    @model_validator(mode="before")
    @classmethod
    def match_keys_ignoring_case(cls, data: Any) -> Any:
        # An exact alias or field name wins over any other casing of the same key.
        if not isinstance(data, dict):
            return data
        by_folded: dict[str, str] = {}
        exact: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            exact[alias] = exact[name] = alias
            by_folded.setdefault(alias.casefold(), alias)
            by_folded.setdefault(name.casefold(), alias)

        present = {exact[key] for key in data if key in exact}
        matched = dict(data)
        for key, value in data.items():
            if not isinstance(key, str) or key in exact:
                continue
            alias = by_folded.get(key.casefold())
            if alias is None or alias in present:
                continue
            present.add(alias)
            matched[alias] = value
        return matched

    def model_post_init(self, __context: Any) -> None:
        if "version" not in self.model_fields_set:
            self.version = self.CURRENT_VERSION

    def to_json(self) -> str:
        """Serialize with file-style property names."""
        return self.model_dump_json(by_alias=True, indent=2)


class VerbosityLevel(str, Enum):
    BASIC = "Basic"
    NORMAL = "Normal"
    DETAILED = "Detailed"


class ParameterTableColumn(str, Enum):
    PARAMETER_NAME = "ParameterName"
    PROGRESS_BAR = "ProgressBar"
    VALUE = "Value"
    RANGE = "Range"
    EXPRESSION = "Expression"


class ApplicationConfig(VersionedConfig):
    """Application-wide settings."""

    CURRENT_VERSION: ClassVar[int] = 1

    editor_command: str = 'notepad.exe "%f"'
    shortcuts: dict[str, str] = Field(default_factory=dict)


class UserPreferences(VersionedConfig):
    """Per-user display preferences."""

    CURRENT_VERSION: ClassVar[int] = 1

    phone_client_verbosity: VerbosityLevel = VerbosityLevel.NORMAL
    pc_client_verbosity: VerbosityLevel = Field(
        default=VerbosityLevel.NORMAL, alias="PCClientVerbosity"
    )
    transformation_engine_verbosity: VerbosityLevel = VerbosityLevel.NORMAL
    preferred_console_width: int = Field(default=150, gt=0)
    preferred_console_height: int = Field(default=60, gt=0)
    pc_parameter_table_columns: list[ParameterTableColumn] = Field(
        default_factory=list, alias="PCParameterTableColumns"
    )
