"""Pydantic schemas for frozen records and project configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docfreeze.types import FreezeMode, IncludeKind


class ExecuteResult(BaseModel):
    """Result produced by a computation engine for one input document.

    Only ``supporting`` and ``includes`` are interpreted by the freeze
    cache. Engine-specific fields are kept as extras and written back
    unchanged.
    """

    model_config = ConfigDict(extra="allow")

    supporting: list[str] = Field(default_factory=list)
    includes: dict[IncludeKind, list[str]] | None = None


class FrozenRecord(BaseModel):
    """Unit persisted under ``execute-results/<ext>.json``."""

    model_config = ConfigDict(extra="ignore")

    hash: str
    result: ExecuteResult

    @field_validator("hash")
    @classmethod
    def _validate_hash(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("hash cannot be empty.")
        return value


class ProjectSection(BaseModel):
    """``project:`` block of the project configuration file."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str = "default"
    lib_dir: str | None = Field(default=None, alias="lib-dir")
    output_dir: str | None = Field(default=None, alias="output-dir")

    @field_validator("lib_dir", "output_dir")
    @classmethod
    def _validate_relative_dir(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip().rstrip("/")
        if not stripped:
            raise ValueError("directory names cannot be empty.")
        if stripped.startswith("/"):
            raise ValueError("directory names must be project-relative.")
        return stripped


class ExecuteSection(BaseModel):
    """``execute:`` block of the project configuration file."""

    model_config = ConfigDict(extra="forbid")

    freeze: bool | Literal["auto"] = "auto"

    @property
    def freeze_mode(self) -> FreezeMode:
        """Map the YAML ``freeze`` value onto a cache mode."""
        if self.freeze == "auto":
            return "auto"
        return "force" if self.freeze else "off"


class ProjectConfig(BaseModel):
    """Validated project configuration (``_project.yml``)."""

    model_config = ConfigDict(extra="ignore")

    project: ProjectSection = Field(default_factory=ProjectSection)
    execute: ExecuteSection = Field(default_factory=ExecuteSection)
