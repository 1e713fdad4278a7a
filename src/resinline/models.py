"""Canonical Pydantic models shared across all resinline modules.

The models fall into two groups:

**Configuration** -- :class:`InlineConfig`, loaded from ``resinline.json``
in the project root and overridden by environment variables and CLI flags
(see :func:`~resinline.config.resolve_config`).

**Run artifacts** -- transient objects of a single run:
:class:`SourceUnit`, :class:`UnitStatus`, :class:`UnitResult`, and
:class:`RunReport`. Nothing here is persisted; the only lasting effect of a
run is the rewritten source files themselves.
"""

from __future__ import annotations

import codecs
import enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# --- Configuration ---


class InlineConfig(BaseModel):
    """Effective configuration for one inlining run.

    Example::

        InlineConfig(
            include=["**/*.ts"],
            exclude=["**/*.spec.ts"],
            remove_module_id=True,
        )
    """

    include: list[str] = Field(
        default_factory=lambda: ["**/*.ts"],
        description="Gitignore-style patterns selecting the source files to rewrite",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Gitignore-style patterns removed from the selection",
    )
    encoding: str = Field(
        default="utf-8", description="Text encoding of sources and templates"
    )
    inline_templates: bool = Field(
        default=True, description="Replace template: require('x.html') with the file content"
    )
    remove_module_id: bool = Field(
        default=True, description="Strip moduleId: module.id assignments"
    )

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value


# --- Run artifacts ---


class SourceUnit(BaseModel):
    """One discovered source file.

    ``relative_path`` is the POSIX path relative to the project root and is
    the unit's identity in reports; ``path`` is the absolute location used
    for I/O.
    """

    relative_path: str
    path: Path

    @property
    def directory(self) -> Path:
        """Directory against which the unit's template references resolve."""
        return self.path.parent


class UnitStatus(str, enum.Enum):
    """Outcome of processing a single :class:`SourceUnit`."""

    CHANGED = "changed"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class UnitResult(BaseModel):
    """Result of the read-transform-write sequence for one unit."""

    path: str
    status: UnitStatus
    error: Optional[str] = None


class RunReport(BaseModel):
    """Aggregate of every unit processed by :func:`~resinline.runner.inline_resources`.

    The report carries no error of its own: failed units are listed with
    ``status == FAILED`` and the run as a whole still completes.
    """

    project: str
    dry_run: bool = False
    results: list[UnitResult] = Field(default_factory=list)

    @property
    def changed(self) -> list[UnitResult]:
        return [r for r in self.results if r.status == UnitStatus.CHANGED]

    @property
    def failed(self) -> list[UnitResult]:
        return [r for r in self.results if r.status == UnitStatus.FAILED]

    @property
    def ok(self) -> bool:
        """``True`` when no unit failed."""
        return not self.failed
