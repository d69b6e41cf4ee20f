"""Pydantic schema for a completed scope extraction."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class ScopeExport(BaseModel):
    """Canonical output of one extraction run."""

    # Identity
    url: str = ""

    # Provenance
    extraction_method: Literal["structured", "heuristic"] = "structured"
    rows_considered: int = 0
    lines_considered: int = 0
    extracted_at: str = ""

    # Assembled assets: category -> trimmed, deduplicated, non-empty list
    assets: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("url", mode="before")
    @classmethod
    def strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @property
    def is_empty(self) -> bool:
        return not any(self.assets.values())

    @property
    def asset_count(self) -> int:
        return sum(len(values) for values in self.assets.values())

    def to_files(self, out_dir: str | Path, **kwargs: Any) -> list[Path]:
        """Write one file per category; see :func:`scopeexporter.output.write_exports`."""
        from scopeexporter.output import write_exports
        return write_exports(self.assets, out_dir, **kwargs)
