"""Result model returned by the scaffolding generators."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class GenerationResult(BaseModel):
    """Outcome of one example or category generation run."""

    key: str = Field(..., description="Example or category key that was generated")
    output_dir: Path = Field(..., description="Root of the generated project")
    package_name: str | None = Field(
        default=None, description="Name written to package.json, if a manifest was rewritten"
    )
    included: list[str] = Field(
        default_factory=list, description="Example keys present in the output"
    )
    skipped: list[str] = Field(
        default_factory=list, description="Example keys left out because of missing sources"
    )
    files: list[Path] = Field(
        default_factory=list, description="Every generated file, relative to output_dir"
    )
