"""FHEVM tools configuration.

Centralised, typed configuration shared by the example, category and
documentation generators. Settings use Pydantic v2 models so they are
validated at construction time; the CLI builds one instance per invocation
from its arguments.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

# Directories that hold generated or downloaded artefacts in a Hardhat tree.
DEFAULT_EXCLUDED_DIRS: list[str] = [
    "node_modules",
    "artifacts",
    "cache",
    "coverage",
    "types",
    "dist",
    "fhevmTemp",
]

# Shared configuration copied from the base template into category projects.
DEFAULT_SHARED_CONFIG_FILES: list[str] = [
    "hardhat.config.ts",
    "package.json",
    "tsconfig.json",
    ".gitignore",
    ".eslintrc.yml",
    ".prettierrc.yml",
]

# Commands a generated project is driven with, in the order they are run.
HARDHAT_COMMANDS: list[str] = ["npm install", "npm run compile", "npm run test"]


class Config(BaseModel):
    """Global configuration for the generators.

    Holds the examples root, the default output location and the fixed
    naming/exclusion rules. Derived paths are exposed as read-only
    properties.
    """

    root_dir: Path = Field(default_factory=Path.cwd, description="Root of the examples tree")
    output_dir: Path = Field(default=Path("./output"), description="Default parent for generated projects")
    package_prefix: str = Field(default="fhevm", min_length=1)
    excluded_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS))
    skipped_entries: list[str] = Field(
        default_factory=lambda: ["scripts"],
        description="Entry names never copied into a generated project (the tooling itself)",
    )
    base_template_dir: str = Field(default="base-template")
    shared_config_files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SHARED_CONFIG_FILES)
    )
    docs_dir: str = Field(default="docs")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def base_template_path(self) -> Path:
        """Directory holding the shared configuration files."""
        return self.root_dir / self.base_template_dir

    # ------------------------------------------------------------------
    # Naming helpers
    # ------------------------------------------------------------------

    def example_package_name(self, example_key: str) -> str:
        """Package manifest name for a single-example project."""
        return f"{self.package_prefix}-{example_key}"

    def category_package_name(self, category_key: str) -> str:
        """Package manifest name for a category project."""
        return f"{self.package_prefix}-{category_key}-examples"

    def default_example_output(self, example_key: str) -> Path:
        """Default destination for ``create-fhevm-example``."""
        return self.output_dir / self.example_package_name(example_key)

    def default_category_output(self, category_key: str) -> Path:
        """Default destination for ``create-fhevm-category``."""
        return self.output_dir / self.category_package_name(category_key)
