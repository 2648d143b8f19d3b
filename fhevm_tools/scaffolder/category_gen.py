"""Category project generator.

Builds one project holding every example of a category, each under
``examples/<key>/{contracts,test}``. Unlike the single-example generator this
one tolerates missing inputs: an unregistered member or a member whose
sources are absent is reported as a warning and skipped.
"""

from __future__ import annotations

import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fhevm_tools.config import HARDHAT_COMMANDS, Config
from fhevm_tools.errors import AlreadyExistsError
from fhevm_tools.registry import (
    CATEGORIES,
    EXAMPLES,
    CategoryDescriptor,
    ExampleDescriptor,
    dangling_references,
    get_category,
)
from fhevm_tools.utils import (
    ensure_dir,
    list_files,
    print_info,
    print_step,
    print_success,
    print_warning,
    update_manifest,
)

from .results import GenerationResult
from .templates import TemplateRenderer


class CategoryGenerator:
    """Scaffolds a multi-example project for one category."""

    def __init__(
        self,
        config: Config | None = None,
        categories: Mapping[str, CategoryDescriptor] = CATEGORIES,
        examples: Mapping[str, ExampleDescriptor] = EXAMPLES,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.categories = categories
        self.examples = examples
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, category_key: str, output_dir: str | Path | None = None) -> GenerationResult:
        """Generate the project for *category_key*.

        Args:
            category_key: Registry key of the category.
            output_dir: Destination directory. Defaults to
                ``<output_dir>/fhevm-<category_key>-examples``. Must not exist.

        Returns:
            A :class:`GenerationResult` listing included and skipped members.

        Raises:
            NotFoundError: The category is not registered.
            AlreadyExistsError: The destination is already on disk.
        """
        category = get_category(category_key, self.categories)
        destination = (
            Path(output_dir) if output_dir is not None
            else self.config.default_category_output(category_key)
        )
        if destination.exists():
            raise AlreadyExistsError(destination)

        print_info(f"Creating category: {category_key}")
        print_info(f"Output directory: {destination}")

        # Step 1: skeleton + shared configuration
        print_step("Step 1: Creating project structure...")
        ensure_dir(destination / "examples")
        self._copy_shared_config(destination)
        print_success("Project structure created")

        # Step 2: one directory per member
        print_step("Step 2: Copying examples...")
        included: list[ExampleDescriptor] = []
        skipped: list[str] = []
        unregistered = {
            member for _, member in dangling_references({category.key: category}, self.examples)
        }
        for member in category.examples:
            if member in unregistered:
                print_warning(f"Example {member} not found")
                skipped.append(member)
                continue
            example = self.examples[member]
            if self._copy_example(example, destination / "examples" / member):
                included.append(example)
            else:
                skipped.append(member)

        # Step 3: category README + manifest
        print_step("Step 3: Generating documentation...")
        self.renderer.render_to_file(
            "category/README.md.j2",
            destination / "README.md",
            self._build_context(category, included),
        )
        print_success("Documentation generated")

        package_name: str | None = None
        manifest = destination / "package.json"
        if manifest.is_file():
            package_name = self.config.category_package_name(category_key)
            update_manifest(manifest, package_name, category.description)

        return GenerationResult(
            key=category_key,
            output_dir=destination,
            package_name=package_name,
            included=[example.key for example in included],
            skipped=skipped,
            files=list_files(destination),
        )

    # -- Steps -------------------------------------------------------------

    def _copy_shared_config(self, destination: Path) -> list[Path]:
        """Copy the shared configuration files that exist in the base template."""
        base = self.config.base_template_path
        if not base.is_dir():
            print_warning(f"Base template not found: {base}")
            return []

        copied: list[Path] = []
        for name in self.config.shared_config_files:
            source = base / name
            if source.is_file():
                copied.append(Path(shutil.copy2(source, destination / name)))
        return copied

    def _copy_example(self, example: ExampleDescriptor, example_dir: Path) -> bool:
        """Copy one member's contract and test, then write its README.

        Returns ``False`` without touching *example_dir* when either source
        file is missing.
        """
        root = self.config.root_dir
        contract_path = root / example.contract
        test_path = root / example.test

        missing = [p for p in (contract_path, test_path) if not p.is_file()]
        if missing:
            for path in missing:
                print_warning(f"Source not found for {example.key}: {path}")
            return False

        contracts_dir = ensure_dir(example_dir / "contracts")
        tests_dir = ensure_dir(example_dir / "test")

        shutil.copy2(contract_path, contracts_dir / contract_path.name)
        print_success(f"Copied contract: {contract_path.name}")
        shutil.copy2(test_path, tests_dir / test_path.name)
        print_success(f"Copied test: {test_path.name}")

        self.renderer.render_to_file(
            "category/example_README.md.j2",
            example_dir / "README.md",
            {"example": example, "commands": HARDHAT_COMMANDS},
        )
        return True

    # -- Context building --------------------------------------------------

    def _build_context(
        self, category: CategoryDescriptor, included: list[ExampleDescriptor]
    ) -> dict[str, Any]:
        """Build the Jinja2 template context for the category README."""
        return {
            "category": category,
            "examples": included,
            "package_name": self.config.category_package_name(category.key),
        }
