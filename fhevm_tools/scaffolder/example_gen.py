"""Standalone project generator for a single FHEVM example.

Copies the whole examples tree (minus build output and the output root, which
may hold earlier projects) into a fresh directory, renames the package
manifest after the example and writes a README for it. The run is
all-or-nothing with respect to validation: every precondition is checked
before the first byte is written.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fhevm_tools.config import HARDHAT_COMMANDS, Config
from fhevm_tools.errors import AlreadyExistsError, MissingSourceError, ParseError
from fhevm_tools.parser import extract_contract_name
from fhevm_tools.registry import EXAMPLES, ExampleDescriptor, get_example
from fhevm_tools.utils import (
    copy_tree,
    list_files,
    load_json,
    print_info,
    print_step,
    print_success,
    update_manifest,
)

from .results import GenerationResult
from .templates import TemplateRenderer


class ExampleGenerator:
    """Scaffolds a standalone project for one registered example.

    Usage::

        generator = ExampleGenerator(Config(root_dir=Path("fhevm-examples")))
        result = generator.generate("artifact-auction", "./output/test1")
    """

    def __init__(
        self,
        config: Config | None = None,
        examples: Mapping[str, ExampleDescriptor] = EXAMPLES,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.examples = examples
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, example_key: str, output_dir: str | Path | None = None) -> GenerationResult:
        """Generate the project for *example_key*.

        Args:
            example_key: Registry key of the example.
            output_dir: Destination directory. Defaults to
                ``<output_dir>/fhevm-<example_key>``. Must not exist.

        Returns:
            A :class:`GenerationResult` describing the new project.

        Raises:
            NotFoundError: The key is not registered.
            AlreadyExistsError: The destination is already on disk.
            MissingSourceError: The contract, test or root manifest is absent.
            ParseError: The root manifest is not a JSON object or the contract
                source declares no contract.
        """
        example = get_example(example_key, self.examples)
        destination = (
            Path(output_dir) if output_dir is not None
            else self.config.default_example_output(example_key)
        )
        if destination.exists():
            raise AlreadyExistsError(destination)

        contract_name = self._validate_sources(example)

        print_info(f"Creating example: {example_key}")

        # 1. Copy the examples tree
        print_step("Copying template...")
        copy_tree(
            self.config.root_dir,
            destination,
            excluded_dirs=self.config.excluded_dirs,
            skipped_entries=self.config.skipped_entries,
            excluded_paths=[self.config.output_dir],
        )
        print_success("Template copied")

        # 2. Rename the package
        print_step("Updating configuration...")
        package_name = self.config.example_package_name(example_key)
        update_manifest(destination / "package.json", package_name, example.description)
        print_success("Configuration updated")

        # 3. README
        print_step("Generating documentation...")
        self.renderer.render_to_file(
            "example/README.md.j2",
            destination / "README.md",
            self._build_context(example, contract_name),
        )
        print_success("Documentation generated")

        return GenerationResult(
            key=example_key,
            output_dir=destination,
            package_name=package_name,
            included=[example_key],
            files=list_files(destination),
        )

    # -- Validation --------------------------------------------------------

    def _validate_sources(self, example: ExampleDescriptor) -> str:
        """Check every input file and return the declared contract name."""
        root = self.config.root_dir
        contract_path = root / example.contract
        test_path = root / example.test

        if not contract_path.is_file():
            raise MissingSourceError("Contract", contract_path)
        if not test_path.is_file():
            raise MissingSourceError("Test", test_path)
        manifest = root / "package.json"
        if not manifest.is_file():
            raise MissingSourceError("Package manifest", manifest)
        try:
            load_json(manifest)
        except ValueError as exc:
            raise ParseError(f"Invalid package manifest: {exc}", manifest) from exc

        contract_name = extract_contract_name(contract_path.read_text(encoding="utf-8"))
        if contract_name is None:
            raise ParseError("Could not extract contract name", contract_path)
        return contract_name

    # -- Context building --------------------------------------------------

    def _build_context(self, example: ExampleDescriptor, contract_name: str) -> dict[str, Any]:
        """Build the Jinja2 template context for the README."""
        return {
            "example": example,
            "contract_name": contract_name,
            "package_name": self.config.example_package_name(example.key),
            "commands": HARDHAT_COMMANDS,
        }
