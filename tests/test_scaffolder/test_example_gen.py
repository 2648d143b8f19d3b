"""Tests for the standalone example generator.

Covers:
- The artifact-auction happy path (manifest, README, exclusions)
- Default output location
- Validation failures leave the file system untouched
- A destination nested inside the examples root
- Earlier projects under the output root are not copied again
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fhevm_tools.config import Config
from fhevm_tools.errors import (
    AlreadyExistsError,
    MissingSourceError,
    NotFoundError,
    ParseError,
)
from fhevm_tools.scaffolder import ExampleGenerator, GenerationResult


pytestmark = pytest.mark.unit


@pytest.fixture
def generator(config: Config) -> ExampleGenerator:
    return ExampleGenerator(config)


def _manifest(project: Path) -> dict:
    return json.loads((project / "package.json").read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_artifact_auction_project(self, generator: ExampleGenerator, config: Config):
        destination = config.output_dir / "test1"
        result = generator.generate("artifact-auction", destination)

        assert isinstance(result, GenerationResult)
        assert result.output_dir == destination
        assert result.package_name == "fhevm-artifact-auction"
        assert result.included == ["artifact-auction"]

        manifest = _manifest(destination)
        assert manifest["name"] == "fhevm-artifact-auction"
        assert manifest["description"] == (
            "Confidential artifact auction with encrypted bids and authentication"
        )
        assert manifest["scripts"] == {"compile": "hardhat compile", "test": "hardhat test"}

    def test_sources_copied(self, generator: ExampleGenerator, config: Config):
        destination = config.output_dir / "auction"
        generator.generate("artifact-auction", destination)

        assert (destination / "contracts" / "ArtifactAuction.sol").is_file()
        assert (destination / "test" / "ArtifactAuction.ts").is_file()
        assert (destination / "hardhat.config.ts").is_file()
        assert (destination / "base-template" / "contracts" / "FHECounter.sol").is_file()

    def test_excluded_entries_not_copied(self, generator: ExampleGenerator, config: Config):
        destination = config.output_dir / "auction"
        generator.generate("artifact-auction", destination)

        for name in ("scripts", "node_modules", "artifacts", "cache", "types"):
            assert not (destination / name).exists(), name

    def test_readme_names_contract(self, generator: ExampleGenerator, config: Config):
        destination = config.output_dir / "auction"
        generator.generate("artifact-auction", destination)

        readme = (destination / "README.md").read_text(encoding="utf-8")
        assert readme.startswith("# FHEVM Example: artifact-auction")
        assert "`ArtifactAuction`" in readme
        assert "npm run compile" in readme

    def test_files_listed_relative(self, generator: ExampleGenerator, config: Config):
        result = generator.generate("counter", config.output_dir / "counter")
        assert Path("README.md") in result.files
        assert Path("package.json") in result.files
        assert all(not path.is_absolute() for path in result.files)

    def test_default_output_location(self, generator: ExampleGenerator, config: Config):
        result = generator.generate("counter")
        assert result.output_dir == config.output_dir / "fhevm-counter"
        assert _manifest(result.output_dir)["name"] == "fhevm-counter"

    def test_examples_root_unchanged(self, generator: ExampleGenerator, config: Config, snapshot):
        before = snapshot(config.root_dir)
        generator.generate("artifact-auction", config.output_dir / "auction")
        assert snapshot(config.root_dir) == before

    def test_destination_inside_root(self, generator: ExampleGenerator, config: Config):
        destination = config.root_dir / "output" / "nested"
        generator.generate("counter", destination)

        assert (destination / "contracts" / "Counter.sol").is_file()
        assert not (destination / "output" / "nested").exists()

    def test_earlier_outputs_not_copied(self, examples_root: Path):
        config = Config(root_dir=examples_root, output_dir=examples_root / "output")
        generator = ExampleGenerator(config)

        first = generator.generate("counter")
        second = generator.generate("artifact-auction")

        assert first.output_dir == config.root_dir / "output" / "fhevm-counter"
        assert not (second.output_dir / "output").exists()
        assert all(path.parts[0] != "output" for path in second.files)

    def test_progress_reported(self, generator: ExampleGenerator, config: Config, capsys):
        generator.generate("counter", config.output_dir / "counter")
        out = capsys.readouterr().out
        assert "Creating example: counter" in out
        assert "Template copied" in out


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    def test_unknown_example(self, generator: ExampleGenerator, config: Config):
        with pytest.raises(NotFoundError) as exc_info:
            generator.generate("nonexistent", config.output_dir / "x")
        assert "Unknown example: nonexistent" in str(exc_info.value)
        assert not config.output_dir.exists()

    def test_existing_destination_untouched(
        self, generator: ExampleGenerator, config: Config, snapshot
    ):
        destination = config.output_dir / "taken"
        destination.mkdir(parents=True)
        (destination / "keep.txt").write_text("mine", encoding="utf-8")
        before = snapshot(destination)

        with pytest.raises(AlreadyExistsError) as exc_info:
            generator.generate("counter", destination)

        assert exc_info.value.path == destination
        assert snapshot(destination) == before

    def test_second_run_fails(self, generator: ExampleGenerator, config: Config, snapshot):
        destination = config.output_dir / "twice"
        generator.generate("counter", destination)
        first = snapshot(destination)

        with pytest.raises(AlreadyExistsError):
            generator.generate("counter", destination)
        assert snapshot(destination) == first

    def test_missing_contract(self, generator: ExampleGenerator, config: Config):
        (config.root_dir / "contracts" / "Counter.sol").unlink()
        destination = config.output_dir / "counter"

        with pytest.raises(MissingSourceError, match="Contract not found"):
            generator.generate("counter", destination)
        assert not destination.exists()

    def test_missing_test(self, generator: ExampleGenerator, config: Config):
        (config.root_dir / "test" / "ArtifactAuction.ts").unlink()
        destination = config.output_dir / "auction"

        with pytest.raises(MissingSourceError, match="Test not found"):
            generator.generate("artifact-auction", destination)
        assert not destination.exists()

    def test_missing_root_manifest(self, generator: ExampleGenerator, config: Config):
        (config.root_dir / "package.json").unlink()
        destination = config.output_dir / "counter"

        with pytest.raises(MissingSourceError, match="Package manifest not found"):
            generator.generate("counter", destination)
        assert not destination.exists()

    def test_contract_without_declaration(self, generator: ExampleGenerator, config: Config):
        (config.root_dir / "contracts" / "Counter.sol").write_text(
            "pragma solidity ^0.8.24;\nlibrary Counting {}\n", encoding="utf-8"
        )
        destination = config.output_dir / "counter"

        with pytest.raises(ParseError, match="Could not extract contract name"):
            generator.generate("counter", destination)
        assert not destination.exists()

    def test_invalid_root_manifest(self, generator: ExampleGenerator, config: Config):
        (config.root_dir / "package.json").write_text("{not json", encoding="utf-8")
        destination = config.output_dir / "counter"

        with pytest.raises(ParseError, match="Invalid package manifest"):
            generator.generate("counter", destination)
        assert not destination.exists()

    def test_array_root_manifest(self, generator: ExampleGenerator, config: Config):
        (config.root_dir / "package.json").write_text("[]", encoding="utf-8")
        with pytest.raises(ParseError, match="Expected a JSON object"):
            generator.generate("counter", config.output_dir / "counter")

    def test_unknown_checked_before_existing(self, generator: ExampleGenerator, config: Config):
        destination = config.output_dir / "taken"
        destination.mkdir(parents=True)
        with pytest.raises(NotFoundError):
            generator.generate("nonexistent", destination)
