"""Shared pytest fixtures for the FHEVM tools test suite.

Provides reusable fixtures for:
- A writable copy of the miniature examples tree in ``tests/fixtures``
- A ``Config`` rooted at that copy
- Directory snapshot helpers for byte-for-byte comparisons
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from fhevm_tools.config import Config

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def examples_root(tmp_path: Path) -> Path:
    """Writable copy of ``tests/fixtures/fhevm-repo`` (auto-cleanup).

    Build artefact directories are added so exclusion rules have something
    to exclude.
    """
    root = tmp_path / "fhevm-repo"
    shutil.copytree(FIXTURES_DIR / "fhevm-repo", root)
    for artefact_dir in ("node_modules/hardhat", "artifacts/contracts", "cache", "types"):
        target = root / artefact_dir
        target.mkdir(parents=True, exist_ok=True)
        (target / "placeholder.json").write_text("{}", encoding="utf-8")
    yield root


@pytest.fixture
def config(examples_root: Path, tmp_path: Path) -> Config:
    """Configuration rooted at the fixture tree, with output under tmp_path."""
    return Config(root_dir=examples_root, output_dir=tmp_path / "output")


@pytest.fixture
def auction_contract_source() -> str:
    """Raw text of the fixture ``ArtifactAuction.sol``."""
    path = FIXTURES_DIR / "fhevm-repo" / "contracts" / "ArtifactAuction.sol"
    return path.read_text(encoding="utf-8")


@pytest.fixture
def auction_test_source() -> str:
    """Raw text of the fixture ``ArtifactAuction.ts``."""
    path = FIXTURES_DIR / "fhevm-repo" / "test" / "ArtifactAuction.ts"
    return path.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Snapshot helpers
# ---------------------------------------------------------------------------

def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (relative POSIX path) to its bytes."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def snapshot():
    """Expose :func:`snapshot_tree` to tests."""
    return snapshot_tree
