"""GitBook documentation generator for FHEVM example contracts.

Produces, under an output root:

- ``docs/<slug>.md`` for every contract/test pair that exists
- ``docs/api.md``, a hand-written API reference for the auction contract
- ``SUMMARY.md``, the GitBook table of contents
- ``book.json``, the GitBook configuration

Every file is fully regenerated on each run and the content depends only on
the sources, so two runs over unchanged inputs are byte-identical.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from fhevm_tools.config import Config
from fhevm_tools.parser import (
    ContractStructure,
    TestGroupDoc,
    extract_contract_structure,
    extract_test_groups,
)
from fhevm_tools.registry import EXAMPLES, ExampleDescriptor
from fhevm_tools.utils import print_success, print_warning, save_json, write_text

DEFAULT_EXAMPLE = "artifact-auction"

BOOK_CONFIG: dict[str, Any] = {
    "root": "./",
    "structure": {
        "readme": "README.md",
        "summary": "SUMMARY.md",
    },
}

API_REFERENCE = """\
# API Reference

## ArtifactAuction Contract

### Core Functions

#### createAuction
Creates a new artifact auction.

```solidity
function createAuction(
    string memory _name,
    string memory _description,
    string memory _category,
    uint256 _minimumBid,
    uint256 _auctionDuration,
    uint256 _yearCreated,
    string memory _provenance
) external returns (uint32)
```

#### authenticateArtifact
Authenticates an artifact in an auction.

```solidity
function authenticateArtifact(uint32 auctionId)
    external
    onlyAuthenticator
```

#### placeBid
Places an encrypted bid on an auction.

```solidity
function placeBid(uint32 auctionId, uint64 _bidAmount)
    external
    auctionExists(auctionId)
    auctionActive(auctionId)
```

#### endAuction
Ends an auction and requests bid decryption.

```solidity
function endAuction(uint32 auctionId) external
```

### View Functions

- `getAuctionInfo(uint32 auctionId)` - Get auction details
- `getArtifactDetails(uint32 auctionId)` - Get artifact information
- `getBidStatus(uint32 auctionId, address bidder)` - Get bid status
- `getAuctionResults(uint32 auctionId)` - Get auction results
- `getActiveAuctions()` - Get all active auction IDs

### Events

- `AuctionCreated` - Emitted when auction is created
- `ConfidentialBidPlaced` - Emitted when bid is placed
- `AuctionEnded` - Emitted when auction ends
- `ArtifactAuthenticated` - Emitted when artifact is authenticated
- `EarningsWithdrawn` - Emitted when seller withdraws earnings
"""


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------

class DocTarget(BaseModel):
    """One contract/test pair to document."""

    contract: Path = Field(..., description="Solidity source file")
    test: Path = Field(..., description="Hardhat test file")
    slug: str = Field(..., description="Output file stem under docs/")

    @classmethod
    def for_example(cls, example: ExampleDescriptor, root: Path) -> "DocTarget":
        return cls(contract=root / example.contract, test=root / example.test, slug=example.key)


class DocEntry(BaseModel):
    """A generated contract page, as listed in SUMMARY.md."""
    title: str
    path: str


class DocsResult(BaseModel):
    """Files written by one documentation run."""

    output_dir: Path
    written: list[Path] = Field(default_factory=list)
    entries: list[DocEntry] = Field(default_factory=list)
    skipped: list[str] = Field(
        default_factory=list, description="Slugs whose contract or test was missing"
    )


# ---------------------------------------------------------------------------
# DocsGenerator
# ---------------------------------------------------------------------------

class DocsGenerator:
    """Generates GitBook markdown from contract and test annotations.

    Usage::

        generator = DocsGenerator(Config(root_dir=Path(".")))
        result = generator.generate()                        # default pair
        result = generator.generate(generator.all_targets()) # whole registry
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------

    def default_targets(self) -> list[DocTarget]:
        """The artifact auction contract and its test."""
        return [DocTarget.for_example(EXAMPLES[DEFAULT_EXAMPLE], self.config.root_dir)]

    def all_targets(self) -> list[DocTarget]:
        """One target per registered example, in registry order."""
        return [DocTarget.for_example(ex, self.config.root_dir) for ex in EXAMPLES.values()]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(
        self,
        targets: list[DocTarget] | None = None,
        output_dir: str | Path | None = None,
    ) -> DocsResult:
        """Write contract pages, the API reference, SUMMARY.md and book.json.

        Parameters
        ----------
        targets:
            Contract/test pairs to document. Defaults to
            :meth:`default_targets`.
        output_dir:
            Root receiving ``SUMMARY.md``, ``book.json`` and ``docs/``.
            Defaults to the configured examples root.

        Returns
        -------
        DocsResult
        """
        root = Path(output_dir) if output_dir is not None else self.config.root_dir
        docs_dir = root / self.config.docs_dir
        result = DocsResult(output_dir=root)

        for target in targets if targets is not None else self.default_targets():
            missing = [p for p in (target.contract, target.test) if not p.is_file()]
            if missing:
                for path in missing:
                    print_warning(f"Skipping {target.slug}.md, source not found: {path}")
                result.skipped.append(target.slug)
                continue

            structure = extract_contract_structure(
                target.contract.read_text(encoding="utf-8"),
                fallback_name=target.contract.stem,
            )
            groups = extract_test_groups(target.test.read_text(encoding="utf-8"))
            page = docs_dir / f"{target.slug}.md"
            write_text(page, self.render_contract_doc(structure, groups, target.contract.name))
            result.written.append(page)
            result.entries.append(
                DocEntry(
                    title=_display_title(structure.name),
                    path=f"{self.config.docs_dir}/{target.slug}.md",
                )
            )
            print_success(f"Generated {target.slug}.md")

        api_path = write_text(docs_dir / "api.md", API_REFERENCE)
        result.written.append(api_path)
        print_success("Generated api.md")

        summary_path = write_text(root / "SUMMARY.md", self.render_summary(result.entries))
        result.written.append(summary_path)
        print_success("Generated SUMMARY.md")

        book_path = save_json(BOOK_CONFIG, root / "book.json")
        result.written.append(book_path)
        print_success("Generated book.json")

        return result

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_contract_doc(
        self,
        structure: ContractStructure,
        groups: list[TestGroupDoc],
        contract_file: str,
    ) -> str:
        """Build the markdown page for one contract."""
        lines: list[str] = [f"# {structure.name}", ""]

        if structure.description:
            lines.extend([structure.description, ""])

        lines.extend([
            "## Overview",
            "",
            f"**File:** `contracts/{contract_file}`",
            "",
        ])

        if groups:
            lines.extend(["## Functionality", ""])
            for group in groups:
                lines.extend([f"### {group.title}", ""])
                if group.description:
                    lines.extend([group.description, ""])

        lines.extend(["## Contract Structure", "", "### State Variables", ""])
        if structure.state_variables:
            lines.extend(f"- `{var.signature}`" for var in structure.state_variables)
        else:
            lines.append("No public state variables.")

        lines.extend(["", "### Functions", ""])
        if structure.functions:
            lines.extend(
                f"- `{func.name}` ({func.visibility.value})" for func in structure.functions
            )
        else:
            lines.append("No public functions.")

        lines.extend([
            "",
            "## Testing",
            "",
            "Run tests with:",
            "",
            "```bash",
            "npm run test",
            "```",
            "",
        ])
        return "\n".join(lines)

    def render_summary(self, entries: list[DocEntry]) -> str:
        """Build the GitBook table of contents."""
        lines: list[str] = [
            "# Summary",
            "",
            "## Introduction",
            "",
            "* [Introduction](README.md)",
            "",
            "## Examples",
            "",
        ]
        lines.extend(f"* [{entry.title}]({entry.path})" for entry in entries)
        if entries:
            lines.append("")
        lines.extend([
            "## Development",
            "",
            "* [Developer Guide](DEVELOPER_GUIDE.md)",
            f"* [API Reference]({self.config.docs_dir}/api.md)",
            "",
        ])
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _display_title(contract_name: str) -> str:
    """Split a contract name into words: ``ArtifactAuction`` -> ``Artifact Auction``."""
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])", " ", contract_name)
