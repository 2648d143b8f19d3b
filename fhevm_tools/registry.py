"""Static registry of scaffoldable FHEVM examples and their categories.

Both tables are built once at import time from frozen Pydantic models and
exposed through read-only mappings. There is no runtime mutation API.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from fhevm_tools.errors import NotFoundError


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------

class ExampleDescriptor(BaseModel):
    """Metadata identifying one scaffoldable demo."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Unique key, also used as the output folder name")
    contract: str = Field(..., description="Contract path relative to the examples root")
    test: str = Field(..., description="Test path relative to the examples root")
    description: str = Field(default="", description="One-line summary")
    category: str = Field(..., description="Key of the owning category")


class CategoryDescriptor(BaseModel):
    """A named, ordered group of examples presented together."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Unique category key")
    name: str = Field(..., description="Display name used in headings")
    description: str = Field(default="")
    examples: tuple[str, ...] = Field(
        default=(),
        description="Example keys in presentation order",
    )


# ---------------------------------------------------------------------------
# Registry tables
# ---------------------------------------------------------------------------

def _index(items: list) -> Mapping:
    return MappingProxyType({item.key: item for item in items})


EXAMPLES: Mapping[str, ExampleDescriptor] = _index([
    ExampleDescriptor(
        key="counter",
        contract="contracts/Counter.sol",
        test="test/Counter.ts",
        description="Simple non-encrypted counter for comparison",
        category="basic",
    ),
    ExampleDescriptor(
        key="fhe-counter",
        contract="base-template/contracts/FHECounter.sol",
        test="base-template/test/FHECounter.ts",
        description="Encrypted counter using FHEVM",
        category="basic",
    ),
    ExampleDescriptor(
        key="artifact-auction",
        contract="contracts/ArtifactAuction.sol",
        test="test/ArtifactAuction.ts",
        description="Confidential artifact auction with encrypted bids and authentication",
        category="advanced",
    ),
])

CATEGORIES: Mapping[str, CategoryDescriptor] = _index([
    CategoryDescriptor(
        key="basic",
        name="Basic FHEVM Examples",
        description="Fundamental examples demonstrating basic FHE operations",
        examples=("counter", "fhe-counter"),
    ),
    CategoryDescriptor(
        key="advanced",
        name="Advanced FHEVM Examples",
        description="Complex examples showing real-world applications",
        examples=("artifact-auction",),
    ),
    CategoryDescriptor(
        key="access-control",
        name="Access Control Examples",
        description="Examples demonstrating FHE access control patterns",
    ),
    CategoryDescriptor(
        key="encryption",
        name="Encryption Examples",
        description="Examples showing encryption and decryption workflows",
    ),
])


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def get_example(
    key: str, examples: Mapping[str, ExampleDescriptor] = EXAMPLES
) -> ExampleDescriptor:
    """Return the descriptor for *key* or raise :class:`NotFoundError`."""
    try:
        return examples[key]
    except KeyError:
        raise NotFoundError("example", key, list(examples)) from None


def get_category(
    key: str, categories: Mapping[str, CategoryDescriptor] = CATEGORIES
) -> CategoryDescriptor:
    """Return the descriptor for *key* or raise :class:`NotFoundError`."""
    try:
        return categories[key]
    except KeyError:
        raise NotFoundError("category", key, list(categories)) from None


def dangling_references(
    categories: Mapping[str, CategoryDescriptor] = CATEGORIES,
    examples: Mapping[str, ExampleDescriptor] = EXAMPLES,
) -> list[tuple[str, str]]:
    """List ``(category, example)`` pairs whose example key is unregistered."""
    return [
        (category.key, member)
        for category in categories.values()
        for member in category.examples
        if member not in examples
    ]
