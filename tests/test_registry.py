"""Unit tests for the static example registry (fhevm_tools.registry)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fhevm_tools.errors import NotFoundError
from fhevm_tools.registry import (
    CATEGORIES,
    EXAMPLES,
    CategoryDescriptor,
    ExampleDescriptor,
    dangling_references,
    get_category,
    get_example,
)


class TestExamples:
    @pytest.mark.unit
    def test_registered_keys(self):
        assert list(EXAMPLES) == ["counter", "fhe-counter", "artifact-auction"]

    @pytest.mark.unit
    def test_artifact_auction_descriptor(self):
        example = EXAMPLES["artifact-auction"]
        assert example.contract == "contracts/ArtifactAuction.sol"
        assert example.test == "test/ArtifactAuction.ts"
        assert example.description == "Confidential artifact auction with encrypted bids and authentication"
        assert example.category == "advanced"

    @pytest.mark.unit
    def test_keys_match_descriptor_keys(self):
        for key, example in EXAMPLES.items():
            assert example.key == key

    @pytest.mark.unit
    def test_every_example_category_is_registered(self):
        for example in EXAMPLES.values():
            assert example.category in CATEGORIES


class TestCategories:
    @pytest.mark.unit
    def test_registered_keys(self):
        assert list(CATEGORIES) == ["basic", "advanced", "access-control", "encryption"]

    @pytest.mark.unit
    def test_basic_members_in_order(self):
        assert CATEGORIES["basic"].examples == ("counter", "fhe-counter")

    @pytest.mark.unit
    def test_empty_categories(self):
        assert CATEGORIES["access-control"].examples == ()
        assert CATEGORIES["encryption"].examples == ()

    @pytest.mark.unit
    def test_no_dangling_references(self):
        assert dangling_references() == []

    @pytest.mark.unit
    def test_dangling_references_reported(self):
        categories = {
            "basic": CategoryDescriptor(key="basic", name="Basic", examples=("counter", "ghost")),
        }
        assert dangling_references(categories, EXAMPLES) == [("basic", "ghost")]


class TestImmutability:
    @pytest.mark.unit
    def test_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            EXAMPLES["new"] = EXAMPLES["counter"]  # type: ignore[index]
        with pytest.raises(TypeError):
            CATEGORIES["new"] = CATEGORIES["basic"]  # type: ignore[index]

    @pytest.mark.unit
    def test_descriptors_are_frozen(self):
        with pytest.raises(ValidationError):
            EXAMPLES["counter"].description = "changed"  # type: ignore[misc]

    @pytest.mark.unit
    def test_descriptor_requires_paths(self):
        with pytest.raises(ValidationError):
            ExampleDescriptor(key="x", category="basic")  # type: ignore[call-arg]


class TestLookups:
    @pytest.mark.unit
    def test_get_example(self):
        assert get_example("counter").contract == "contracts/Counter.sol"

    @pytest.mark.unit
    def test_get_example_unknown(self):
        with pytest.raises(NotFoundError) as exc_info:
            get_example("nope")
        assert exc_info.value.key == "nope"
        assert exc_info.value.kind == "example"
        assert "artifact-auction" in str(exc_info.value)

    @pytest.mark.unit
    def test_get_category(self):
        assert get_category("advanced").name == "Advanced FHEVM Examples"

    @pytest.mark.unit
    def test_get_category_unknown(self):
        with pytest.raises(NotFoundError) as exc_info:
            get_category("nonexistent")
        assert str(exc_info.value).startswith("Unknown category: nonexistent")
        assert exc_info.value.available == list(CATEGORIES)
