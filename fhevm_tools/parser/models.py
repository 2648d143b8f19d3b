"""Pydantic v2 models for structures extracted from contract and test sources."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Visibility(str, Enum):
    """Solidity function visibility. Functions without a keyword are internal."""
    PUBLIC = "public"
    EXTERNAL = "external"
    INTERNAL = "internal"
    PRIVATE = "private"


class TestGroupDoc(BaseModel):
    """A named test group paired with the block comment preceding it."""

    __test__ = False

    title: str = Field(..., description="Title passed to describe()")
    description: str = Field(default="", description="Cleaned comment body")


class StateVariable(BaseModel):
    """A contract-level variable declaration."""
    type: str
    name: str

    @property
    def signature(self) -> str:
        return f"{self.type} {self.name}"


class FunctionInfo(BaseModel):
    """A declared function and its visibility."""
    name: str
    visibility: Visibility = Visibility.INTERNAL


class ContractStructure(BaseModel):
    """Everything the documentation generator reports about one contract."""

    name: str = Field(..., description="Declared contract name")
    description: str | None = Field(
        default=None, description="First /// documentation line, if any"
    )
    state_variables: list[StateVariable] = Field(default_factory=list)
    functions: list[FunctionInfo] = Field(default_factory=list)
