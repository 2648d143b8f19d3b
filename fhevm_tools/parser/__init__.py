"""Source extraction for the FHEVM tools.

Pulls contract names, documentation comments, state variables, functions and
``describe`` test groups out of Solidity and Hardhat test sources using
regular expressions.
"""

from .extractor import (
    clean_doc_comment,
    extract_contract_description,
    extract_contract_name,
    extract_contract_structure,
    extract_functions,
    extract_state_variables,
    extract_test_groups,
    strip_comments,
)
from .models import ContractStructure, FunctionInfo, StateVariable, TestGroupDoc, Visibility

__all__ = [
    # Extraction
    "clean_doc_comment",
    "extract_contract_description",
    "extract_contract_name",
    "extract_contract_structure",
    "extract_functions",
    "extract_state_variables",
    "extract_test_groups",
    "strip_comments",
    # Models
    "ContractStructure",
    "FunctionInfo",
    "StateVariable",
    "TestGroupDoc",
    "Visibility",
]
