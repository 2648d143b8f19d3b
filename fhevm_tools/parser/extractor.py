"""Pattern-based extraction from Solidity contracts and Hardhat test files.

Uses pure regex and a brace-depth line scan -- no real parser. Sources that
deviate from the usual formatting conventions simply yield fewer results:
every extractor returns ``None`` or an empty list when nothing matches and
never raises.
"""

from __future__ import annotations

import re

from .models import ContractStructure, FunctionInfo, StateVariable, TestGroupDoc, Visibility


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_CONTRACT_PATTERN = re.compile(r"^\s*contract\s+(\w+)(?:\s+is\s+|\s*\{)", re.MULTILINE)
_DESCRIBE_PATTERN = re.compile(
    r"""describe\(\s*(['"`])(.*?)\1\s*,\s*(?:async\s+)?(?:function\s*\(\s*\)|\(\s*\)\s*=>)"""
)
_BLOCK_DOC_PATTERN = re.compile(r"/\*\*.*?\*/", re.DOTALL)
_DOC_LINE_PATTERN = re.compile(r"^\s*///[ \t]*(.*?)[ \t]*$", re.MULTILINE)
_NATSPEC_TAG_PATTERN = re.compile(r"^@(?:title|notice|dev|author)\s+")
_COMMENT_MARKER_PATTERN = re.compile(r"^\s*\*(?: |$)?(.*)$")

_BLOCK_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT_PATTERN = re.compile(r"//[^\n]*")

_STATE_VAR_PATTERN = re.compile(
    r"^\s*(?P<type>mapping\s*\((?:[^()]|\([^()]*\))*\)"
    r"|address\s+payable(?:\[\d*\])*"
    r"|[A-Za-z_][\w.]*(?:\[\d*\])*)"
    r"\s+(?:(?:public|private|internal|constant|immutable|override)\s+)*"
    r"(?P<name>[A-Za-z_]\w*)\s*(?:=[^;]*)?;"
)
_FUNCTION_PATTERN = re.compile(r"\bfunction\s+(\w+)\s*\(([^)]*)\)([^{;]*)")
_VISIBILITY_PATTERN = re.compile(r"\b(public|external|internal|private)\b")

# Statements that look like "<word> <word>;" but are not declarations.
_NON_TYPE_KEYWORDS = frozenset({
    "return", "emit", "delete", "revert", "require", "using",
    "import", "pragma", "else", "new",
})


# ---------------------------------------------------------------------------
# Contract sources
# ---------------------------------------------------------------------------

def extract_contract_name(source: str) -> str | None:
    """Return the name of the first ``contract`` declaration, or ``None``."""
    match = _CONTRACT_PATTERN.search(source)
    return match.group(1) if match else None


def extract_contract_description(source: str) -> str | None:
    """Return the text of the first ``///`` line, or ``None``.

    A leading NatSpec tag (``@title``, ``@notice``, ...) is dropped so the
    result reads as plain prose.
    """
    match = _DOC_LINE_PATTERN.search(source)
    if not match:
        return None
    text = _NATSPEC_TAG_PATTERN.sub("", match.group(1)).strip()
    return text or None


def strip_comments(source: str) -> str:
    """Remove comments while keeping line numbering intact."""
    without_blocks = _BLOCK_COMMENT_PATTERN.sub(
        lambda m: "\n" * m.group(0).count("\n"), source
    )
    return _LINE_COMMENT_PATTERN.sub("", without_blocks)


def extract_state_variables(source: str) -> list[StateVariable]:
    """Find variable declarations directly inside a contract body.

    Only lines that start at brace depth one are considered, which excludes
    struct members and locals declared inside function bodies.
    """
    variables: list[StateVariable] = []
    depth = 0
    for line in strip_comments(source).splitlines():
        if depth == 1:
            match = _STATE_VAR_PATTERN.match(line)
            if match and match.group("type") not in _NON_TYPE_KEYWORDS:
                variables.append(
                    StateVariable(
                        type=re.sub(r"\s+", " ", match.group("type")),
                        name=match.group("name"),
                    )
                )
        depth += line.count("{") - line.count("}")
        depth = max(depth, 0)
    return variables


def extract_functions(source: str) -> list[FunctionInfo]:
    """Find ``function`` declarations and their visibility (default internal)."""
    functions: list[FunctionInfo] = []
    for match in _FUNCTION_PATTERN.finditer(strip_comments(source)):
        visibility = _VISIBILITY_PATTERN.search(match.group(3))
        functions.append(
            FunctionInfo(
                name=match.group(1),
                visibility=Visibility(visibility.group(1)) if visibility else Visibility.INTERNAL,
            )
        )
    return functions


def extract_contract_structure(source: str, fallback_name: str = "Contract") -> ContractStructure:
    """Bundle name, description, state variables and functions of a contract."""
    return ContractStructure(
        name=extract_contract_name(source) or fallback_name,
        description=extract_contract_description(source),
        state_variables=extract_state_variables(source),
        functions=extract_functions(source),
    )


# ---------------------------------------------------------------------------
# Test sources
# ---------------------------------------------------------------------------

def clean_doc_comment(block: str) -> str:
    """Strip ``/**``/``*/`` delimiters and ``*`` markers from a doc block.

    Lines that are blank before the markers come off are dropped. A bare
    ``*`` line separates paragraphs and is kept as an empty line, except at
    either end of the block.
    """
    body = block.strip()
    if body.startswith("/**"):
        body = body[3:]
    if body.endswith("*/"):
        body = body[:-2]

    lines: list[str] = []
    for raw in body.splitlines():
        if not raw.strip():
            continue
        marker = _COMMENT_MARKER_PATTERN.match(raw)
        line = marker.group(1) if marker else raw.strip()
        lines.append(line.rstrip())

    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)


def extract_test_groups(source: str) -> list[TestGroupDoc]:
    """Pair every ``describe(...)`` group with the nearest preceding doc block.

    The doc block may sit anywhere earlier in the file; groups with no doc
    block before them are left out.
    """
    blocks = list(_BLOCK_DOC_PATTERN.finditer(source))
    groups: list[TestGroupDoc] = []

    for describe in _DESCRIBE_PATTERN.finditer(source):
        preceding = [b for b in blocks if b.end() <= describe.start()]
        if not preceding:
            continue
        groups.append(
            TestGroupDoc(
                title=describe.group(2),
                description=clean_doc_comment(preceding[-1].group(0)),
            )
        )
    return groups
