"""Documentation generation for the FHEVM examples.

Turns contract and test annotations into GitBook pages. See
:class:`DocsGenerator`.
"""

from fhevm_tools.reporter.docs import (
    API_REFERENCE,
    BOOK_CONFIG,
    DocEntry,
    DocsGenerator,
    DocsResult,
    DocTarget,
)

__all__ = [
    "API_REFERENCE",
    "BOOK_CONFIG",
    "DocEntry",
    "DocsGenerator",
    "DocsResult",
    "DocTarget",
]
