"""Exceptions raised by the FHEVM example generators.

Every fatal condition derives from :class:`GenerationError` so the CLI entry
points can catch a single type and report it consistently.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base class for failures that abort a generation run."""


class NotFoundError(GenerationError):
    """Raised when an example or category key is absent from its registry."""

    def __init__(self, kind: str, key: str, available: list[str] | None = None) -> None:
        self.kind = kind
        self.key = key
        self.available = available or []
        message = f"Unknown {kind}: {key}"
        if self.available:
            listing = "\n".join(f"  - {name}" for name in self.available)
            message += f"\n\nAvailable {kind} keys:\n{listing}"
        super().__init__(message)


class AlreadyExistsError(GenerationError):
    """Raised when the destination directory is already present on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory exists: {self.path}")


class MissingSourceError(GenerationError):
    """Raised when a file referenced by a descriptor does not exist."""

    def __init__(self, what: str, path: str | Path) -> None:
        self.what = what
        self.path = Path(path)
        super().__init__(f"{what} not found: {self.path}")


class ParseError(GenerationError):
    """Raised when a required pattern cannot be found in a source file."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message} ({self.path})"
        super().__init__(message)
