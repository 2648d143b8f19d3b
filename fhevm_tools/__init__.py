"""FHEVM example tooling: project scaffolding and documentation generation."""

__version__ = "0.1.0"
