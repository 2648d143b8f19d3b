"""Command-line entry points.

Three independent commands, installed as console scripts::

    create-fhevm-example <example> [output-dir] [--root DIR]
    create-fhevm-category <category> [output-dir] [--root DIR]
    generate-docs [--all] [--contract FILE --test FILE] [--output DIR] [--root DIR]

Fatal errors are printed as ``Error: <message>`` and exit with status 1;
help output exits with status 0.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.table import Table

from fhevm_tools.config import HARDHAT_COMMANDS, Config
from fhevm_tools.errors import GenerationError
from fhevm_tools.registry import CATEGORIES, EXAMPLES
from fhevm_tools.reporter import DocsGenerator, DocTarget
from fhevm_tools.scaffolder import CategoryGenerator, ExampleGenerator
from fhevm_tools.utils import (
    console,
    kebab_case,
    print_banner,
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
)


# Failures that end a run: generator checks, file-system errors during copy
# and unreadable or non-object package manifests.
FATAL_ERRORS = (GenerationError, OSError, ValueError)


def _build_config(root: str | None) -> Config:
    return Config(root_dir=Path(root) if root else Path.cwd())


# ---------------------------------------------------------------------------
# create-fhevm-example
# ---------------------------------------------------------------------------


def print_example_help() -> None:
    """Print usage and every registered example."""
    console.print("[bold cyan]FHEVM Example Generator[/bold cyan]\n")
    console.print("Usage: create-fhevm-example <name> [output-dir] [--root DIR]\n", markup=False)

    table = Table(title="Available examples", show_header=True, header_style="bold yellow")
    table.add_column("Example", style="green", no_wrap=True)
    table.add_column("Category", style="blue")
    table.add_column("Description")
    for key, example in EXAMPLES.items():
        table.add_row(key, example.category, example.description)
    console.print(table)


def example_main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-fhevm-example``."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] == "--help":
        print_example_help()
        sys.exit(0)

    parser = argparse.ArgumentParser(
        prog="create-fhevm-example",
        description="Generate a standalone FHEVM example project",
        add_help=False,
    )
    parser.add_argument("example", help="Registered example key")
    parser.add_argument("output", nargs="?", default=None, help="Destination directory")
    parser.add_argument("--root", default=None, help="Examples root (default: current directory)")
    args = parser.parse_args(argv)

    config = _build_config(args.root)
    try:
        result = ExampleGenerator(config).generate(args.example, args.output)
    except FATAL_ERRORS as exc:
        print_error(str(exc))
        sys.exit(1)

    print_banner(f"Example created: {result.key}")
    print_summary_table(
        {
            "Package": result.package_name or "",
            "Location": str(result.output_dir),
            "Files": str(len(result.files)),
        },
        title="Generated project",
    )
    print_next_steps(result.output_dir, HARDHAT_COMMANDS)


# ---------------------------------------------------------------------------
# create-fhevm-category
# ---------------------------------------------------------------------------


def print_category_help() -> None:
    """Print usage and every registered category with its members."""
    console.print("[bold cyan]FHEVM Category Generator[/bold cyan]\n")
    console.print("Usage: create-fhevm-category <category> [output-dir] [--root DIR]\n", markup=False)

    table = Table(title="Available categories", show_header=True, header_style="bold yellow")
    table.add_column("Category", style="green", no_wrap=True)
    table.add_column("Description")
    table.add_column("Examples", style="blue")
    for key, category in CATEGORIES.items():
        table.add_row(key, category.description, ", ".join(category.examples))
    console.print(table)

    console.print("\n[bold yellow]Example:[/bold yellow]")
    console.print("  create-fhevm-category basic ./output/basic-examples\n", highlight=False)


def category_main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-fhevm-category``."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] in ("--help", "-h"):
        print_category_help()
        sys.exit(0)

    parser = argparse.ArgumentParser(
        prog="create-fhevm-category",
        description="Generate a project holding every example of a category",
        add_help=False,
    )
    parser.add_argument("category", help="Registered category key")
    parser.add_argument("output", nargs="?", default=None, help="Destination directory")
    parser.add_argument("--root", default=None, help="Examples root (default: current directory)")
    args = parser.parse_args(argv)

    config = _build_config(args.root)
    try:
        result = CategoryGenerator(config).generate(args.category, args.output)
    except FATAL_ERRORS as exc:
        print_error(str(exc))
        sys.exit(1)

    print_banner(f'Category "{result.key}" created successfully!')
    print_next_steps(result.output_dir, HARDHAT_COMMANDS)

    console.print("\n[bold cyan]Category includes:[/bold cyan]")
    for key in result.included:
        console.print(f"  - {key}: {EXAMPLES[key].description}", highlight=False)
    for key in result.skipped:
        console.print(f"  - {key}: [yellow]skipped[/yellow]", highlight=False)


# ---------------------------------------------------------------------------
# generate-docs
# ---------------------------------------------------------------------------


def print_docs_help() -> None:
    """Print usage for ``generate-docs``."""
    console.print("[bold cyan]Documentation Generator[/bold cyan]\n")
    console.print("Usage: generate-docs [options]\n", markup=False)
    console.print("[bold yellow]Options:[/bold yellow]")
    console.print("  --help, -h        Show this help message")
    console.print("  --all             Generate documentation for every registered example")
    console.print("  --contract FILE   Contract to document (requires --test)")
    console.print("  --test FILE       Test file paired with --contract")
    console.print("  --output DIR      Output root for docs/, SUMMARY.md and book.json")
    console.print("  --root DIR        Examples root (default: current directory)\n")


def docs_main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``generate-docs``."""
    argv = sys.argv[1:] if argv is None else argv

    parser = argparse.ArgumentParser(prog="generate-docs", add_help=False)
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    parser.add_argument("--all", action="store_true", dest="all_examples")
    parser.add_argument("--contract", default=None)
    parser.add_argument("--test", default=None)
    parser.add_argument("--output", default=None)
    parser.add_argument("--root", default=None)
    args = parser.parse_args(argv)

    if args.show_help:
        print_docs_help()
        sys.exit(0)
    if (args.contract is None) != (args.test is None):
        parser.error("--contract and --test must be given together")

    config = _build_config(args.root)
    generator = DocsGenerator(config)

    if args.contract is not None:
        contract = Path(args.contract)
        targets = [DocTarget(contract=contract, test=Path(args.test), slug=kebab_case(contract.stem))]
    elif args.all_examples:
        targets = generator.all_targets()
    else:
        targets = generator.default_targets()

    console.print("[bold cyan]Generating documentation...[/bold cyan]")
    try:
        result = generator.generate(targets, args.output)
    except FATAL_ERRORS as exc:
        print_error(str(exc))
        sys.exit(1)

    print_banner("Documentation generated successfully")
    console.print("\n[bold yellow]Generated files:[/bold yellow]")
    for path in result.written:
        console.print(f"  - {path.relative_to(result.output_dir).as_posix()}", highlight=False)

    console.print("\n[bold cyan]To serve documentation locally:[/bold cyan]")
    console.print("  npm install -g gitbook-cli")
    console.print("  gitbook serve")
    print_success(f"{len(result.written)} files written to {result.output_dir}")
